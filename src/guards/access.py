"""
AccessGuard — ownership check и emergency pause

Порядок использования в SaveWrapper:
1. require_owner → Unauthorized (owner-only операции)
2. require_active → Paused (pausable операции)

Оба guard проверяются до любого движения value, поэтому неавторизованный
или приостановленный вызов никогда не доходит до коллабораторов.

Состояния: "active" и "paused", свободно обратимы owner.
"""

import logging

from src.core.domain.units import same_address
from src.core.errors import Paused, Unauthorized

from .state import GuardState

logger = logging.getLogger(__name__)


class AccessGuard:
    """Owner guard + pause switch поверх GuardState."""

    def __init__(self, state: GuardState):
        self._state = state

    @property
    def owner(self) -> str:
        return self._state.owner

    @property
    def paused(self) -> bool:
        return self._state.paused

    def is_owner(self, caller: str) -> bool:
        return same_address(caller, self._state.owner)

    def require_owner(self, caller: str) -> None:
        """
        Raises:
            Unauthorized: Если caller не owner
        """
        if not self.is_owner(caller):
            logger.warning("Rejected owner-only call from %s", caller)
            raise Unauthorized(f"Caller {caller} is not the owner")

    def require_active(self) -> None:
        """
        Raises:
            Paused: Если pause flag установлен
        """
        if self._state.paused:
            logger.warning("Rejected call while paused")
            raise Paused("Contract is paused")

    def toggle_contract_active(self, caller: str) -> bool:
        """
        Переключение pause flag (owner-only).

        Args:
            caller: Эффективный caller

        Returns:
            Новое значение paused

        Raises:
            Unauthorized: Если caller не owner
        """
        self.require_owner(caller)
        self._state.paused = not self._state.paused
        logger.info("Contract %s by owner", "paused" if self._state.paused else "activated")
        return self._state.paused
