"""
ReentrancyGuard — единый lock для value-moving операций

Паттерн:

    with reentrancy_guard:
        # critical section
        ...

Вход: ReentrantCall если lock уже взят, иначе lock = True.
Выход: lock = False на любом пути (успех или исключение), до возврата
управления вызывающему.

Какие операции защищены, решает SaveWrapper явно для каждой операции:
withdraw path защищен всегда, deposit path только при guard_deposits=True.
"""

import logging

from src.core.errors import ReentrantCall

from .state import GuardState

logger = logging.getLogger(__name__)


class ReentrancyGuard:
    """Context manager поверх GuardState.locked."""

    def __init__(self, state: GuardState):
        self._state = state

    @property
    def locked(self) -> bool:
        return self._state.locked

    def enter(self) -> None:
        """
        Raises:
            ReentrantCall: Если lock уже взят
        """
        if self._state.locked:
            logger.warning("Rejected reentrant call")
            raise ReentrantCall("Reentrant call")
        self._state.locked = True

    def exit(self) -> None:
        self._state.locked = False

    def __enter__(self) -> "ReentrancyGuard":
        self.enter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.exit()
        return False
