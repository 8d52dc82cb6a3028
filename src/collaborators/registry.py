"""
ContractRegistry — каталог коллабораторов по адресам

Pipelines получают адреса в параметрах вызова и разрешают их здесь
в объекты коллабораторов нужной роли. Неизвестный адрес или объект
не той роли → InvalidAddress.

Registry также снимает snapshot всех Transactional коллабораторов для
атомарного scope SaveWrapper.
"""

import logging
from typing import Any, Dict, List, Tuple

from src.core.domain.units import is_zero_address, normalize_address
from src.core.errors import InvalidAddress

from .interfaces import (
    AccountingToken,
    FeederPool,
    FungibleToken,
    Minter,
    SavingsWrapper,
    Transactional,
    Vault,
)

logger = logging.getLogger(__name__)


class ContractRegistry:
    """Адрес → коллаборатор."""

    def __init__(self):
        self._contracts: Dict[str, Any] = {}

    def register(self, address: str, contract: Any) -> None:
        """
        Регистрация коллаборатора.

        Raises:
            InvalidAddress: Если адрес нулевой
        """
        if is_zero_address(address):
            raise InvalidAddress("Cannot register contract at zero address")
        self._contracts[normalize_address(address)] = contract
        logger.debug("Registered %s at %s", type(contract).__name__, address)

    def __contains__(self, address: str) -> bool:
        return normalize_address(address) in self._contracts

    def resolve(self, address: str, role: type = object) -> Any:
        """
        Разрешение адреса в коллаборатора заданной роли.

        Args:
            address: Адрес коллаборатора
            role: runtime_checkable Protocol роли (или object)

        Returns:
            Объект коллаборатора

        Raises:
            InvalidAddress: Если адрес нулевой, неизвестен или объект не реализует роль
        """
        if is_zero_address(address):
            raise InvalidAddress(f"Zero address for {role.__name__}")

        contract = self._contracts.get(normalize_address(address))
        if contract is None:
            raise InvalidAddress(f"No contract at {address}")

        if not isinstance(contract, role):
            raise InvalidAddress(f"Contract at {address} is not a {role.__name__}")

        return contract

    def token(self, address: str) -> FungibleToken:
        return self.resolve(address, FungibleToken)

    def minter(self, address: str) -> Minter:
        return self.resolve(address, Minter)

    def savings(self, address: str) -> SavingsWrapper:
        return self.resolve(address, SavingsWrapper)

    def feeder_pool(self, address: str) -> FeederPool:
        return self.resolve(address, FeederPool)

    def vault(self, address: str) -> Vault:
        return self.resolve(address, Vault)

    def accounting_token(self, address: str) -> AccountingToken:
        return self.resolve(address, AccountingToken)

    # -------------------------------------------------------------------------
    # Snapshot / restore
    # -------------------------------------------------------------------------

    def snapshot(self) -> List[Tuple[Any, Any]]:
        """Snapshot всех Transactional коллабораторов (каждый объект один раз)."""
        seen = set()
        states = []
        for contract in self._contracts.values():
            if id(contract) in seen or not isinstance(contract, Transactional):
                continue
            seen.add(id(contract))
            states.append((contract, contract.snapshot()))
        return states

    def restore(self, states: List[Tuple[Any, Any]]) -> None:
        for contract, state in states:
            contract.restore(state)
