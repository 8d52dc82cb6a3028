"""Collaborators — интерфейсы внешних контрактов и каталог адресов."""

from .interfaces import (
    AccountingToken,
    FeederPool,
    FungibleToken,
    Minter,
    SavingsWrapper,
    Transactional,
    Vault,
)
from .registry import ContractRegistry

__all__ = [
    "AccountingToken",
    "FeederPool",
    "FungibleToken",
    "Minter",
    "SavingsWrapper",
    "Transactional",
    "Vault",
    "ContractRegistry",
]
