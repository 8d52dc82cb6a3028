"""
Units — Централизованный модуль адресов и uint256 количеств

Единственный допустимый способ работы с:
- address (идентичность контракта или аккаунта, `0x` + 40 hex)
- amount (целое беззнаковое 256-битное количество токена)

Адреса всегда нормализуются к lowercase перед сравнением.
"""

import re
from typing import Final, Optional


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Нулевой адрес ("адрес не задан")
ZERO_ADDRESS: Final[str] = "0x" + "0" * 40

# Максимальное uint256 значение — "infinite approval"
MAX_UINT256: Final[int] = 2**256 - 1

# Регулярное выражение для адреса
ADDRESS_PATTERN: Final[str] = "^0x[0-9a-fA-F]{40}$"

_ADDRESS_RE = re.compile(ADDRESS_PATTERN)


# =============================================================================
# АДРЕСА
# =============================================================================


def normalize_address(address: str) -> str:
    """
    Нормализация адреса к lowercase.

    Args:
        address: Адрес в формате 0x + 40 hex (любой регистр)

    Returns:
        Адрес в lowercase

    Raises:
        ValueError: Если строка не является адресом
    """
    if not isinstance(address, str) or not _ADDRESS_RE.match(address):
        raise ValueError(f"Not an address: {address!r}")
    return address.lower()


def is_zero_address(address: Optional[str]) -> bool:
    """
    Проверка на "пустой" адрес.

    None трактуется как нулевой адрес.
    """
    if address is None:
        return True
    return normalize_address(address) == ZERO_ADDRESS


def same_address(a: str, b: str) -> bool:
    return normalize_address(a) == normalize_address(b)


# =============================================================================
# КОЛИЧЕСТВА
# =============================================================================


def validate_amount(amount: int) -> None:
    """
    Проверка, что количество — корректный uint256.

    Args:
        amount: Количество токена

    Raises:
        ValueError: Если amount не int, отрицательный или > MAX_UINT256
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"Amount must be an integer: {amount!r}")

    if amount < 0:
        raise ValueError(f"Amount cannot be negative: {amount}")

    if amount > MAX_UINT256:
        raise ValueError(f"Amount {amount} exceeds uint256 range")
