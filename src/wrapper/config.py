"""
SaveWrapperConfig — политика SaveWrapper

Два наблюдаемых варианта wrapper расходятся в:
- stake of record: vault записывает staker = wrapper или staker = depositor
- reentrancy coverage deposit path: защищен или нет

Оба поведения доступны через конфигурацию, ни одно не считается единственно
верным. Default: WRAPPER stake of record, deposit path только под pause.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.domain.units import ZERO_ADDRESS, is_zero_address, normalize_address


class StakeOfRecord(str, Enum):
    """Кого vault записывает как staker при stake=True."""

    WRAPPER = "WRAPPER"
    DEPOSITOR = "DEPOSITOR"


@dataclass(frozen=True)
class SaveWrapperConfig:
    """Конфигурация SaveWrapper.

    - default_referrer: referrer для запросов без явного referrer
      (ZERO_ADDRESS → referrer отсутствует)
    - stake_of_record: staker в vault при stake=True
    - guard_deposits: True → deposit path под ReentrancyGuard
    - accounting_token: адрес receipt token (None → не используется)
    """

    default_referrer: str = ZERO_ADDRESS
    stake_of_record: StakeOfRecord = StakeOfRecord.WRAPPER
    guard_deposits: bool = False
    accounting_token: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "default_referrer", normalize_address(self.default_referrer))
        object.__setattr__(self, "stake_of_record", StakeOfRecord(self.stake_of_record))

        if self.accounting_token is not None:
            if is_zero_address(self.accounting_token):
                object.__setattr__(self, "accounting_token", None)
            else:
                object.__setattr__(
                    self, "accounting_token", normalize_address(self.accounting_token)
                )

        # Withdraw через wrapper требует, чтобы wrapper был staker of record
        if self.accounting_token is not None and self.stake_of_record == StakeOfRecord.DEPOSITOR:
            raise ValueError(
                "DEPOSITOR stake of record cannot be combined with an accounting token"
            )

    @property
    def uses_accounting_token(self) -> bool:
        return self.accounting_token is not None
