"""Results — результаты операций SaveWrapper (frozen dataclasses)."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DepositResult:
    """Результат deposit pipeline (saveViaMint / saveAndStake / saveViaSwap)."""

    depositor: str
    input_asset: str
    input_amount: int

    # Количество derivative asset, переданное в savings
    derivative_amount: int

    # Credits, полученные от savings wrapper
    credits: int

    staked: bool
    stake_beneficiary: Optional[str]  # None если stake=False
    credits_recipient: str
    referrer: Optional[str]

    # Количество accounting token, выпущенное caller (0 если токен не настроен)
    accounting_minted: int

    details: str


@dataclass(frozen=True)
class ApprovalResult:
    """Результат approve: упорядоченный список (token, spender) grants."""

    grants: tuple[tuple[str, str], ...]
    allowance: int
    details: str


@dataclass(frozen=True)
class ClaimResult:
    """Результат claimRewards."""

    vault: str
    reward_token: str
    reward_amount: int
    platform_token: Optional[str]
    platform_amount: int
    details: str
