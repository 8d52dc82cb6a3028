"""
StakeRouter — savings deposit и опциональный stake в vault

Четыре варианта по (stake, referrer present):

| stake | referrer | savings deposit               | дальше                         |
|-------|----------|-------------------------------|--------------------------------|
| True  | есть     | с referrer, credits → wrapper | vault.stake(staker, credits)   |
| True  | нет      | без referrer, credits → wrapper | vault.stake(staker, credits) |
| False | есть     | с referrer                    | credits → caller / accounting  |
| False | нет      | без referrer                  | credits → caller / accounting  |

staker = wrapper или caller (StakeOfRecord).

Accounting token настроен:
- stake=True: после stake выпускается accounting token caller'у, quantity = credits
- stake=False: credits остаются у wrapper, caller получает accounting token
Accounting token не настроен:
- stake=False: credits зачисляются напрямую caller'у
- stake=True при WRAPPER stake of record → Unauthorized: позиция в vault
  была бы записана на wrapper без учета владельца
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.collaborators.registry import ContractRegistry
from src.core.domain.units import is_zero_address
from src.core.errors import Unauthorized

from .config import SaveWrapperConfig, StakeOfRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteOutcome:
    """Результат маршрутизации derivative asset."""

    credits: int
    staked: bool
    stake_beneficiary: Optional[str]
    credits_recipient: str
    referrer: Optional[str]
    accounting_minted: int


class StakeRouter:
    """Маршрутизация derivative asset → savings → (vault)."""

    def __init__(
        self,
        registry: ContractRegistry,
        wrapper_address: str,
        config: SaveWrapperConfig,
    ):
        self._registry = registry
        self._address = wrapper_address
        self._config = config

    def resolve_referrer(self, referrer: Optional[str]) -> Optional[str]:
        """Явный referrer или default; нулевой адрес → None."""
        if referrer is None:
            referrer = self._config.default_referrer
        if is_zero_address(referrer):
            return None
        return referrer

    def route(
        self,
        caller: str,
        savings: str,
        vault: str,
        amount: int,
        stake: bool,
        referrer: Optional[str],
    ) -> RouteOutcome:
        """
        Депозит amount derivative asset в savings и опциональный stake.

        Args:
            caller: Эффективный caller (depositor)
            savings: Адрес savings wrapper
            vault: Адрес vault
            amount: Количество derivative asset у wrapper
            stake: Stake credits в vault
            referrer: Уже разрешенный referrer (None → без referrer)

        Returns:
            RouteOutcome

        Raises:
            Unauthorized: stake на wrapper без accounting token
        """
        uses_accounting = self._config.uses_accounting_token

        if stake and not uses_accounting and self._config.stake_of_record == StakeOfRecord.WRAPPER:
            logger.warning("Rejected unattributed stake by %s", caller)
            raise Unauthorized("Staking on the wrapper requires an accounting token")

        # Credits остаются у wrapper, если их дальше stake'ят или учитывают accounting token
        if stake or uses_accounting:
            credits_recipient = self._address
        else:
            credits_recipient = caller

        credits = self._deposit_savings(savings, amount, credits_recipient, referrer)

        stake_beneficiary = None
        if stake:
            if self._config.stake_of_record == StakeOfRecord.DEPOSITOR:
                stake_beneficiary = caller
            else:
                stake_beneficiary = self._address

            logger.debug("Staking %d credits in %s for %s", credits, vault, stake_beneficiary)
            self._registry.vault(vault).stake(self._address, stake_beneficiary, credits)

        accounting_minted = 0
        if uses_accounting:
            self._registry.accounting_token(self._config.accounting_token).deposit(
                self._address, caller, credits
            )
            accounting_minted = credits

        return RouteOutcome(
            credits=credits,
            staked=stake,
            stake_beneficiary=stake_beneficiary,
            credits_recipient=credits_recipient,
            referrer=referrer,
            accounting_minted=accounting_minted,
        )

    def _deposit_savings(
        self,
        savings: str,
        amount: int,
        recipient: str,
        referrer: Optional[str],
    ) -> int:
        wrapper = self._registry.savings(savings)
        if referrer is not None:
            logger.debug("depositSavings %d into %s with referrer %s", amount, savings, referrer)
            return wrapper.deposit_savings(self._address, amount, recipient, referrer)

        logger.debug("depositSavings %d into %s", amount, savings)
        return wrapper.deposit_savings(self._address, amount, recipient)
