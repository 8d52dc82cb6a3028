"""
WithdrawPipeline — "withdraw and unwrap"

Шаги:
1. transferFrom amount accounting token от caller к wrapper → TransferFailed
2. accounting_token.withdraw(wrapper, amount) — burn
3. vault.withdraw_and_unwrap(...) — unstake + unwind в output asset;
   output < min_out → WithdrawSlippage

Без accounting token caller не может доказать долю в stake wrapper,
поэтому withdraw отклоняется до любых вызовов коллабораторов.
Возвращает реализованное количество output asset без изменений.
"""

import logging

from src.collaborators.registry import ContractRegistry
from src.core.domain.requests import WithdrawAndUnwrapRequest
from src.core.errors import Unauthorized, WithdrawSlippage

from .config import SaveWrapperConfig
from .transfers import safe_transfer_from

logger = logging.getLogger(__name__)


class WithdrawPipeline:
    def __init__(
        self,
        registry: ContractRegistry,
        wrapper_address: str,
        config: SaveWrapperConfig,
    ):
        self._registry = registry
        self._address = wrapper_address
        self._config = config

    def withdraw_and_unwrap(self, caller: str, request: WithdrawAndUnwrapRequest) -> int:
        """
        Raises:
            Unauthorized: accounting token не настроен
            TransferFailed: недостаточно accounting token или allowance у caller
            WithdrawSlippage: output < min_out
        """
        if not self._config.uses_accounting_token:
            logger.warning("Rejected withdraw by %s: no accounting token configured", caller)
            raise Unauthorized("Withdraw requires an accounting token")

        accounting = self._config.accounting_token
        safe_transfer_from(
            self._registry, accounting, self._address, caller, self._address, request.amount
        )
        self._registry.accounting_token(accounting).withdraw(
            self._address, self._address, request.amount
        )

        output = self._registry.vault(request.vault).withdraw_and_unwrap(
            self._address,
            request.amount,
            request.min_out,
            request.output_asset,
            request.beneficiary,
            request.router,
            request.is_base_asset_out,
        )
        if output < request.min_out:
            raise WithdrawSlippage(f"Output {output} below min_out {request.min_out}")

        logger.info(
            "Withdraw by %s: %d units -> %d %s to %s",
            caller,
            request.amount,
            output,
            request.output_asset,
            request.beneficiary,
        )
        return output
