"""
DepositPipeline — "save via mint" и родственные deposit entry points

saveViaMint, шаги (каждый зависит от успеха предыдущего):
1. Все адреса ненулевые → иначе InvalidAddress (до любого transfer)
2. transferFrom amount base asset от caller к wrapper → TransferFailed
3. minter.mint(base asset, amount, min_out) → MintSlippage при недоборе
4. StakeRouter.route(minted)

saveAndStake: caller уже держит derivative asset, шаг 3 пропускается.
saveViaSwap: шаг 3 заменяется feeder_pool.swap → SwapSlippage при недоборе.

Custody неиспользованных токенов остается у wrapper до явной передачи.
Атомарность всей цепочки обеспечивает SaveWrapper._atomic.
"""

import logging
from typing import Optional

from src.collaborators.registry import ContractRegistry
from src.core.domain.requests import (
    SaveAndStakeRequest,
    SaveViaMintRequest,
    SaveViaSwapRequest,
)
from src.core.domain.results import DepositResult
from src.core.domain.units import is_zero_address
from src.core.errors import InvalidAddress, MintSlippage, SwapSlippage

from .stake_router import StakeRouter
from .transfers import safe_transfer_from

logger = logging.getLogger(__name__)


def _require_addresses(**addresses: str) -> None:
    for name, address in addresses.items():
        if is_zero_address(address):
            raise InvalidAddress(f"Invalid {name} address")


class DepositPipeline:
    """Pull → (mint | swap) → StakeRouter."""

    def __init__(
        self,
        registry: ContractRegistry,
        wrapper_address: str,
        router: StakeRouter,
    ):
        self._registry = registry
        self._address = wrapper_address
        self._router = router

    def save_via_mint(self, caller: str, request: SaveViaMintRequest) -> DepositResult:
        """
        Base asset → mint derivative asset → savings → (stake).

        Raises:
            InvalidAddress: нулевой base_asset / minter / savings / vault
            TransferFailed: недостаточно баланса или allowance у caller
            MintSlippage: minted < min_out
        """
        _require_addresses(
            minter=request.minter,
            savings=request.savings,
            vault=request.vault,
            base_asset=request.base_asset,
        )

        self._pull(request.base_asset, caller, request.amount)

        minted = self._registry.minter(request.minter).mint(
            self._address,
            request.base_asset,
            request.amount,
            request.min_out,
            self._address,
        )
        if minted < request.min_out:
            raise MintSlippage(f"Minted {minted} below min_out {request.min_out}")

        return self._finish(
            caller=caller,
            input_asset=request.base_asset,
            input_amount=request.amount,
            derivative_amount=minted,
            savings=request.savings,
            vault=request.vault,
            stake=request.stake,
            referrer=request.referrer,
            source="mint",
        )

    def save_and_stake(self, caller: str, request: SaveAndStakeRequest) -> DepositResult:
        """
        Derivative asset → savings → (stake).

        Raises:
            InvalidAddress: нулевой derivative_asset / savings / vault
            TransferFailed: недостаточно баланса или allowance у caller
        """
        _require_addresses(
            derivative_asset=request.derivative_asset,
            savings=request.savings,
            vault=request.vault,
        )

        self._pull(request.derivative_asset, caller, request.amount)

        return self._finish(
            caller=caller,
            input_asset=request.derivative_asset,
            input_amount=request.amount,
            derivative_amount=request.amount,
            savings=request.savings,
            vault=request.vault,
            stake=request.stake,
            referrer=request.referrer,
            source="direct",
        )

    def save_via_swap(self, caller: str, request: SaveViaSwapRequest) -> DepositResult:
        """
        Feeder asset → feeder pool swap → savings → (stake).

        Raises:
            InvalidAddress: нулевой адрес любого коллаборатора
            TransferFailed: недостаточно баланса или allowance у caller
            SwapSlippage: swapped < min_out
        """
        _require_addresses(
            feeder_pool=request.feeder_pool,
            derivative_asset=request.derivative_asset,
            savings=request.savings,
            vault=request.vault,
            input_asset=request.input_asset,
        )

        self._pull(request.input_asset, caller, request.amount)

        swapped = self._registry.feeder_pool(request.feeder_pool).swap(
            self._address,
            request.input_asset,
            request.derivative_asset,
            request.amount,
            request.min_out,
            self._address,
        )
        if swapped < request.min_out:
            raise SwapSlippage(f"Swapped {swapped} below min_out {request.min_out}")

        return self._finish(
            caller=caller,
            input_asset=request.input_asset,
            input_amount=request.amount,
            derivative_amount=swapped,
            savings=request.savings,
            vault=request.vault,
            stake=request.stake,
            referrer=request.referrer,
            source="swap",
        )

    # -------------------------------------------------------------------------

    def _pull(self, token: str, caller: str, amount: int) -> None:
        safe_transfer_from(self._registry, token, self._address, caller, self._address, amount)

    def _finish(
        self,
        caller: str,
        input_asset: str,
        input_amount: int,
        derivative_amount: int,
        savings: str,
        vault: str,
        stake: bool,
        referrer: Optional[str],
        source: str,
    ) -> DepositResult:
        resolved_referrer = self._router.resolve_referrer(referrer)
        outcome = self._router.route(
            caller=caller,
            savings=savings,
            vault=vault,
            amount=derivative_amount,
            stake=stake,
            referrer=resolved_referrer,
        )

        logger.info(
            "Deposit (%s) by %s: %d in, %d credits, staked=%s",
            source,
            caller,
            input_amount,
            outcome.credits,
            outcome.staked,
        )

        return DepositResult(
            depositor=caller,
            input_asset=input_asset,
            input_amount=input_amount,
            derivative_amount=derivative_amount,
            credits=outcome.credits,
            staked=outcome.staked,
            stake_beneficiary=outcome.stake_beneficiary,
            credits_recipient=outcome.credits_recipient,
            referrer=outcome.referrer,
            accounting_minted=outcome.accounting_minted,
            details=(
                f"{source}: derivative={derivative_amount}, credits={outcome.credits}, "
                f"staked={outcome.staked}, referrer={outcome.referrer}"
            ),
        )
