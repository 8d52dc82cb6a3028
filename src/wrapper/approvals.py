"""
ApprovalManager — infinite approvals от wrapper к внешним spenders

Три вида grant (все owner-only, проверка owner в SaveWrapper):
1. SingleApproval: token → spender
2. TokenListApproval: tokens → spender
3. BundleApproval:
   - derivative_asset → savings
   - savings → vault
   - каждый base asset → derivative_asset (minter)
   - feeder_assets[i] → feeder_pools[i]

Каждый элементарный grant:
- InvalidSpender если spender нулевой
- InvalidToken если token нулевой
- иначе allowance = MAX_UINT256

Allowance никогда не читается и не уменьшается: grants идемпотентны,
pipelines рассчитывают на неограниченный pre-approval.

Все grants запроса валидируются до первого вызова коллаборатора,
поэтому отклоненный запрос не делает ни одного grant.
"""

import logging
from typing import List, Tuple

from src.collaborators.registry import ContractRegistry
from src.core.domain.requests import (
    ApprovalRequest,
    BundleApproval,
    SingleApproval,
    TokenListApproval,
)
from src.core.domain.results import ApprovalResult
from src.core.domain.units import MAX_UINT256, is_zero_address
from src.core.errors import InvalidSpender, InvalidToken, LengthMismatch

from .transfers import safe_approve

logger = logging.getLogger(__name__)


class ApprovalManager:
    """Выдача MAX_UINT256 allowance от имени wrapper."""

    def __init__(self, registry: ContractRegistry, wrapper_address: str):
        self._registry = registry
        self._address = wrapper_address

    def approve(self, request: ApprovalRequest) -> ApprovalResult:
        """
        Выполнение approval запроса.

        Args:
            request: SingleApproval / TokenListApproval / BundleApproval

        Returns:
            ApprovalResult с упорядоченным списком grants

        Raises:
            LengthMismatch: feeder_pools и feeder_assets разной длины
            InvalidSpender / InvalidToken: нулевой адрес в любом grant
            TransferFailed: токен отклонил approve
        """
        grants = self.plan(request)

        for token, spender in grants:
            safe_approve(self._registry, token, self._address, spender, MAX_UINT256)

        logger.info("Granted %d infinite approvals (%s)", len(grants), request.kind)
        return ApprovalResult(
            grants=tuple(grants),
            allowance=MAX_UINT256,
            details=f"{request.kind}: {len(grants)} grants",
        )

    def plan(self, request: ApprovalRequest) -> List[Tuple[str, str]]:
        """Раскрытие запроса в список (token, spender) с валидацией."""
        if isinstance(request, SingleApproval):
            grants = [(request.token, request.spender)]
        elif isinstance(request, TokenListApproval):
            grants = [(token, request.spender) for token in request.tokens]
        elif isinstance(request, BundleApproval):
            grants = self._plan_bundle(request)
        else:
            raise TypeError(f"Unsupported approval request: {type(request).__name__}")

        for token, spender in grants:
            self._check_grant(token, spender)

        return grants

    @staticmethod
    def _plan_bundle(request: BundleApproval) -> List[Tuple[str, str]]:
        if len(request.feeder_pools) != len(request.feeder_assets):
            raise LengthMismatch(
                f"feeder_pools ({len(request.feeder_pools)}) and "
                f"feeder_assets ({len(request.feeder_assets)}) differ in length"
            )

        grants = [
            (request.derivative_asset, request.savings),
            (request.savings, request.vault),
        ]
        grants.extend((base_asset, request.derivative_asset) for base_asset in request.base_assets)
        grants.extend(zip(request.feeder_assets, request.feeder_pools))
        return grants

    @staticmethod
    def _check_grant(token: str, spender: str) -> None:
        if is_zero_address(spender):
            raise InvalidSpender(f"Invalid spender for token {token}")
        if is_zero_address(token):
            raise InvalidToken(f"Invalid token for spender {spender}")
