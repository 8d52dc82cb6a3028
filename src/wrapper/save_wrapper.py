"""
SaveWrapper — публичная поверхность orchestration layer

| Операция               | Роль  | Guards                                   |
|------------------------|-------|------------------------------------------|
| toggle_contract_active | Owner | —                                        |
| approve                | Owner | —                                        |
| claim_rewards          | Owner | —                                        |
| save_via_mint          | Any   | Pause (+ Reentrancy при guard_deposits)  |
| save_and_stake         | Any   | Pause (+ Reentrancy при guard_deposits)  |
| save_via_swap          | Any   | Pause (+ Reentrancy при guard_deposits)  |
| withdraw_and_unwrap    | Any   | Pause, затем Reentrancy                  |

Каждая операция выполняется как одна неделимая единица работы:
- guards проверяются до любого движения value (fail-fast, без retry)
- любое исключение откатывает GuardState и все Transactional коллабораторы
  к состоянию на входе в операцию, затем пробрасывается вызывающему
"""

import logging
from contextlib import contextmanager, nullcontext
from typing import Iterator, Optional

from src.collaborators.registry import ContractRegistry
from src.core.domain.requests import (
    ApprovalRequest,
    SaveAndStakeRequest,
    SaveViaMintRequest,
    SaveViaSwapRequest,
    WithdrawAndUnwrapRequest,
)
from src.core.domain.results import ApprovalResult, ClaimResult, DepositResult
from src.core.domain.units import normalize_address
from src.guards.access import AccessGuard
from src.guards.reentrancy import ReentrancyGuard
from src.guards.state import GuardState

from .approvals import ApprovalManager
from .config import SaveWrapperConfig
from .deposit import DepositPipeline
from .rewards import RewardClaimer
from .stake_router import StakeRouter
from .withdraw import WithdrawPipeline

logger = logging.getLogger(__name__)


class SaveWrapper:
    """Orchestration layer: deposit / withdraw pipelines под guards."""

    def __init__(
        self,
        address: str,
        owner: str,
        registry: ContractRegistry,
        config: Optional[SaveWrapperConfig] = None,
    ):
        """
        Args:
            address: Собственная идентичность wrapper (custody address)
            owner: Deployer, становится owner навсегда
            registry: Каталог коллабораторов
            config: Политика (default SaveWrapperConfig())
        """
        self.address = normalize_address(address)
        self.config = config or SaveWrapperConfig()
        self.registry = registry

        self._state = GuardState(owner=owner)
        self._access = AccessGuard(self._state)
        self._reentrancy = ReentrancyGuard(self._state)

        self._approvals = ApprovalManager(registry, self.address)
        self._router = StakeRouter(registry, self.address, self.config)
        self._deposits = DepositPipeline(registry, self.address, self._router)
        self._withdrawals = WithdrawPipeline(registry, self.address, self.config)
        self._rewards = RewardClaimer(registry, self.address)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def owner(self) -> str:
        return self._access.owner

    @property
    def paused(self) -> bool:
        return self._access.paused

    @property
    def locked(self) -> bool:
        return self._reentrancy.locked

    # -------------------------------------------------------------------------
    # Owner operations
    # -------------------------------------------------------------------------

    def toggle_contract_active(self, caller: str) -> None:
        with self._atomic():
            self._access.toggle_contract_active(normalize_address(caller))

    def approve(self, caller: str, request: ApprovalRequest) -> ApprovalResult:
        """Infinite approvals (single / token list / bundle), owner-only."""
        with self._atomic():
            self._access.require_owner(normalize_address(caller))
            return self._approvals.approve(request)

    def claim_rewards(self, caller: str, vault: str) -> ClaimResult:
        """Claim vault rewards и sweep reward/platform токенов owner'у."""
        caller = normalize_address(caller)
        with self._atomic():
            self._access.require_owner(caller)
            return self._rewards.claim_rewards(caller, normalize_address(vault))

    # -------------------------------------------------------------------------
    # Deposit operations
    # -------------------------------------------------------------------------

    def save_via_mint(self, caller: str, request: SaveViaMintRequest) -> DepositResult:
        caller = normalize_address(caller)
        with self._atomic():
            self._access.require_active()
            with self._deposit_guard():
                return self._deposits.save_via_mint(caller, request)

    def save_and_stake(self, caller: str, request: SaveAndStakeRequest) -> DepositResult:
        caller = normalize_address(caller)
        with self._atomic():
            self._access.require_active()
            with self._deposit_guard():
                return self._deposits.save_and_stake(caller, request)

    def save_via_swap(self, caller: str, request: SaveViaSwapRequest) -> DepositResult:
        caller = normalize_address(caller)
        with self._atomic():
            self._access.require_active()
            with self._deposit_guard():
                return self._deposits.save_via_swap(caller, request)

    # -------------------------------------------------------------------------
    # Withdraw operation
    # -------------------------------------------------------------------------

    def withdraw_and_unwrap(self, caller: str, request: WithdrawAndUnwrapRequest) -> int:
        """
        Returns:
            Реализованное количество output asset (как вернул vault)
        """
        caller = normalize_address(caller)
        with self._atomic():
            self._access.require_active()
            with self._reentrancy:
                return self._withdrawals.withdraw_and_unwrap(caller, request)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _deposit_guard(self):
        if self.config.guard_deposits:
            return self._reentrancy
        return nullcontext()

    @contextmanager
    def _atomic(self) -> Iterator[None]:
        """All-or-nothing scope: откат состояния при любом исключении."""
        guard_snapshot = self._state.copy()
        contracts_snapshot = self.registry.snapshot()
        try:
            yield
        except Exception as exc:
            self.registry.restore(contracts_snapshot)
            self._state.restore_from(guard_snapshot)
            logger.warning("Operation reverted: %s: %s", type(exc).__name__, exc)
            raise
