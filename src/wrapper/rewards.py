"""
RewardClaimer — claim vault rewards и sweep на caller

1. vault.claim_reward() от имени wrapper
2. reward token: баланс wrapper > 0 → transfer caller
3. platform token (если vault его сообщает): баланс > 0 → transfer caller

Нулевые балансы пропускаются без ошибки.
"""

import logging

from src.collaborators.registry import ContractRegistry
from src.core.domain.results import ClaimResult
from src.core.domain.units import is_zero_address, normalize_address

from .transfers import safe_transfer

logger = logging.getLogger(__name__)


class RewardClaimer:
    def __init__(self, registry: ContractRegistry, wrapper_address: str):
        self._registry = registry
        self._address = wrapper_address

    def claim_rewards(self, caller: str, vault: str) -> ClaimResult:
        """
        Raises:
            InvalidAddress: неизвестный vault
            TransferFailed: токен отклонил sweep transfer
        """
        vault_contract = self._registry.vault(vault)
        vault_contract.claim_reward(self._address)

        reward_token = normalize_address(vault_contract.get_reward_token())
        reward_amount = self._sweep(reward_token, caller)

        platform_token = vault_contract.get_platform_token()
        platform_amount = 0
        if is_zero_address(platform_token):
            platform_token = None
        else:
            platform_token = normalize_address(platform_token)
            platform_amount = self._sweep(platform_token, caller)

        logger.info(
            "Claimed rewards from %s: reward=%d platform=%d",
            vault,
            reward_amount,
            platform_amount,
        )
        return ClaimResult(
            vault=vault,
            reward_token=reward_token,
            reward_amount=reward_amount,
            platform_token=platform_token,
            platform_amount=platform_amount,
            details=f"reward={reward_amount}, platform={platform_amount}",
        )

    def _sweep(self, token: str, recipient: str) -> int:
        balance = self._registry.token(token).balance_of(self._address)
        if balance > 0:
            safe_transfer(self._registry, token, self._address, recipient, balance)
        return balance
