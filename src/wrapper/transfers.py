"""
Safe token operations — проверенные transfer / transferFrom / approve

Token primitive сообщает отказ через False. Здесь каждый результат
проверяется и превращается в TransferFailed. Количество проверяется
на диапазон uint256 до вызова токена (ValueError).
"""

import logging

from src.collaborators.registry import ContractRegistry
from src.core.domain.units import validate_amount
from src.core.errors import TransferFailed

logger = logging.getLogger(__name__)


def safe_transfer_from(
    registry: ContractRegistry,
    token: str,
    spender: str,
    owner: str,
    recipient: str,
    amount: int,
) -> None:
    """
    Перевод amount токена от owner к recipient по allowance spender.

    Raises:
        TransferFailed: Если токен отклонил перевод (баланс или allowance)
    """
    validate_amount(amount)
    logger.debug("transferFrom %s: %s -> %s amount=%d", token, owner, recipient, amount)
    if not registry.token(token).transfer_from(spender, owner, recipient, amount):
        raise TransferFailed(
            f"transferFrom of {amount} {token} from {owner} rejected"
        )


def safe_transfer(
    registry: ContractRegistry,
    token: str,
    sender: str,
    recipient: str,
    amount: int,
) -> None:
    """
    Raises:
        TransferFailed: Если токен отклонил перевод
    """
    validate_amount(amount)
    logger.debug("transfer %s: %s -> %s amount=%d", token, sender, recipient, amount)
    if not registry.token(token).transfer(sender, recipient, amount):
        raise TransferFailed(f"transfer of {amount} {token} to {recipient} rejected")


def safe_approve(
    registry: ContractRegistry,
    token: str,
    owner: str,
    spender: str,
    amount: int,
) -> None:
    """
    Raises:
        TransferFailed: Если токен отклонил approve
    """
    validate_amount(amount)
    logger.debug("approve %s: %s -> %s amount=%d", token, owner, spender, amount)
    if not registry.token(token).approve(owner, spender, amount):
        raise TransferFailed(f"approve of {token} for {spender} rejected")
