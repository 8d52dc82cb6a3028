"""
Commands — выполнение операций SaveWrapper по JSON payload

Порядок:
1. Валидация payload против JSON Schema контракта операции (jsonschema);
   все нарушения собираются в одну InvalidPayload ошибку
2. Построение Pydantic request модели
3. Вызов соответствующего метода SaveWrapper

Malformed payload отклоняется до любых guards и коллабораторов.
"""

import logging
from typing import Any, Callable, Dict

from src.core.contracts import validator_for
from src.core.domain.requests import (
    APPROVAL_REQUEST_ADAPTER,
    SaveAndStakeRequest,
    SaveViaMintRequest,
    SaveViaSwapRequest,
    WithdrawAndUnwrapRequest,
)

from .save_wrapper import SaveWrapper

logger = logging.getLogger(__name__)


def _toggle(wrapper: SaveWrapper, caller: str, payload: Dict[str, Any]) -> Any:
    return wrapper.toggle_contract_active(caller)


def _approve(wrapper: SaveWrapper, caller: str, payload: Dict[str, Any]) -> Any:
    return wrapper.approve(caller, APPROVAL_REQUEST_ADAPTER.validate_python(payload))


def _claim_rewards(wrapper: SaveWrapper, caller: str, payload: Dict[str, Any]) -> Any:
    return wrapper.claim_rewards(caller, payload["vault"])


def _save_via_mint(wrapper: SaveWrapper, caller: str, payload: Dict[str, Any]) -> Any:
    return wrapper.save_via_mint(caller, SaveViaMintRequest.model_validate(payload))


def _save_and_stake(wrapper: SaveWrapper, caller: str, payload: Dict[str, Any]) -> Any:
    return wrapper.save_and_stake(caller, SaveAndStakeRequest.model_validate(payload))


def _save_via_swap(wrapper: SaveWrapper, caller: str, payload: Dict[str, Any]) -> Any:
    return wrapper.save_via_swap(caller, SaveViaSwapRequest.model_validate(payload))


def _withdraw_and_unwrap(wrapper: SaveWrapper, caller: str, payload: Dict[str, Any]) -> Any:
    return wrapper.withdraw_and_unwrap(caller, WithdrawAndUnwrapRequest.model_validate(payload))


# operation → handler; контракт payload берется из OPERATION_SCHEMAS
OPERATIONS: Dict[str, Callable[[SaveWrapper, str, Dict[str, Any]], Any]] = {
    "toggle_contract_active": _toggle,
    "approve": _approve,
    "claim_rewards": _claim_rewards,
    "save_via_mint": _save_via_mint,
    "save_and_stake": _save_and_stake,
    "save_via_swap": _save_via_swap,
    "withdraw_and_unwrap": _withdraw_and_unwrap,
}


def execute(wrapper: SaveWrapper, caller: str, operation: str, payload: Dict[str, Any]) -> Any:
    """
    Выполнение операции по имени и JSON payload.

    Args:
        wrapper: SaveWrapper
        caller: Эффективный caller
        operation: Имя операции (ключ OPERATIONS)
        payload: JSON payload операции

    Returns:
        Результат соответствующего метода SaveWrapper

    Raises:
        ValueError: Неизвестная операция
        InvalidPayload: payload не соответствует контракту (все нарушения)
        SaveWrapperError: ошибки guards и pipelines
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown operation: {operation}")

    validator_for(operation).check(payload)

    logger.debug("Executing %s for %s", operation, caller)
    return OPERATIONS[operation](wrapper, caller, payload)
