"""
Errors — таксономия ошибок SaveWrapper

Все ошибки пробрасываются синхронно вызывающему и прерывают операцию целиком.
Локального recovery/retry внутри ядра нет: эффекты вызова откатываются
атомарным scope (см. SaveWrapper._atomic).

Иерархия:
- SaveWrapperError
  - Unauthorized
  - Paused
  - ReentrantCall
  - InvalidAddress
    - InvalidToken
    - InvalidSpender
  - LengthMismatch
  - TransferFailed
  - MintSlippage
    - SwapSlippage
  - WithdrawSlippage
  - InvalidPayload
"""

from typing import List


class SaveWrapperError(Exception):
    """
    Базовая ошибка SaveWrapper.

    `code` — стабильный идентификатор ошибки для логов и внешних клиентов.
    """

    code = "save_wrapper_error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)
        self.message = message or self.code


class Unauthorized(SaveWrapperError):
    """Caller не вправе выполнить операцию: не owner, либо долю нельзя подтвердить accounting token."""

    code = "unauthorized"


class Paused(SaveWrapperError):
    """Контракт приостановлен (emergency pause)."""

    code = "paused"


class ReentrantCall(SaveWrapperError):
    """Повторный вход в операцию под reentrancy lock."""

    code = "reentrant_call"


class InvalidAddress(SaveWrapperError):
    """Нулевой или неизвестный адрес."""

    code = "invalid_address"


class InvalidToken(InvalidAddress):
    code = "invalid_token"


class InvalidSpender(InvalidAddress):
    code = "invalid_spender"


class LengthMismatch(SaveWrapperError):
    """Списки feeder pools / feeder assets разной длины."""

    code = "length_mismatch"


class TransferFailed(SaveWrapperError):
    """Token collaborator отклонил transfer / transferFrom / approve."""

    code = "transfer_failed"


class MintSlippage(SaveWrapperError):
    """Minter вернул меньше min_out derivative asset."""

    code = "mint_slippage"


class SwapSlippage(MintSlippage):
    """Feeder pool swap вернул меньше min_out derivative asset."""

    code = "swap_slippage"


class WithdrawSlippage(SaveWrapperError):
    """Vault unstake-and-unwrap вернул меньше min_out output asset."""

    code = "withdraw_slippage"


class InvalidPayload(SaveWrapperError):
    """
    JSON payload операции не соответствует контракту.

    `errors` — все нарушения схемы в виде "path: message", не только первое.
    """

    code = "invalid_payload"

    def __init__(self, operation: str, errors: List[str]):
        super().__init__(f"Invalid {operation} payload: " + "; ".join(errors))
        self.operation = operation
        self.errors = errors
