"""
Domain models and value objects.

Contains addresses and uint256 units, request models for every public
operation and frozen operation results.
"""

from src.core.domain.requests import (
    APPROVAL_REQUEST_ADAPTER,
    ApprovalRequest,
    BundleApproval,
    SaveAndStakeRequest,
    SaveViaMintRequest,
    SaveViaSwapRequest,
    SingleApproval,
    TokenListApproval,
    WithdrawAndUnwrapRequest,
)
from src.core.domain.results import ApprovalResult, ClaimResult, DepositResult
from src.core.domain.units import (
    ADDRESS_PATTERN,
    MAX_UINT256,
    ZERO_ADDRESS,
    is_zero_address,
    normalize_address,
    same_address,
    validate_amount,
)

__all__ = [
    # Units module
    "ADDRESS_PATTERN",
    "MAX_UINT256",
    "ZERO_ADDRESS",
    "is_zero_address",
    "normalize_address",
    "same_address",
    "validate_amount",
    # Requests
    "SaveViaMintRequest",
    "SaveAndStakeRequest",
    "SaveViaSwapRequest",
    "WithdrawAndUnwrapRequest",
    "SingleApproval",
    "TokenListApproval",
    "BundleApproval",
    "ApprovalRequest",
    "APPROVAL_REQUEST_ADAPTER",
    # Results
    "DepositResult",
    "ApprovalResult",
    "ClaimResult",
]
