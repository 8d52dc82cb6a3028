"""Guards — ownership, emergency pause и reentrancy lock."""

from .access import AccessGuard
from .reentrancy import ReentrancyGuard
from .state import GuardState

__all__ = [
    "AccessGuard",
    "ReentrancyGuard",
    "GuardState",
]
