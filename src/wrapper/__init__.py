"""SaveWrapper — deposit/withdraw pipelines, approvals и rewards под guards."""

from .commands import OPERATIONS, execute
from .config import SaveWrapperConfig, StakeOfRecord
from .save_wrapper import SaveWrapper

__all__ = [
    "SaveWrapper",
    "SaveWrapperConfig",
    "StakeOfRecord",
    "OPERATIONS",
    "execute",
]
