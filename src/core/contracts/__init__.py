"""JSON Schema контракты payloads операций SaveWrapper."""

from .validators import (
    OPERATION_SCHEMAS,
    ContractValidator,
    SchemaLoader,
    validator_for,
)

__all__ = [
    "OPERATION_SCHEMAS",
    "ContractValidator",
    "SchemaLoader",
    "validator_for",
]
