"""
Payload Contracts — JSON Schema контракты операций SaveWrapper

Каждая публичная операция принимает JSON payload, описанный схемой
draft 2020-12 в contracts/schema/<operation>.json:

| Операция               | Схема                        |
|------------------------|------------------------------|
| save_via_mint          | save_via_mint.json           |
| save_and_stake         | save_and_stake.json          |
| save_via_swap          | save_via_swap.json           |
| withdraw_and_unwrap    | withdraw_and_unwrap.json     |
| approve                | approval.json (oneOf kind)   |
| claim_rewards          | claim_rewards.json           |
| toggle_contract_active | toggle_contract_active.json  |

Нарушения собираются полностью (iter_errors) и отдаются одной
InvalidPayload ошибкой, до любых guards и коллабораторов.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

from src.core.errors import InvalidPayload

logger = logging.getLogger(__name__)

# operation → имя схемы без расширения
OPERATION_SCHEMAS: Dict[str, str] = {
    "save_via_mint": "save_via_mint",
    "save_and_stake": "save_and_stake",
    "save_via_swap": "save_via_swap",
    "withdraw_and_unwrap": "withdraw_and_unwrap",
    "approve": "approval",
    "claim_rewards": "claim_rewards",
    "toggle_contract_active": "toggle_contract_active",
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем из contracts/schema/ в корне репозитория.

    Каждая схема проходит meta-validation при первой загрузке и кэшируется.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень репозитория: src/core/contracts/validators.py → 4 уровня вверх
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Файл схемы отсутствует
            ValueError: Файл не является валидной draft 2020-12 схемой
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        logger.debug("Loaded schema %s", schema_name)
        self._schemas[schema_name] = schema
        return schema

    def load_operation(self, operation: str) -> Dict[str, Any]:
        """
        Схема по имени операции.

        Raises:
            ValueError: Операция без контракта
        """
        if operation not in OPERATION_SCHEMAS:
            raise ValueError(f"Unknown operation: {operation}")
        return self.load_schema(OPERATION_SCHEMAS[operation])


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


def _format_error(error: jsonschema.ValidationError) -> str:
    path = "/".join(str(part) for part in error.absolute_path) or "<root>"
    return f"{path}: {error.message}"


class ContractValidator:
    """Проверка payload одной операции против ее схемы."""

    def __init__(self, operation: str, loader: SchemaLoader | None = None):
        self.operation = operation
        self.schema = (loader or _SCHEMA_LOADER).load_operation(operation)
        self._validator = Draft202012Validator(self.schema)

    def errors(self, payload: Any) -> List[str]:
        """Все нарушения схемы, упорядоченные по пути в payload."""
        found = sorted(
            self._validator.iter_errors(payload),
            key=lambda error: [str(part) for part in error.absolute_path],
        )
        return [_format_error(error) for error in found]

    def is_valid(self, payload: Any) -> bool:
        return self._validator.is_valid(payload)

    def check(self, payload: Any) -> None:
        """
        Raises:
            InvalidPayload: со всеми нарушениями схемы
        """
        errors = self.errors(payload)
        if errors:
            logger.warning("Rejected %s payload: %d violations", self.operation, len(errors))
            raise InvalidPayload(self.operation, errors)


@lru_cache(maxsize=None)
def validator_for(operation: str) -> ContractValidator:
    """
    Кэшированный ContractValidator операции.

    Raises:
        ValueError: Операция без контракта
    """
    return ContractValidator(operation)
