"""
Element Contract — JSON Schema для сериализованных Element

Формат: {"kind": "<ElementKind value>", "value": <payload>}

Схема schema/element.json загружается один раз при импорте.
Схема проверяет только форму (kind из перечня, JSON тип value);
диапазон ширины целых и точность float32 проверяет модель Element.
"""

import json
from pathlib import Path
from typing import Any, Final

from jsonschema import Draft202012Validator

ELEMENT_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "element.json"


def _load_element_validator() -> Draft202012Validator:
    with open(ELEMENT_SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema = json.load(f)

    # meta-validation
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


ELEMENT_VALIDATOR: Final[Draft202012Validator] = _load_element_validator()


def validate_element_contract(data: dict[str, Any]) -> None:
    """
    Валидация сериализованного Element.

    Args:
        data: dict вида {"kind": ..., "value": ...}

    Raises:
        jsonschema.ValidationError: Если data не соответствует element.json
    """
    ELEMENT_VALIDATOR.validate(data)
