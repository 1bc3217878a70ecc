"""
Contract Validation Module

JSON Schema контракт сериализованных Element.
"""

from .element_contract import (
    ELEMENT_SCHEMA_PATH,
    ELEMENT_VALIDATOR,
    validate_element_contract,
)

__all__ = [
    "ELEMENT_SCHEMA_PATH",
    "ELEMENT_VALIDATOR",
    "validate_element_contract",
]
