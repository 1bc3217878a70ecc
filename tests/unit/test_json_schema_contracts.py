"""
Tests for Element JSON Schema Contract

Тестирование контракта element.json:
- Перечень kind в схеме совпадает с ElementKind
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Интеграция с Pydantic моделью Element (to_contract / from_contract)
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import ELEMENT_SCHEMA_PATH, ELEMENT_VALIDATOR, validate_element_contract
from src.core.element import EMPTY_ELEMENT, Element, ElementKind, new


# =============================================================================
# ELEMENT CONTRACT
# =============================================================================


class TestElementContract:
    """Валидация сериализованных Element"""

    def test_schema_kinds_match_enum(self) -> None:
        """Перечень kind в схеме совпадает с ElementKind"""
        schema = json.loads(ELEMENT_SCHEMA_PATH.read_text(encoding="utf-8"))
        assert set(schema["properties"]["kind"]["enum"]) == {k.value for k in ElementKind}
        assert ELEMENT_VALIDATOR.schema == schema

    @pytest.mark.parametrize(
        "data",
        [
            {"kind": "invalid", "value": None},
            {"kind": "invalid"},
            {"kind": "bool", "value": True},
            {"kind": "int8", "value": -5},
            {"kind": "int8", "value": 5.0},
            {"kind": "uint64", "value": 2**64 - 1},
            {"kind": "float32", "value": 1.5},
            {"kind": "float64", "value": 3},
            {"kind": "string", "value": "abc"},
        ],
    )
    def test_valid(self, data) -> None:
        validate_element_contract(data)

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"value": 1},
            {"kind": "decimal", "value": 1},
            {"kind": "int8"},
            {"kind": "int8", "value": "5"},
            {"kind": "int8", "value": True},
            {"kind": "int8", "value": 5.5},
            {"kind": "float64", "value": "1.0"},
            {"kind": "bool", "value": 1},
            {"kind": "string", "value": 1},
            {"kind": "invalid", "value": 0},
            {"kind": "int8", "value": 1, "extra": 1},
        ],
    )
    def test_invalid(self, data) -> None:
        with pytest.raises(ValidationError):
            validate_element_contract(data)


class TestElementSerialization:
    """Element.to_contract / Element.from_contract"""

    def test_to_contract(self) -> None:
        assert new(5, ElementKind.INT8).to_contract() == {"kind": "int8", "value": 5}
        assert EMPTY_ELEMENT.to_contract() == {"kind": "invalid", "value": None}

    def test_to_contract_is_valid(self) -> None:
        for element in (new(True), new(7), new(2.5), new("s"), new(None)):
            validate_element_contract(element.to_contract())

    def test_from_contract(self) -> None:
        element = Element.from_contract({"kind": "uint16", "value": 300})
        assert element == new(300, ElementKind.UINT16)

    def test_from_contract_null(self) -> None:
        assert Element.from_contract({"kind": "invalid"}) == EMPTY_ELEMENT

    def test_from_contract_normalizes_floats(self) -> None:
        """JSON целое для float kind становится float, float32 округляется"""
        assert Element.from_contract({"kind": "float64", "value": 3}).value == 3.0
        assert Element.from_contract({"kind": "float32", "value": 0.1}).value == 0.10000000149011612

    def test_from_contract_integral_float_for_integer_kind(self) -> None:
        """5.0 для int8 проходит схему и становится int"""
        element = Element.from_contract({"kind": "int8", "value": 5.0})
        assert element == new(5, ElementKind.INT8)
        assert type(element.value) is int

    def test_from_contract_fractional_float_for_integer_kind(self) -> None:
        """5.5 для int8 отклоняется схемой"""
        with pytest.raises(ValidationError):
            Element.from_contract({"kind": "int8", "value": 5.5})

    def test_from_contract_integral_float_out_of_range(self) -> None:
        with pytest.raises(PydanticValidationError):
            Element.from_contract({"kind": "int8", "value": 300.0})

    def test_from_contract_schema_violation(self) -> None:
        with pytest.raises(ValidationError):
            Element.from_contract({"kind": "int8", "value": "5"})

    def test_from_contract_range_violation(self) -> None:
        """Диапазон ширины проверяется Pydantic моделью, не схемой"""
        with pytest.raises(PydanticValidationError):
            Element.from_contract({"kind": "int8", "value": 300})

    def test_json_round_trip(self) -> None:
        element = new(-12, ElementKind.INT32)
        restored = Element.from_contract(json.loads(json.dumps(element.to_contract())))
        assert restored == element
