"""
Element — Скалярная ячейка frame/table данных

Immutable Pydantic модель, хранящая одно значение и его kind:
- null (INVALID), bool, целые 8/16/32/64 (signed/unsigned),
  float32/float64, UTF-8 строки
- kind всегда соответствует активному варианту value

Коэрция (as_float) нормализует любой числовой kind к FLOAT64 перед
арифметикой и возвращает новый Element: исходный не изменяется.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.element_contract import validate_element_contract
from src.core.element.kinds import (
    INTEGER_KINDS,
    NUMERIC_KINDS,
    ElementKind,
    fits_integer_kind,
    infer_kind,
    is_float_kind,
)
from src.core.math.numerical_safeguards import is_float32_exact, to_float32


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ElementArithmeticError(ArithmeticError):
    """
    Попытка коэрции нечислового Element (BOOL, STRING, INVALID) к float.

    Единственная операционная ошибка ядра. Не ретраится и не оборачивается:
    пробрасывается вызывающему коду без частичного результата.
    """

    def __init__(self, kind: ElementKind):
        super().__init__(
            f"ArithmeticError: can only operate on numeric types, got {kind.value}"
        )
        self.kind = kind


# =============================================================================
# ELEMENT MODEL
# =============================================================================


class Element(BaseModel):
    """
    Скалярное значение с тегом kind.

    Immutable модель (frozen=True). Структурное равенство (==) означает
    совпадение kind и value; равенство с толерантностью — см. operators.equal.
    """

    kind: ElementKind = Field(..., description="Тег активного варианта value")
    value: Optional[Union[bool, int, float, str]] = Field(
        ..., description="Значение (None только для kind=INVALID)"
    )

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_value_matches_kind(cls, v: Any, info) -> Any:
        """Проверка, что value является допустимым значением для kind"""
        if "kind" not in info.data:
            return v

        kind = info.data["kind"]

        if kind == ElementKind.INVALID:
            if v is not None:
                raise ValueError(f"invalid element cannot hold a value, got {v!r}")
        elif kind == ElementKind.BOOL:
            if not isinstance(v, bool):
                raise ValueError(f"bool element requires bool value, got {v!r}")
        elif kind in INTEGER_KINDS:
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"{kind.value} element requires int value, got {v!r}")
            if not fits_integer_kind(v, kind):
                raise ValueError(f"value {v} out of range for {kind.value}")
        elif kind == ElementKind.FLOAT32:
            if not isinstance(v, float):
                raise ValueError(f"float32 element requires float value, got {v!r}")
            if not is_float32_exact(v):
                raise ValueError(f"value {v!r} is not representable as float32")
        elif kind == ElementKind.FLOAT64:
            if not isinstance(v, float):
                raise ValueError(f"float64 element requires float value, got {v!r}")
        elif kind == ElementKind.STRING:
            if not isinstance(v, str):
                raise ValueError(f"string element requires str value, got {v!r}")
        else:
            raise ValueError(f"Unknown element kind: {kind!r}")

        return v

    @property
    def is_null(self) -> bool:
        return self.kind == ElementKind.INVALID

    @property
    def is_numeric(self) -> bool:
        return self.kind in NUMERIC_KINDS

    @property
    def is_float(self) -> bool:
        return is_float_kind(self.kind)

    def as_float(self) -> "Element":
        """
        Коэрция к FLOAT64.

        Целые любой ширины и float32 расширяются до float64;
        FLOAT64 возвращается как есть.

        Returns:
            Новый Element с kind=FLOAT64

        Raises:
            ElementArithmeticError: Если kind не числовой (BOOL, STRING, INVALID)
        """
        if self.kind == ElementKind.FLOAT64:
            return self

        if self.kind in NUMERIC_KINDS:
            return Element.model_construct(kind=ElementKind.FLOAT64, value=float(self.value))

        raise ElementArithmeticError(self.kind)

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в dict согласно контракту element.json"""
        return {"kind": self.kind.value, "value": self.value}

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "Element":
        """
        Десериализация из dict контракта element.json.

        Raises:
            jsonschema.ValidationError: Если data не соответствует контракту
            pydantic.ValidationError: Если value недопустим для kind
        """
        validate_element_contract(data)
        return new(data.get("value"), ElementKind(data["kind"]))


# =============================================================================
# КОНСТРУКТОР
# =============================================================================


def _normalize_for_kind(value: Any, kind: ElementKind) -> Any:
    # JSON producers emit 5.0 for integral numbers
    if kind in INTEGER_KINDS and isinstance(value, float) and value.is_integer():
        value = int(value)

    if is_float_kind(kind) and isinstance(value, int) and not isinstance(value, bool):
        try:
            value = float(value)
        except OverflowError as e:
            raise ValueError(f"Integer {value} is too large for {kind.value}") from e

    if kind == ElementKind.FLOAT32 and isinstance(value, float):
        value = to_float32(value)

    return value


def new(value: Any = None, kind: Optional[ElementKind] = None) -> Element:
    """
    Создание Element из Python значения.

    Без kind тип выводится через infer_kind. С явным kind значение
    нормализуется (int → float для float kinds, целочисленный float → int
    для целых kinds, округление до binary32 для FLOAT32). None всегда даёт
    INVALID Element без значения.

    Args:
        value: Python значение (None, bool, int, float, str)
        kind: Явный kind (optional)

    Returns:
        Новый Element

    Raises:
        TypeError: Если тип значения не поддерживается
        ValueError: Если int не помещается в 64 бита (без kind)
            или не конвертируется во float (для float kinds)
        pydantic.ValidationError: Если value недопустим для явного kind

    Examples:
        >>> new(5).kind
        <ElementKind.INT64: 'int64'>
        >>> new(5, ElementKind.UINT8).value
        5
        >>> new(None).is_null
        True
    """
    if value is None:
        return Element(kind=ElementKind.INVALID, value=None)

    if kind is None:
        kind = infer_kind(value)
    else:
        kind = ElementKind(kind)
        value = _normalize_for_kind(value, kind)

    return Element(kind=kind, value=value)


# Sentinel для отсутствующего значения и для результата без данных
EMPTY_ELEMENT: Element = new(None)
