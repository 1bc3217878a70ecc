"""
ElementKind — Закрытый набор типов значений Element

Каждый Element несёт ровно один kind. Набор фиксирован:
пользовательские типы не поддерживаются.

INVALID — маркер отсутствующего значения (null). Никогда не является
числовым и никогда не смешивается с числовыми kind.
"""

from enum import Enum
from typing import Any, Final


# =============================================================================
# ENUMS
# =============================================================================


class ElementKind(str, Enum):
    """Тег активного варианта значения Element"""

    INVALID = "invalid"
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"


# =============================================================================
# ГРУППЫ KIND
# =============================================================================

SIGNED_INTEGER_KINDS: Final[frozenset[ElementKind]] = frozenset(
    {ElementKind.INT8, ElementKind.INT16, ElementKind.INT32, ElementKind.INT64}
)

UNSIGNED_INTEGER_KINDS: Final[frozenset[ElementKind]] = frozenset(
    {ElementKind.UINT8, ElementKind.UINT16, ElementKind.UINT32, ElementKind.UINT64}
)

INTEGER_KINDS: Final[frozenset[ElementKind]] = SIGNED_INTEGER_KINDS | UNSIGNED_INTEGER_KINDS

FLOAT_KINDS: Final[frozenset[ElementKind]] = frozenset(
    {ElementKind.FLOAT32, ElementKind.FLOAT64}
)

NUMERIC_KINDS: Final[frozenset[ElementKind]] = INTEGER_KINDS | FLOAT_KINDS


def _signed_bounds(bits: int) -> tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _unsigned_bounds(bits: int) -> tuple[int, int]:
    return 0, (1 << bits) - 1


# Включительные границы (min, max) для каждого целочисленного kind
INTEGER_BOUNDS: Final[dict[ElementKind, tuple[int, int]]] = {
    ElementKind.INT8: _signed_bounds(8),
    ElementKind.INT16: _signed_bounds(16),
    ElementKind.INT32: _signed_bounds(32),
    ElementKind.INT64: _signed_bounds(64),
    ElementKind.UINT8: _unsigned_bounds(8),
    ElementKind.UINT16: _unsigned_bounds(16),
    ElementKind.UINT32: _unsigned_bounds(32),
    ElementKind.UINT64: _unsigned_bounds(64),
}


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_numeric_kind(kind: ElementKind) -> bool:
    """Числовой kind: целое любой ширины или float32/float64"""
    return kind in NUMERIC_KINDS


def is_float_kind(kind: ElementKind) -> bool:
    return kind in FLOAT_KINDS


def fits_integer_kind(value: int, kind: ElementKind) -> bool:
    """
    Проверка, помещается ли целое в диапазон kind.

    Args:
        value: Целое значение
        kind: Целочисленный kind

    Returns:
        True если min <= value <= max для kind

    Raises:
        ValueError: Если kind не целочисленный
    """
    if kind not in INTEGER_BOUNDS:
        raise ValueError(f"{kind.value} is not an integer kind")

    low, high = INTEGER_BOUNDS[kind]
    return low <= value <= high


# =============================================================================
# ВЫВОД KIND ДЛЯ PYTHON ЗНАЧЕНИЙ
# =============================================================================


def infer_kind(value: Any) -> ElementKind:
    """
    Определение kind для нативного Python значения.

    Правила:
    - None → INVALID
    - bool → BOOL (проверяется до int, т.к. bool является подклассом int)
    - int → INT64, либо UINT64 если значение помещается только в беззнаковый диапазон
    - float → FLOAT64
    - str → STRING

    Args:
        value: Python значение

    Returns:
        ElementKind активного варианта

    Raises:
        ValueError: Если целое не помещается ни в INT64, ни в UINT64
        TypeError: Если тип значения не поддерживается
    """
    if value is None:
        return ElementKind.INVALID

    if isinstance(value, bool):
        return ElementKind.BOOL

    if isinstance(value, int):
        if fits_integer_kind(value, ElementKind.INT64):
            return ElementKind.INT64
        if fits_integer_kind(value, ElementKind.UINT64):
            return ElementKind.UINT64
        raise ValueError(f"Integer {value} does not fit into 64 bits")

    if isinstance(value, float):
        return ElementKind.FLOAT64

    if isinstance(value, str):
        return ElementKind.STRING

    raise TypeError(f"Unsupported element value type: {type(value).__name__}")
