"""
Operators — Диспетчер бинарных операций над Element

Operator table (OPS) — read-only отображение Operator → функция над двумя
FLOAT64 Element. Строится один раз при импорте и никогда не изменяется,
поэтому безопасна для конкурентного чтения без блокировок.

Порядок apply():
1. Коэрция left, затем right к FLOAT64 (первая ошибка пробрасывается)
2. Поиск функции в OPS и вызов

Равенство (==) не проходит через OPS: у него отдельная точка входа equal(),
которая никогда не бросает исключений.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union

from src.core.element.cell import Element, ElementArithmeticError
from src.core.element.kinds import ElementKind, is_float_kind
from src.core.math.numerical_safeguards import (
    EPS_ELEMENT_EQ_ABS,
    ieee_divide,
    ieee_mod,
    is_close_abs,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Символ бинарной операции"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    EQ = "=="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="


OperatorFn = Callable[[Element, Element], Element]


# =============================================================================
# OPERATOR TABLE
# =============================================================================


def _float_element(x: float) -> Element:
    return Element.model_construct(kind=ElementKind.FLOAT64, value=x)


def _bool_element(flag: bool) -> Element:
    return Element.model_construct(kind=ElementKind.BOOL, value=flag)


TRUE_ELEMENT: Element = _bool_element(True)
FALSE_ELEMENT: Element = _bool_element(False)


# Функции предполагают, что оба операнда уже FLOAT64
OPS: Mapping[Operator, OperatorFn] = MappingProxyType(
    {
        Operator.ADD: lambda a, b: _float_element(a.value + b.value),
        Operator.SUB: lambda a, b: _float_element(a.value - b.value),
        Operator.MUL: lambda a, b: _float_element(a.value * b.value),
        Operator.DIV: lambda a, b: _float_element(ieee_divide(a.value, b.value)),
        Operator.MOD: lambda a, b: _float_element(ieee_mod(a.value, b.value)),
        Operator.LT: lambda a, b: _bool_element(a.value < b.value),
        Operator.LE: lambda a, b: _bool_element(a.value <= b.value),
        Operator.GT: lambda a, b: _bool_element(a.value > b.value),
        Operator.GE: lambda a, b: _bool_element(a.value >= b.value),
    }
)


# =============================================================================
# DISPATCHER
# =============================================================================


def apply(left: Element, right: Element, op: Union[Operator, str]) -> Element:
    """
    Применение бинарного оператора к двум Element.

    Args:
        left: Левый операнд
        right: Правый операнд
        op: Operator или его символ ("+", "-", "*", "/", "%", "==", "<", "<=", ">", ">=")

    Returns:
        FLOAT64 Element для арифметики, BOOL Element для сравнений

    Raises:
        ElementArithmeticError: Если операнд не числовой (left проверяется первым).
            Для "==" не бросается никогда.
        ValueError: Если символ оператора неизвестен

    Examples:
        >>> apply(new(2), new(3), "+").value
        5.0
    """
    op = Operator(op)

    if op == Operator.EQ:
        return equal(left, right)

    try:
        left = left.as_float()
        right = right.as_float()
    except ElementArithmeticError as e:
        logger.debug("Operator %s rejected %s operand", op.value, e.kind.value)
        raise

    return OPS[op](left, right)


def add(left: Element, right: Element) -> Element:
    return apply(left, right, Operator.ADD)


def diff(left: Element, right: Element) -> Element:
    return apply(left, right, Operator.SUB)


def prod(left: Element, right: Element) -> Element:
    return apply(left, right, Operator.MUL)


def quot(left: Element, right: Element) -> Element:
    return apply(left, right, Operator.DIV)


def mod(left: Element, right: Element) -> Element:
    return apply(left, right, Operator.MOD)


def le(left: Element, right: Element) -> Element:
    """left < right (строго)"""
    return apply(left, right, Operator.LT)


def leq(left: Element, right: Element) -> Element:
    return apply(left, right, Operator.LE)


def ge(left: Element, right: Element) -> Element:
    """left > right (строго)"""
    return apply(left, right, Operator.GT)


def geq(left: Element, right: Element) -> Element:
    return apply(left, right, Operator.GE)


# =============================================================================
# EQUALITY
# =============================================================================


def equal(left: Element, right: Element, abs_tol: float = EPS_ELEMENT_EQ_ABS) -> Element:
    """
    Равенство Element с толерантностью для float.

    Порядок проверок:
    1. Ровно один операнд null → False
    2. Структурное совпадение (kind и value) → True
    3. Хотя бы один kind float32/float64 → коэрция обеих сторон
       (ошибки коэрции подавляются, нечисловая сторона → False),
       затем abs(a - b) <= abs_tol
    4. Иначе → False

    Целые разной ширины с одинаковым значением (INT8 5 и INT32 5)
    попадают в п.4 и не равны.

    NaN не равен ничему, включая NaN.

    Args:
        left: Левый операнд
        right: Правый операнд
        abs_tol: Абсолютная толерантность (default: EPS_ELEMENT_EQ_ABS)

    Returns:
        BOOL Element (для любых операндов сравнение не бросает исключений)

    Raises:
        ValueError: Если abs_tol отрицательный (проверяется до сравнения,
            независимо от операндов)
    """
    if abs_tol < 0:
        raise ValueError(f"abs_tol must be non-negative, got {abs_tol}")

    if left.is_null != right.is_null:
        return FALSE_ELEMENT

    if left.kind == right.kind and left.value == right.value:
        return TRUE_ELEMENT

    if not (is_float_kind(left.kind) or is_float_kind(right.kind)):
        return FALSE_ELEMENT

    try:
        left_float = left.as_float()
        right_float = right.as_float()
    except ElementArithmeticError as e:
        logger.debug("Equality fallback: %s operand is not numeric", e.kind.value)
        return FALSE_ELEMENT

    if is_close_abs(left_float.value, right_float.value, abs_tol=abs_tol):
        return TRUE_ELEMENT
    return FALSE_ELEMENT


eq = equal
