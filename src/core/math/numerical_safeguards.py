"""
Numerical Safeguards — Float primitives для Element арифметики

Модуль обеспечивает IEEE-совместимое поведение float операций там,
где Python по умолчанию бросает исключение:
- Деление на ноль → ±inf / nan (вместо ZeroDivisionError)
- Floating modulo по ноль и inf → nan (вместо ValueError из math.fmod)
- Epsilon-сравнение с абсолютной толерантностью
- Округление до binary32 (float32) представления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление и modulo никогда не бросают исключений
2. NaN никогда не считается близким ни к одному значению (включая NaN)
3. Совпадающие бесконечности считаются равными
4. Все операции детерминированы и воспроизводимы
"""

import math
import struct
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для равенства Element значений.
# Используется в equal(), когда хотя бы одна сторона имеет float kind
EPS_ELEMENT_EQ_ABS: Final[float] = 1e-10

# Максимальное конечное значение binary32
FLOAT32_MAX: Final[float] = 3.4028234663852886e38


# =============================================================================
# IEEE АРИФМЕТИКА
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE 754.

    Python бросает ZeroDivisionError для x / 0.0, здесь результат
    определяется по стандарту:
    - x / ±0.0 (x != 0) → ±inf со знаком sign(x) * sign(denominator)
    - 0.0 / ±0.0 → nan
    - nan / ±0.0 → nan

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if math.isnan(numerator) or numerator == 0.0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_mod(dividend: float, divisor: float) -> float:
    """
    Floating modulo (знак результата совпадает со знаком делимого).

    Семантика fmod, а не целочисленного % Python:
    ieee_mod(-5.5, 2.0) == -1.5, тогда как -5.5 % 2.0 == 0.5.

    Граничные случаи:
    - mod(±inf, y) → nan
    - mod(x, 0.0) → nan
    - mod(x, ±inf) → x
    - mod(nan, y), mod(x, nan) → nan

    Examples:
        >>> ieee_mod(5.5, 2.0)
        1.5
        >>> ieee_mod(-5.5, 2.0)
        -1.5
    """
    if math.isnan(dividend) or math.isnan(divisor):
        return math.nan
    if math.isinf(dividend) or divisor == 0.0:
        return math.nan
    return math.fmod(dividend, divisor)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close_abs(a: float, b: float, abs_tol: float = EPS_ELEMENT_EQ_ABS) -> bool:
    """
    Сравнение float с абсолютной толерантностью.

    Алгоритм:
        a == b or abs(a - b) <= abs_tol

    Первая проверка нужна для совпадающих бесконечностей (inf - inf = nan).

    Args:
        a: Первое значение
        b: Второе значение
        abs_tol: Абсолютная толерантность (default: EPS_ELEMENT_EQ_ABS)

    Returns:
        True если значения близки, False иначе (всегда False для NaN)

    Raises:
        ValueError: Если abs_tol отрицательный

    Examples:
        >>> is_close_abs(1.0, 1.0 + 5e-11)
        True
        >>> is_close_abs(1.0, 1.0 + 5e-9)
        False
    """
    if abs_tol < 0:
        raise ValueError(f"abs_tol must be non-negative, got {abs_tol}")

    if a == b:
        return True
    return abs(a - b) <= abs_tol


# =============================================================================
# FLOAT32
# =============================================================================


def to_float32(value: float) -> float:
    """
    Округление значения до ближайшего binary32.

    Значения за пределами диапазона float32 становятся ±inf,
    как при конверсии float64 → float32 в IEEE 754.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def is_float32_exact(value: float) -> bool:
    """Проверка, представимо ли значение в binary32 без потерь."""
    if math.isnan(value):
        return True
    return to_float32(value) == value
