"""
Core math modules

Float примитивы с IEEE-семантикой и epsilon-сравнения.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_ELEMENT_EQ_ABS,
    FLOAT32_MAX,
    # IEEE arithmetic
    ieee_divide,
    ieee_mod,
    is_valid_float,
    # Epsilon comparisons
    is_close_abs,
    # Float32
    is_float32_exact,
    to_float32,
)

__all__ = [
    "EPS_ELEMENT_EQ_ABS",
    "FLOAT32_MAX",
    "ieee_divide",
    "ieee_mod",
    "is_valid_float",
    "is_close_abs",
    "is_float32_exact",
    "to_float32",
]
