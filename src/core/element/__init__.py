"""
Element — скалярные ячейки frame и операции над ними.

Ячейка (Element) хранит одно значение с тегом kind; операторы
нормализуют числовые kind к FLOAT64 и диспетчеризуют по Operator.
"""

# Kinds
from src.core.element.kinds import (
    FLOAT_KINDS,
    INTEGER_BOUNDS,
    INTEGER_KINDS,
    NUMERIC_KINDS,
    SIGNED_INTEGER_KINDS,
    UNSIGNED_INTEGER_KINDS,
    ElementKind,
    fits_integer_kind,
    infer_kind,
    is_float_kind,
    is_numeric_kind,
)

# Value cell
from src.core.element.cell import (
    EMPTY_ELEMENT,
    Element,
    ElementArithmeticError,
    new,
)

# Operators
from src.core.element.operators import (
    FALSE_ELEMENT,
    OPS,
    TRUE_ELEMENT,
    Operator,
    add,
    apply,
    diff,
    eq,
    equal,
    ge,
    geq,
    le,
    leq,
    mod,
    prod,
    quot,
)

__all__ = [
    # Kinds
    "ElementKind",
    "SIGNED_INTEGER_KINDS",
    "UNSIGNED_INTEGER_KINDS",
    "INTEGER_KINDS",
    "FLOAT_KINDS",
    "NUMERIC_KINDS",
    "INTEGER_BOUNDS",
    "fits_integer_kind",
    "infer_kind",
    "is_float_kind",
    "is_numeric_kind",
    # Value cell
    "Element",
    "ElementArithmeticError",
    "EMPTY_ELEMENT",
    "new",
    # Operators
    "Operator",
    "OPS",
    "TRUE_ELEMENT",
    "FALSE_ELEMENT",
    "apply",
    "add",
    "diff",
    "prod",
    "quot",
    "mod",
    "le",
    "leq",
    "ge",
    "geq",
    "equal",
    "eq",
]
