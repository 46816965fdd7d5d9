"""
Math primitives для number_types

Численные примитивы нормализации: clamp, wrap, IEEE min/max и деление.
"""

from number_types.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    UNIT_PERIOD,
    # IEEE min/max
    ieee_max,
    ieee_min,
    # Normalization
    clamp,
    wrap_unit,
    # Division
    ieee_divide,
    # Comparisons
    is_close,
    is_valid_float,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "UNIT_PERIOD",
    # IEEE min/max
    "ieee_max",
    "ieee_min",
    # Normalization
    "clamp",
    "wrap_unit",
    # Division
    "ieee_divide",
    # Comparisons
    "is_close",
    "is_valid_float",
]
