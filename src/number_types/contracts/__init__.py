"""
Contract Validation Module

Валидация сериализованной (JSON) формы bounded-типов по схемам,
выведенным из Pydantic моделей.
"""

from .validators import (
    BipolarFloatValidator,
    ContractValidator,
    PhaseValidator,
    UnipolarFloatValidator,
    contract_schema,
    validate_bipolar_float,
    validate_phase,
    validate_unipolar_float,
)

__all__ = [
    # Classes
    "ContractValidator",
    "UnipolarFloatValidator",
    "BipolarFloatValidator",
    "PhaseValidator",
    # Functions
    "contract_schema",
    "validate_unipolar_float",
    "validate_bipolar_float",
    "validate_phase",
]
