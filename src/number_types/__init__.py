"""
Self-normalizing bounded float types.

UnipolarFloat [0, 1] и BipolarFloat [-1, 1] насыщаются (clamp),
Phase [0, 1) заворачивается (wrap). Ни один конструктор и ни один оператор
не бросает исключений для числового входа.
"""

from number_types.domain import (
    BIPOLAR_MAX,
    BIPOLAR_MIN,
    PHASE_PERIOD,
    UNIPOLAR_MAX,
    UNIPOLAR_MIN,
    BipolarFloat,
    Phase,
    UnipolarFloat,
)

__all__ = [
    # Range constants
    "UNIPOLAR_MIN",
    "UNIPOLAR_MAX",
    "BIPOLAR_MIN",
    "BIPOLAR_MAX",
    "PHASE_PERIOD",
    # Types
    "UnipolarFloat",
    "BipolarFloat",
    "Phase",
]
