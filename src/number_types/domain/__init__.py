"""
Domain value objects.

Bounded float types: UnipolarFloat, BipolarFloat, Phase.
"""

from number_types.domain.bipolar import BIPOLAR_MAX, BIPOLAR_MIN, BipolarFloat
from number_types.domain.phase import PHASE_PERIOD, Phase
from number_types.domain.unipolar import UNIPOLAR_MAX, UNIPOLAR_MIN, UnipolarFloat

__all__ = [
    # UnipolarFloat
    "UNIPOLAR_MIN",
    "UNIPOLAR_MAX",
    "UnipolarFloat",
    # BipolarFloat
    "BIPOLAR_MIN",
    "BIPOLAR_MAX",
    "BipolarFloat",
    # Phase
    "PHASE_PERIOD",
    "Phase",
]
