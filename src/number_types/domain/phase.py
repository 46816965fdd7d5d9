"""
Phase — угловая фаза, нормированная на один полный оборот

Immutable Pydantic модель. В отличие от UnipolarFloat/BipolarFloat,
Phase не насыщается, а заворачивается (wrap) через euclidean modulus:
арифметика фазы не теряет информацию на границе, а идёт по кругу.

ТАБЛИЦА НОРМАЛИЗАЦИИ:
    Phase(v), +, -               -> wrap
    Phase * UnipolarFloat        -> без wrap ([0,1) x [0,1] остаётся в [0,1))
    Phase * float                -> wrap
    Phase / UnipolarFloat        -> wrap (деление на ноль не бросает исключение)

Сравнения линейные по завёрнутому представителю, а не по круговому
расстоянию: Phase(0.99) и Phase(0.01) далеки друг от друга.
"""

from numbers import Real
from typing import ClassVar, Final

from pydantic import RootModel, field_validator

from number_types.domain.bipolar import BipolarFloat
from number_types.domain.unipolar import UnipolarFloat
from number_types.math.numerical_safeguards import ieee_divide, wrap_unit


PHASE_PERIOD: Final[float] = 1.0


class Phase(RootModel):
    """
    Единичная угловая фаза в диапазоне [0.0, 1.0).

    Обычное создание никогда не даёт ровно 1.0 (кроме округления
    крошечных отрицательных входов), но 1.0 допустимо через Phase.ONE.
    NaN/Inf на входе дают NaN; в JSON такая фаза пишется как NaN
    (ser_json_inf_nan="constants") и читается обратно без ошибки.
    """

    root: float = 0.0

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    ZERO: ClassVar["Phase"]

    # Обычно 1.0 заворачивается в 0.0, но "один полный оборот" — допустимое
    # граничное значение (например, верхняя граница диапазона фаз).
    ONE: ClassVar["Phase"]

    @field_validator("root")
    @classmethod
    def wrap_to_period(cls, v: float) -> float:
        """Wrap в [0.0, 1.0) при создании и при десериализации; NaN/Inf -> NaN."""
        return wrap_unit(float(v), PHASE_PERIOD)

    @classmethod
    def new(cls, v: float) -> "Phase":
        """Создание из сырого float с wrap в [0.0, 1.0)."""
        return cls(v)

    def val(self) -> float:
        """Внутреннее значение фазы."""
        return self.root

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Phase":
        if isinstance(other, Phase):
            return self.new(self.root + other.root)
        if isinstance(other, Real):
            return self.new(self.root + float(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> "Phase":
        if isinstance(other, Phase):
            return self.new(self.root - other.root)
        if isinstance(other, Real):
            return self.new(self.root - float(other))
        return NotImplemented

    def __mul__(self, other: object) -> "Phase":
        if isinstance(other, UnipolarFloat):
            # Масштабирование на долю из [0, 1] никогда не выходит из диапазона
            return Phase.model_construct(self.root * other.root)
        if isinstance(other, Real):
            return self.new(self.root * float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Phase":
        """Деление на UnipolarFloat с последующим wrap."""
        if isinstance(other, UnipolarFloat):
            return self.new(ieee_divide(self.root, other.root))
        return NotImplemented

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Phase, UnipolarFloat, BipolarFloat)):
            return self.root == other.root
        if isinstance(other, Real):
            return self.root == float(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.root)

    def __lt__(self, other: object) -> bool:
        value = _ordering_value(other)
        if value is None:
            return NotImplemented
        return self.root < value

    def __le__(self, other: object) -> bool:
        value = _ordering_value(other)
        if value is None:
            return NotImplemented
        return self.root <= value

    def __gt__(self, other: object) -> bool:
        value = _ordering_value(other)
        if value is None:
            return NotImplemented
        return self.root > value

    def __ge__(self, other: object) -> bool:
        value = _ordering_value(other)
        if value is None:
            return NotImplemented
        return self.root >= value

    def __float__(self) -> float:
        return self.root

    def __str__(self) -> str:
        return str(self.root)

    def __format__(self, format_spec: str) -> str:
        return format(self.root, format_spec)


Phase.ZERO = Phase.model_construct(0.0)
Phase.ONE = Phase.model_construct(PHASE_PERIOD)


def _ordering_value(other: object) -> float | None:
    """Phase упорядочивается относительно Phase, UnipolarFloat и float."""
    if isinstance(other, (Phase, UnipolarFloat)):
        return other.root
    if isinstance(other, Real):
        return float(other)
    return None
