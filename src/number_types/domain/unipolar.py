"""
UnipolarFloat — нормализованная доля в диапазоне [0.0, 1.0]

Immutable Pydantic модель (RootModel над float) для интенсивности, mix amount
и прочих дробных величин. Инвариант диапазона поддерживается clamp-ом
при каждом создании и каждой арифметической операции, которая может его
нарушить. Сериализуется как голое число.

ТАБЛИЦА НОРМАЛИЗАЦИИ:
    UnipolarFloat(v), +, -       -> clamp (saturating)
    UnipolarFloat * UnipolarFloat -> без clamp (произведение [0,1] x [0,1] в [0,1])
    UnipolarFloat * float         -> float (без нормализации)
    invert()                      -> без clamp (1 - v всегда в [0,1])
"""

from numbers import Real
from typing import ClassVar, Final

from pydantic import RootModel, field_validator

from number_types.math.numerical_safeguards import clamp


# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

UNIPOLAR_MIN: Final[float] = 0.0
UNIPOLAR_MAX: Final[float] = 1.0


# =============================================================================
# UNIPOLAR FLOAT
# =============================================================================


class UnipolarFloat(RootModel):
    """
    Float, ограниченный диапазоном [0.0, 1.0].

    Immutable модель (frozen=True). Все операции создают новый экземпляр.
    Любой числовой вход (включая NaN/Inf) нормализуется, а не отклоняется:
    NaN -> 0.0, +inf -> 1.0, -inf -> 0.0.

    Равенство определено только с UnipolarFloat и float: сравнение с
    BipolarFloat всегда False (в отличие от Phase, которая равна обоим).
    """

    root: float = 0.0

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    ZERO: ClassVar["UnipolarFloat"]
    ONE: ClassVar["UnipolarFloat"]

    @field_validator("root")
    @classmethod
    def clamp_to_range(cls, v: float) -> float:
        """Clamp в [0.0, 1.0] при создании и при десериализации."""
        return clamp(float(v), UNIPOLAR_MIN, UNIPOLAR_MAX)

    @classmethod
    def new(cls, v: float) -> "UnipolarFloat":
        """Создание из сырого float с clamp в [0.0, 1.0]."""
        return cls(v)

    def val(self) -> float:
        """Внутреннее значение float."""
        return self.root

    def invert(self) -> "UnipolarFloat":
        """
        Инверсия: 1 -> 0, 0 -> 1.

        Returns:
            UnipolarFloat(1.0 - v), clamp не требуется
        """
        return UnipolarFloat.model_construct(UNIPOLAR_MAX - self.root)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "UnipolarFloat":
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.new(self.root + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "UnipolarFloat":
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.new(self.root - value)

    def __mul__(self, other: object) -> "UnipolarFloat | float":
        if isinstance(other, UnipolarFloat):
            # Произведение двух значений из [0, 1] не выходит из [0, 1]
            return UnipolarFloat.model_construct(self.root * other.root)
        if isinstance(other, Real):
            return self.root * float(other)
        return NotImplemented

    def __rmul__(self, other: object) -> float:
        if isinstance(other, Real):
            return float(other) * self.root
        return NotImplemented

    # -------------------------------------------------------------------------
    # Сравнения (IEEE-семантика внутреннего float)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.root == value

    def __hash__(self) -> int:
        return hash(self.root)

    def __lt__(self, other: object) -> bool:
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.root < value

    def __le__(self, other: object) -> bool:
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.root <= value

    def __gt__(self, other: object) -> bool:
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.root > value

    def __ge__(self, other: object) -> bool:
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.root >= value

    # -------------------------------------------------------------------------
    # Конверсия и отображение
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return self.root

    def __str__(self) -> str:
        return str(self.root)

    def __format__(self, format_spec: str) -> str:
        return format(self.root, format_spec)


UnipolarFloat.ZERO = UnipolarFloat.model_construct(UNIPOLAR_MIN)
UnipolarFloat.ONE = UnipolarFloat.model_construct(UNIPOLAR_MAX)


def _operand_value(other: object) -> float | None:
    """Значение второго операнда: UnipolarFloat или вещественное число."""
    if isinstance(other, UnipolarFloat):
        return other.root
    if isinstance(other, Real):
        return float(other)
    return None
