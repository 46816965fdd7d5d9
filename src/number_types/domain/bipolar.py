"""
BipolarFloat — знаковая нормализованная величина в диапазоне [-1.0, 1.0]

Immutable Pydantic модель для pan, направления, знакового смещения.
Политика та же, что у UnipolarFloat: clamp при создании, сложении и
вычитании; умножение на UnipolarFloat или BipolarFloat не требует clamp.
Конверсия в UnipolarFloat только явная, через abs().
"""

from numbers import Real
from typing import ClassVar, Final

from pydantic import RootModel, field_validator

from number_types.domain.unipolar import UnipolarFloat
from number_types.math.numerical_safeguards import clamp


BIPOLAR_MIN: Final[float] = -1.0
BIPOLAR_MAX: Final[float] = 1.0


class BipolarFloat(RootModel):
    """
    Float, ограниченный диапазоном [-1.0, 1.0].

    Immutable модель (frozen=True). NaN -> -1.0, +inf -> 1.0, -inf -> -1.0.
    Равенство с UnipolarFloat всегда False, даже при одинаковом значении.
    """

    root: float = 0.0

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    ZERO: ClassVar["BipolarFloat"]
    ONE: ClassVar["BipolarFloat"]

    @field_validator("root")
    @classmethod
    def clamp_to_range(cls, v: float) -> float:
        """Clamp в [-1.0, 1.0] при создании и при десериализации."""
        return clamp(float(v), BIPOLAR_MIN, BIPOLAR_MAX)

    @classmethod
    def new(cls, v: float) -> "BipolarFloat":
        """Создание из сырого float с clamp в [-1.0, 1.0]."""
        return cls(v)

    def val(self) -> float:
        """Внутреннее значение float."""
        return self.root

    def abs(self) -> UnipolarFloat:
        """
        Модуль значения как UnipolarFloat.

        |v| для v из [-1, 1] всегда в [0, 1], clamp не требуется.
        """
        return UnipolarFloat.model_construct(abs(self.root))

    def invert(self) -> "BipolarFloat":
        """Смена знака (без clamp)."""
        return BipolarFloat.model_construct(-1.0 * self.root)

    def invert_if(self, invert: bool) -> "BipolarFloat":
        """
        Условная смена знака.

        Args:
            invert: Если True, вернуть invert(), иначе исходное значение

        Returns:
            BipolarFloat
        """
        if invert:
            return self.invert()
        return self

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BipolarFloat":
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.new(self.root + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> "BipolarFloat":
        value = _operand_value(other)
        if value is None:
            return NotImplemented
        return self.new(self.root - value)

    def __mul__(self, other: object) -> "BipolarFloat | float":
        if isinstance(other, (BipolarFloat, UnipolarFloat)):
            # |a * b| <= 1 при |a| <= 1 и |b| <= 1
            return BipolarFloat.model_construct(self.root * other.root)
        if isinstance(other, Real):
            return self.root * float(other)
        return NotImplemented

    def __rmul__(self, other: object) -> "BipolarFloat | float":
        if isinstance(other, UnipolarFloat):
            return BipolarFloat.model_construct(other.root * self.root)
        if isinstance(other, Real):
            return float(other) * self.root
        return NotImplemented

    def __neg__(self) -> "BipolarFloat":
        return self.invert()

    def __abs__(self) -> UnipolarFloat:
        return self.abs()

    # -------------------------------------------------------------------------
    # Сравнения
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

    def __float__(self) -> float:
        return self.root

    def __str__(self) -> str:
        return str(self.root)

    def __format__(self, format_spec: str) -> str:
        return format(self.root, format_spec)


BipolarFloat.ZERO = BipolarFloat.model_construct(0.0)
BipolarFloat.ONE = BipolarFloat.model_construct(BIPOLAR_MAX)


def _operand_value(other: object) -> float | None:
    if isinstance(other, BipolarFloat):
        return other.root
    if isinstance(other, Real):
        return float(other)
    return None
