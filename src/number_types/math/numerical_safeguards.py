"""
Numerical Safeguards — Safe Math Primitives

Общие численные примитивы для bounded-типов (UnipolarFloat, BipolarFloat, Phase):
- IEEE-754 minNum/maxNum (детерминированная обработка NaN)
- Clamp в замкнутый интервал
- Wrap через euclidean modulus
- Деление без исключений (IEEE-семантика деления на ноль)
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция нормализации не бросает исключений для float-входа
2. clamp(NaN, lo, hi) == lo (NaN не проходит через clamp)
3. wrap_unit(v) >= 0 для любого конечного v
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Период фазы по умолчанию (один полный оборот)
UNIT_PERIOD: Final[float] = 1.0


# =============================================================================
# IEEE-754 MIN/MAX
# =============================================================================


def ieee_max(a: float, b: float) -> float:
    """
    IEEE-754 maxNum: максимум двух float с игнорированием NaN.

    Встроенный max() зависит от порядка аргументов при NaN
    (max(nan, 0.0) -> nan, max(0.0, nan) -> 0.0), поэтому для clamp
    не используется.

    Returns:
        - Если ровно один аргумент NaN: другой аргумент
        - Если оба NaN: NaN
        - Иначе: больший из двух

    Examples:
        >>> ieee_max(1.0, 2.0)
        2.0
        >>> ieee_max(float('nan'), 0.0)
        0.0
    """
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def ieee_min(a: float, b: float) -> float:
    """
    IEEE-754 minNum: минимум двух float с игнорированием NaN.

    Examples:
        >>> ieee_min(1.0, 2.0)
        1.0
        >>> ieee_min(1.0, float('nan'))
        1.0
    """
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


# =============================================================================
# CLAMP / WRAP
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне (saturating).

    Порядок операций фиксирован: сначала нижняя граница, затем верхняя,
    обе через IEEE maxNum/minNum. Следствия:
    - NaN -> min_value (если задан)
    - +inf -> max_value, -inf -> min_value

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
        >>> clamp(float('nan'), -1.0, 1.0)
        -1.0
    """
    result = value

    if min_value is not None:
        result = ieee_max(result, min_value)

    if max_value is not None:
        result = ieee_min(result, max_value)

    return result


def wrap_unit(value: float, period: float = UNIT_PERIOD) -> float:
    """
    Wrap значения в [0, period) через euclidean modulus.

    Python float % уже имеет знак делителя, что для положительного
    period совпадает с euclidean modulus. Граничный случай: для очень
    малых отрицательных value сумма value + period округляется до period,
    поэтому результат может быть ровно period (например, -1e-20 -> 1.0).

    Для NaN/Inf результат NaN (исключение не бросается).

    Args:
        value: Исходное значение
        period: Период (должен быть > 0)

    Returns:
        Значение в [0, period]

    Raises:
        ValueError: Если period <= 0 или NaN/Inf

    Examples:
        >>> wrap_unit(1.25)
        0.25
        >>> wrap_unit(-0.25)
        0.75
        >>> wrap_unit(1.0)
        0.0
    """
    if not (is_valid_float(period) and period > 0):
        raise ValueError(f"period must be a positive finite float, got {period}")

    if not is_valid_float(value):
        return math.nan

    return value % period


# =============================================================================
# ДЕЛЕНИЕ БЕЗ ИСКЛЮЧЕНИЙ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-754 семантикой вместо ZeroDivisionError.

    В отличие от safe-деления с fallback, результат деления на ноль
    не подменяется: x / ±0 -> ±inf (знак по правилу знаков), 0 / 0 -> NaN.
    Вызывающий код нормализует результат сам (например, через wrap_unit).

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if math.isnan(numerator) or numerator == 0.0:
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


# =============================================================================
# ВАЛИДНОСТЬ И СРАВНЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.
    Принимает bounded-типы напрямую (через float()).

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(float(a), float(b), rel_tol=rel_tol, abs_tol=abs_tol)
