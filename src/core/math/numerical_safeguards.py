"""
Numerical Safeguards — Safe Math Primitives для цветовых каналов

Модуль обеспечивает численную устойчивость всех операций над каналами:
- Clamp в замкнутый интервал (bounded channel)
- Wrap по модулю 1 (circular channel, hue)
- NaN/Inf санитизация для предотвращения распространения невалидных значений
- Безопасное деление для производных величин (saturation = chroma / axis)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. clamp никогда не возвращает значение вне [min_value, max_value]
2. repeat всегда возвращает значение в [0, 1), включая отрицательные входы
   и отрицательные значения, сколь угодно близкие к нулю
3. Деление на ноль никогда не происходит (возвращается fallback)
4. Все операции детерминированы и не имеют состояния
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений (защита деления)
EPS_CALC: Final[float] = 1e-12

# Толерантность предиката "цвет конвертируется в RGB без клиппинга".
# Компонента RGB в [-EPS_COLOR, 1 + EPS_COLOR] считается допустимой.
EPS_COLOR: Final[float] = 1e-6

# Границы единичного интервала каналов
UNIT_MIN: Final[float] = 0.0
UNIT_MAX: Final[float] = 1.0


# =============================================================================
# CLAMP / WRAP
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(0.5, 0.0, 1.0)
        0.5
        >>> clamp(-0.1, 0.0, 1.0)
        0.0
        >>> clamp(1.5, 0.0, 1.0)
        1.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_unit(value: float) -> float:
    """Clamp в [0, 1]."""
    return clamp(value, UNIT_MIN, UNIT_MAX)


def repeat(value: float) -> float:
    """
    Wrap значения по модулю 1 в полуоткрытый интервал [0, 1).

    Python `%` для float уже возвращает неотрицательный остаток
    (-0.1 % 1.0 == 0.9), но для отрицательных значений порядка 1e-17 и меньше
    результат округляется ровно до 1.0. Такой результат отображается в 0.0,
    т.к. 0 и 1 на окружности совпадают.

    Examples:
        >>> repeat(1.25)
        0.25
        >>> round(repeat(-0.1), 12)
        0.9
        >>> repeat(1.0)
        0.0
        >>> repeat(-1e-20)
        0.0
    """
    result = value % UNIT_MAX
    if result >= UNIT_MAX:
        return UNIT_MIN
    return result


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Examples:
        >>> sanitize_float(0.5)
        0.5
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('inf'), fallback=1.0)
        1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    eps: float = EPS_CALC,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    В отличие от деления с epsilon-подстановкой в знаменатель, здесь
    знаменатель по модулю <= eps сразу даёт fallback: для цветовых
    производных (saturation = chroma / value) вырожденный знаменатель
    означает ахроматическую точку, а не "очень большое" отношение.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        eps: Порог вырожденности знаменателя
        fallback: Значение при вырожденном знаменателе (default: 0.0)

    Returns:
        Результат деления или fallback

    Examples:
        >>> safe_divide(0.25, 0.5)
        0.5
        >>> safe_divide(0.25, 0.0)
        0.0
        >>> safe_divide(0.0, 1e-15, fallback=1.0)
        1.0
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    num_clean = sanitize_float(numerator, fallback=0.0)
    denom_clean = sanitize_float(denominator, fallback=0.0)

    if abs(denom_clean) <= eps:
        return fallback

    return sanitize_float(num_clean / denom_clean, fallback=fallback)
