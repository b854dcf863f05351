"""
Perturbation — операторы возмущения одного канала

Три режима возмущения существующего значения канала:
- shift:  аддитивный сдвиг на delta из заданного диапазона
- spread: сдвиг на долю оставшегося расстояния до границы (0 или 1)
- lerp:   равномерная точка между текущим значением и target

Каждый режим существует в трёх вариантах домена:
- bounded (*):            линейный канал [0, 1], результат clamp-ится
- constrained (*_clamped): линейный канал, дополнительно clamp в [min_value, max_value]
                           (диапазон зависит от соседнего канала, например
                           max chroma зависит от текущей luma)
- circular (*_repeated):  hue в [0, 1), результат wrap-ится по модулю 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат bounded-оператора всегда в [0, 1] (или в [min_value, max_value])
2. Результат circular-оператора всегда в [0, 1)
3. Нулевая величина возмущения возвращает original без обращения к rng
4. Операторы не имеют состояния; вся случайность берётся из переданного rng

ПРЕДУСЛОВИЯ (не проверяются в runtime):
- max_delta >= 0, min_delta <= max_delta
- max_proportion в [0, 1]; min_proportion, max_proportion в [-1, 1],
  min_proportion <= max_proportion
При нарушении предусловий результат всё равно лежит в домене канала
(финальный clamp / wrap), но его распределение не определено.
"""

from typing import Final, Optional, Union

from src.core.domain.channels import ChannelKind
from src.core.math.numerical_safeguards import (
    UNIT_MAX,
    UNIT_MIN,
    clamp,
    repeat,
)
from src.core.rng.source import RandomSource

# Величина возмущения: симметричная (max_abs) или асимметричная (min, max)
Magnitude = Union[float, tuple[float, float]]

# Полуширина spread, покрывающая всю окружность hue
FULL_CIRCLE_SPREAD: Final[float] = 0.5

# Длина дуги, покрывающая всю окружность hue
FULL_CIRCLE_ARC: Final[float] = 1.0


# =============================================================================
# BOUNDED SHIFT
# =============================================================================


def shift(rng: RandomSource, original: float, max_delta: float) -> float:
    """
    Сдвиг линейного канала на delta в [-max_delta, +max_delta].

    Значение выбирается равномерно из
        [max(0, original - max_delta), min(original + max_delta, 1)]

    Examples:
        >>> shift(rng, 0.4, 0.0)
        0.4
    """
    if max_delta == 0:
        return original

    return shift_clamped(rng, original, max_delta, UNIT_MIN, UNIT_MAX)


def shift_range(rng: RandomSource, original: float, min_delta: float, max_delta: float) -> float:
    """
    Асимметричный сдвиг линейного канала: равномерно из
        [clamp(original + min_delta), clamp(original + max_delta)]
    """
    return shift_range_clamped(rng, original, min_delta, max_delta, UNIT_MIN, UNIT_MAX)


def shift_clamped(
    rng: RandomSource,
    original: float,
    max_delta: float,
    min_value: float,
    max_value: float,
) -> float:
    """
    Сдвиг линейного канала с границами [min_value, max_value] вместо [0, 1].

    Args:
        rng: Источник случайных величин
        original: Текущее значение канала
        max_delta: Максимальный абсолютный сдвиг (>= 0)
        min_value: Нижняя граница допустимого диапазона
        max_value: Верхняя граница допустимого диапазона

    Returns:
        Новое значение в [min_value, max_value]
    """
    if max_delta == 0:
        return original

    lower = max(min_value, original - max_delta)
    upper = min(original + max_delta, max_value)
    return clamp(rng.closed_range(lower, upper), min_value, max_value)


def shift_range_clamped(
    rng: RandomSource,
    original: float,
    min_delta: float,
    max_delta: float,
    min_value: float,
    max_value: float,
) -> float:
    """Асимметричный сдвиг с границами [min_value, max_value]."""
    lower = clamp(original + min_delta, min_value, max_value)
    upper = clamp(original + max_delta, min_value, max_value)
    return clamp(rng.closed_range(lower, upper), min_value, max_value)


# =============================================================================
# CIRCULAR SHIFT
# =============================================================================


def shift_repeated(rng: RandomSource, original: float, max_delta: float) -> float:
    """
    Сдвиг hue на delta в [-max_delta, +max_delta] с wrap по модулю 1.

    Examples:
        Сдвиг 0.99 на +0.05 даёт ~0.04, а не 1.04.
    """
    if max_delta == 0:
        return original

    return repeat(rng.closed_range(original - max_delta, original + max_delta))


def shift_range_repeated(
    rng: RandomSource, original: float, min_delta: float, max_delta: float
) -> float:
    """Асимметричный сдвиг hue: равномерно из [original + min_delta, original + max_delta] mod 1."""
    return repeat(rng.closed_range(original + min_delta, original + max_delta))


# =============================================================================
# BOUNDED SPREAD
# =============================================================================


def _spread_bound(original: float, proportion: float) -> float:
    # proportion > 0: к 1 на долю headroom, proportion < 0: к 0 на долю footroom
    if proportion >= 0:
        return original + (UNIT_MAX - original) * proportion
    return original + original * proportion


def spread(rng: RandomSource, original: float, max_proportion: float) -> float:
    """
    Spread линейного канала: равномерно из
        [original * (1 - p), original + (1 - original) * p]

    То есть сдвиг вниз не более чем на долю p расстояния до 0
    и вверх не более чем на долю p расстояния до 1.
    """
    if max_proportion == 0:
        return original

    return spread_range(rng, original, -max_proportion, max_proportion)


def spread_range(
    rng: RandomSource, original: float, min_proportion: float, max_proportion: float
) -> float:
    """
    Асимметричный spread: каждая граница интервала считается отдельно.

    Положительная доля сдвигает границу к 1 на эту долю headroom,
    отрицательная сдвигает к 0 на эту долю footroom.

    Examples:
        spread_range(rng, 0.5, 0.2, 0.4) → равномерно из [0.6, 0.7]
        spread_range(rng, 0.5, -0.4, -0.2) → равномерно из [0.3, 0.4]
    """
    return spread_range_clamped(rng, original, min_proportion, max_proportion, UNIT_MIN, UNIT_MAX)


def spread_clamped(
    rng: RandomSource,
    original: float,
    max_proportion: float,
    min_value: float,
    max_value: float,
) -> float:
    """
    Spread, дополнительно ограниченный диапазоном [min_value, max_value].

    Доли считаются относительно [0, 1], как в spread; [min_value, max_value]
    только обрезает полученный интервал.
    """
    if max_proportion == 0:
        return original

    return spread_range_clamped(
        rng, original, -max_proportion, max_proportion, min_value, max_value
    )


def spread_range_clamped(
    rng: RandomSource,
    original: float,
    min_proportion: float,
    max_proportion: float,
    min_value: float,
    max_value: float,
) -> float:
    """Асимметричный spread с границами [min_value, max_value]."""
    lower = clamp(_spread_bound(original, min_proportion), min_value, max_value)
    upper = clamp(_spread_bound(original, max_proportion), min_value, max_value)
    return clamp(rng.closed_range(lower, upper), min_value, max_value)


# =============================================================================
# CIRCULAR SPREAD
# =============================================================================


def spread_repeated(rng: RandomSource, original: float, max_proportion: float) -> float:
    """
    Spread hue на долю окружности в [-p, +p] с wrap по модулю 1.

    При p >= 0.5 интервал покрывает всю окружность: возвращается независимое
    равномерное значение в [0, 1), не коррелирующее с original.
    """
    if max_proportion == 0:
        return original

    if max_proportion >= FULL_CIRCLE_SPREAD:
        return rng.half_open_unit()

    return repeat(rng.closed_range(original - max_proportion, original + max_proportion))


def spread_range_repeated(
    rng: RandomSource, original: float, min_proportion: float, max_proportion: float
) -> float:
    """
    Асимметричный spread hue.

    Если |max_proportion - min_proportion| >= 1 (вся окружность),
    возвращается независимое равномерное значение в [0, 1).
    """
    if abs(max_proportion - min_proportion) >= FULL_CIRCLE_ARC:
        return rng.half_open_unit()

    return repeat(rng.closed_range(original + min_proportion, original + max_proportion))


# =============================================================================
# LERP
# =============================================================================


def range_lerp(rng: RandomSource, original: float, target: float) -> float:
    """Равномерная точка в замкнутом интервале между original и target (порядок не важен)."""
    if original == target:
        return original

    lower, upper = min(original, target), max(original, target)
    return clamp(rng.closed_range(lower, upper), lower, upper)


def lerp_repeated(rng: RandomSource, original: float, target: float) -> float:
    """
    Равномерная точка на короткой дуге окружности между original и target.

    Дуга может проходить через шов 0/1: lerp_repeated(rng, 0.1, 0.9) выбирает
    из [0.9, 1) ∪ [0, 0.1], а не из [0.1, 0.9].
    Если обе дуги равны 0.5, направление не определено, и возвращается
    независимое равномерное значение в [0, 1).
    """
    forward = repeat(target - original)

    if forward == 0:
        return repeat(original)

    if forward == FULL_CIRCLE_SPREAD:
        return rng.half_open_unit()

    if forward < FULL_CIRCLE_SPREAD:
        return repeat(original + rng.closed_range(0.0, forward))

    return repeat(original - rng.closed_range(0.0, FULL_CIRCLE_ARC - forward))


# =============================================================================
# DISPATCH ПО ВИДУ КАНАЛА
# =============================================================================


def is_zero_magnitude(magnitude: Magnitude) -> bool:
    """True для 0.0 и (0.0, 0.0): такой вызов можно пропустить целиком."""
    if isinstance(magnitude, tuple):
        return magnitude[0] == 0 and magnitude[1] == 0
    return magnitude == 0


def shift_channel(
    rng: RandomSource,
    kind: ChannelKind,
    original: float,
    magnitude: Magnitude,
    bounds: Optional[tuple[float, float]] = None,
) -> float:
    """
    Shift канала с выбором варианта по виду домена.

    Args:
        rng: Источник случайных величин
        kind: Вид канала (BOUNDED / CIRCULAR)
        original: Текущее значение
        magnitude: max_abs_delta или (min_delta, max_delta)
        bounds: (min_value, max_value) для constrained-варианта; только для BOUNDED
    """
    if kind == ChannelKind.CIRCULAR:
        if isinstance(magnitude, tuple):
            return shift_range_repeated(rng, original, magnitude[0], magnitude[1])
        return shift_repeated(rng, original, magnitude)

    lower, upper = bounds if bounds is not None else (UNIT_MIN, UNIT_MAX)
    if isinstance(magnitude, tuple):
        return shift_range_clamped(rng, original, magnitude[0], magnitude[1], lower, upper)
    return shift_clamped(rng, original, magnitude, lower, upper)


def spread_channel(
    rng: RandomSource,
    kind: ChannelKind,
    original: float,
    magnitude: Magnitude,
    bounds: Optional[tuple[float, float]] = None,
) -> float:
    """Spread канала с выбором варианта по виду домена (см. shift_channel)."""
    if kind == ChannelKind.CIRCULAR:
        if isinstance(magnitude, tuple):
            return spread_range_repeated(rng, original, magnitude[0], magnitude[1])
        return spread_repeated(rng, original, magnitude)

    lower, upper = bounds if bounds is not None else (UNIT_MIN, UNIT_MAX)
    if isinstance(magnitude, tuple):
        return spread_range_clamped(rng, original, magnitude[0], magnitude[1], lower, upper)
    return spread_clamped(rng, original, magnitude, lower, upper)


def lerp_channel(rng: RandomSource, kind: ChannelKind, original: float, target: float) -> float:
    """Lerp канала: короткая дуга для hue, замкнутый интервал для линейных каналов."""
    if kind == ChannelKind.CIRCULAR:
        return lerp_repeated(rng, original, target)
    return range_lerp(rng, original, target)


def rerandomize_channel(
    rng: RandomSource,
    kind: ChannelKind,
    bounds: Optional[tuple[float, float]] = None,
) -> float:
    """Новое значение канала, равномерное по всему домену (без учёта текущего)."""
    if kind == ChannelKind.CIRCULAR:
        return rng.half_open_unit()

    lower, upper = bounds if bounds is not None else (UNIT_MIN, UNIT_MAX)
    return clamp(rng.closed_range(lower, upper), lower, upper)
