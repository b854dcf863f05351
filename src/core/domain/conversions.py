"""
Conversions — формулы перехода между цветовыми моделями и RGB

Hue-chroma модели (HCV / HCL / HCY) отличаются только осью яркости:
- VALUE:     max(r, g, b)
- LIGHTNESS: (max + min) / 2
- LUMA:      взвешенная сумма Rec.601 (0.299, 0.587, 0.114)

Для фиксированного hue допустимая область (chroma, axis) — треугольник
    (0, 0), (0, 1), (1, apex)
где apex = axis_at_max_chroma(axis, hue): 1.0 для VALUE, 0.5 для LIGHTNESS,
luma чистого цвета данного hue для LUMA.

Точка (h, c, axis) вне треугольника конвертируется в RGB с компонентами
вне [0, 1]; предикат can_convert_to_rgb сообщает об этом, to_rgb клиппирует.
"""

import colorsys
from enum import Enum
from typing import Final

from src.core.math.numerical_safeguards import (
    EPS_COLOR,
    UNIT_MAX,
    UNIT_MIN,
    clamp_unit,
    repeat,
    safe_divide,
)

RGBTuple = tuple[float, float, float]

# Веса luma (Rec.601)
LUMA_WEIGHTS: Final[RGBTuple] = (0.299, 0.587, 0.114)

# Ось lightness в вершине треугольника HCL
LIGHTNESS_AT_MAX_CHROMA: Final[float] = 0.5


class HueAxis(str, Enum):
    """Ось яркости hue-модели."""

    VALUE = "value"
    LIGHTNESS = "lightness"
    LUMA = "luma"


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def luma(r: float, g: float, b: float) -> float:
    """Luma по Rec.601."""
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def hue_to_pure_rgb(hue: float) -> RGBTuple:
    """Чистый цвет данного hue: chroma = 1, min компонента = 0."""
    return colorsys.hsv_to_rgb(repeat(hue), 1.0, 1.0)


def axis_of_rgb(axis: HueAxis, r: float, g: float, b: float) -> float:
    """Значение оси яркости для RGB."""
    if axis == HueAxis.VALUE:
        return max(r, g, b)
    if axis == HueAxis.LIGHTNESS:
        return (max(r, g, b) + min(r, g, b)) / 2.0
    return luma(r, g, b)


def axis_at_max_chroma(axis: HueAxis, hue: float) -> float:
    """
    Значение оси в вершине треугольника (chroma = 1).

    Examples:
        >>> axis_at_max_chroma(HueAxis.VALUE, 0.3)
        1.0
        >>> axis_at_max_chroma(HueAxis.LIGHTNESS, 0.3)
        0.5
        >>> round(axis_at_max_chroma(HueAxis.LUMA, 0.0), 3)  # красный
        0.299
    """
    if axis == HueAxis.VALUE:
        return UNIT_MAX
    if axis == HueAxis.LIGHTNESS:
        return LIGHTNESS_AT_MAX_CHROMA
    return luma(*hue_to_pure_rgb(hue))


def max_chroma(axis: HueAxis, hue: float, axis_value: float) -> float:
    """
    Максимальная chroma, допустимая при данных hue и значении оси.

    Ниже вершины граница — ребро (0, 0)–(1, apex), выше — ребро (0, 1)–(1, apex).
    """
    apex = axis_at_max_chroma(axis, hue)
    if axis_value <= apex:
        return clamp_unit(safe_divide(axis_value, apex, fallback=UNIT_MAX))
    return clamp_unit(safe_divide(UNIT_MAX - axis_value, UNIT_MAX - apex, fallback=UNIT_MAX))


def axis_range(axis: HueAxis, hue: float, chroma: float) -> tuple[float, float]:
    """
    Допустимый диапазон оси при данных hue и chroma.

    Returns:
        (min_axis, max_axis) = (chroma * apex, 1 - chroma * (1 - apex))
    """
    apex = axis_at_max_chroma(axis, hue)
    c = clamp_unit(chroma)
    return (c * apex, UNIT_MAX - c * (UNIT_MAX - apex))


def is_rgb_in_gamut(rgb: RGBTuple, eps: float = EPS_COLOR) -> bool:
    """True если все компоненты в [-eps, 1 + eps]."""
    return all(UNIT_MIN - eps <= component <= UNIT_MAX + eps for component in rgb)


def clamp_rgb(rgb: RGBTuple) -> RGBTuple:
    r, g, b = rgb
    return (clamp_unit(r), clamp_unit(g), clamp_unit(b))


# =============================================================================
# HUE-CHROMA (HCV / HCL / HCY)
# =============================================================================


def hue_chroma_to_rgb(axis: HueAxis, hue: float, chroma: float, axis_value: float) -> RGBTuple:
    """
    (h, c, axis) → RGB без клиппинга.

    RGB = chroma * pure_rgb(hue) + m, где m = axis - chroma * apex.
    Для точек вне треугольника компоненты выходят за [0, 1].
    """
    pr, pg, pb = hue_to_pure_rgb(hue)
    m = axis_value - chroma * axis_at_max_chroma(axis, hue)
    return (chroma * pr + m, chroma * pg + m, chroma * pb + m)


def rgb_to_hue_chroma(axis: HueAxis, r: float, g: float, b: float) -> tuple[float, float, float]:
    """RGB → (h, c, axis)."""
    hue, _, _ = colorsys.rgb_to_hsv(r, g, b)
    chroma = max(r, g, b) - min(r, g, b)
    return (repeat(hue), chroma, axis_of_rgb(axis, r, g, b))


def can_convert_hue_chroma(axis: HueAxis, hue: float, chroma: float, axis_value: float) -> bool:
    """Предикат валидности: точка лежит внутри треугольника данного hue."""
    return is_rgb_in_gamut(hue_chroma_to_rgb(axis, hue, chroma, axis_value))


# =============================================================================
# HUE-SATURATION (HSV / HSL / HSY)
# =============================================================================


def chroma_to_saturation(axis: HueAxis, hue: float, chroma: float, axis_value: float) -> float:
    """Saturation = chroma / max_chroma(hue, axis); 0 для ахроматических точек."""
    return clamp_unit(safe_divide(chroma, max_chroma(axis, hue, axis_value), fallback=0.0))


def saturation_to_chroma(axis: HueAxis, hue: float, saturation: float, axis_value: float) -> float:
    return saturation * max_chroma(axis, hue, axis_value)


def hsv_to_rgb(h: float, s: float, v: float) -> RGBTuple:
    return colorsys.hsv_to_rgb(h, s, v)


def rgb_to_hsv(r: float, g: float, b: float) -> RGBTuple:
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    return (repeat(h), s, v)


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTuple:  # noqa: E741
    return colorsys.hls_to_rgb(h, l, s)


def rgb_to_hsl(r: float, g: float, b: float) -> RGBTuple:
    h, l, s = colorsys.rgb_to_hls(r, g, b)  # noqa: E741
    return (repeat(h), clamp_unit(s), l)


def hsy_to_rgb(h: float, s: float, y: float) -> RGBTuple:
    chroma = saturation_to_chroma(HueAxis.LUMA, h, s, y)
    return clamp_rgb(hue_chroma_to_rgb(HueAxis.LUMA, h, chroma, y))


def rgb_to_hsy(r: float, g: float, b: float) -> RGBTuple:
    h, c, y = rgb_to_hue_chroma(HueAxis.LUMA, r, g, b)
    return (h, chroma_to_saturation(HueAxis.LUMA, h, c, y), y)


# =============================================================================
# SUBTRACTIVE (CMY / CMYK)
# =============================================================================


def rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """RGB → CMYK; для чёрного c = m = y = 0, k = 1."""
    k = UNIT_MAX - max(r, g, b)
    ink = UNIT_MAX - k
    if ink <= 0:
        return (0.0, 0.0, 0.0, UNIT_MAX)
    return (
        clamp_unit((ink - r) / ink),
        clamp_unit((ink - g) / ink),
        clamp_unit((ink - b) / ink),
        k,
    )


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGBTuple:
    ink = UNIT_MAX - k
    return ((UNIT_MAX - c) * ink, (UNIT_MAX - m) * ink, (UNIT_MAX - y) * ink)
