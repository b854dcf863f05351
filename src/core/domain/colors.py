"""
Colors — модели цветов

Immutable Pydantic модели цветов в девяти цветовых моделях:
- линейные:          RGB, CMY, CMYK
- hue + saturation:  HSV, HSL, HSY
- hue + chroma:      HCV, HCL, HCY

Каждая модель объявляет свои каналы через CHANNELS (ChannelSpec); hue всегда
CIRCULAR, остальные каналы и alpha — BOUNDED. Домены каналов проверяются
Pydantic при создании (hue в [0, 1), остальные в [0, 1]).

Hue-chroma модели могут представлять точки вне треугольника допустимых
(chroma, axis): такие цвета создаются без ошибки, но can_convert_to_rgb = False.
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from .channels import ChannelKind, ChannelSpec
from .conversions import (
    HueAxis,
    axis_range,
    can_convert_hue_chroma,
    clamp_rgb,
    cmyk_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    hsy_to_rgb,
    hue_chroma_to_rgb,
    max_chroma,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hsy,
    rgb_to_hue_chroma,
)

HUE = ChannelSpec("h", ChannelKind.CIRCULAR)
ALPHA = ChannelSpec("a")


# =============================================================================
# BASE MODEL
# =============================================================================


class ColorModel(BaseModel):
    """
    Базовая модель цвета: набор каналов + alpha.

    Подклассы задают MODEL_NAME, CHANNELS и конверсии to_rgb / from_rgb.
    """

    MODEL_NAME: ClassVar[str] = ""
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = ()

    a: float = Field(1.0, ge=0, le=1, description="Alpha (непрозрачность)")

    model_config = {"frozen": True}

    @classmethod
    def channel_specs(cls) -> tuple[ChannelSpec, ...]:
        """Каналы модели, включая alpha последним."""
        return cls.CHANNELS + (ALPHA,)

    @classmethod
    def channel_names(cls) -> tuple[str, ...]:
        return tuple(spec.name for spec in cls.channel_specs())

    @classmethod
    def channel_spec(cls, name: str) -> ChannelSpec:
        """
        Объявление канала по имени.

        Raises:
            ValueError: если у модели нет такого канала
        """
        for spec in cls.channel_specs():
            if spec.name == name:
                return spec
        raise ValueError(
            f"{cls.MODEL_NAME} has no channel {name!r}, expected one of {cls.channel_names()}"
        )

    def channel_values(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in self.channel_names()}

    def with_channels(self, **values: float) -> "ColorModel":
        """Новый цвет той же модели с заменёнными каналами (с валидацией доменов)."""
        return type(self)(**{**self.channel_values(), **values})

    @property
    def can_convert_to_rgb(self) -> bool:
        """Конвертируется ли цвет в RGB без клиппинга."""
        return True

    def to_rgb(self) -> "ColorRGB":
        raise NotImplementedError

    @classmethod
    def from_rgb(cls, rgb: "ColorRGB") -> "ColorModel":
        raise NotImplementedError


# =============================================================================
# LINEAR MODELS
# =============================================================================


class ColorRGB(ColorModel):
    """Линейная модель RGB."""

    MODEL_NAME: ClassVar[str] = "RGB"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (
        ChannelSpec("r"),
        ChannelSpec("g"),
        ChannelSpec("b"),
    )

    r: float = Field(..., ge=0, le=1, description="Red")
    g: float = Field(..., ge=0, le=1, description="Green")
    b: float = Field(..., ge=0, le=1, description="Blue")

    def to_rgb(self) -> "ColorRGB":
        return self

    @classmethod
    def from_rgb(cls, rgb: "ColorRGB") -> "ColorRGB":
        return rgb


class ColorCMY(ColorModel):
    """Субтрактивная модель CMY: c = 1 - r и т.д."""

    MODEL_NAME: ClassVar[str] = "CMY"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (
        ChannelSpec("c"),
        ChannelSpec("m"),
        ChannelSpec("y"),
    )

    c: float = Field(..., ge=0, le=1, description="Cyan")
    m: float = Field(..., ge=0, le=1, description="Magenta")
    y: float = Field(..., ge=0, le=1, description="Yellow")

    def to_rgb(self) -> ColorRGB:
        return ColorRGB(r=1.0 - self.c, g=1.0 - self.m, b=1.0 - self.y, a=self.a)

    @classmethod
    def from_rgb(cls, rgb: ColorRGB) -> "ColorCMY":
        return cls(c=1.0 - rgb.r, m=1.0 - rgb.g, y=1.0 - rgb.b, a=rgb.a)


class ColorCMYK(ColorModel):
    """Субтрактивная модель CMYK."""

    MODEL_NAME: ClassVar[str] = "CMYK"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (
        ChannelSpec("c"),
        ChannelSpec("m"),
        ChannelSpec("y"),
        ChannelSpec("k"),
    )

    c: float = Field(..., ge=0, le=1, description="Cyan")
    m: float = Field(..., ge=0, le=1, description="Magenta")
    y: float = Field(..., ge=0, le=1, description="Yellow")
    k: float = Field(..., ge=0, le=1, description="Key (black)")

    def to_rgb(self) -> ColorRGB:
        r, g, b = clamp_rgb(cmyk_to_rgb(self.c, self.m, self.y, self.k))
        return ColorRGB(r=r, g=g, b=b, a=self.a)

    @classmethod
    def from_rgb(cls, rgb: ColorRGB) -> "ColorCMYK":
        c, m, y, k = rgb_to_cmyk(rgb.r, rgb.g, rgb.b)
        return cls(c=c, m=m, y=y, k=k, a=rgb.a)


# =============================================================================
# HUE + SATURATION MODELS
# =============================================================================


class HueSaturationColor(ColorModel):
    """
    Hue + saturation + ось яркости.

    Saturation нормирована на max chroma при данных hue и оси, поэтому
    любая комбинация каналов в [0, 1] конвертируется в RGB.
    """

    AXIS: ClassVar[HueAxis] = HueAxis.VALUE
    AXIS_FIELD: ClassVar[str] = "v"

    h: float = Field(..., ge=0, lt=1, description="Hue (circular)")
    s: float = Field(..., ge=0, le=1, description="Saturation")

    @property
    def axis_value(self) -> float:
        return getattr(self, self.AXIS_FIELD)


class ColorHSV(HueSaturationColor):
    MODEL_NAME: ClassVar[str] = "HSV"
    AXIS: ClassVar[HueAxis] = HueAxis.VALUE
    AXIS_FIELD: ClassVar[str] = "v"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (HUE, ChannelSpec("s"), ChannelSpec("v"))

    v: float = Field(..., ge=0, le=1, description="Value")

    def to_rgb(self) -> ColorRGB:
        r, g, b = clamp_rgb(hsv_to_rgb(self.h, self.s, self.v))
        return ColorRGB(r=r, g=g, b=b, a=self.a)

    @classmethod
    def from_rgb(cls, rgb: ColorRGB) -> "ColorHSV":
        h, s, v = rgb_to_hsv(rgb.r, rgb.g, rgb.b)
        return cls(h=h, s=s, v=v, a=rgb.a)


class ColorHSL(HueSaturationColor):
    MODEL_NAME: ClassVar[str] = "HSL"
    AXIS: ClassVar[HueAxis] = HueAxis.LIGHTNESS
    AXIS_FIELD: ClassVar[str] = "l"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (HUE, ChannelSpec("s"), ChannelSpec("l"))

    l: float = Field(..., ge=0, le=1, description="Lightness")  # noqa: E741

    def to_rgb(self) -> ColorRGB:
        r, g, b = clamp_rgb(hsl_to_rgb(self.h, self.s, self.l))
        return ColorRGB(r=r, g=g, b=b, a=self.a)

    @classmethod
    def from_rgb(cls, rgb: ColorRGB) -> "ColorHSL":
        h, s, l = rgb_to_hsl(rgb.r, rgb.g, rgb.b)  # noqa: E741
        return cls(h=h, s=s, l=l, a=rgb.a)


class ColorHSY(HueSaturationColor):
    MODEL_NAME: ClassVar[str] = "HSY"
    AXIS: ClassVar[HueAxis] = HueAxis.LUMA
    AXIS_FIELD: ClassVar[str] = "y"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (HUE, ChannelSpec("s"), ChannelSpec("y"))

    y: float = Field(..., ge=0, le=1, description="Luma (Rec.601)")

    def to_rgb(self) -> ColorRGB:
        r, g, b = hsy_to_rgb(self.h, self.s, self.y)
        return ColorRGB(r=r, g=g, b=b, a=self.a)

    @classmethod
    def from_rgb(cls, rgb: ColorRGB) -> "ColorHSY":
        h, s, y = rgb_to_hsy(rgb.r, rgb.g, rgb.b)
        return cls(h=h, s=s, y=y, a=rgb.a)


# =============================================================================
# HUE + CHROMA MODELS
# =============================================================================


class HueChromaColor(ColorModel):
    """
    Hue + абсолютная chroma + ось яркости.

    Допустимая область (chroma, axis) при фиксированном hue — треугольник
    (0, 0), (0, 1), (1, apex). Точки вне него представимы, но
    can_convert_to_rgb = False, а to_rgb клиппирует компоненты.
    """

    AXIS: ClassVar[HueAxis] = HueAxis.VALUE
    AXIS_FIELD: ClassVar[str] = "v"

    h: float = Field(..., ge=0, lt=1, description="Hue (circular)")
    c: float = Field(..., ge=0, le=1, description="Chroma")

    @property
    def axis_value(self) -> float:
        return getattr(self, self.AXIS_FIELD)

    @property
    def can_convert_to_rgb(self) -> bool:
        return can_convert_hue_chroma(self.AXIS, self.h, self.c, self.axis_value)

    def max_chroma(self) -> float:
        """Максимальная chroma при текущих hue и оси."""
        return max_chroma(self.AXIS, self.h, self.axis_value)

    def axis_range(self) -> tuple[float, float]:
        """Допустимый диапазон оси при текущих hue и chroma."""
        return axis_range(self.AXIS, self.h, self.c)

    def to_rgb(self) -> ColorRGB:
        r, g, b = clamp_rgb(hue_chroma_to_rgb(self.AXIS, self.h, self.c, self.axis_value))
        return ColorRGB(r=r, g=g, b=b, a=self.a)

    @classmethod
    def from_rgb(cls, rgb: ColorRGB) -> "HueChromaColor":
        h, c, axis_value = rgb_to_hue_chroma(cls.AXIS, rgb.r, rgb.g, rgb.b)
        return cls(**{"h": h, "c": c, cls.AXIS_FIELD: axis_value, "a": rgb.a})


class ColorHCV(HueChromaColor):
    MODEL_NAME: ClassVar[str] = "HCV"
    AXIS: ClassVar[HueAxis] = HueAxis.VALUE
    AXIS_FIELD: ClassVar[str] = "v"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (HUE, ChannelSpec("c"), ChannelSpec("v"))

    v: float = Field(..., ge=0, le=1, description="Value")


class ColorHCL(HueChromaColor):
    MODEL_NAME: ClassVar[str] = "HCL"
    AXIS: ClassVar[HueAxis] = HueAxis.LIGHTNESS
    AXIS_FIELD: ClassVar[str] = "l"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (HUE, ChannelSpec("c"), ChannelSpec("l"))

    l: float = Field(..., ge=0, le=1, description="Lightness")  # noqa: E741


class ColorHCY(HueChromaColor):
    MODEL_NAME: ClassVar[str] = "HCY"
    AXIS: ClassVar[HueAxis] = HueAxis.LUMA
    AXIS_FIELD: ClassVar[str] = "y"
    CHANNELS: ClassVar[tuple[ChannelSpec, ...]] = (HUE, ChannelSpec("c"), ChannelSpec("y"))

    y: float = Field(..., ge=0, le=1, description="Luma (Rec.601)")


# =============================================================================
# REGISTRY
# =============================================================================


COLOR_MODELS: dict[str, type[ColorModel]] = {
    model.MODEL_NAME: model
    for model in (
        ColorRGB,
        ColorCMY,
        ColorCMYK,
        ColorHSV,
        ColorHSL,
        ColorHSY,
        ColorHCV,
        ColorHCL,
        ColorHCY,
    )
}
