"""
Domain models and value objects.

Contains channel declarations, color models and color-space conversions.
"""

from src.core.domain.channels import ChannelKind, ChannelSpec
from src.core.domain.colors import (
    COLOR_MODELS,
    ColorCMY,
    ColorCMYK,
    ColorHCL,
    ColorHCV,
    ColorHCY,
    ColorHSL,
    ColorHSV,
    ColorHSY,
    ColorModel,
    ColorRGB,
    HueChromaColor,
    HueSaturationColor,
)
from src.core.domain.conversions import (
    LUMA_WEIGHTS,
    HueAxis,
    axis_at_max_chroma,
    axis_range,
    chroma_to_saturation,
    max_chroma,
)

__all__ = [
    # Channels
    "ChannelKind",
    "ChannelSpec",
    # Color models
    "COLOR_MODELS",
    "ColorModel",
    "ColorRGB",
    "ColorCMY",
    "ColorCMYK",
    "HueSaturationColor",
    "ColorHSV",
    "ColorHSL",
    "ColorHSY",
    "HueChromaColor",
    "ColorHCV",
    "ColorHCL",
    "ColorHCY",
    # Conversions
    "LUMA_WEIGHTS",
    "HueAxis",
    "axis_at_max_chroma",
    "axis_range",
    "chroma_to_saturation",
    "max_chroma",
]
