"""
Tests for Pydantic Color Models

Покрывает:
- Валидацию доменов каналов (hue в [0, 1), остальные в [0, 1])
- Immutability (frozen=True)
- Объявления каналов (BOUNDED / CIRCULAR)
- Невалидные, но представимые HCY цвета
- Конверсии to_rgb / from_rgb
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    COLOR_MODELS,
    ChannelKind,
    ColorCMY,
    ColorCMYK,
    ColorHCL,
    ColorHCV,
    ColorHCY,
    ColorHSL,
    ColorHSV,
    ColorHSY,
    ColorRGB,
)

ORANGE = ColorRGB(r=0.8, g=0.4, b=0.2)


# =============================================================================
# ТЕСТЫ: ВАЛИДАЦИЯ
# =============================================================================


class TestValidation:
    """Тесты доменов каналов"""

    def test_default_alpha(self) -> None:
        assert ColorRGB(r=0.1, g=0.2, b=0.3).a == 1.0

    @pytest.mark.parametrize("value", [-0.01, 1.01])
    def test_bounded_channel_out_of_range(self, value) -> None:
        with pytest.raises(ValidationError):
            ColorRGB(r=value, g=0.2, b=0.3)

    def test_alpha_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            ColorHSV(h=0.1, s=0.2, v=0.3, a=1.5)

    def test_hue_one_rejected(self) -> None:
        """Hue = 1.0 совпадает с 0.0 и не является каноничным значением"""
        with pytest.raises(ValidationError):
            ColorHCY(h=1.0, c=0.2, y=0.5)

    def test_missing_channel(self) -> None:
        with pytest.raises(ValidationError):
            ColorHSL(h=0.1, s=0.2)

    def test_frozen(self) -> None:
        color = ColorHCV(h=0.1, c=0.2, v=0.5)
        with pytest.raises(ValidationError):
            color.c = 0.3

    def test_with_channels_validates(self) -> None:
        color = ColorHSV(h=0.1, s=0.2, v=0.5)
        updated = color.with_channels(s=0.9)
        assert updated.s == 0.9
        assert updated.h == color.h
        assert color.s == 0.2
        with pytest.raises(ValidationError):
            color.with_channels(h=1.0)


# =============================================================================
# ТЕСТЫ: КАНАЛЫ
# =============================================================================


class TestChannels:
    """Тесты объявлений каналов"""

    def test_registry(self) -> None:
        assert set(COLOR_MODELS) == {"RGB", "CMY", "CMYK", "HSV", "HSL", "HSY", "HCV", "HCL", "HCY"}

    @pytest.mark.parametrize("model", list(COLOR_MODELS.values()))
    def test_alpha_last_and_bounded(self, model) -> None:
        specs = model.channel_specs()
        assert specs[-1].name == "a"
        assert specs[-1].kind == ChannelKind.BOUNDED

    @pytest.mark.parametrize("model", [ColorHSV, ColorHSL, ColorHSY, ColorHCV, ColorHCL, ColorHCY])
    def test_hue_is_circular(self, model) -> None:
        assert model.channel_spec("h").is_circular
        others = [spec for spec in model.channel_specs() if spec.name != "h"]
        assert all(spec.kind == ChannelKind.BOUNDED for spec in others)

    @pytest.mark.parametrize("model", [ColorRGB, ColorCMY, ColorCMYK])
    def test_linear_models_have_no_circular_channels(self, model) -> None:
        assert not any(spec.is_circular for spec in model.channel_specs())

    def test_channel_names(self) -> None:
        assert ColorHCY.channel_names() == ("h", "c", "y", "a")
        assert ColorCMYK.channel_names() == ("c", "m", "y", "k", "a")

    def test_unknown_channel(self) -> None:
        with pytest.raises(ValueError, match="has no channel 'v'"):
            ColorHCY.channel_spec("v")

    def test_channel_values(self) -> None:
        color = ColorHCL(h=0.25, c=0.5, l=0.5, a=0.7)
        assert color.channel_values() == {"h": 0.25, "c": 0.5, "l": 0.5, "a": 0.7}


# =============================================================================
# ТЕСТЫ: HUE-CHROMA ТРЕУГОЛЬНИК
# =============================================================================


class TestHueChromaModels:
    """Тесты can_convert_to_rgb / max_chroma / axis_range"""

    def test_invalid_hcy_constructible(self) -> None:
        """Точка вне треугольника создаётся без ошибки"""
        color = ColorHCY(h=2.0 / 3.0, c=1.0, y=0.9)
        assert not color.can_convert_to_rgb

    def test_invalid_color_to_rgb_clamps(self) -> None:
        rgb = ColorHCY(h=2.0 / 3.0, c=1.0, y=0.9).to_rgb()
        for component in (rgb.r, rgb.g, rgb.b):
            assert 0.0 <= component <= 1.0

    def test_valid_color(self) -> None:
        assert ColorHCL(h=0.3, c=1.0, l=0.5).can_convert_to_rgb
        assert ColorHCV(h=0.3, c=0.0, v=0.0).can_convert_to_rgb

    def test_max_chroma_and_axis_range(self) -> None:
        color = ColorHCL(h=0.3, c=0.5, l=0.25)
        assert color.max_chroma() == pytest.approx(0.5)
        assert color.axis_range() == pytest.approx((0.25, 0.75))

    @pytest.mark.parametrize("model", list(COLOR_MODELS.values()))
    def test_saturation_and_linear_models_always_convertible(self, model) -> None:
        color = model.from_rgb(ORANGE)
        assert color.can_convert_to_rgb


# =============================================================================
# ТЕСТЫ: КОНВЕРСИИ
# =============================================================================


class TestConversions:
    """Тесты to_rgb / from_rgb"""

    @pytest.mark.parametrize("model", list(COLOR_MODELS.values()))
    def test_round_trip(self, model) -> None:
        rgb = model.from_rgb(ORANGE).to_rgb()
        assert (rgb.r, rgb.g, rgb.b) == pytest.approx((0.8, 0.4, 0.2), abs=1e-9)

    @pytest.mark.parametrize("model", list(COLOR_MODELS.values()))
    def test_alpha_preserved(self, model) -> None:
        color = model.from_rgb(ColorRGB(r=0.1, g=0.5, b=0.9, a=0.3))
        assert color.a == 0.3
        assert color.to_rgb().a == 0.3

    def test_cmy(self) -> None:
        assert ColorCMY.from_rgb(ORANGE).channel_values() == pytest.approx(
            {"c": 0.2, "m": 0.6, "y": 0.8, "a": 1.0}
        )

    def test_hcv_from_rgb(self) -> None:
        color = ColorHCV.from_rgb(ORANGE)
        assert color.c == pytest.approx(0.6)
        assert color.v == pytest.approx(0.8)
