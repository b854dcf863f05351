"""ColorRandomizer — генерация и возмущение цветов во всех цветовых моделях.

Единая точка входа вместо набора per-channel обёрток:
- random_color(model): равномерно случайный цвет модели
- shift / spread: возмущение именованных каналов
- lerp: случайная точка между двумя цветами по именованным каналам
- rerandomize: новое значение именованных каналов по всему их домену
- gray / dark_* / light_* / any_* / darken / lighten: конкретные RGB цвета

Вид канала (bounded / circular) берётся из CHANNELS модели.

Hue-chroma модели (HCV / HCL / HCY):
- возмущение только chroma или только оси → constrained-оператор с
  диапазоном, вычисленным по соседнему каналу (rejection не нужен)
- любое другое возмущение hue / chroma / оси → TriangleRejectionSampler
- возмущение только alpha не затрагивает треугольник
- rerandomize chroma вместе с осью → равномерно внутри треугольника
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar, Union

from src.core.domain.channels import ChannelSpec
from src.core.domain.colors import (
    COLOR_MODELS,
    ColorModel,
    ColorRGB,
    HueChromaColor,
    HueSaturationColor,
)
from src.core.domain.conversions import HueAxis, axis_at_max_chroma, chroma_to_saturation
from src.core.math.numerical_safeguards import clamp, clamp_unit
from src.core.math.perturbation import (
    Magnitude,
    is_zero_magnitude,
    lerp_channel,
    rerandomize_channel,
    shift_channel,
    spread_channel,
)
from src.core.math.rejection_sampling import RejectionBudget, TriangleRejectionSampler
from src.core.rng.source import RandomSource, SystemRandomSource

C = TypeVar("C", bound=ColorModel)

# Значение alpha для random_color: случайная непрозрачность
RANDOM_ALPHA = "random"

# Каналы RGB для dark / light / any
PRIMARIES = ("r", "g", "b")

AlphaArg = Union[float, str]
Bounds = Optional[tuple[float, float]]
ChannelFn = Callable[[ChannelSpec, float, Bounds], float]


@dataclass(frozen=True)
class RandomizerConfig:
    """Конфигурация ColorRandomizer.

    seed используется только для источника по умолчанию (SystemRandomSource).
    """
    seed: Optional[int] = None
    budget: RejectionBudget = field(default_factory=RejectionBudget)


class ColorRandomizer:
    """Генерация и возмущение цветов поверх RandomSource."""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        sampler: Optional[TriangleRejectionSampler] = None,
        config: Optional[RandomizerConfig] = None,
    ):
        """
        Args:
            rng: источник случайных величин (default: SystemRandomSource(config.seed))
            sampler: rejection sampler (default: с бюджетом config.budget)
            config: конфигурация
        """
        self.config = config or RandomizerConfig()
        self.rng = rng or SystemRandomSource(self.config.seed)
        self.sampler = sampler or TriangleRejectionSampler(self.config.budget)

    # -------------------------------------------------------------------------
    # Случайный цвет
    # -------------------------------------------------------------------------

    def random_color(self, model: type[C], alpha: AlphaArg = 1.0) -> C:
        """Равномерно случайный цвет модели.

        Для hue-моделей (chroma, axis) выбирается равномерно внутри
        треугольника (0, 0), (1, apex), (0, 1), а не внутри прямоугольника.

        Args:
            model: класс модели (ColorRGB, ColorHCY, ...)
            alpha: значение alpha либо RANDOM_ALPHA

        Raises:
            ValueError: неизвестная модель или некорректный alpha
        """
        if model not in COLOR_MODELS.values():
            raise ValueError(f"Unsupported color model: {model!r}")

        a = self._alpha(alpha)

        if issubclass(model, (HueChromaColor, HueSaturationColor)):
            hue = self.rng.half_open_unit()
            chroma, axis_value = self._triangle_point(model.AXIS, hue)

            values = {"h": hue, model.AXIS_FIELD: axis_value, "a": a}
            if issubclass(model, HueSaturationColor):
                values["s"] = chroma_to_saturation(model.AXIS, hue, chroma, axis_value)
            else:
                values["c"] = chroma
            return model(**values)

        values = {spec.name: self.rng.closed_unit() for spec in model.CHANNELS}
        return model(**values, a=a)

    def _triangle_point(self, axis: HueAxis, hue: float) -> tuple[float, float]:
        # (chroma, axis) равномерно внутри треугольника (0, 0), (1, apex), (0, 1)
        apex = axis_at_max_chroma(axis, hue)
        chroma, axis_value = self.rng.point_within_triangle((0.0, 0.0), (1.0, apex), (0.0, 1.0))
        return clamp_unit(chroma), clamp_unit(axis_value)

    def _alpha(self, alpha: AlphaArg) -> float:
        if alpha == RANDOM_ALPHA:
            return self.rng.closed_unit()
        if isinstance(alpha, str):
            raise ValueError(f"alpha must be a float or {RANDOM_ALPHA!r}, got {alpha!r}")
        return alpha

    # -------------------------------------------------------------------------
    # Конкретные цвета (RGB)
    # -------------------------------------------------------------------------

    def gray(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        """Оттенок серого от чёрного до белого."""
        value = self.rng.closed_unit()
        return ColorRGB(r=value, g=value, b=value, a=self._alpha(alpha))

    def dark_red(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        """От чёрного до чистого красного."""
        return self._dark("r", self.rng.closed_unit(), alpha)

    def dark_green(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        return self._dark("g", self.rng.closed_unit(), alpha)

    def dark_blue(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        return self._dark("b", self.rng.closed_unit(), alpha)

    def light_red(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        """От чистого красного до белого."""
        return self._light("r", self.rng.closed_unit(), alpha)

    def light_green(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        return self._light("g", self.rng.closed_unit(), alpha)

    def light_blue(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        return self._light("b", self.rng.closed_unit(), alpha)

    def any_red(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        """
        От чёрного через чистый красный до белого.

        Одно значение u в [0, 1]: u <= 0.5 → dark с яркостью 2u,
        иначе light с осветлением 2u - 1.
        """
        return self._any("r", alpha)

    def any_green(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        return self._any("g", alpha)

    def any_blue(self, alpha: AlphaArg = 1.0) -> ColorRGB:
        return self._any("b", alpha)

    def darken(self, color: ColorModel) -> ColorRGB:
        """Случайное затемнение: RGB * t, t в [0, 1]; alpha сохраняется."""
        rgb = color.to_rgb()
        t = self.rng.closed_unit()
        return ColorRGB(r=rgb.r * t, g=rgb.g * t, b=rgb.b * t, a=rgb.a)

    def lighten(self, color: ColorModel) -> ColorRGB:
        """Случайное осветление: RGB + (1 - RGB) * t, t в [0, 1]; alpha сохраняется."""
        rgb = color.to_rgb()
        t = self.rng.closed_unit()
        return ColorRGB(
            r=clamp_unit(rgb.r + (1.0 - rgb.r) * t),
            g=clamp_unit(rgb.g + (1.0 - rgb.g) * t),
            b=clamp_unit(rgb.b + (1.0 - rgb.b) * t),
            a=rgb.a,
        )

    def _dark(self, primary: str, value: float, alpha: AlphaArg) -> ColorRGB:
        values = {name: 0.0 for name in PRIMARIES}
        values[primary] = value
        return ColorRGB(**values, a=self._alpha(alpha))

    def _light(self, primary: str, value: float, alpha: AlphaArg) -> ColorRGB:
        values = {name: value for name in PRIMARIES}
        values[primary] = 1.0
        return ColorRGB(**values, a=self._alpha(alpha))

    def _any(self, primary: str, alpha: AlphaArg) -> ColorRGB:
        value = self.rng.closed_unit()
        if value <= 0.5:
            return self._dark(primary, value * 2.0, alpha)
        return self._light(primary, value * 2.0 - 1.0, alpha)

    # -------------------------------------------------------------------------
    # Возмущение каналов
    # -------------------------------------------------------------------------

    def shift(self, color: C, **deltas: Magnitude) -> C:
        """Shift каналов: channel=max_abs_delta или channel=(min_delta, max_delta).

        Examples:
            randomizer.shift(hsv, h=0.1, v=(-0.2, 0.0))
        """
        active = self._active(color, deltas)

        def fn(spec: ChannelSpec, original: float, bounds: Bounds) -> float:
            return shift_channel(self.rng, spec.kind, original, active[spec.name], bounds)

        return self._apply(color, active, fn)

    def spread(self, color: C, **proportions: Magnitude) -> C:
        """Spread каналов: channel=max_abs_proportion или channel=(min, max)."""
        active = self._active(color, proportions)

        def fn(spec: ChannelSpec, original: float, bounds: Bounds) -> float:
            return spread_channel(self.rng, spec.kind, original, active[spec.name], bounds)

        return self._apply(color, active, fn)

    def lerp(self, color: C, target: C, *channels: str) -> C:
        """Случайная точка между color и target по каналам (по умолчанию по всем).

        Hue интерполируется по короткой дуге.

        Raises:
            TypeError: если color и target разных моделей
        """
        if type(color) is not type(target):
            raise TypeError(
                f"Cannot lerp {type(color).__name__} towards {type(target).__name__}"
            )

        names = channels or color.channel_names()
        for name in names:
            color.channel_spec(name)
        active = {
            name: getattr(target, name)
            for name in names
            if getattr(color, name) != getattr(target, name)
        }

        def fn(spec: ChannelSpec, original: float, bounds: Bounds) -> float:
            value = lerp_channel(self.rng, spec.kind, original, active[spec.name])
            if bounds is not None:
                return clamp(value, *bounds)
            return value

        return self._apply(color, active, fn)

    def rerandomize(self, color: C, *channels: str) -> C:
        """Новые значения каналов, равномерные по их домену (по умолчанию все каналы).

        Для hue-chroma моделей chroma и ось вместе выбираются равномерно
        внутри треугольника (нового либо текущего) hue, без rejection sampling.
        """
        names = channels or color.channel_names()
        active = {name: color.channel_spec(name) for name in names}

        if isinstance(color, HueChromaColor) and {"c", color.AXIS_FIELD} <= set(active):
            hue = self.rng.half_open_unit() if "h" in active else color.h
            chroma, axis_value = self._triangle_point(color.AXIS, hue)
            values = {"h": hue, "c": chroma, color.AXIS_FIELD: axis_value}
            if "a" in active:
                values["a"] = self.rng.closed_unit()
            return color.with_channels(**values)

        def fn(spec: ChannelSpec, original: float, bounds: Bounds) -> float:
            return rerandomize_channel(self.rng, spec.kind, bounds)

        return self._apply(color, active, fn)

    # -------------------------------------------------------------------------
    # Внутреннее
    # -------------------------------------------------------------------------

    @staticmethod
    def _active(color: ColorModel, magnitudes: dict[str, Magnitude]) -> dict[str, Magnitude]:
        # Проверка имён до отбрасывания нулевых величин
        for name in magnitudes:
            color.channel_spec(name)
        return {name: m for name, m in magnitudes.items() if not is_zero_magnitude(m)}

    def _apply(self, color: C, active: dict, fn: ChannelFn) -> C:
        if not active:
            return color

        def generate(bounds: Optional[dict[str, tuple[float, float]]] = None) -> C:
            values = {}
            for name in active:
                spec = color.channel_spec(name)
                channel_bounds = bounds.get(name) if bounds else None
                values[name] = fn(spec, getattr(color, name), channel_bounds)
            return color.with_channels(**values)

        if not isinstance(color, HueChromaColor):
            return generate()

        touched = set(active) & {"h", "c", color.AXIS_FIELD}
        if not touched:
            return generate()
        if touched == {"c"}:
            return generate({"c": (0.0, color.max_chroma())})
        if touched == {color.AXIS_FIELD}:
            return generate({color.AXIS_FIELD: color.axis_range()})

        return self.sampler.sample(
            lambda candidate: candidate.can_convert_to_rgb,
            generate,
            color.can_convert_to_rgb,
        )
