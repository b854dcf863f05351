"""Generator — генерация и возмущение цветов.

ColorRandomizer объединяет операторы возмущения каналов, rejection sampling
для hue-chroma моделей и равномерный выбор цвета в каждой модели.
"""

from .color_randomizer import (
    RANDOM_ALPHA,
    ColorRandomizer,
    RandomizerConfig,
)

__all__ = [
    "RANDOM_ALPHA",
    "ColorRandomizer",
    "RandomizerConfig",
]
