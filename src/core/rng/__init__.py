"""
Источники случайных величин для генерации и возмущения цветов.
"""

from src.core.rng.source import (
    CLOSED_UNIT_RESOLUTION,
    Point2D,
    RandomSource,
    SystemRandomSource,
)

__all__ = [
    "CLOSED_UNIT_RESOLUTION",
    "Point2D",
    "RandomSource",
    "SystemRandomSource",
]
