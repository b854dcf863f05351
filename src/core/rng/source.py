"""
RandomSource — источник равномерных случайных величин

Контракт, который потребляют операторы возмущения каналов и генератор цветов:
- closed_unit / half_open_unit: равномерное значение в [0, 1] / [0, 1)
- closed_range / half_open_range: равномерное значение в [a, b] / [a, b)
- point_within_triangle: равномерная (по площади) точка внутри треугольника

SystemRandomSource — реализация поверх random.Random (Mersenne Twister),
воспроизводимая при заданном seed. Экземпляр не синхронизирован: для
многопоточного использования нужен отдельный экземпляр на поток.
"""

import math
import random
from typing import Final, Optional, Protocol

# Точка на плоскости (chroma, axis)
Point2D = tuple[float, float]

# Разрешение closed_unit: 2^53 + 1 равновероятных значений, включая 0.0 и 1.0
CLOSED_UNIT_RESOLUTION: Final[int] = 1 << 53


class RandomSource(Protocol):
    """Протокол источника равномерных случайных величин."""

    def closed_unit(self) -> float:
        ...

    def half_open_unit(self) -> float:
        ...

    def closed_range(self, lower: float, upper: float) -> float:
        ...

    def half_open_range(self, lower: float, upper: float) -> float:
        ...

    def point_within_triangle(self, p0: Point2D, p1: Point2D, p2: Point2D) -> Point2D:
        ...


class SystemRandomSource:
    """
    RandomSource поверх стандартного random.Random.

    Все производные величины (range, triangle) строятся через closed_unit и
    half_open_unit, поэтому подкласс, переопределивший только эти два
    метода, полностью управляет последовательностью (используется в тестах).
    """

    def __init__(self, seed: Optional[int] = None, generator: Optional[random.Random] = None):
        """
        Args:
            seed: seed для воспроизводимости (игнорируется, если передан generator)
            generator: готовый экземпляр random.Random (default: создаётся)
        """
        self._random = generator or random.Random(seed)

    def closed_unit(self) -> float:
        """Равномерное значение в [0, 1] (обе границы достижимы)."""
        return self._random.randint(0, CLOSED_UNIT_RESOLUTION) / CLOSED_UNIT_RESOLUTION

    def half_open_unit(self) -> float:
        """Равномерное значение в [0, 1)."""
        return self._random.random()

    def closed_range(self, lower: float, upper: float) -> float:
        """
        Равномерное значение между lower и upper включительно.

        Порядок границ не важен: при lower > upper результат всё равно
        лежит между ними.
        """
        result = lower + (upper - lower) * self.closed_unit()
        # Округление не должно выводить за границы интервала
        return min(max(result, min(lower, upper)), max(lower, upper))

    def half_open_range(self, lower: float, upper: float) -> float:
        """Равномерное значение в [lower, upper)."""
        result = lower + (upper - lower) * self.half_open_unit()
        # Округление может дать ровно upper при широком интервале
        if result >= upper > lower:
            return math.nextafter(upper, lower)
        return result

    def point_within_triangle(self, p0: Point2D, p1: Point2D, p2: Point2D) -> Point2D:
        """
        Равномерная по площади точка внутри треугольника (p0, p1, p2).

        Алгоритм: r1 = sqrt(u1), r2 = u2,
            P = (1 - r1) * p0 + r1 * (1 - r2) * p1 + r1 * r2 * p2
        sqrt компенсирует линейный рост длины сечения от вершины p0, поэтому
        распределение не смещено к рёбрам.
        """
        r1 = math.sqrt(self.closed_unit())
        r2 = self.closed_unit()

        w0 = 1.0 - r1
        w1 = r1 * (1.0 - r2)
        w2 = r1 * r2

        return (
            w0 * p0[0] + w1 * p1[0] + w2 * p2[0],
            w0 * p0[1] + w1 * p1[1] + w2 * p2[1],
        )
