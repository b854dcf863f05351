"""
Тесты для RandomSource (SystemRandomSource)

Проверяет:
1. Границы closed / half-open значений
2. Воспроизводимость при одинаковом seed
3. Равномерность точки в треугольнике (без смещения к рёбрам)
"""

import random

import pytest

from src.core.rng import RandomSource, SystemRandomSource
from src.core.rng.source import CLOSED_UNIT_RESOLUTION

SAMPLES = 20000


@pytest.fixture
def rng() -> SystemRandomSource:
    return SystemRandomSource(seed=2024)


class FixedGenerator(random.Random):
    """random.Random с фиксированными крайними значениями."""

    def __init__(self, randint_value: int, random_value: float):
        super().__init__(0)
        self._randint_value = randint_value
        self._random_value = random_value

    def randint(self, a, b):
        return self._randint_value

    def random(self):
        return self._random_value


# =============================================================================
# ТЕСТЫ: UNIT / RANGE
# =============================================================================


class TestUnitValues:
    """Тесты closed_unit / half_open_unit"""

    def test_satisfies_protocol(self, rng) -> None:
        source: RandomSource = rng
        assert 0.0 <= source.closed_unit() <= 1.0

    def test_closed_unit_bounds(self, rng) -> None:
        for _ in range(SAMPLES):
            assert 0.0 <= rng.closed_unit() <= 1.0

    def test_closed_unit_reaches_one(self) -> None:
        """Верхняя граница closed_unit достижима"""
        source = SystemRandomSource(generator=FixedGenerator(CLOSED_UNIT_RESOLUTION, 0.0))
        assert source.closed_unit() == 1.0

    def test_half_open_unit_bounds(self, rng) -> None:
        for _ in range(SAMPLES):
            assert 0.0 <= rng.half_open_unit() < 1.0

    def test_seed_reproducibility(self) -> None:
        """Одинаковый seed → одинаковая последовательность"""
        first = SystemRandomSource(seed=7)
        second = SystemRandomSource(seed=7)
        assert [first.closed_unit() for _ in range(50)] == [second.closed_unit() for _ in range(50)]

    def test_different_seeds_differ(self) -> None:
        first = SystemRandomSource(seed=1)
        second = SystemRandomSource(seed=2)
        assert [first.half_open_unit() for _ in range(10)] != [second.half_open_unit() for _ in range(10)]


class TestRanges:
    """Тесты closed_range / half_open_range"""

    def test_closed_range_bounds(self, rng) -> None:
        for _ in range(SAMPLES):
            assert 0.2 <= rng.closed_range(0.2, 0.7) <= 0.7

    def test_closed_range_reversed_bounds(self, rng) -> None:
        """Порядок границ не важен"""
        for _ in range(1000):
            assert 0.2 <= rng.closed_range(0.7, 0.2) <= 0.7

    def test_closed_range_endpoints(self) -> None:
        """Крайние значения closed_unit дают ровно границы"""
        low = SystemRandomSource(generator=FixedGenerator(0, 0.0))
        high = SystemRandomSource(generator=FixedGenerator(CLOSED_UNIT_RESOLUTION, 0.0))
        assert low.closed_range(0.1, 0.3) == 0.1
        assert high.closed_range(0.1, 0.3) == 0.3

    def test_degenerate_range(self, rng) -> None:
        assert rng.closed_range(0.4, 0.4) == 0.4

    def test_half_open_range_bounds(self, rng) -> None:
        for _ in range(SAMPLES):
            assert -0.5 <= rng.half_open_range(-0.5, 0.5) < 0.5

    def test_half_open_range_never_returns_upper(self) -> None:
        """Даже при random() у единицы upper не достигается"""
        source = SystemRandomSource(generator=FixedGenerator(0, 1.0 - 2**-53))
        assert source.half_open_range(-1e6, 1e6) < 1e6


# =============================================================================
# ТЕСТЫ: POINT WITHIN TRIANGLE
# =============================================================================


class TestPointWithinTriangle:
    """Тесты равномерной точки в треугольнике"""

    TRIANGLE = ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))

    def test_point_inside(self, rng) -> None:
        for _ in range(SAMPLES):
            x, y = rng.point_within_triangle(*self.TRIANGLE)
            assert x >= -1e-12
            assert y >= -1e-12
            assert x + y <= 1.0 + 1e-12

    def test_area_uniform(self, rng) -> None:
        """
        Треугольник x + y < 0.5 занимает 1/4 площади.

        Смещение к вершине p0 (наивные барицентрические веса) дало бы
        заметно большую долю.
        """
        inside = 0
        sum_x = 0.0
        for _ in range(SAMPLES):
            x, y = rng.point_within_triangle(*self.TRIANGLE)
            sum_x += x
            if x + y < 0.5:
                inside += 1

        assert inside / SAMPLES == pytest.approx(0.25, abs=0.02)
        # Центроид треугольника: (1/3, 1/3)
        assert sum_x / SAMPLES == pytest.approx(1.0 / 3.0, abs=0.02)

    def test_vertex_weights(self) -> None:
        """u1 = 0 → вершина p0"""
        source = SystemRandomSource(generator=FixedGenerator(0, 0.0))
        assert source.point_within_triangle((0.2, 0.3), (1.0, 0.5), (0.0, 1.0)) == (0.2, 0.3)
