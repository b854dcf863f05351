"""
Rejection Sampling — поиск конвертируемого в RGB цвета в chroma-моделях

Для HCV/HCL/HCY допустимая область (chroma, axis) — треугольник, а не
прямоугольник. Возмущение каналов по отдельности может вывести точку за
пределы треугольника, поэтому кандидат генерируется повторно, пока не
станет валидным или пока не исчерпан бюджет попыток.

АДАПТИВНЫЙ БЮДЖЕТ:
- исходный цвет валиден → до 100 попыток (валидный сосед почти наверняка есть)
- исходный цвет невалиден → до 5 попыток (валидный сосед может быть недостижим)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Цикл всегда ограничен бюджетом (никогда не блокирует бесконечно)
2. generate вызывается минимум один раз
3. Возвращается первый валидный кандидат, либо последний кандидат
   при исчерпании бюджета, без exception (best-effort деградация)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Final, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Бюджет попыток при валидном исходном цвете
BUDGET_WHEN_ORIGINAL_VALID: Final[int] = 100

# Бюджет попыток при невалидном исходном цвете
BUDGET_WHEN_ORIGINAL_INVALID: Final[int] = 5


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class RejectionBudget:
    """Бюджет попыток rejection sampling в зависимости от валидности исходного цвета."""

    when_original_valid: int = BUDGET_WHEN_ORIGINAL_VALID
    when_original_invalid: int = BUDGET_WHEN_ORIGINAL_INVALID

    def __post_init__(self) -> None:
        if self.when_original_valid < 1:
            raise ValueError(
                f"when_original_valid must be >= 1, got {self.when_original_valid}"
            )
        if self.when_original_invalid < 1:
            raise ValueError(
                f"when_original_invalid must be >= 1, got {self.when_original_invalid}"
            )

    def for_original(self, was_original_valid: bool) -> int:
        return self.when_original_valid if was_original_valid else self.when_original_invalid


@dataclass(frozen=True)
class RejectionResult(Generic[T]):
    """Результат rejection sampling."""

    candidate: T
    attempts: int
    budget: int
    is_valid: bool

    @property
    def exhausted(self) -> bool:
        """True если бюджет исчерпан без валидного кандидата."""
        return not self.is_valid


# =============================================================================
# SAMPLER
# =============================================================================


class TriangleRejectionSampler:
    """
    Повторная генерация кандидата до выполнения предиката валидности.

    Одна и та же политика применяется ко всем трём chroma-моделям; модели
    различаются только замыканием generate и предикатом is_valid.
    """

    def __init__(self, budget: Optional[RejectionBudget] = None):
        """
        Args:
            budget: бюджет попыток (default: 100 / 5)
        """
        self.budget = budget or RejectionBudget()

    def sample(
        self,
        is_valid: Callable[[T], bool],
        generate: Callable[[], T],
        was_original_valid: bool,
    ) -> T:
        """
        Первый валидный кандидат или последний кандидат при исчерпании бюджета.

        Args:
            is_valid: предикат "кандидат конвертируется в RGB"
            generate: замыкание, возвращающее нового кандидата
            was_original_valid: валиден ли исходный цвет (выбор бюджета)

        Returns:
            Кандидат (валидный, либо последняя попытка)
        """
        return self.sample_with_report(is_valid, generate, was_original_valid).candidate

    def sample_with_report(
        self,
        is_valid: Callable[[T], bool],
        generate: Callable[[], T],
        was_original_valid: bool,
    ) -> RejectionResult[T]:
        """То же, что sample, но с диагностикой (число попыток, исход)."""
        budget = self.budget.for_original(was_original_valid)
        attempts = 0

        while True:
            candidate = generate()
            attempts += 1
            valid = is_valid(candidate)
            if valid or attempts >= budget:
                break

        if not valid:
            logger.debug(
                "Rejection budget exhausted: attempts=%d budget=%d original_valid=%s",
                attempts,
                budget,
                was_original_valid,
            )

        return RejectionResult(
            candidate=candidate,
            attempts=attempts,
            budget=budget,
            is_valid=valid,
        )
