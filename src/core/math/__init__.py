"""
Core math modules

Численные примитивы возмущения каналов и rejection sampling.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_CALC,
    EPS_COLOR,
    UNIT_MAX,
    UNIT_MIN,
    clamp,
    clamp_unit,
    is_valid_float,
    repeat,
    safe_divide,
    sanitize_float,
)

# Perturbation
from src.core.math.perturbation import (
    FULL_CIRCLE_ARC,
    FULL_CIRCLE_SPREAD,
    Magnitude,
    is_zero_magnitude,
    lerp_channel,
    lerp_repeated,
    range_lerp,
    rerandomize_channel,
    shift,
    shift_channel,
    shift_clamped,
    shift_range,
    shift_range_clamped,
    shift_range_repeated,
    shift_repeated,
    spread,
    spread_channel,
    spread_clamped,
    spread_range,
    spread_range_clamped,
    spread_range_repeated,
    spread_repeated,
)

# Rejection Sampling
from src.core.math.rejection_sampling import (
    BUDGET_WHEN_ORIGINAL_INVALID,
    BUDGET_WHEN_ORIGINAL_VALID,
    RejectionBudget,
    RejectionResult,
    TriangleRejectionSampler,
)

__all__ = [
    # Numerical Safeguards: Constants
    "EPS_CALC",
    "EPS_COLOR",
    "UNIT_MAX",
    "UNIT_MIN",
    # Numerical Safeguards: Functions
    "clamp",
    "clamp_unit",
    "is_valid_float",
    "repeat",
    "safe_divide",
    "sanitize_float",
    # Perturbation: Constants / Types
    "FULL_CIRCLE_ARC",
    "FULL_CIRCLE_SPREAD",
    "Magnitude",
    # Perturbation: Bounded
    "shift",
    "shift_range",
    "shift_clamped",
    "shift_range_clamped",
    "spread",
    "spread_range",
    "spread_clamped",
    "spread_range_clamped",
    "range_lerp",
    # Perturbation: Circular
    "shift_repeated",
    "shift_range_repeated",
    "spread_repeated",
    "spread_range_repeated",
    "lerp_repeated",
    # Perturbation: Dispatch
    "is_zero_magnitude",
    "shift_channel",
    "spread_channel",
    "lerp_channel",
    "rerandomize_channel",
    # Rejection Sampling
    "BUDGET_WHEN_ORIGINAL_INVALID",
    "BUDGET_WHEN_ORIGINAL_VALID",
    "RejectionBudget",
    "RejectionResult",
    "TriangleRejectionSampler",
]
