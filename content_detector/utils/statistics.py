"""Small numeric helpers shared by the scoring pipeline."""
import math
from collections.abc import Sequence


def mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_variance(values: Sequence[float]) -> float:
    """Mean squared deviation from the mean (denominator is len, not len - 1)."""
    if not values:
        return 0.0
    avg = mean(values)
    return sum((v - avg) ** 2 for v in values) / len(values)


def round_half_up(value: float) -> int:
    # round() is banker's rounding; percentages are rounded .5 away from zero
    return math.floor(value + 0.5)
