"""Descriptive statistics: thresholded mean, median, minimum, maximum.

Pure functions over a sequence of floats.  None of them mutate the input.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import structlog

from src.statlib.errors import EmptySequenceError

log = structlog.get_logger("statlib")


def _require_values(values: Sequence[float | int], operation: str) -> None:
    if not values:
        log.warning("empty_sequence", operation=operation)
        raise EmptySequenceError(operation)


def compute_mean(
    values: Sequence[float | int], min_value: float, threshold: bool
) -> float:
    """Arithmetic mean of *values*.

    When *threshold* is true only values ``>= min_value`` are averaged.
    Returns ``0.0`` if nothing qualifies, including for empty input.
    """
    total = 0.0
    count = 0
    for value in values:
        if not threshold or value >= min_value:
            total += value
            count += 1

    if count == 0:
        log.debug(
            "mean_fallback",
            size=len(values),
            min_value=min_value,
            threshold=threshold,
        )
        return 0.0
    return total / count


def compute_median(values: Sequence[float | int]) -> float:
    """Median of *values*, taken over a sorted copy."""
    _require_values(values, "compute_median")
    # NaN sorts last so the order is total
    s = sorted(values, key=lambda x: (math.isnan(x), x))
    n = len(s)
    if n % 2 == 1:
        return float(s[n // 2])
    return (s[n // 2 - 1] + s[n // 2]) / 2.0


def find_min(values: Sequence[float | int]) -> float:
    _require_values(values, "find_min")
    smallest = values[0]
    for value in values:
        if value < smallest:
            smallest = value
    return float(smallest)


def find_max(values: Sequence[float | int]) -> float:
    _require_values(values, "find_max")
    largest = values[0]
    for value in values:
        if value > largest:
            largest = value
    return float(largest)
