"""All four statistics of one sequence, bundled and formatted."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from src.common.constants import DEFAULT_THRESHOLD_MIN
from src.statlib.stats import compute_mean, compute_median, find_max, find_min

log = structlog.get_logger("statlib")


@dataclass(frozen=True)
class Summary:
    count: int
    mean: float
    median: float
    minimum: float
    maximum: float
    threshold_min: float
    thresholded: bool


def summarize(
    values: Sequence[float | int],
    min_value: float = DEFAULT_THRESHOLD_MIN,
    threshold: bool = True,
) -> Summary:
    """Compute mean, median, min and max of *values* in one call.

    Raises ``EmptySequenceError`` for empty input, since only the mean
    has a defined fallback.
    """
    summary = Summary(
        count=len(values),
        mean=compute_mean(values, min_value, threshold),
        median=compute_median(values),
        minimum=find_min(values),
        maximum=find_max(values),
        threshold_min=min_value,
        thresholded=threshold,
    )
    log.debug("summary", count=summary.count, mean=summary.mean)
    return summary


def fmt_summary(summary: Summary) -> str:
    """mean [min, med, max] (n=...), noting the threshold when applied."""
    mean_part = f"mean={summary.mean:,.2f}"
    if summary.thresholded:
        mean_part += f" (>= {summary.threshold_min:,.2f})"
    return (
        f"{mean_part}"
        f"  [min={summary.minimum:,.2f}, med={summary.median:,.2f}, max={summary.maximum:,.2f}]"
        f"  (n={summary.count})"
    )
