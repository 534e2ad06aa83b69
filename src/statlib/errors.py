"""Caller errors raised by the statistics helpers."""

from __future__ import annotations


class StatisticsError(ValueError):
    """Base class for invalid input to a statistic."""


class EmptySequenceError(StatisticsError):
    """A statistic that needs at least one value was given none."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() requires at least one value")
        self.operation = operation
