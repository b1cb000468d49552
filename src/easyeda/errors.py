"""Exception types raised by the profiling engine."""

from __future__ import annotations


class EasyEDAError(Exception):
    """Base class for engine errors."""


class InvalidInputError(EasyEDAError, ValueError):
    """The dataset is not tabular, is empty, or is otherwise unusable.

    Raised before any statistic is computed; no partial result exists.
    """


class StatisticalTestFailure(EasyEDAError, RuntimeError):
    """A single statistical test could not be computed.

    Handled where the test runs and recorded as a per-variable error entry.
    """

    def __init__(self, variable: str, reason: str) -> None:
        self.variable = variable
        self.reason = reason
        super().__init__(f"{variable}: {reason}")
