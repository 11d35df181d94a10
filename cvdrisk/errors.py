"""Exceptions raised by the risk score calculators.

All of them derive from ``ValueError`` so callers that already guard
numeric input with ``except ValueError`` keep working.
"""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np


MAX_REPORTED_INDICES = 10


def _format_indices(indices: Sequence[int]) -> str:
    shown = ", ".join(str(i) for i in indices[:MAX_REPORTED_INDICES])
    if len(indices) > MAX_REPORTED_INDICES:
        shown += f", ... ({len(indices)} records)"
    return shown


class RiskScoreError(ValueError):
    """Base class for risk score errors."""
    pass


class ShapeError(RiskScoreError):
    """Input vectors of unequal length."""
    pass


class InvalidOption(RiskScoreError):
    """Configuration flag outside its documented enumeration."""
    pass


class RecordError(RiskScoreError):
    """Error tied to specific record positions of a batch."""

    def __init__(self, parameter: str, indices: Sequence[int], reason: str):
        self.parameter = parameter
        self.indices = [int(i) for i in np.asarray(indices).ravel()]
        self.reason = reason
        message = f"{parameter}: {reason}"
        if self.indices:
            message += f" (records {_format_indices(self.indices)})"
        super().__init__(message)


class MissingInput(RecordError):
    """A required attribute is absent or NA."""

    def __init__(self, parameter: str, indices: Optional[Sequence[int]] = None, reason: str = "required value is missing"):
        super().__init__(parameter, indices if indices is not None else [], reason)


class InvalidStratum(RecordError):
    """Sex, ethnicity, region or age selects no known table or coefficient set."""
    pass


class DomainError(RecordError):
    """A continuous or indicator input outside its mathematically valid domain."""
    pass
