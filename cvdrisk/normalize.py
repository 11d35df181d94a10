"""Input normalization shared by every risk score.

Turns scalar / list / ndarray / Series arguments into aligned 1-D arrays,
checks missing values, converts units and assigns measurements to the
banded categories used by the point tables.
"""
from __future__ import annotations

import logging
import warnings
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from .config import CONFIG, DOMAIN_ERROR_POLICIES
from .errors import DomainError, InvalidOption, InvalidStratum, MissingInput, ShapeError

logger = logging.getLogger(__name__)


SEX_ALIASES = {
    "male": "male",
    "m": "male",
    "man": "male",
    "female": "female",
    "f": "female",
    "woman": "female",
}

REGION_ALIASES = {
    "low": "low",
    "moderate": "moderate",
    "high": "high",
    "very high": "very high",
    "very_high": "very high",
    "veryhigh": "very high",
    "very-high": "very high",
}


# ============================================================================
# Shapes and missing values
# ============================================================================

def as_vector(value: Any) -> np.ndarray:
    """Convert a scalar or sequence into a 1-D numpy array."""
    if isinstance(value, (pd.Series, pd.Index)):
        return value.to_numpy()
    arr = np.asarray(value)
    if arr.ndim == 0:
        return arr.reshape(1)
    if arr.ndim > 1:
        raise ShapeError(f"Inputs must be one-dimensional, got shape {arr.shape}")
    return arr


def broadcast(values: Mapping[str, Any]) -> Dict[str, Optional[np.ndarray]]:
    """Align every supplied input to a common length.

    Scalars and length-1 inputs are repeated; ``None`` marks an input that
    was not supplied and is kept as ``None``.

    Raises:
        ShapeError: If two non-scalar inputs differ in length.
    """
    arrays = {name: (None if value is None else as_vector(value)) for name, value in values.items()}
    lengths = {name: len(arr) for name, arr in arrays.items() if arr is not None and len(arr) != 1}
    distinct = set(lengths.values())
    if len(distinct) > 1:
        detail = ", ".join(f"{name}={length}" for name, length in sorted(lengths.items()))
        raise ShapeError(f"All inputs must have the same length; got {detail}")
    n = distinct.pop() if distinct else 1
    for name, arr in arrays.items():
        if arr is not None and len(arr) == 1 and n != 1:
            arrays[name] = np.repeat(arr, n)
    return arrays


def batch_length(arrays: Mapping[str, Optional[np.ndarray]]) -> int:
    for arr in arrays.values():
        if arr is not None:
            return len(arr)
    return 0


def require(values: Optional[np.ndarray], name: str) -> np.ndarray:
    """Raise MissingInput if an input was not supplied or holds NA values."""
    if values is None:
        raise MissingInput(name, reason="required input was not supplied")
    missing = pd.isna(values)
    if np.any(missing):
        raise MissingInput(name, np.flatnonzero(missing))
    return values


def fill_optional(values: Optional[np.ndarray], default: float, n: int) -> np.ndarray:
    """Replace a missing optional modifier with its inert default."""
    if values is None:
        return np.full(n, default, dtype=float)
    out = pd.to_numeric(pd.Series(values), errors="coerce").to_numpy(dtype=float)
    return np.where(np.isnan(out), default, out)


# ============================================================================
# Per-record domain checks
# ============================================================================

class DomainGuard:
    """Collect out-of-domain records for a batch.

    Under the "raise" policy the first failing check raises DomainError
    naming every offending record. Under "mask" the records are remembered
    and ``finalize`` blanks their results. Each problem is reported once per
    batch, however many result arrays are finalized.
    """

    def __init__(self, n: int, score_name: str, policy: Optional[str] = None):
        self.n = n
        self.score_name = score_name
        self.policy = policy or CONFIG.domain_errors
        if self.policy not in DOMAIN_ERROR_POLICIES:
            raise InvalidOption(
                f"Unknown domain error policy '{self.policy}'. Available: {list(DOMAIN_ERROR_POLICIES)}"
            )
        self.invalid = np.zeros(n, dtype=bool)
        self.problems: list = []
        self.reported = 0

    def check(self, mask: np.ndarray, parameter: str, reason: str) -> np.ndarray:
        mask = np.asarray(mask, dtype=bool)
        if mask.any():
            indices = np.flatnonzero(mask)
            if self.policy == "raise":
                raise DomainError(parameter, indices, reason)
            self.invalid |= mask
            self.problems.append((parameter, indices.tolist(), reason))
        return mask

    def safe(self, values: np.ndarray, fill: Any) -> np.ndarray:
        """Substitute a harmless value at masked records so lookups stay in range."""
        if not self.invalid.any():
            return values
        return np.where(self.invalid, fill, values)

    def finalize(self, result: np.ndarray) -> np.ndarray:
        if not self.invalid.any():
            return result
        for parameter, indices, reason in self.problems[self.reported:]:
            message = (
                f"{self.score_name}: {parameter} {reason}; "
                f"{len(indices)} record(s) masked: {indices[:10]}"
            )
            logger.warning(message)
            warnings.warn(message, UserWarning)
        self.reported = len(self.problems)
        if result.dtype == object:
            result = result.copy()
            result[self.invalid] = None
            return result
        result = result.astype(float)
        result[self.invalid] = np.nan
        return result


def numeric(values: np.ndarray, name: str, guard: DomainGuard) -> np.ndarray:
    """Coerce an input to float, flagging entries that are not numbers."""
    if values.dtype.kind in "biuf":
        return values.astype(float)
    out = pd.to_numeric(pd.Series(values, dtype=object), errors="coerce").to_numpy(dtype=float)
    guard.check(np.isnan(out) & ~pd.isna(values), name, "must be numeric")
    return out


def indicator(values: np.ndarray, name: str, guard: DomainGuard) -> np.ndarray:
    """Coerce a 0/1 (or boolean) input to int, flagging any other value."""
    out = numeric(values, name, guard)
    bad = ~np.isin(out, (0.0, 1.0)) & ~np.isnan(out)
    guard.check(bad, name, "must be 0 or 1")
    return np.where(np.isin(out, (0.0, 1.0)), out, 0.0).astype(int)


def positive(values: np.ndarray, name: str, guard: DomainGuard, reason: str = "must be positive") -> np.ndarray:
    """Flag non-positive measurements and replace them with a neutral 1.0."""
    guard.check(values <= 0, name, reason)
    return guard.safe(values, 1.0)


# ============================================================================
# Categorical strata and options
# ============================================================================

def categorical(values: np.ndarray, name: str, aliases: Mapping[str, str]) -> np.ndarray:
    """Map categorical labels to their canonical spelling.

    Raises:
        InvalidStratum: If any label is not recognized.
    """
    lowered = np.array([str(v).strip().lower() for v in values], dtype=object)
    known = np.isin(lowered, list(aliases))
    if not known.all():
        raise InvalidStratum(
            name,
            np.flatnonzero(~known),
            f"must be one of {sorted(set(aliases.values()))}",
        )
    return np.array([aliases[v] for v in lowered], dtype=object)


def female_mask(sex: np.ndarray) -> np.ndarray:
    """Boolean mask of female records from a sex vector."""
    return categorical(sex, "sex", SEX_ALIASES) == "female"


def validate_option(value: Any, allowed: Iterable[str], name: str, aliases: Optional[Mapping[str, str]] = None) -> str:
    """Validate a configuration flag against its enumeration.

    Raises:
        InvalidOption: If the value is not recognized.
    """
    allowed = list(allowed)
    key = str(value).strip().lower() if value is not None else ""
    if aliases is not None:
        key = aliases.get(key, key)
    if key not in allowed:
        raise InvalidOption(f"Unknown {name}: {value}. Available: {allowed}")
    return key


def validate_flag(value: Any, name: str) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidOption(f"{name} must be True or False, got {value!r}")
    return bool(value)


# ============================================================================
# Units and banding
# ============================================================================

def to_mmol(values: np.ndarray, mmol: bool, factor: Optional[float] = None) -> np.ndarray:
    """Express a lipid value in mmol/L."""
    if mmol:
        return values
    return values / (factor or CONFIG.mgdl_per_mmol_chol)


def to_mgdl(values: np.ndarray, mmol: bool, factor: Optional[float] = None) -> np.ndarray:
    """Express a lipid value in mg/dL."""
    if not mmol:
        return values
    return values * (factor or CONFIG.mgdl_per_mmol_chol)


def band_index(values: np.ndarray, edges: Sequence[float], closed: str = "left") -> np.ndarray:
    """Index of the band each value falls into.

    ``edges`` are the interior boundaries in ascending order, so there are
    ``len(edges) + 1`` bands and the outer ones are open-ended. With
    ``closed="left"`` a value equal to an edge belongs to the upper band
    (``[lo, hi)``); with ``closed="right"`` it stays in the lower band
    (``(lo, hi]``).
    """
    side = "right" if closed == "left" else "left"
    return np.searchsorted(np.asarray(edges, dtype=float), values, side=side)


def band_points(values: np.ndarray, edges: Sequence[float], points: Sequence[float], closed: str = "left") -> np.ndarray:
    """Points awarded for the band each value falls into."""
    if len(points) != len(edges) + 1:
        raise ValueError(f"Expected {len(edges) + 1} point values for {len(edges)} edges, got {len(points)}")
    return np.asarray(points)[band_index(values, edges, closed)]


def clamp_range(values: np.ndarray, low: Optional[float], high: Optional[float], name: str, score_name: str) -> np.ndarray:
    """Clip values to a validated range and log how many records moved."""
    if low is None and high is None:
        return values
    clipped = np.clip(values, low, high)
    moved = int(np.count_nonzero(clipped != values))
    if moved:
        logger.warning(
            f"{score_name}: {moved} record(s) with {name} outside [{low}, {high}] "
            f"assigned to the nearest tabulated band"
        )
    return clipped
