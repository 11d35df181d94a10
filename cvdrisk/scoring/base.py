"""Shared table-lookup and survival-formula machinery."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..config import CONFIG
from ..errors import InvalidOption, ShapeError
from ..normalize import (
    SEX_ALIASES,
    DomainGuard,
    batch_length,
    broadcast,
    categorical,
    fill_optional,
    indicator,
    numeric,
    require,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Table scorer
# ============================================================================

def lookup_points(points: np.ndarray, first_point: int, risks: Sequence[Any]) -> np.ndarray:
    """Look up integer point totals in a contiguous point table.

    ``risks[k]`` is the risk for ``first_point + k`` points. Totals beyond
    either end of the table take the extreme tabulated value.
    """
    table = np.asarray(risks)
    idx = np.clip(np.asarray(points, dtype=int) - first_point, 0, len(table) - 1)
    return table[idx]


def lookup_grid(grid: np.ndarray, *indices: np.ndarray) -> np.ndarray:
    """Vectorized lookup in an n-dimensional reference grid."""
    safe = [np.clip(np.asarray(ix, dtype=int), 0, grid.shape[axis] - 1) for axis, ix in enumerate(indices)]
    return grid[tuple(safe)]


# ============================================================================
# Formula scorer
# ============================================================================

def survival_risk(linear_predictor: np.ndarray, baseline_survival: float, mean_predictor: float = 0.0) -> np.ndarray:
    """Cox-model absolute risk ``1 - S0 ** exp(L - mean)`` as a fraction."""
    return 1.0 - np.power(baseline_survival, np.exp(linear_predictor - mean_predictor))


def recalibrate(risk: np.ndarray, scale1: float, scale2: float) -> np.ndarray:
    """Region recalibration on the complementary log-log scale."""
    return 1.0 - np.exp(-np.exp(scale1 + scale2 * np.log(-np.log(1.0 - risk))))


def as_percent(risk: np.ndarray, decimals: Optional[int] = None) -> np.ndarray:
    return np.round(risk * 100.0, CONFIG.decimals if decimals is None else decimals)


def linear_predictor(coefficients: Mapping[str, float], terms: Mapping[str, np.ndarray]) -> np.ndarray:
    """Sum of coefficient * term over the coefficients' names.

    Every coefficient must have a matching term; terms without a
    coefficient are ignored.
    """
    total = 0.0
    for name, beta in coefficients.items():
        total = total + beta * terms[name]
    return np.asarray(total, dtype=float)


# ============================================================================
# Calculator base class
# ============================================================================

class RiskScore:
    """Common input handling for every score calculator.

    Subclasses declare which inputs they need and implement ``_evaluate``,
    which receives normalized arrays and returns ``(risk, points)``; points
    is ``None`` for formula-based scores.
    """

    name: str = ""
    description: str = ""
    # Inputs that must be present and non-missing
    REQUIRED: Tuple[str, ...] = ()
    # Inputs restricted to 0/1
    INDICATORS: Tuple[str, ...] = ()
    # Labels (sex, ethnicity) mapped to their canonical spelling
    CATEGORICAL: Tuple[str, ...] = ("sex",)
    ALIASES: Dict[str, Mapping[str, str]] = {"sex": SEX_ALIASES}
    # Optional modifiers and the value used when absent
    OPTIONAL: Dict[str, float] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def _prepare(self, inputs: Mapping[str, Any], required: Optional[Tuple[str, ...]] = None) -> Tuple[Dict[str, np.ndarray], DomainGuard]:
        arrays = broadcast(inputs)
        n = batch_length(arrays)
        for name in (self.REQUIRED if required is None else required):
            require(arrays.get(name), name)
        # Strata are checked before any per-record domain check
        for name in self.CATEGORICAL:
            if arrays.get(name) is not None:
                arrays[name] = categorical(arrays[name], name, self.ALIASES[name])
        guard = DomainGuard(n, self.name)
        data: Dict[str, np.ndarray] = {}
        for name, values in arrays.items():
            if name in self.OPTIONAL:
                data[name] = fill_optional(values, self.OPTIONAL[name], n)
            elif values is None:
                continue
            elif name in self.CATEGORICAL:
                data[name] = values
            elif name in self.INDICATORS:
                data[name] = indicator(values, name, guard)
            else:
                data[name] = numeric(values, name, guard)
        for name in self.OPTIONAL:
            if name in self.INDICATORS and name in data:
                data[name] = indicator(data[name], name, guard)
        logger.debug(f"{self.name}: scoring {n} record(s)")
        return data, guard

    def _evaluate(self, **kwargs) -> Tuple[np.ndarray, Optional[np.ndarray]]:
        raise NotImplementedError

    def compute_points(self, **kwargs) -> np.ndarray:
        """Integer point total per record, before the table lookup."""
        _, points = self._evaluate(**kwargs)
        if points is None:
            raise InvalidOption(f"{self.name} is formula based and has no point total")
        return points

    def compute(self, **record) -> Dict[str, Any]:
        """Score a single record.

        Returns:
            Dictionary with 'score', 'risk' and, for point-based scores, 'points'
        """
        risk, points = self._evaluate(**record)
        return self._single(risk, points)

    def _single(self, risk: np.ndarray, points: Optional[np.ndarray]) -> Dict[str, Any]:
        if len(risk) != 1:
            raise ShapeError(f"compute() scores one record, got {len(risk)}; use compute_batch()")
        result = {"score": self.name, "risk": risk[0]}
        if points is not None:
            result["points"] = int(points[0]) if not np.isnan(points[0]) else None
        return result
