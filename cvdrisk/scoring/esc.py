"""ESC SCORE (2016) and SCORE2 risk charts and SCORE2 risk models."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np

from ..errors import InvalidStratum
from ..normalize import (
    REGION_ALIASES,
    band_index,
    clamp_range,
    female_mask,
    positive,
    to_mmol,
    validate_flag,
    validate_option,
)
from ..reference import esc as ref
from .base import RiskScore, as_percent, linear_predictor, lookup_grid, recalibrate, survival_risk

logger = logging.getLogger(__name__)


def _chart_array(chart: Dict[str, Dict[int, list]]) -> np.ndarray:
    """Stack a chart into an array indexed [female][smoker][age][sbp][chol]."""
    return np.array(
        [
            [chart["male"][0], chart["male"][1]],
            [chart["female"][0], chart["female"][1]],
        ],
        dtype=float,
    )


class EscChartScore(RiskScore):
    """Lookup in an ESC risk chart.

    Age, systolic blood pressure and cholesterol are banded, and the cell
    for the record's sex and smoking status is returned. The outer age
    bands are open-ended, so ages outside the chart take the nearest row.
    """

    REQUIRED = ("sex", "age", "totchol", "sbp", "smoker")
    INDICATORS = ("smoker",)

    # Charts keyed by region, or a single chart when REGIONS is empty
    CHARTS: Dict[str, Any] = {}
    REGIONS: Tuple[str, ...] = ()
    AGE_EDGES: Tuple[float, ...] = ()
    AGE_RANGE: Tuple[Optional[float], Optional[float]] = (None, None)
    SBP_EDGES: Tuple[float, ...] = ref.SCORE_SBP_EDGES
    SBP_CLOSED = "right"
    CHOL_EDGES: Tuple[float, ...] = ref.SCORE_CHOL_EDGES
    NON_HDL = False

    def _chart(self, risk: Optional[str]) -> np.ndarray:
        if not self.REGIONS:
            return _chart_array(self.CHARTS)
        region = validate_option(risk, self.REGIONS, "risk region", REGION_ALIASES)
        return _chart_array(self.CHARTS[region])

    def _evaluate(self, sex, age, totchol, sbp, smoker, hdl=None, risk="low", mmol=False):
        chart = self._chart(risk)
        mmol = validate_flag(mmol, "mmol")
        data, guard = self._prepare(dict(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker, hdl=hdl))
        female = female_mask(data["sex"]).astype(int)

        chol = to_mmol(positive(data["totchol"], "totchol", guard), mmol)
        if self.NON_HDL:
            hdl_mmol = to_mmol(positive(data["hdl"], "hdl", guard), mmol)
            guard.check(hdl_mmol >= chol, "hdl", "must be lower than totchol")
            chol = chol - hdl_mmol

        age_values = clamp_range(data["age"], *self.AGE_RANGE, "age", self.name)
        age_idx = band_index(age_values, self.AGE_EDGES)
        sbp_idx = band_index(data["sbp"], self.SBP_EDGES, closed=self.SBP_CLOSED)
        chol_idx = band_index(chol, self.CHOL_EDGES)

        result = lookup_grid(chart, female, data["smoker"], age_idx, sbp_idx, chol_idx)
        return guard.finalize(result), None


class EscScoreGer2016Table(EscChartScore):
    """ESC SCORE 2016, German recalibration: 10-year risk of fatal CVD."""

    name = "esc_score_ger_2016_table"
    description = "ESC SCORE 2016 chart recalibrated for Germany"
    CHARTS = ref.SCORE_GER_2016
    AGE_EDGES = ref.SCORE_GER_AGE_EDGES
    AGE_RANGE = ref.SCORE_GER_AGE_RANGE

    def compute_batch(self, sex, age, totchol, sbp, smoker, mmol: bool = False) -> np.ndarray:
        """Compute the German SCORE risk for multiple patients.

        Args:
            sex: "male" / "female"
            age: Age in years
            totchol: Total cholesterol (mg/dL, or mmol/L with mmol=True)
            sbp: Systolic blood pressure (mmHg)
            smoker: 0/1
            mmol: Whether cholesterol is given in mmol/L

        Returns:
            Array of 10-year risks of fatal CVD (%)
        """
        risk, _ = self._evaluate(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker, mmol=mmol)
        return risk


class EscScore2016Table(EscChartScore):
    """ESC SCORE 2016 for low- and high-risk European countries, age 40-65."""

    name = "esc_score_2016_table"
    description = "ESC SCORE 2016 chart (low / high risk countries)"
    CHARTS = ref.SCORE_2016
    REGIONS = ("low", "high")
    AGE_EDGES = ref.SCORE_2016_AGE_EDGES
    AGE_RANGE = ref.SCORE_2016_AGE_RANGE

    def compute_batch(self, sex, age, totchol, sbp, smoker, risk: str = "low", mmol: bool = False) -> np.ndarray:
        """Compute SCORE 2016 for multiple patients.

        Args:
            risk: Country risk level, "low" or "high"
            (other arguments as in EscScoreGer2016Table.compute_batch)

        Returns:
            Array of 10-year risks of fatal CVD (%)
        """
        result, _ = self._evaluate(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker, risk=risk, mmol=mmol)
        return result


class EscScoreOPTable(EscChartScore):
    """ESC SCORE for older persons (65-80 years)."""

    name = "esc_score_op_table"
    description = "ESC SCORE O.P. chart for older persons"
    CHARTS = ref.SCORE_OP
    REGIONS = ("low", "high")
    AGE_EDGES = ref.SCORE_OP_AGE_EDGES
    AGE_RANGE = ref.SCORE_OP_AGE_RANGE

    def compute_batch(self, sex, age, totchol, sbp, smoker, risk: str = "low", mmol: bool = False) -> np.ndarray:
        result, _ = self._evaluate(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker, risk=risk, mmol=mmol)
        return result


class EscScore2Table(EscChartScore):
    """SCORE2 chart: 10-year fatal and non-fatal CVD risk, age 40-69."""

    name = "esc_score2_table"
    description = "ESC SCORE2 chart by risk region"
    REQUIRED = ("sex", "age", "totchol", "hdl", "sbp", "smoker")
    CHARTS = ref.SCORE2
    REGIONS = ("low", "moderate", "high", "very high")
    AGE_EDGES = ref.SCORE2_AGE_EDGES
    AGE_RANGE = ref.SCORE2_TABLE_AGE_RANGE
    SBP_EDGES = ref.SCORE2_SBP_EDGES
    SBP_CLOSED = "left"
    CHOL_EDGES = ref.SCORE2_CHOL_EDGES
    NON_HDL = True

    def compute_batch(self, sex, age, totchol, hdl, sbp, smoker, risk: str = "low", mmol: bool = False) -> np.ndarray:
        """Compute the SCORE2 chart risk for multiple patients.

        The chart's cholesterol axis is non-HDL cholesterol, derived here as
        totchol - hdl.

        Args:
            hdl: HDL cholesterol in the same unit as totchol
            risk: "low", "moderate", "high" or "very high"

        Returns:
            Array of 10-year CVD risks (%)
        """
        result, _ = self._evaluate(sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp, smoker=smoker, risk=risk, mmol=mmol)
        return result


class EscScore2OPTable(EscScore2Table):
    """SCORE2-OP chart for people aged 70 and over."""

    name = "esc_score2_op_table"
    description = "ESC SCORE2-OP chart by risk region"
    CHARTS = ref.SCORE2_OP
    AGE_EDGES = ref.SCORE2_OP_AGE_EDGES
    AGE_RANGE = ref.SCORE2_OP_TABLE_AGE_RANGE


# ============================================================================
# SCORE2 risk models
# ============================================================================

class EscScore2Formula(RiskScore):
    """SCORE2 competing-risk adjusted model, recalibrated to the risk region."""

    name = "esc_score2_formula"
    description = "ESC SCORE2 model (age 40-69)"
    REQUIRED = ("sex", "age", "totchol", "hdl", "sbp", "smoker", "diabetic")
    INDICATORS = ("smoker", "diabetic")

    COEFFICIENTS = ref.SCORE2_COEFFICIENTS
    BASELINE_SURVIVAL = ref.SCORE2_BASELINE_SURVIVAL
    MEAN_PREDICTOR = {"male": 0.0, "female": 0.0}
    CALIBRATION = ref.SCORE2_CALIBRATION

    def _check_age(self, age: np.ndarray) -> None:
        low, high = ref.SCORE2_AGE_RANGE
        outside = (age < low) | (age >= high)
        if outside.any():
            raise InvalidStratum("age", np.flatnonzero(outside), f"SCORE2 applies to ages {low} to {high - 1}")

    def _terms(self, age, sbp, tc, hdl, smoker, diabetic) -> Dict[str, np.ndarray]:
        cage = (age - 60) / 5
        csbp = (sbp - 120) / 20
        ctc = tc - 6
        chdl = (hdl - 1.3) / 0.5
        return {
            "cage": cage,
            "smoker": smoker,
            "csbp": csbp,
            "diabetic": diabetic,
            "ctc": ctc,
            "chdl": chdl,
            "smoker_cage": smoker * cage,
            "csbp_cage": csbp * cage,
            "ctc_cage": ctc * cage,
            "chdl_cage": chdl * cage,
            "diabetic_cage": diabetic * cage,
        }

    def _evaluate(self, sex, age, totchol, hdl, sbp, smoker, diabetic, risk="low", mmol=False):
        region = validate_option(risk, tuple(self.CALIBRATION), "risk region", REGION_ALIASES)
        mmol = validate_flag(mmol, "mmol")
        data, guard = self._prepare(
            dict(sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp, smoker=smoker, diabetic=diabetic)
        )
        female = female_mask(data["sex"])
        self._check_age(data["age"])

        tc = to_mmol(positive(data["totchol"], "totchol", guard), mmol)
        hdl_mmol = to_mmol(positive(data["hdl"], "hdl", guard), mmol)
        sbp_values = positive(data["sbp"], "sbp", guard)
        terms = self._terms(data["age"], sbp_values, tc, hdl_mmol, data["smoker"], data["diabetic"])

        result = np.empty(len(female), dtype=float)
        for sex_key, mask in (("male", ~female), ("female", female)):
            if not mask.any():
                continue
            lp = linear_predictor(self.COEFFICIENTS[sex_key], {k: v[mask] for k, v in terms.items()})
            uncalibrated = survival_risk(lp, self.BASELINE_SURVIVAL[sex_key], self.MEAN_PREDICTOR[sex_key])
            scale1, scale2 = self.CALIBRATION[region][sex_key]
            result[mask] = recalibrate(uncalibrated, scale1, scale2)
        return guard.finalize(as_percent(result)), None

    def compute_batch(self, sex, age, totchol, hdl, sbp, smoker, diabetic, risk: str = "low", mmol: bool = False) -> np.ndarray:
        """Compute calibrated SCORE2 risks for multiple patients.

        Args:
            sex: "male" / "female"
            age: Age in years
            totchol: Total cholesterol (mg/dL, or mmol/L with mmol=True)
            hdl: HDL cholesterol, same unit as totchol
            sbp: Systolic blood pressure (mmHg)
            smoker: 0/1
            diabetic: 0/1
            risk: "low", "moderate", "high" or "very high"
            mmol: Whether lipids are given in mmol/L

        Returns:
            Array of 10-year CVD risks (%)

        Raises:
            InvalidStratum: If any age falls outside the model's range
        """
        result, _ = self._evaluate(
            sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
            smoker=smoker, diabetic=diabetic, risk=risk, mmol=mmol,
        )
        return result


class EscScore2OPFormula(EscScore2Formula):
    """SCORE2-OP model for people aged 70 and over."""

    name = "esc_score2_op_formula"
    description = "ESC SCORE2-OP model (age 70+)"

    COEFFICIENTS = ref.SCORE2_OP_COEFFICIENTS
    BASELINE_SURVIVAL = ref.SCORE2_OP_BASELINE_SURVIVAL
    MEAN_PREDICTOR = ref.SCORE2_OP_MEAN_PREDICTOR
    CALIBRATION = ref.SCORE2_OP_CALIBRATION

    def _check_age(self, age: np.ndarray) -> None:
        outside = age < ref.SCORE2_OP_MIN_AGE
        if outside.any():
            raise InvalidStratum("age", np.flatnonzero(outside), f"SCORE2-OP applies from age {ref.SCORE2_OP_MIN_AGE}")

    def _terms(self, age, sbp, tc, hdl, smoker, diabetic) -> Dict[str, np.ndarray]:
        cage = age - 73
        csbp = sbp - 150
        ctc = tc - 6
        chdl = hdl - 1.4
        return {
            "cage": cage,
            "diabetic": diabetic,
            "smoker": smoker,
            "csbp": csbp,
            "ctc": ctc,
            "chdl": chdl,
            "diabetic_cage": diabetic * cage,
            "smoker_cage": smoker * cage,
            "csbp_cage": csbp * cage,
            "ctc_cage": ctc * cage,
            "chdl_cage": chdl * cage,
        }


def esc_score_ger_2016_table(sex, age, totchol, sbp, smoker, mmol: bool = False) -> np.ndarray:
    return EscScoreGer2016Table().compute_batch(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker, mmol=mmol)


def esc_score_2016_table(sex, age, totchol, sbp, smoker, risk: str = "low", mmol: bool = False) -> np.ndarray:
    return EscScore2016Table().compute_batch(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker, risk=risk, mmol=mmol)


def esc_score_op_table(sex, age, totchol, sbp, smoker, risk: str = "low", mmol: bool = False) -> np.ndarray:
    return EscScoreOPTable().compute_batch(sex=sex, age=age, totchol=totchol, sbp=sbp, smoker=smoker, risk=risk, mmol=mmol)


def esc_score2_table(sex, age, totchol, hdl, sbp, smoker, risk: str = "low", mmol: bool = False) -> np.ndarray:
    return EscScore2Table().compute_batch(
        sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp, smoker=smoker, risk=risk, mmol=mmol
    )


def esc_score2_op_table(sex, age, totchol, hdl, sbp, smoker, risk: str = "low", mmol: bool = False) -> np.ndarray:
    return EscScore2OPTable().compute_batch(
        sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp, smoker=smoker, risk=risk, mmol=mmol
    )


def esc_score2_formula(sex, age, totchol, hdl, sbp, smoker, diabetic, risk: str = "low", mmol: bool = False) -> np.ndarray:
    return EscScore2Formula().compute_batch(
        sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
        smoker=smoker, diabetic=diabetic, risk=risk, mmol=mmol,
    )


def esc_score2_op_formula(sex, age, totchol, hdl, sbp, smoker, diabetic, risk: str = "low", mmol: bool = False) -> np.ndarray:
    return EscScore2OPFormula().compute_batch(
        sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
        smoker=smoker, diabetic=diabetic, risk=risk, mmol=mmol,
    )
