"""Framingham general CVD (2008) and CHD (1998) risk scores."""
from __future__ import annotations

import logging
from typing import Callable, Tuple

import numpy as np
import pandas as pd

from ..normalize import (
    band_index,
    band_points,
    broadcast,
    clamp_range,
    female_mask,
    positive,
    require,
    to_mgdl,
    validate_flag,
    validate_option,
)
from ..reference import framingham as ref
from .base import RiskScore, as_percent, linear_predictor, lookup_points, survival_risk

logger = logging.getLogger(__name__)


CHOLESTEROL_MODELS = ("tc", "ldl")


def _by_sex(female: np.ndarray, values_for: Callable[[str], np.ndarray]) -> np.ndarray:
    """Evaluate a sex-specific rule for both sexes and pick per record."""
    return np.where(female, values_for("female"), values_for("male"))


# ============================================================================
# General CVD
# ============================================================================

class FraminghamCvdTable(RiskScore):
    """Framingham general CVD points chart (D'Agostino 2008).

    Optionally reports the heart (vascular) age matching the point total.
    """

    name = "ascvd_frs_cvd_table"
    description = "Framingham 10-year general CVD risk, points chart"
    REQUIRED = ("sex", "age", "totchol", "hdl", "sbp", "bp_med", "smoker", "diabetic")
    INDICATORS = ("bp_med", "smoker", "diabetic")

    def _points(self, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol=False):
        mmol = validate_flag(mmol, "mmol")
        data, guard = self._prepare(
            dict(sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
                 bp_med=bp_med, smoker=smoker, diabetic=diabetic)
        )
        female = female_mask(data["sex"])
        tc = to_mgdl(positive(data["totchol"], "totchol", guard), mmol)
        hdl_mgdl = to_mgdl(positive(data["hdl"], "hdl", guard), mmol)
        age_values = data["age"]
        low, high = ref.FRS_CVD_VALID_AGE
        outside = int(np.count_nonzero((age_values < low) | (age_values > high)))
        if outside:
            logger.info(f"{self.name}: {outside} record(s) outside the validated age range {low}-{high}")
        treated = data["bp_med"].astype(bool)

        def sbp_points(sex_key: str) -> np.ndarray:
            edges = ref.FRS_CVD_SBP_EDGES[sex_key]
            untreated = band_points(data["sbp"], edges, ref.FRS_CVD_SBP_POINTS[(sex_key, "untreated")])
            on_treatment = band_points(data["sbp"], edges, ref.FRS_CVD_SBP_POINTS[(sex_key, "treated")])
            return np.where(treated, on_treatment, untreated)

        points = (
            _by_sex(female, lambda s: band_points(age_values, ref.FRS_CVD_AGE_EDGES, ref.FRS_CVD_AGE_POINTS[s]))
            + _by_sex(female, lambda s: band_points(hdl_mgdl, ref.FRS_CVD_HDL_EDGES, ref.FRS_CVD_HDL_POINTS[s]))
            + _by_sex(female, lambda s: band_points(tc, ref.FRS_CVD_TC_EDGES, ref.FRS_CVD_TC_POINTS[s]))
            + _by_sex(female, sbp_points)
            + data["smoker"] * _by_sex(female, lambda s: ref.FRS_CVD_SMOKER_POINTS[s])
            + data["diabetic"] * _by_sex(female, lambda s: ref.FRS_CVD_DIABETES_POINTS[s])
        )
        return points.astype(int), female, guard

    def _results(self, **inputs) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Risk, points and heart age, masked together by one guard."""
        points, female, guard = self._points(**inputs)
        risk = _by_sex(female, lambda s: lookup_points(points, *ref.FRS_CVD_RISK_TABLE[s])).astype(float)
        years = self.heart_age(points, female)
        return guard.finalize(risk), guard.finalize(points), guard.finalize(years)

    def _evaluate(self, **inputs):
        risk, points, _ = self._results(**inputs)
        return risk, points

    def compute(self, heart_age: bool = False, **record):
        """Score a single record, adding 'heart_age' when requested."""
        heart_age = validate_flag(heart_age, "heart_age")
        risk, points, years = self._results(**record)
        result = self._single(risk, points)
        if heart_age:
            result["heart_age"] = None if np.isnan(years[0]) else float(years[0])
        return result

    def heart_age(self, points: np.ndarray, female: np.ndarray) -> np.ndarray:
        """Heart age (years) for point totals, clamped to the chart."""
        return _by_sex(female, lambda s: lookup_points(points, *ref.FRS_CVD_HEART_AGE_TABLE[s])).astype(float)

    def compute_batch(self, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic,
                      heart_age: bool = False, mmol: bool = False):
        """Compute Framingham CVD chart risks for multiple patients.

        Args:
            sex: "male" / "female"
            age: Age in years
            totchol: Total cholesterol (mg/dL, or mmol/L with mmol=True)
            hdl: HDL cholesterol, same unit as totchol
            sbp: Systolic blood pressure (mmHg)
            bp_med: Antihypertensive treatment, 0/1
            smoker: 0/1
            diabetic: 0/1
            heart_age: Also return the heart age

        Returns:
            Array of 10-year CVD risks (%), or a DataFrame with columns
            'risk' and 'heart_age' when heart_age is True
        """
        heart_age = validate_flag(heart_age, "heart_age")
        risk, _, years = self._results(
            sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
            bp_med=bp_med, smoker=smoker, diabetic=diabetic, mmol=mmol,
        )
        if not heart_age:
            return risk
        return pd.DataFrame({"risk": risk, "heart_age": years})


class FraminghamCvdFormula(RiskScore):
    """Framingham general CVD Cox model (D'Agostino 2008)."""

    name = "ascvd_frs_cvd_formula"
    description = "Framingham 10-year general CVD risk, Cox model"
    REQUIRED = FraminghamCvdTable.REQUIRED
    INDICATORS = FraminghamCvdTable.INDICATORS

    def _evaluate(self, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol=False):
        mmol = validate_flag(mmol, "mmol")
        data, guard = self._prepare(
            dict(sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
                 bp_med=bp_med, smoker=smoker, diabetic=diabetic)
        )
        female = female_mask(data["sex"])
        reason = "must be positive for the log transform"
        ln_sbp = np.log(positive(data["sbp"], "sbp", guard, reason))
        terms = {
            "ln_age": np.log(positive(data["age"], "age", guard, reason)),
            "ln_tc": np.log(to_mgdl(positive(data["totchol"], "totchol", guard, reason), mmol)),
            "ln_hdl": np.log(to_mgdl(positive(data["hdl"], "hdl", guard, reason), mmol)),
            "ln_untreated_sbp": ln_sbp * (1 - data["bp_med"]),
            "ln_treated_sbp": ln_sbp * data["bp_med"],
            "smoker": data["smoker"],
            "diabetic": data["diabetic"],
        }

        def risk_for(sex_key: str) -> np.ndarray:
            lp = linear_predictor(ref.FRS_CVD_COEFFICIENTS[sex_key], terms)
            return survival_risk(lp, ref.FRS_CVD_BASELINE_SURVIVAL[sex_key], ref.FRS_CVD_MEAN_PREDICTOR[sex_key])

        return guard.finalize(as_percent(_by_sex(female, risk_for))), None

    def compute_batch(self, sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol: bool = False) -> np.ndarray:
        result, _ = self._evaluate(
            sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
            bp_med=bp_med, smoker=smoker, diabetic=diabetic, mmol=mmol,
        )
        return result


# ============================================================================
# Coronary heart disease
# ============================================================================

class _FraminghamChd(RiskScore):
    """Shared input handling for the CHD chart and model."""

    REQUIRED = ("sex", "age", "hdl", "sbp", "dbp", "smoker", "diabetic")
    INDICATORS = ("smoker", "diabetic")

    def _categories(self, sex, age, hdl, sbp, dbp, smoker, diabetic, totchol=None, ldl=None,
                    chol_cat="tc", mmol=False):
        chol_cat = validate_option(chol_cat, CHOLESTEROL_MODELS, "chol_cat")
        mmol = validate_flag(mmol, "mmol")
        chol_name = "totchol" if chol_cat == "tc" else "ldl"
        data, guard = self._prepare(
            dict(sex=sex, age=age, totchol=totchol, ldl=ldl, hdl=hdl, sbp=sbp,
                 dbp=dbp, smoker=smoker, diabetic=diabetic),
            required=self.REQUIRED + (chol_name,),
        )
        female = female_mask(data["sex"])
        chol = to_mgdl(positive(data[chol_name], chol_name, guard), mmol)
        hdl_mgdl = to_mgdl(positive(data["hdl"], "hdl", guard), mmol)
        chol_edges = ref.FRS_CHD_TC_EDGES if chol_cat == "tc" else ref.FRS_CHD_LDL_EDGES
        categories = {
            "age": band_index(clamp_range(data["age"], *ref.FRS_CHD_VALID_AGE, "age", self.name), ref.FRS_CHD_AGE_EDGES),
            "chol": band_index(chol, chol_edges),
            "hdl": band_index(hdl_mgdl, ref.FRS_CHD_HDL_EDGES),
            "bp": np.maximum(
                band_index(data["sbp"], ref.FRS_CHD_SBP_EDGES),
                band_index(data["dbp"], ref.FRS_CHD_DBP_EDGES),
            ),
        }
        return data, categories, female, chol_cat, guard

    def compute_batch(self, sex, age, hdl, sbp, dbp, smoker, diabetic, totchol=None, ldl=None,
                      chol_cat: str = "tc", mmol: bool = False) -> np.ndarray:
        """Compute 10-year CHD risks for multiple patients.

        Args:
            sex: "male" / "female"
            age: Age in years
            hdl: HDL cholesterol (mg/dL, or mmol/L with mmol=True)
            sbp: Systolic blood pressure (mmHg)
            dbp: Diastolic blood pressure (mmHg)
            smoker: 0/1
            diabetic: 0/1
            totchol: Total cholesterol, required when chol_cat="tc"
            ldl: LDL cholesterol, required when chol_cat="ldl"
            chol_cat: Cholesterol model, "tc" or "ldl"

        Returns:
            Array of 10-year CHD risks (%)
        """
        result, _ = self._evaluate(
            sex=sex, age=age, hdl=hdl, sbp=sbp, dbp=dbp, smoker=smoker, diabetic=diabetic,
            totchol=totchol, ldl=ldl, chol_cat=chol_cat, mmol=mmol,
        )
        return result


class FraminghamChdTable(_FraminghamChd):
    """Framingham CHD points chart (Wilson 1998)."""

    name = "ascvd_frs_chd_table"
    description = "Framingham 10-year CHD risk, points chart"

    def _evaluate(self, **inputs) -> Tuple[np.ndarray, np.ndarray]:
        data, cat, female, chol_cat, guard = self._categories(**inputs)

        def points_for(sex_key: str) -> np.ndarray:
            table = ref.FRS_CHD_POINTS[sex_key]
            return (
                np.asarray(table["age"])[cat["age"]]
                + np.asarray(table[chol_cat])[cat["chol"]]
                + np.asarray(table[f"hdl_{chol_cat}"])[cat["hdl"]]
                + np.asarray(table["bp"])[cat["bp"]]
                + data["diabetic"] * table["diabetic"]
                + data["smoker"] * table["smoker"]
            )

        points = _by_sex(female, points_for).astype(int)
        risk = _by_sex(female, lambda s: lookup_points(points, *ref.FRS_CHD_RISK_TABLE[(s, chol_cat)]))
        return guard.finalize(risk.astype(float)), guard.finalize(points)


class FraminghamChdFormula(_FraminghamChd):
    """Framingham CHD categorical Cox model (Wilson 1998)."""

    name = "ascvd_frs_chd_formula"
    description = "Framingham 10-year CHD risk, Cox model"

    def _evaluate(self, **inputs) -> Tuple[np.ndarray, None]:
        data, cat, female, chol_cat, guard = self._categories(**inputs)
        age = data["age"]

        def risk_for(sex_key: str) -> np.ndarray:
            key = (sex_key, chol_cat)
            beta = ref.FRS_CHD_COEFFICIENTS[key]
            lp = (
                beta["age"] * age
                + beta["age_sq"] * age ** 2
                + np.asarray(beta["chol"])[cat["chol"]]
                + np.asarray(beta["hdl"])[cat["hdl"]]
                + np.asarray(beta["bp"])[cat["bp"]]
                + beta["diabetic"] * data["diabetic"]
                + beta["smoker"] * data["smoker"]
            )
            return survival_risk(lp, ref.FRS_CHD_BASELINE_SURVIVAL[key], ref.FRS_CHD_MEAN_PREDICTOR[key])

        return guard.finalize(as_percent(_by_sex(female, risk_for))), None


def frs_chd_average_risk(sex, age, kind: str = "average") -> np.ndarray:
    """Comparative 10-year CHD risk for a person's age and sex.

    Args:
        sex: "male" / "female"
        age: Age in years (ages outside 30-74 use the nearest class)
        kind: "average", "average_hard" (hard CHD events) or "low"
            (optimal risk factor profile)

    Returns:
        Array of comparative risks (%)
    """
    kind = validate_option(kind, ("average", "average_hard", "low"), "kind")
    arrays = broadcast(dict(sex=sex, age=age))
    for name in ("sex", "age"):
        require(arrays[name], name)
    female = female_mask(arrays["sex"])
    age_class = band_index(arrays["age"].astype(float), ref.FRS_CHD_AGE_EDGES)
    return _by_sex(female, lambda s: np.asarray(ref.FRS_CHD_AVERAGE_RISK[s][kind], dtype=float)[age_class])


def ascvd_frs_cvd_table(sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic,
                        heart_age: bool = False, mmol: bool = False):
    return FraminghamCvdTable().compute_batch(
        sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp, bp_med=bp_med,
        smoker=smoker, diabetic=diabetic, heart_age=heart_age, mmol=mmol,
    )


def ascvd_frs_cvd_formula(sex, age, totchol, hdl, sbp, bp_med, smoker, diabetic, mmol: bool = False) -> np.ndarray:
    return FraminghamCvdFormula().compute_batch(
        sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp, bp_med=bp_med,
        smoker=smoker, diabetic=diabetic, mmol=mmol,
    )


def ascvd_frs_chd_table(sex, age, hdl, sbp, dbp, smoker, diabetic, totchol=None, ldl=None,
                        chol_cat: str = "tc", mmol: bool = False) -> np.ndarray:
    return FraminghamChdTable().compute_batch(
        sex=sex, age=age, hdl=hdl, sbp=sbp, dbp=dbp, smoker=smoker, diabetic=diabetic,
        totchol=totchol, ldl=ldl, chol_cat=chol_cat, mmol=mmol,
    )


def ascvd_frs_chd_formula(sex, age, hdl, sbp, dbp, smoker, diabetic, totchol=None, ldl=None,
                          chol_cat: str = "tc", mmol: bool = False) -> np.ndarray:
    return FraminghamChdFormula().compute_batch(
        sex=sex, age=age, hdl=hdl, sbp=sbp, dbp=dbp, smoker=smoker, diabetic=diabetic,
        totchol=totchol, ldl=ldl, chol_cat=chol_cat, mmol=mmol,
    )
