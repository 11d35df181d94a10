"""PROCAM acute coronary event scores (2002 point table, 2007 risk chart)."""
from __future__ import annotations

import logging

import numpy as np

from ..config import CONFIG
from ..normalize import band_points, clamp_range, female_mask, to_mgdl, validate_flag
from ..reference import procam as ref
from .base import RiskScore, lookup_points

logger = logging.getLogger(__name__)


def _threshold_grid() -> np.ndarray:
    """Category lower bounds as an array indexed [female][age - min_age][category].

    Bounds that are not tabulated for an age are +inf, so that category is
    unreachable there.
    """
    low, high = ref.PROCAM_2007_AGE_RANGE
    width = len(ref.PROCAM_2007_CATEGORIES) - 1
    grid = np.full((2, high - low + 1, width), np.inf)
    for female, sex in enumerate(("male", "female")):
        for age, bounds in ref.PROCAM_2007_THRESHOLDS[sex].items():
            grid[female, age - low, : len(bounds)] = bounds
    return grid


_PROCAM_2007_GRID = _threshold_grid()


class _Procam(RiskScore):

    REQUIRED = ("age", "ldl", "hdl", "triglycerides", "smoker", "diabetic", "famMI", "sbp")
    INDICATORS = ("smoker", "diabetic", "famMI")

    def _lipids(self, data, mmol):
        """Lipids in mg/dL, rounded to whole numbers like the published charts."""
        return (
            np.round(to_mgdl(data["ldl"], mmol)),
            np.round(to_mgdl(data["hdl"], mmol)),
            np.round(to_mgdl(data["triglycerides"], mmol, CONFIG.mgdl_per_mmol_tg)),
        )


class Procam2002(_Procam):
    """PROCAM 2002 score (Assmann et al., 2002).

    Point scheme derived from 10-year follow-up of men aged 35-65; the risk
    table covers 20 to 60 points and totals outside that range take the
    nearest tabulated risk.
    """

    name = "procam_score_2002"
    description = "PROCAM 10-year risk of acute coronary events (2002)"
    CATEGORICAL = ()

    def _evaluate(self, age, ldl, hdl, triglycerides, smoker, diabetic, famMI, sbp, mmol=False):
        mmol = validate_flag(mmol, "mmol")
        data, guard = self._prepare(
            dict(age=age, ldl=ldl, hdl=hdl, triglycerides=triglycerides,
                 smoker=smoker, diabetic=diabetic, famMI=famMI, sbp=sbp)
        )
        ldl_mgdl, hdl_mgdl, tg_mgdl = self._lipids(data, mmol)
        age_years = clamp_range(np.round(data["age"]), *ref.PROCAM_2002_AGE_RANGE, "age", self.name)

        points = (
            band_points(age_years, ref.PROCAM_2002_AGE_EDGES, ref.PROCAM_2002_AGE_POINTS)
            + band_points(ldl_mgdl, ref.PROCAM_2002_LDL_EDGES, ref.PROCAM_2002_LDL_POINTS)
            + band_points(hdl_mgdl, ref.PROCAM_2002_HDL_EDGES, ref.PROCAM_2002_HDL_POINTS)
            + band_points(tg_mgdl, ref.PROCAM_TG_EDGES, ref.PROCAM_TG_POINTS)
            + band_points(np.round(data["sbp"]), ref.PROCAM_2002_SBP_EDGES, ref.PROCAM_2002_SBP_POINTS)
            + ref.PROCAM_2002_SMOKER_POINTS * data["smoker"]
            + ref.PROCAM_2002_DIABETES_POINTS * data["diabetic"]
            + ref.PROCAM_FAMILY_HISTORY_POINTS * data["famMI"]
        ).astype(int)

        first, last = ref.PROCAM_2002_POINT_RANGE
        clamped = int(np.count_nonzero((points < first) | (points > last)))
        if clamped:
            logger.info(f"{self.name}: {clamped} point total(s) outside {first}-{last} take the nearest tabulated risk")
        risk = lookup_points(points, first, ref.PROCAM_2002_RISK).astype(float)
        return guard.finalize(risk), guard.finalize(points)

    def compute_batch(self, age, ldl, hdl, triglycerides, smoker, diabetic, famMI, sbp, mmol: bool = False) -> np.ndarray:
        """Compute PROCAM 2002 risks for multiple patients.

        Args:
            age: Age in years
            ldl: LDL cholesterol (mg/dL, or mmol/L with mmol=True)
            hdl: HDL cholesterol, same unit as ldl
            triglycerides: Triglycerides (mg/dL, or mmol/L with mmol=True)
            smoker: 0/1
            diabetic: 0/1
            famMI: Family history of premature myocardial infarction, 0/1
            sbp: Systolic blood pressure (mmHg)

        Returns:
            Array of 10-year risks of an acute coronary event (%)
        """
        result, _ = self._evaluate(
            age=age, ldl=ldl, hdl=hdl, triglycerides=triglycerides,
            smoker=smoker, diabetic=diabetic, famMI=famMI, sbp=sbp, mmol=mmol,
        )
        return result


class Procam2007(_Procam):
    """PROCAM 2007 risk chart.

    The point sum is read against the row for the patient's exact age (in
    years, clamped to 20-75) and reported as a risk category label.
    """

    name = "procam_score_2007"
    description = "PROCAM 10-year risk category of acute coronary events (2007)"
    REQUIRED = ("sex",) + _Procam.REQUIRED

    def _evaluate(self, sex, age, ldl, hdl, triglycerides, smoker, diabetic, famMI, sbp, mmol=False):
        mmol = validate_flag(mmol, "mmol")
        data, guard = self._prepare(
            dict(sex=sex, age=age, ldl=ldl, hdl=hdl, triglycerides=triglycerides,
                 smoker=smoker, diabetic=diabetic, famMI=famMI, sbp=sbp)
        )
        female = female_mask(data["sex"])
        ldl_mgdl, hdl_mgdl, tg_mgdl = self._lipids(data, mmol)

        ldl_points = np.clip(
            np.ceil((ldl_mgdl - ref.PROCAM_2007_LDL_FLOOR) / ref.PROCAM_2007_LDL_STEP),
            0, ref.PROCAM_2007_LDL_MAX_POINTS,
        )
        hdl_points = np.clip(
            ref.PROCAM_2007_HDL_MAX_POINTS - np.ceil((hdl_mgdl - ref.PROCAM_2007_HDL_FLOOR) / ref.PROCAM_2007_HDL_STEP),
            0, ref.PROCAM_2007_HDL_MAX_POINTS,
        )
        diabetes_points = np.where(
            female, ref.PROCAM_2007_DIABETES_POINTS["female"], ref.PROCAM_2007_DIABETES_POINTS["male"]
        )
        points = (
            ldl_points
            + hdl_points
            + band_points(tg_mgdl, ref.PROCAM_TG_EDGES, ref.PROCAM_TG_POINTS)
            + band_points(np.round(data["sbp"]), ref.PROCAM_2007_SBP_EDGES, ref.PROCAM_2007_SBP_POINTS)
            + ref.PROCAM_2007_SMOKER_POINTS * data["smoker"]
            + diabetes_points * data["diabetic"]
            + ref.PROCAM_FAMILY_HISTORY_POINTS * data["famMI"]
        ).astype(int)

        low, _ = ref.PROCAM_2007_AGE_RANGE
        age_years = guard.safe(clamp_range(np.round(data["age"]), *ref.PROCAM_2007_AGE_RANGE, "age", self.name), low)
        bounds = _PROCAM_2007_GRID[female.astype(int), age_years.astype(int) - low]
        category = np.sum(points[:, None] >= bounds, axis=1)
        labels = np.asarray(ref.PROCAM_2007_CATEGORIES, dtype=object)[category]
        return guard.finalize(labels), guard.finalize(points)

    def compute_batch(self, sex, age, ldl, hdl, triglycerides, smoker, diabetic, famMI, sbp, mmol: bool = False) -> np.ndarray:
        """Compute PROCAM 2007 risk categories for multiple patients.

        Returns:
            Object array of category labels ("0-4%", "5-9%", "10-19%",
            "20-29%", "=30%")
        """
        result, _ = self._evaluate(
            sex=sex, age=age, ldl=ldl, hdl=hdl, triglycerides=triglycerides,
            smoker=smoker, diabetic=diabetic, famMI=famMI, sbp=sbp, mmol=mmol,
        )
        return result


def procam_score_2002(age, ldl, hdl, triglycerides, smoker, diabetic, famMI, sbp, mmol: bool = False) -> np.ndarray:
    return Procam2002().compute_batch(
        age=age, ldl=ldl, hdl=hdl, triglycerides=triglycerides,
        smoker=smoker, diabetic=diabetic, famMI=famMI, sbp=sbp, mmol=mmol,
    )


def procam_score_2007(sex, age, ldl, hdl, triglycerides, smoker, diabetic, famMI, sbp, mmol: bool = False) -> np.ndarray:
    return Procam2007().compute_batch(
        sex=sex, age=age, ldl=ldl, hdl=hdl, triglycerides=triglycerides,
        smoker=smoker, diabetic=diabetic, famMI=famMI, sbp=sbp, mmol=mmol,
    )
