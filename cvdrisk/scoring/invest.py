"""INVEST risk score for hypertensive patients with coronary artery disease."""
from __future__ import annotations

import logging

import numpy as np

from ..normalize import band_points
from ..reference import secondary_prevention as ref
from .base import RiskScore, lookup_points

logger = logging.getLogger(__name__)


ETHNICITY_ALIASES = {
    "white": "white",
    "nw": "nw",
    "nonwhite": "nw",
    "non-white": "nw",
}


class InvestScore(RiskScore):
    """INVEST 24-month risk of death, MI or stroke.

    Point totals above 12 take the 12-point risk.
    """

    name = "invest_score"
    description = "INVEST 24-month risk of death, nonfatal MI or nonfatal stroke"
    REQUIRED = ("age", "ethnicity", "bmi", "hr", "sbp", "mi", "chf", "stroke",
                "smoker", "diabetic", "pad", "ckd")
    INDICATORS = ("mi", "chf", "stroke", "smoker", "diabetic", "pad", "ckd")
    CATEGORICAL = ("ethnicity",)
    ALIASES = {"ethnicity": ETHNICITY_ALIASES}

    def _evaluate(self, age, ethnicity, bmi, hr, sbp, mi, chf, stroke, smoker, diabetic, pad, ckd):
        data, guard = self._prepare(
            dict(age=age, ethnicity=ethnicity, bmi=bmi, hr=hr, sbp=sbp, mi=mi, chf=chf,
                 stroke=stroke, smoker=smoker, diabetic=diabetic, pad=pad, ckd=ckd)
        )
        group = data["ethnicity"]
        ethnicity_points = np.where(
            group == "white", ref.INVEST_ETHNICITY_POINTS["white"], ref.INVEST_ETHNICITY_POINTS["nw"]
        )

        points = (
            band_points(data["age"], ref.INVEST_AGE_EDGES, ref.INVEST_AGE_POINTS)
            + ethnicity_points
            + band_points(data["bmi"], ref.INVEST_BMI_EDGES, ref.INVEST_BMI_POINTS)
            + (data["hr"] >= ref.INVEST_HR_THRESHOLD).astype(int)
            + band_points(data["sbp"], ref.INVEST_SBP_EDGES, ref.INVEST_SBP_POINTS)
        )
        for name, weight in ref.INVEST_POINTS.items():
            points = points + weight * data[name]
        points = points.astype(int)

        capped = int(np.count_nonzero(points >= len(ref.INVEST_RISK)))
        if capped:
            logger.debug(f"{self.name}: {capped} record(s) above {len(ref.INVEST_RISK) - 1} points use the top risk")
        risk = lookup_points(points, 0, ref.INVEST_RISK).astype(float)
        return guard.finalize(risk), guard.finalize(points)

    def compute_batch(self, age, ethnicity, bmi, hr, sbp, mi, chf, stroke, smoker, diabetic, pad, ckd) -> np.ndarray:
        """Compute INVEST risks for multiple patients.

        Args:
            age: Age in years
            ethnicity: "white" (North American residence) or "nw" (nonwhite)
            bmi: Body mass index (kg/m2)
            hr: Heart rate (beats/min)
            sbp: Systolic blood pressure (mmHg)
            mi: Prior myocardial infarction, 0/1
            chf: Congestive heart failure, 0/1
            stroke: Prior stroke or TIA, 0/1
            smoker: 0/1
            diabetic: 0/1
            pad: Peripheral arterial disease, 0/1
            ckd: Chronic kidney disease, 0/1

        Returns:
            Array of 24-month risks (%)
        """
        result, _ = self._evaluate(
            age=age, ethnicity=ethnicity, bmi=bmi, hr=hr, sbp=sbp, mi=mi, chf=chf,
            stroke=stroke, smoker=smoker, diabetic=diabetic, pad=pad, ckd=ckd,
        )
        return result


def invest_score(age, ethnicity, bmi, hr, sbp, mi, chf, stroke, smoker, diabetic, pad, ckd) -> np.ndarray:
    return InvestScore().compute_batch(
        age=age, ethnicity=ethnicity, bmi=bmi, hr=hr, sbp=sbp, mi=mi, chf=chf,
        stroke=stroke, smoker=smoker, diabetic=diabetic, pad=pad, ckd=ckd,
    )
