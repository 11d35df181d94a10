"""TRA2°P risk score for recurrent atherothrombotic events."""
from __future__ import annotations

import logging

import numpy as np

from ..reference import secondary_prevention as ref
from .base import RiskScore, lookup_points

logger = logging.getLogger(__name__)


class Tra2pScore(RiskScore):
    """TRA2°P 3-year risk of CV death, MI or ischemic stroke.

    One point per risk indicator; seven or more points share the top risk.
    """

    name = "tra2p_score"
    description = "TRA2°P 3-year risk of recurrent atherothrombotic events"
    REQUIRED = ("age", "chf", "ah", "diabetic", "stroke", "bypass_surg", "other_surg", "egfr", "smoker")
    INDICATORS = ("chf", "ah", "diabetic", "stroke", "bypass_surg", "other_surg", "smoker", "pad")
    CATEGORICAL = ()
    OPTIONAL = {"pad": 0}

    def _evaluate(self, age, chf, ah, diabetic, stroke, bypass_surg, other_surg, egfr, smoker, pad=None):
        data, guard = self._prepare(
            dict(age=age, chf=chf, ah=ah, diabetic=diabetic, stroke=stroke, bypass_surg=bypass_surg,
                 other_surg=other_surg, egfr=egfr, smoker=smoker, pad=pad)
        )
        points = (
            (data["age"] >= ref.TRA2P_AGE_THRESHOLD).astype(int)
            + (data["egfr"] < ref.TRA2P_EGFR_THRESHOLD).astype(int)
        )
        for name in ("chf", "ah", "diabetic", "stroke", "bypass_surg", "other_surg", "smoker", "pad"):
            points = points + data[name]

        risk = lookup_points(points, 0, ref.TRA2P_RISK).astype(float)
        return guard.finalize(risk), guard.finalize(points)

    def compute_batch(self, age, chf, ah, diabetic, stroke, bypass_surg, other_surg, egfr, smoker,
                      pad=None) -> np.ndarray:
        """Compute TRA2°P risks for multiple patients.

        Args:
            age: Age in years (75 or older scores a point)
            chf: Congestive heart failure, 0/1
            ah: Arterial hypertension, 0/1
            diabetic: 0/1
            stroke: Prior stroke, 0/1
            bypass_surg: Prior coronary bypass surgery, 0/1
            other_surg: Other prior vascular surgery, 0/1
            egfr: Estimated GFR (mL/min/1.73m2; below 60 scores a point)
            smoker: 0/1
            pad: Peripheral arterial disease, 0/1 (default 0)

        Returns:
            Array of 3-year risks (%)
        """
        result, _ = self._evaluate(
            age=age, chf=chf, ah=ah, diabetic=diabetic, stroke=stroke, bypass_surg=bypass_surg,
            other_surg=other_surg, egfr=egfr, smoker=smoker, pad=pad,
        )
        return result


def tra2p_score(age, chf, ah, diabetic, stroke, bypass_surg, other_surg, egfr, smoker, pad=None) -> np.ndarray:
    return Tra2pScore().compute_batch(
        age=age, chf=chf, ah=ah, diabetic=diabetic, stroke=stroke, bypass_surg=bypass_surg,
        other_surg=other_surg, egfr=egfr, smoker=smoker, pad=pad,
    )
