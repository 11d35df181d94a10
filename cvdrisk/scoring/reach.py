"""REACH registry scores for patients with established atherothrombosis."""
from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from ..normalize import DomainGuard, band_points, batch_length, broadcast, female_mask, indicator, numeric, require
from ..reference import secondary_prevention as ref
from .base import RiskScore, lookup_points

logger = logging.getLogger(__name__)


class _Reach(RiskScore):
    """Shared point sum for the two REACH endpoints.

    ``vasc`` is the number of symptomatic vascular beds (0-3) and
    ``cv_event`` flags a cardiovascular event in the past year; both can be
    derived from registry fields with :func:`reach_cv_history`.
    """

    ENDPOINT = ""
    REQUIRED = ("sex", "age", "bmi", "smoker", "diabetic", "vasc", "cv_event",
                "chf", "af", "statin", "asa")
    INDICATORS = ("smoker", "diabetic", "cv_event", "chf", "af", "statin", "asa", "region_ee_or_me")
    OPTIONAL = {"region_ee_or_me": 0}

    def _evaluate(self, sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, asa,
                  region_ee_or_me=None):
        data, guard = self._prepare(
            dict(sex=sex, age=age, bmi=bmi, smoker=smoker, diabetic=diabetic, vasc=vasc,
                 cv_event=cv_event, chf=chf, af=af, statin=statin, asa=asa,
                 region_ee_or_me=region_ee_or_me)
        )
        weights = ref.REACH_POINTS[self.ENDPOINT]
        male = ~female_mask(data["sex"])

        beds = data["vasc"]
        guard.check(~np.isin(beds, (0, 1, 2, 3)) & ~np.isnan(beds), "vasc", "must be 0, 1, 2 or 3")
        beds = guard.safe(beds, 0).astype(int)

        points = (
            band_points(data["age"], ref.REACH_AGE_EDGES, ref.REACH_AGE_POINTS)
            + weights["male"] * male
            + weights["low_bmi"] * (data["bmi"] <= ref.REACH_LOW_BMI)
            + np.asarray(weights["vasc"])[beds]
        )
        for name in ("smoker", "diabetic", "cv_event", "chf", "af", "statin", "asa", "region_ee_or_me"):
            points = points + weights[name] * data[name]
        points = points.astype(int)

        first, risks = ref.REACH_RISK_TABLE[self.ENDPOINT]
        risk = lookup_points(points, first, risks).astype(float)
        return guard.finalize(risk), guard.finalize(points)

    def compute_batch(self, sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, asa,
                      region_ee_or_me=None) -> np.ndarray:
        """Compute REACH risks for multiple patients.

        Args:
            sex: "male" / "female"
            age: Age in years
            bmi: Body mass index (kg/m2)
            smoker: Current smoker, 0/1
            diabetic: 0/1
            vasc: Number of symptomatic vascular beds (coronary, cerebral,
                peripheral), 0-3
            cv_event: Cardiovascular event in the past year, 0/1
            chf: Congestive heart failure, 0/1
            af: Atrial fibrillation, 0/1
            statin: Statin therapy, 0/1
            asa: Aspirin therapy, 0/1
            region_ee_or_me: Resident of Eastern Europe or the Middle East,
                0/1 (default 0)

        Returns:
            Array of 20-month risks (%)
        """
        result, _ = self._evaluate(
            sex=sex, age=age, bmi=bmi, smoker=smoker, diabetic=diabetic, vasc=vasc,
            cv_event=cv_event, chf=chf, af=af, statin=statin, asa=asa,
            region_ee_or_me=region_ee_or_me,
        )
        return result


class ReachNextCv(_Reach):
    """REACH risk of a next cardiovascular event (20 months).

    Point totals clamp to the published 0-29 table.
    """

    name = "reach_score_next_cv"
    description = "REACH 20-month risk of a subsequent CV event"
    ENDPOINT = "next_cv"


class ReachCvDeath(_Reach):
    """REACH risk of cardiovascular death (20 months).

    Point totals clamp to the published 8-26 table.
    """

    name = "reach_score_cv_death"
    description = "REACH 20-month risk of CV death"
    ENDPOINT = "cv_death"


def reach_cv_history(khk, mvcad, pad, stroke, mi, date_mi, date_invest) -> pd.DataFrame:
    """Derive REACH ``vasc`` and ``cv_event`` inputs from registry fields.

    Coronary disease is taken from the angiography finding when one is
    recorded (code 2 means no relevant CAD, 3-7 diseased vessels) and from
    the clinical ``khk`` flag otherwise. A cardiovascular event counts when
    a stroke/TIA is recorded or a myocardial infarction happened at most
    365 days before the examination.

    Args:
        khk: Known coronary heart disease, 0/1
        mvcad: Angiography finding code, or NaN when not examined
        pad: Peripheral arterial disease, 0/1
        stroke: Stroke or TIA, 0/1
        mi: Myocardial infarction, 0/1
        date_mi: Date of the myocardial infarction (NaT when none)
        date_invest: Date of the examination

    Returns:
        DataFrame with integer columns 'vasc' and 'cv_event'
    """
    arrays = broadcast(dict(khk=khk, mvcad=mvcad, pad=pad, stroke=stroke, mi=mi,
                            date_mi=date_mi, date_invest=date_invest))
    for name in ("khk", "pad", "stroke", "mi", "date_invest"):
        require(arrays[name], name)
    n = batch_length(arrays)
    guard = DomainGuard(n, "reach_cv_history", policy="raise")

    khk_values = indicator(arrays["khk"], "khk", guard)
    if arrays["mvcad"] is None:
        mvcad_values = np.full(n, np.nan)
    else:
        mvcad_values = numeric(arrays["mvcad"], "mvcad", guard)
    angiography = np.isin(mvcad_values, ref.REACH_MVCAD_CODES)
    cad = np.where(angiography, mvcad_values > ref.REACH_MVCAD_NO_CAD, khk_values == 1)

    pad_values = indicator(arrays["pad"], "pad", guard)
    stroke_values = indicator(arrays["stroke"], "stroke", guard)
    vasc = cad.astype(int) + pad_values + stroke_values

    mi_dates = pd.to_datetime(pd.Series(arrays["date_mi"] if arrays["date_mi"] is not None else [pd.NaT] * n))
    days = (pd.to_datetime(pd.Series(arrays["date_invest"])) - mi_dates).dt.days.to_numpy()
    recent_mi = (indicator(arrays["mi"], "mi", guard) == 1) & (days <= ref.REACH_RECENT_EVENT_DAYS)
    cv_event = (recent_mi | (stroke_values == 1)).astype(int)

    logger.debug(f"reach_cv_history: derived vascular beds for {n} record(s)")
    return pd.DataFrame({"vasc": vasc, "cv_event": cv_event})


def reach_score_next_cv(sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, asa,
                        region_ee_or_me=None) -> np.ndarray:
    return ReachNextCv().compute_batch(
        sex=sex, age=age, bmi=bmi, smoker=smoker, diabetic=diabetic, vasc=vasc,
        cv_event=cv_event, chf=chf, af=af, statin=statin, asa=asa, region_ee_or_me=region_ee_or_me,
    )


def reach_score_cv_death(sex, age, bmi, smoker, diabetic, vasc, cv_event, chf, af, statin, asa,
                         region_ee_or_me=None) -> np.ndarray:
    return ReachCvDeath().compute_batch(
        sex=sex, age=age, bmi=bmi, smoker=smoker, diabetic=diabetic, vasc=vasc,
        cv_event=cv_event, chf=chf, af=af, statin=statin, asa=asa, region_ee_or_me=region_ee_or_me,
    )
