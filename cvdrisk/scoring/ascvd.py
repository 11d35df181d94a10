"""ACC/AHA ASCVD risk (Pooled Cohort Equations)."""
from __future__ import annotations

import logging

import numpy as np

from ..normalize import SEX_ALIASES, female_mask, positive, to_mgdl, validate_flag
from ..reference import ascvd as ref
from .base import RiskScore, as_percent, linear_predictor, survival_risk

logger = logging.getLogger(__name__)


ETHNICITY_ALIASES = {
    "white": "white",
    "aa": "aa",
    "african american": "aa",
}


class AscvdAccAha(RiskScore):
    """ACC/AHA 10-year risk of a first hard ASCVD event.

    Predicts nonfatal MI, CHD death and fatal or nonfatal stroke for
    adults 40-79 without established ASCVD.
    """

    name = "ascvd_acc_aha"
    description = "ACC/AHA Pooled Cohort Equations"
    REQUIRED = ("ethnicity", "sex", "age", "totchol", "hdl", "sbp", "smoker", "diabetic", "bp_med")
    INDICATORS = ("smoker", "diabetic", "bp_med")
    CATEGORICAL = ("sex", "ethnicity")
    ALIASES = {"sex": SEX_ALIASES, "ethnicity": ETHNICITY_ALIASES}

    def _evaluate(self, ethnicity, sex, age, totchol, hdl, sbp, smoker, diabetic, bp_med, mmol=False):
        mmol = validate_flag(mmol, "mmol")
        data, guard = self._prepare(
            dict(ethnicity=ethnicity, sex=sex, age=age, totchol=totchol, hdl=hdl,
                 sbp=sbp, smoker=smoker, diabetic=diabetic, bp_med=bp_med)
        )
        female = female_mask(data["sex"])
        group = data["ethnicity"]

        reason = "must be positive for the log transform"
        ln_age = np.log(positive(data["age"], "age", guard, reason))
        ln_tc = np.log(to_mgdl(positive(data["totchol"], "totchol", guard, reason), mmol))
        ln_hdl = np.log(to_mgdl(positive(data["hdl"], "hdl", guard, reason), mmol))
        ln_sbp = np.log(positive(data["sbp"], "sbp", guard, reason))

        low, high = ref.ASCVD_VALID_AGE
        outside = int(np.count_nonzero((data["age"] < low) | (data["age"] > high)))
        if outside:
            logger.info(f"{self.name}: {outside} record(s) outside the validated age range {low}-{high}")

        treated = data["bp_med"]
        smoker = data["smoker"]
        terms = {
            "ln_age": ln_age,
            "ln_age_sq": ln_age ** 2,
            "ln_tc": ln_tc,
            "ln_age_x_ln_tc": ln_age * ln_tc,
            "ln_hdl": ln_hdl,
            "ln_age_x_ln_hdl": ln_age * ln_hdl,
            "ln_treated_sbp": ln_sbp * treated,
            "ln_age_x_ln_treated_sbp": ln_age * ln_sbp * treated,
            "ln_untreated_sbp": ln_sbp * (1 - treated),
            "ln_age_x_ln_untreated_sbp": ln_age * ln_sbp * (1 - treated),
            "smoker": smoker,
            "ln_age_x_smoker": ln_age * smoker,
            "diabetic": data["diabetic"],
        }

        result = np.empty(len(female), dtype=float)
        for key in ref.ASCVD_COEFFICIENTS:
            mask = (group == key[0]) & (female == (key[1] == "female"))
            if not mask.any():
                continue
            lp = linear_predictor(ref.ASCVD_COEFFICIENTS[key], {k: v[mask] for k, v in terms.items()})
            result[mask] = survival_risk(lp, ref.ASCVD_BASELINE_SURVIVAL[key], ref.ASCVD_MEAN_PREDICTOR[key])
        return guard.finalize(as_percent(result)), None

    def compute_batch(self, ethnicity, sex, age, totchol, hdl, sbp, smoker, diabetic, bp_med, mmol: bool = False) -> np.ndarray:
        """Compute 10-year ASCVD risks for multiple patients.

        Args:
            ethnicity: "white" or "aa" (African American)
            sex: "male" / "female"
            age: Age in years
            totchol: Total cholesterol (mg/dL, or mmol/L with mmol=True)
            hdl: HDL cholesterol, same unit as totchol
            sbp: Systolic blood pressure (mmHg)
            smoker: 0/1
            diabetic: 0/1
            bp_med: Antihypertensive treatment, 0/1

        Returns:
            Array of 10-year ASCVD risks (%)
        """
        result, _ = self._evaluate(
            ethnicity=ethnicity, sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
            smoker=smoker, diabetic=diabetic, bp_med=bp_med, mmol=mmol,
        )
        return result


def ascvd_acc_aha(ethnicity, sex, age, totchol, hdl, sbp, smoker, diabetic, bp_med, mmol: bool = False) -> np.ndarray:
    return AscvdAccAha().compute_batch(
        ethnicity=ethnicity, sex=sex, age=age, totchol=totchol, hdl=hdl, sbp=sbp,
        smoker=smoker, diabetic=diabetic, bp_med=bp_med, mmol=mmol,
    )
