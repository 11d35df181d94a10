"""ACC/AHA Pooled Cohort Equations (Goff et al., 2014).

Terms are natural logs of age, total and HDL cholesterol (mg/dL) and
systolic blood pressure; the treated / untreated SBP coefficient is
selected by antihypertensive medication status. Coefficients absent from
a group's dictionary are zero.
"""

ASCVD_VALID_AGE = (40, 79)

ASCVD_COEFFICIENTS = {
    ("white", "female"): {
        "ln_age": -29.799,
        "ln_age_sq": 4.884,
        "ln_tc": 13.540,
        "ln_age_x_ln_tc": -3.114,
        "ln_hdl": -13.578,
        "ln_age_x_ln_hdl": 3.149,
        "ln_treated_sbp": 2.019,
        "ln_untreated_sbp": 1.957,
        "smoker": 7.574,
        "ln_age_x_smoker": -1.665,
        "diabetic": 0.661,
    },
    ("aa", "female"): {
        "ln_age": 17.114,
        "ln_tc": 0.940,
        "ln_hdl": -18.920,
        "ln_age_x_ln_hdl": 4.475,
        "ln_treated_sbp": 29.291,
        "ln_age_x_ln_treated_sbp": -6.432,
        "ln_untreated_sbp": 27.820,
        "ln_age_x_ln_untreated_sbp": -6.087,
        "smoker": 0.691,
        "diabetic": 0.874,
    },
    ("white", "male"): {
        "ln_age": 12.344,
        "ln_tc": 11.853,
        "ln_age_x_ln_tc": -2.664,
        "ln_hdl": -7.990,
        "ln_age_x_ln_hdl": 1.769,
        "ln_treated_sbp": 1.797,
        "ln_untreated_sbp": 1.764,
        "smoker": 7.837,
        "ln_age_x_smoker": -1.795,
        "diabetic": 0.658,
    },
    ("aa", "male"): {
        "ln_age": 2.469,
        "ln_tc": 0.302,
        "ln_hdl": -0.307,
        "ln_treated_sbp": 1.916,
        "ln_untreated_sbp": 1.809,
        "smoker": 0.549,
        "diabetic": 0.645,
    },
}

ASCVD_BASELINE_SURVIVAL = {
    ("white", "female"): 0.9665,
    ("aa", "female"): 0.9533,
    ("white", "male"): 0.9144,
    ("aa", "male"): 0.8954,
}

ASCVD_MEAN_PREDICTOR = {
    ("white", "female"): -29.18,
    ("aa", "female"): 86.61,
    ("white", "male"): 61.18,
    ("aa", "male"): 19.54,
}
