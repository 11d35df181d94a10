"""Framingham reference data.

General CVD: D'Agostino et al., 2008 (points chart, heart age and Cox model).
CHD: Wilson et al., 1998 (points charts and categorical Cox models for the
total-cholesterol and LDL-cholesterol variants).

All lipid boundaries are in mg/dL. Band edges are interior lower bounds,
bands are half-open [lo, hi) unless stated otherwise, and every points
tuple lists the bands in ascending order.
"""

# ============================================================================
# General CVD (2008): points chart
# ============================================================================

# 30-34, 35-39, ..., 70-74, >=75
FRS_CVD_AGE_EDGES = (35, 40, 45, 50, 55, 60, 65, 70, 75)
FRS_CVD_AGE_POINTS = {
    "female": (0, 2, 4, 5, 7, 8, 9, 10, 11, 12),
    "male": (0, 2, 5, 6, 8, 10, 11, 12, 14, 15),
}
FRS_CVD_VALID_AGE = (30, 74)

# <35, 35-44, 45-49, 50-59, >=60
FRS_CVD_HDL_EDGES = (35, 45, 50, 60)
FRS_CVD_HDL_POINTS = {
    "female": (2, 1, 0, -1, -2),
    "male": (2, 1, 0, -1, -2),
}

# <160, 160-199, 200-239, 240-279, >=280
FRS_CVD_TC_EDGES = (160, 200, 240, 280)
FRS_CVD_TC_POINTS = {
    "female": (0, 1, 3, 4, 5),
    "male": (0, 1, 2, 3, 4),
}

FRS_CVD_SBP_EDGES = {
    "female": (120, 130, 140, 150, 160),
    "male": (120, 130, 140, 160),
}
FRS_CVD_SBP_POINTS = {
    ("female", "untreated"): (-3, 0, 1, 2, 4, 5),
    ("female", "treated"): (-1, 2, 3, 5, 6, 7),
    ("male", "untreated"): (-2, 0, 1, 2, 3),
    ("male", "treated"): (0, 2, 3, 4, 5),
}

FRS_CVD_SMOKER_POINTS = {"female": 3, "male": 4}
FRS_CVD_DIABETES_POINTS = {"female": 4, "male": 3}

# Risk (%) for point totals starting at the given first point
FRS_CVD_RISK_TABLE = {
    "female": (-2, (0, 1, 1.2, 1.5, 1.7, 2.0, 2.4, 2.8, 3.3, 3.9, 4.5, 5.3, 6.3, 7.3,
                    8.6, 10.0, 11.7, 13.7, 15.9, 18.5, 21.5, 24.8, 28.5, 30)),
    "male": (-3, (0, 1.1, 1.4, 1.6, 1.9, 2.3, 2.8, 3.3, 3.9, 4.7, 5.6, 6.7, 7.9, 9.4,
                  11.2, 13.2, 15.6, 18.4, 21.6, 25.3, 29.4, 30)),
}

# Heart (vascular) age in years for point totals
FRS_CVD_HEART_AGE_TABLE = {
    "female": (0, (30, 31, 34, 36, 39, 42, 45, 48, 51, 55, 59, 64, 68, 73, 79, 80)),
    "male": (-1, (29, 30, 32, 34, 36, 38, 40, 42, 45, 48, 51, 54, 57, 60, 64, 68, 72, 76, 80)),
}

# ============================================================================
# General CVD (2008): Cox model
# ============================================================================

FRS_CVD_COEFFICIENTS = {
    "female": {
        "ln_age": 2.32888,
        "ln_tc": 1.20904,
        "ln_hdl": -0.70833,
        "ln_untreated_sbp": 2.76157,
        "ln_treated_sbp": 2.82263,
        "smoker": 0.52873,
        "diabetic": 0.69154,
    },
    "male": {
        "ln_age": 3.06117,
        "ln_tc": 1.12370,
        "ln_hdl": -0.93263,
        "ln_untreated_sbp": 1.93303,
        "ln_treated_sbp": 1.99881,
        "smoker": 0.65451,
        "diabetic": 0.57367,
    },
}
FRS_CVD_BASELINE_SURVIVAL = {"female": 0.95012, "male": 0.88936}
FRS_CVD_MEAN_PREDICTOR = {"female": 26.1931, "male": 23.9802}

# ============================================================================
# CHD (1998): categories shared by points charts and Cox models
# ============================================================================

# 30-34, 35-39, ..., 70-74
FRS_CHD_AGE_EDGES = (35, 40, 45, 50, 55, 60, 65, 70)
FRS_CHD_VALID_AGE = (30, 74)

FRS_CHD_TC_EDGES = (160, 200, 240, 280)
FRS_CHD_LDL_EDGES = (100, 130, 160, 190)
FRS_CHD_HDL_EDGES = (35, 45, 50, 60)

# Blood pressure category: optimal, normal, high normal, stage I, stage II.
# The higher of the systolic and diastolic categories applies.
FRS_CHD_SBP_EDGES = (120, 130, 140, 160)
FRS_CHD_DBP_EDGES = (80, 85, 90, 100)

FRS_CHD_POINTS = {
    "female": {
        "age": (-9, -4, 0, 3, 6, 7, 8, 8, 8),
        "tc": (-2, 0, 1, 1, 3),
        "ldl": (-2, 0, 0, 2, 2),
        "hdl_tc": (5, 2, 1, 0, -3),
        "hdl_ldl": (5, 2, 1, 0, -2),
        "bp": (-3, 0, 0, 2, 3),
        "diabetic": 4,
        "smoker": 2,
    },
    "male": {
        "age": (-1, 0, 1, 2, 3, 4, 5, 6, 7),
        "tc": (-3, 0, 1, 2, 3),
        "ldl": (-3, 0, 0, 1, 2),
        "hdl_tc": (2, 1, 0, 0, -2),
        "hdl_ldl": (2, 1, 0, 0, -1),
        "bp": (0, 0, 1, 2, 3),
        "diabetic": 2,
        "smoker": 2,
    },
}

FRS_CHD_RISK_TABLE = {
    ("female", "tc"): (-2, (1, 2, 2, 2, 3, 3, 4, 4, 5, 6, 7, 8, 10, 11, 13, 15, 18, 20, 24, 27)),
    ("female", "ldl"): (-2, (1, 2, 2, 2, 3, 3, 4, 5, 6, 7, 8, 9, 11, 13, 15, 17, 20, 24, 27, 32)),
    ("male", "tc"): (-1, (2, 3, 3, 4, 5, 7, 8, 10, 13, 16, 20, 25, 31, 37, 45, 53)),
    ("male", "ldl"): (-3, (1, 2, 2, 3, 4, 4, 6, 7, 9, 11, 14, 18, 22, 27, 33, 40, 47, 56)),
}

# Comparative 10-year risk (%) by age class 30-34 ... 70-74
FRS_CHD_AVERAGE_RISK = {
    "female": {
        "average": (1, 1, 2, 5, 8, 12, 12, 13, 14),
        "average_hard": (0, 0, 1, 2, 3, 7, 8, 8, 11),
        "low": (0, 1, 2, 3, 5, 7, 8, 8, 8),
    },
    "male": {
        "average": (3, 5, 7, 11, 14, 16, 21, 25, 30),
        "average_hard": (1, 4, 4, 8, 10, 13, 20, 22, 25),
        "low": (2, 3, 4, 4, 6, 7, 9, 11, 14),
    },
}

# ============================================================================
# CHD (1998): Cox models
# ============================================================================

# Category coefficients follow the band order above; age is linear, and the
# female models add age squared.
FRS_CHD_COEFFICIENTS = {
    ("male", "tc"): {
        "age": 0.04826,
        "age_sq": 0.0,
        "chol": (-0.65945, 0.0, 0.17692, 0.50539, 0.65713),
        "hdl": (0.49744, 0.24310, 0.0, -0.05107, -0.48660),
        "bp": (-0.00226, 0.0, 0.28320, 0.52168, 0.61859),
        "diabetic": 0.42839,
        "smoker": 0.52337,
    },
    ("female", "tc"): {
        "age": 0.33766,
        "age_sq": -0.00268,
        "chol": (-0.26138, 0.0, 0.20771, 0.24385, 0.53513),
        "hdl": (0.84312, 0.37796, 0.19785, 0.0, -0.42951),
        "bp": (-0.53363, -0.06773, 0.0, 0.26288, 0.46573),
        "diabetic": 0.59626,
        "smoker": 0.29246,
    },
    ("male", "ldl"): {
        "age": 0.04808,
        "age_sq": 0.0,
        "chol": (-0.69281, 0.0, 0.00389, 0.26755, 0.56705),
        "hdl": (0.48149, 0.17803, 0.0, -0.05825, -0.44003),
        "bp": (-0.00089, 0.0, 0.29300, 0.55112, 0.62310),
        "diabetic": 0.42146,
        "smoker": 0.54377,
    },
    ("female", "ldl"): {
        "age": 0.33994,
        "age_sq": -0.00270,
        "chol": (-0.42616, 0.0, 0.01843, 0.30163, 0.21193),
        "hdl": (0.87976, 0.36378, 0.19100, 0.0, -0.46257),
        "bp": (-0.51532, -0.03837, 0.0, 0.28697, 0.47812),
        "diabetic": 0.58758,
        "smoker": 0.29981,
    },
}

FRS_CHD_BASELINE_SURVIVAL = {
    ("male", "tc"): 0.90015,
    ("female", "tc"): 0.96246,
    ("male", "ldl"): 0.90017,
    ("female", "ldl"): 0.96648,
}

FRS_CHD_MEAN_PREDICTOR = {
    ("male", "tc"): 3.0975,
    ("female", "tc"): 9.92545,
    ("male", "ldl"): 3.00069,
    ("female", "ldl"): 9.91365,
}
