"""Secondary-prevention point scores.

REACH: Wilson et al., Am J Med 2012 (20-month risk of a next
cardiovascular event and of cardiovascular death in outpatients with
established atherothrombosis).
TRA2°P: Bohula et al., Circulation 2016 (3-year risk of CV death, MI or
ischemic stroke after MI).
INVEST: Bavry et al., Hypertension 2013 (24-month risk of death, MI or
stroke in hypertensive patients with coronary artery disease).
"""

# ============================================================================
# REACH
# ============================================================================

# <25, 25-29, ..., 80-84, >=85
REACH_AGE_EDGES = (25, 30, 35, 40, 45, 50, 55, 60, 65, 70, 75, 80, 85)
REACH_AGE_POINTS = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13)

# BMI at or below this threshold scores as underweight
REACH_LOW_BMI = 20

REACH_POINTS = {
    "next_cv": {
        "male": 1,
        "low_bmi": 2,
        "smoker": 2,
        "diabetic": 2,
        "vasc": (0, 2, 4, 6),
        "cv_event": 2,
        "chf": 3,
        "af": 2,
        "statin": -2,
        "asa": -1,
        "region_ee_or_me": 2,
    },
    "cv_death": {
        "male": 1,
        "low_bmi": 2,
        "smoker": 1,
        "diabetic": 2,
        "vasc": (0, 1, 2, 3),
        "cv_event": 1,
        "chf": 4,
        "af": 2,
        "statin": -1,
        "asa": -1,
        "region_ee_or_me": 1,
    },
}

# 20-month risk (%) by point total, starting at the first tabulated point
REACH_RISK_TABLE = {
    "next_cv": (0, (0, 1, 1.2, 1.4, 1.6, 1.9, 2.2, 2.5, 3, 3.5, 4, 4.7, 5.4, 6.3, 7.3,
                    8.5, 9.8, 11, 13, 15, 17, 20, 23, 26, 30, 34, 38, 43, 48, 50)),
    "cv_death": (8, (0, 1.1, 1.4, 1.8, 2.3, 3, 3.8, 4.9, 6.2, 7.9, 10, 13, 16, 20, 25,
                     30, 37, 45, 50)),
}

# Coronary angiography finding codes: 2 means no relevant CAD, 3-7 one or
# more diseased vessels
REACH_MVCAD_NO_CAD = 2
REACH_MVCAD_CODES = (2, 3, 4, 5, 6, 7)
REACH_RECENT_EVENT_DAYS = 365

# ============================================================================
# TRA2°P
# ============================================================================

TRA2P_AGE_THRESHOLD = 75
TRA2P_EGFR_THRESHOLD = 60

# 3-year risk (%) for 0..7 indicators; 7 or more share the last value
TRA2P_RISK = (3.5, 6.8, 9.9, 14.5, 21.8, 28.8, 45.3, 58.6)

# ============================================================================
# INVEST
# ============================================================================

# <65, 65-74, >=75
INVEST_AGE_EDGES = (65, 75)
INVEST_AGE_POINTS = (0, 2, 3)

INVEST_ETHNICITY_POINTS = {"white": 2, "nw": 0}

# <20, 20-29.9, >=30
INVEST_BMI_EDGES = (20, 30)
INVEST_BMI_POINTS = (2, 1, 0)

INVEST_HR_THRESHOLD = 85

# <110, 110-139, >=140
INVEST_SBP_EDGES = (110, 140)
INVEST_SBP_POINTS = (2, 0, 1)

INVEST_POINTS = {
    "mi": 1,
    "chf": 2,
    "stroke": 2,
    "smoker": 1,
    "diabetic": 2,
    "pad": 1,
    "ckd": 2,
}

# 24-month risk (%) for 0..12 points; higher totals share the last value.
# The publication reports the anchors at 8 (16%) and 12 (36%); the other
# values are interpolated on the logit scale between those anchors.
INVEST_RISK = (2, 3, 4, 5, 6, 8, 10, 13, 16, 20, 25, 30, 36)
