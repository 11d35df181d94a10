"""ESC SCORE and SCORE2 reference data.

Risk charts are stored as nested lists indexed
``[sex][smoker][age band][sbp band][cholesterol band]``, every axis in
ascending order. Sex is "female"/"male", smoker is 0/1. Values are the
10-year risk in percent as printed on the charts.

Cholesterol boundaries are in mmol/L. The SCORE2 and SCORE2-OP charts use
non-HDL cholesterol (total minus HDL) on the cholesterol axis.
"""

# ============================================================================
# SCORE (2016) family: fatal CVD, total cholesterol
# ============================================================================

# Systolic blood pressure bands: <=130, 131-150, 151-170, >170 (upper bound inclusive)
SCORE_SBP_EDGES = (130, 150, 170)
# Total cholesterol bands: <4.5, 4.5-5.4, 5.5-6.4, 6.5-7.4, >=7.5
SCORE_CHOL_EDGES = (4.5, 5.5, 6.5, 7.5)

# German recalibration: <45, 45-49, 50-54, 55-59, 60-64, >=65
SCORE_GER_AGE_EDGES = (45, 50, 55, 60, 65)
SCORE_GER_AGE_RANGE = (40, 65)

SCORE_GER_2016 = {
    "female": {
        0: [
            [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0]],
            [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 1], [0, 0, 1, 1, 1]],
            [[0, 0, 0, 0, 0], [0, 0, 0, 1, 1], [0, 1, 1, 1, 1], [1, 1, 1, 1, 1]],
            [[0, 0, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 1, 2], [1, 1, 2, 2, 2]],
            [[1, 1, 1, 1, 1], [1, 1, 1, 2, 2], [1, 2, 2, 2, 3], [2, 2, 3, 4, 4]],
            [[1, 2, 2, 2, 3], [2, 2, 3, 3, 4], [3, 3, 4, 5, 5], [4, 5, 6, 7, 8]],
        ],
        1: [
            [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 1, 1], [0, 1, 1, 1, 1]],
            [[0, 0, 0, 0, 1], [0, 0, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 1, 2]],
            [[0, 1, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 2, 2], [1, 2, 2, 2, 3]],
            [[1, 1, 1, 1, 2], [1, 1, 2, 2, 2], [2, 2, 2, 3, 3], [2, 3, 3, 4, 5]],
            [[1, 2, 2, 2, 3], [2, 2, 3, 3, 4], [3, 4, 4, 5, 6], [4, 5, 6, 7, 8]],
            [[3, 3, 4, 4, 5], [4, 5, 5, 6, 8], [5, 7, 8, 9, 11], [8, 9, 11, 13, 15]],
        ],
    },
    "male": {
        0: [
            [[0, 0, 0, 0, 0], [0, 0, 0, 0, 1], [0, 0, 1, 1, 1], [1, 1, 1, 1, 1]],
            [[0, 0, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 1, 2], [1, 1, 2, 2, 2]],
            [[1, 1, 1, 1, 1], [1, 1, 1, 1, 2], [1, 1, 2, 2, 3], [2, 2, 3, 3, 4]],
            [[1, 1, 2, 2, 2], [2, 2, 2, 3, 3], [2, 3, 3, 4, 5], [3, 4, 5, 6, 7]],
            [[2, 2, 3, 3, 4], [3, 3, 4, 5, 6], [4, 5, 6, 7, 8], [6, 7, 8, 10, 11]],
            [[3, 4, 4, 5, 6], [5, 5, 6, 8, 9], [7, 8, 9, 11, 13], [9, 11, 13, 15, 18]],
        ],
        1: [
            [[0, 0, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 1, 2], [1, 1, 2, 2, 2]],
            [[1, 1, 1, 1, 2], [1, 1, 2, 2, 2], [2, 2, 2, 3, 3], [2, 3, 3, 4, 5]],
            [[1, 1, 2, 2, 2], [2, 2, 3, 3, 4], [3, 3, 4, 4, 5], [4, 4, 5, 6, 7]],
            [[2, 3, 3, 4, 5], [3, 4, 5, 6, 7], [5, 6, 7, 8, 10], [7, 8, 10, 12, 14]],
            [[4, 5, 5, 7, 8], [6, 7, 8, 9, 11], [8, 9, 11, 13, 16], [11, 13, 16, 19, 22]],
            [[6, 8, 9, 11, 13], [9, 11, 13, 15, 18], [13, 15, 18, 21, 25], [18, 21, 25, 29, 34]],
        ],
    },
}

# European charts: 40-44, 45-52.4, 52.5-57.4, 57.5-62.4, 62.5-65
SCORE_2016_AGE_EDGES = (45, 52.5, 57.5, 62.5)
SCORE_2016_AGE_RANGE = (40, 65)

SCORE_2016 = {
    "low": {
        "female": {
            0: [
                [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0]],
                [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 1, 1, 1], [1, 1, 1, 1, 1]],
                [[0, 0, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 2, 2, 2]],
                [[1, 1, 1, 1, 1], [1, 1, 1, 2, 2], [2, 2, 2, 2, 3], [3, 3, 3, 4, 4]],
                [[1, 1, 2, 2, 2], [2, 2, 2, 3, 3], [3, 3, 4, 4, 5], [4, 5, 6, 6, 7]],
            ],
            1: [
                [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0]],
                [[0, 0, 0, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 2, 2, 2]],
                [[1, 1, 1, 1, 1], [1, 1, 1, 2, 2], [2, 2, 2, 3, 3], [3, 3, 3, 4, 4]],
                [[1, 2, 2, 2, 3], [2, 2, 3, 3, 4], [3, 4, 4, 5, 5], [5, 5, 6, 7, 8]],
                [[3, 3, 3, 4, 4], [4, 4, 5, 6, 7], [6, 6, 7, 8, 10], [9, 9, 11, 12, 14]],
            ],
        },
        "male": {
            0: [
                [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 1, 1], [0, 1, 1, 1, 1]],
                [[1, 1, 1, 1, 1], [1, 1, 1, 1, 2], [1, 1, 2, 2, 2], [2, 2, 3, 3, 4]],
                [[1, 1, 1, 2, 2], [1, 2, 2, 2, 3], [2, 2, 3, 3, 4], [3, 4, 4, 5, 6]],
                [[2, 2, 2, 3, 3], [2, 3, 3, 4, 4], [3, 4, 5, 5, 6], [5, 6, 7, 8, 9]],
                [[2, 3, 3, 4, 5], [4, 4, 5, 6, 7], [5, 6, 7, 8, 10], [8, 9, 10, 12, 14]],
            ],
            1: [
                [[0, 0, 0, 1, 1], [0, 1, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 2, 2]],
                [[1, 1, 2, 2, 2], [2, 2, 2, 3, 3], [2, 3, 3, 4, 5], [4, 4, 5, 6, 7]],
                [[2, 2, 3, 3, 4], [3, 3, 4, 5, 6], [4, 5, 6, 7, 8], [6, 7, 8, 10, 12]],
                [[3, 4, 4, 5, 6], [5, 5, 6, 7, 9], [7, 8, 9, 11, 13], [10, 11, 13, 15, 18]],
                [[5, 5, 6, 8, 9], [7, 8, 9, 11, 13], [10, 12, 14, 16, 19], [15, 17, 20, 23, 26]],
            ],
        },
    },
    "high": {
        "female": {
            0: [
                [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0]],
                [[0, 0, 1, 1, 1], [0, 1, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 2, 2]],
                [[1, 1, 1, 1, 1], [1, 1, 1, 1, 2], [1, 2, 2, 2, 3], [2, 2, 3, 3, 4]],
                [[1, 1, 2, 2, 2], [2, 2, 2, 3, 3], [3, 3, 3, 4, 5], [4, 4, 5, 6, 7]],
                [[2, 2, 3, 3, 4], [3, 3, 4, 5, 6], [5, 5, 6, 7, 8], [7, 8, 9, 10, 12]],
            ],
            1: [
                [[0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 0, 0], [0, 0, 0, 1, 1]],
                [[1, 1, 1, 1, 1], [1, 1, 1, 1, 2], [1, 2, 2, 2, 3], [2, 2, 3, 3, 4]],
                [[1, 1, 2, 2, 2], [2, 2, 2, 3, 3], [3, 3, 4, 4, 5], [4, 5, 5, 6, 7]],
                [[2, 3, 3, 4, 4], [3, 4, 5, 5, 6], [5, 6, 7, 8, 9], [8, 9, 10, 11, 13]],
                [[4, 5, 5, 6, 7], [6, 7, 8, 9, 11], [9, 10, 12, 13, 16], [13, 15, 17, 19, 22]],
            ],
        },
        "male": {
            0: [
                [[0, 0, 1, 1, 1], [0, 1, 1, 1, 1], [1, 1, 1, 1, 1], [1, 1, 1, 2, 2]],
                [[1, 1, 2, 2, 2], [2, 2, 2, 3, 3], [2, 3, 3, 4, 5], [4, 4, 5, 6, 7]],
                [[2, 2, 3, 3, 4], [3, 3, 4, 5, 6], [4, 5, 6, 7, 8], [6, 7, 8, 10, 12]],
                [[3, 3, 4, 5, 6], [4, 5, 6, 7, 9], [6, 7, 9, 10, 12], [9, 11, 13, 15, 18]],
                [[4, 5, 6, 7, 9], [6, 8, 9, 11, 13], [9, 11, 13, 15, 16], [14, 16, 19, 22, 26]],
            ],
            1: [
                [[1, 1, 1, 1, 1], [1, 1, 1, 2, 2], [1, 2, 2, 2, 3], [2, 2, 3, 3, 4]],
                [[2, 3, 3, 4, 5], [3, 4, 5, 6, 7], [5, 6, 7, 8, 10], [7, 8, 10, 12, 14]],
                [[4, 4, 5, 6, 8], [5, 6, 8, 9, 11], [8, 9, 11, 13, 16], [12, 13, 16, 19, 22]],
                [[6, 7, 8, 10, 12], [8, 10, 12, 14, 17], [12, 14, 17, 20, 24], [18, 21, 24, 28, 33]],
                [[9, 10, 12, 14, 17], [13, 15, 17, 20, 24], [18, 21, 25, 29, 34], [26, 30, 35, 41, 47]],
            ],
        },
    },
}

# Older persons: 65-67.4, 67.5-72.4, 72.5-80
SCORE_OP_AGE_EDGES = (67.5, 72.5)
SCORE_OP_AGE_RANGE = (65, 80)

SCORE_OP = {
    "low": {
        "female": {
            0: [
                [[2, 2, 2, 2, 2], [2, 2, 2, 2, 2], [2, 2, 2, 3, 3], [3, 3, 3, 3, 3]],
                [[4, 4, 4, 4, 4], [4, 4, 5, 5, 5], [5, 5, 5, 6, 6], [6, 6, 6, 6, 7]],
                [[8, 8, 8, 9, 9], [9, 9, 10, 10, 11], [10, 11, 11, 12, 12], [12, 12, 13, 13, 14]],
            ],
            1: [
                [[3, 3, 3, 3, 3], [3, 3, 4, 4, 4], [4, 4, 4, 4, 5], [4, 4, 5, 5, 5]],
                [[6, 6, 7, 7, 7], [7, 7, 8, 8, 8], [8, 8, 9, 9, 10], [9, 9, 10, 10, 11]],
                [[12, 13, 14, 14, 15], [14, 15, 16, 16, 17], [16, 17, 18, 19, 20], [19, 19, 20, 21, 22]],
            ],
        },
        "male": {
            0: [
                [[3, 4, 4, 4, 5], [4, 4, 4, 5, 6], [4, 5, 5, 6, 7], [5, 5, 6, 7, 8]],
                [[6, 7, 7, 8, 9], [7, 8, 8, 9, 10], [8, 9, 10, 11, 12], [9, 10, 11, 12, 14]],
                [[11, 12, 13, 15, 16], [13, 14, 15, 17, 19], [15, 16, 17, 19, 21], [17, 18, 20, 22, 24]],
            ],
            1: [
                [[6, 6, 7, 8, 9], [6, 7, 8, 9, 10], [7, 8, 9, 10, 11], [9, 9, 10, 12, 13]],
                [[10, 11, 13, 14, 16], [12, 13, 14, 16, 18], [14, 15, 16, 18, 20], [16, 17, 19, 21, 23]],
                [[19, 21, 22, 25, 27], [22, 23, 25, 28, 31], [25, 26, 29, 31, 35], [28, 30, 32, 35, 39]],
            ],
        },
    },
    "high": {
        "female": {
            0: [
                [[3, 3, 3, 3, 3], [3, 3, 3, 4, 4], [4, 4, 4, 4, 4], [4, 4, 5, 5, 5]],
                [[6, 6, 6, 7, 7], [7, 7, 7, 8, 8], [7, 8, 8, 9, 9], [9, 9, 10, 10, 11]],
                [[12, 13, 13, 14, 15], [14, 14, 15, 16, 17], [16, 16, 17, 18, 19], [18, 19, 20, 21, 22]],
            ],
            1: [
                [[4, 5, 5, 5, 6], [5, 5, 6, 6, 7], [6, 6, 7, 7, 8], [7, 7, 8, 8, 9]],
                [[9, 10, 11, 11, 12], [11, 11, 12, 13, 14], [12, 13, 14, 15, 16], [14, 15, 16, 17, 18]],
                [[19, 20, 22, 23, 24], [22, 23, 24, 26, 27], [25, 26, 28, 29, 31], [28, 29, 31, 33, 35]],
            ],
        },
        "male": {
            0: [
                [[5, 5, 6, 7, 9], [6, 6, 7, 8, 10], [6, 7, 8, 10, 11], [7, 8, 10, 11, 13]],
                [[9, 10, 11, 13, 15], [10, 11, 13, 15, 17], [12, 13, 15, 17, 20], [13, 15, 17, 20, 23]],
                [[16, 18, 20, 23, 26], [18, 20, 23, 26, 30], [21, 23, 26, 30, 34], [23, 26, 30, 33, 38]],
            ],
            1: [
                [[8, 10, 11, 13, 15], [10, 11, 13, 15, 17], [11, 13, 14, 17, 19], [13, 14, 17, 19, 22]],
                [[15, 17, 19, 22, 25], [17, 19, 22, 25, 29], [20, 22, 25, 29, 33], [22, 25, 29, 32, 37]],
                [[26, 29, 33, 37, 42], [30, 33, 37, 42, 47], [34, 37, 42, 46, 52], [38, 42, 46, 52, 57]],
            ],
        },
    },
}

# ============================================================================
# SCORE2 family: fatal and non-fatal CVD, non-HDL cholesterol
# ============================================================================

# Systolic blood pressure bands: <120, 120-139, 140-159, >=160
SCORE2_SBP_EDGES = (120, 140, 160)
# Non-HDL cholesterol bands: <4, 4-4.9, 5-5.9, >=6
SCORE2_CHOL_EDGES = (4, 5, 6)

# <45, 45-49, 50-54, 55-59, 60-64, >=65
SCORE2_AGE_EDGES = (45, 50, 55, 60, 65)
SCORE2_TABLE_AGE_RANGE = (40, 69)

SCORE2 = {
    "low": {
        "female": {
            0: [
                [[1, 1, 1, 1], [1, 1, 1, 1], [1, 2, 2, 2], [2, 2, 2, 3]],
                [[1, 1, 1, 1], [1, 2, 2, 2], [2, 2, 2, 3], [2, 3, 3, 3]],
                [[2, 2, 2, 2], [2, 2, 2, 3], [3, 3, 3, 3], [3, 4, 4, 4]],
                [[2, 2, 3, 3], [3, 3, 3, 3], [3, 4, 4, 4], [4, 5, 5, 5]],
                [[3, 3, 4, 4], [4, 4, 4, 5], [5, 5, 5, 6], [6, 6, 7, 7]],
                [[5, 5, 5, 5], [5, 6, 6, 6], [7, 7, 7, 7], [8, 8, 9, 9]],
            ],
            1: [
                [[2, 2, 2, 2], [2, 3, 3, 3], [3, 3, 4, 4], [4, 4, 5, 6]],
                [[2, 2, 3, 3], [3, 3, 4, 4], [4, 4, 5, 5], [5, 5, 6, 7]],
                [[3, 3, 4, 4], [4, 4, 5, 5], [5, 5, 6, 6], [6, 7, 7, 8]],
                [[4, 4, 5, 5], [5, 5, 6, 6], [6, 7, 7, 8], [8, 8, 9, 10]],
                [[5, 6, 6, 6], [6, 7, 7, 8], [8, 8, 9, 9], [10, 10, 11, 11]],
                [[7, 7, 7, 8], [8, 9, 9, 9], [10, 10, 11, 11], [12, 12, 13, 13]],
            ],
        },
        "male": {
            0: [
                [[1, 2, 2, 2], [2, 2, 3, 3], [2, 3, 3, 4], [3, 4, 5, 5]],
                [[2, 2, 3, 3], [2, 3, 3, 4], [3, 4, 4, 5], [4, 5, 6, 6]],
                [[3, 3, 3, 4], [3, 4, 4, 5], [4, 5, 5, 6], [5, 6, 7, 8]],
                [[4, 4, 4, 5], [4, 5, 5, 6], [5, 6, 7, 8], [7, 7, 8, 9]],
                [[5, 5, 6, 6], [6, 6, 7, 8], [7, 8, 8, 9], [8, 9, 10, 11]],
                [[6, 7, 7, 8], [8, 8, 9, 10], [9, 10, 11, 11], [11, 12, 12, 13]],
            ],
            1: [
                [[3, 3, 4, 5], [3, 4, 5, 6], [5, 5, 6, 8], [6, 7, 8, 10]],
                [[3, 4, 5, 5], [4, 5, 6, 7], [6, 7, 8, 9], [7, 8, 10, 11]],
                [[4, 5, 6, 7], [6, 6, 7, 8], [7, 8, 9, 10], [9, 10, 11, 13]],
                [[6, 6, 7, 8], [7, 8, 9, 10], [9, 10, 11, 12], [10, 12, 13, 15]],
                [[7, 8, 9, 10], [9, 10, 10, 11], [10, 11, 13, 14], [13, 14, 15, 17]],
                [[9, 10, 11, 11], [11, 12, 13, 13], [13, 14, 15, 16], [15, 16, 17, 19]],
            ],
        },
    },
    "moderate": {
        "female": {
            0: [
                [[1, 1, 1, 1], [1, 1, 1, 2], [1, 2, 2, 2], [2, 2, 3, 3]],
                [[1, 1, 1, 2], [2, 2, 2, 2], [2, 2, 3, 3], [3, 3, 3, 4]],
                [[2, 2, 2, 2], [2, 2, 3, 3], [3, 3, 4, 4], [4, 4, 5, 5]],
                [[3, 3, 3, 3], [3, 3, 4, 4], [4, 4, 5, 5], [5, 6, 6, 7]],
                [[4, 4, 4, 5], [5, 5, 5, 6], [6, 6, 7, 7], [7, 8, 8, 9]],
                [[5, 6, 6, 6], [7, 7, 7, 8], [8, 9, 9, 9], [10, 10, 11, 12]],
            ],
            1: [
                [[2, 2, 2, 3], [3, 3, 3, 4], [3, 4, 5, 5], [5, 5, 6, 7]],
                [[3, 3, 3, 4], [3, 4, 4, 5], [5, 5, 6, 6], [6, 7, 8, 9]],
                [[3, 4, 4, 5], [5, 5, 6, 6], [6, 6, 7, 8], [8, 8, 9, 10]],
                [[5, 5, 6, 6], [6, 7, 7, 8], [8, 8, 9, 10], [10, 11, 11, 12]],
                [[6, 7, 7, 8], [8, 8, 9, 10], [10, 11, 11, 12], [12, 13, 14, 15]],
                [[9, 9, 9, 10], [10, 11, 12, 12], [13, 13, 14, 15], [15, 16, 17, 18]],
            ],
        },
        "male": {
            0: [
                [[2, 2, 2, 3], [2, 3, 3, 4], [3, 4, 4, 5], [4, 5, 6, 7]],
                [[2, 3, 3, 4], [3, 4, 4, 5], [4, 5, 5, 6], [5, 6, 7, 8]],
                [[3, 4, 4, 5], [4, 5, 5, 6], [5, 6, 7, 8], [7, 8, 9, 10]],
                [[4, 5, 6, 6], [5, 6, 7, 8], [7, 8, 9, 10], [9, 10, 11, 12]],
                [[6, 7, 7, 8], [7, 8, 9, 10], [9, 10, 11, 12], [11, 12, 13, 15]],
                [[8, 9, 10, 10], [10, 11, 12, 13], [12, 13, 14, 15], [14, 15, 17, 18]],
            ],
            1: [
                [[3, 4, 5, 6], [4, 5, 6, 8], [6, 7, 8, 10], [8, 9, 11, 13]],
                [[4, 5, 6, 7], [5, 7, 8, 9], [7, 8, 10, 12], [9, 11, 13, 15]],
                [[5, 6, 7, 8], [7, 8, 9, 11], [9, 10, 12, 14], [11, 13, 15, 17]],
                [[7, 8, 9, 10], [9, 10, 11, 13], [11, 13, 14, 16], [14, 16, 17, 20]],
                [[9, 10, 11, 12], [11, 13, 14, 15], [14, 15, 17, 18], [17, 18, 20, 22]],
                [[12, 13, 14, 15], [14, 15, 17, 18], [17, 18, 20, 21], [20, 22, 23, 25]],
            ],
        },
    },
    "high": {
        "female": {
            0: [
                [[1, 1, 1, 1], [1, 1, 1, 2], [1, 2, 2, 2], [2, 3, 3, 4]],
                [[1, 1, 2, 2], [2, 2, 2, 2], [2, 3, 3, 4], [3, 4, 4, 5]],
                [[2, 2, 2, 3], [3, 3, 3, 4], [3, 4, 4, 5], [5, 5, 6, 7]],
                [[3, 3, 4, 4], [4, 4, 5, 5], [5, 6, 7, 7], [7, 8, 9, 10]],
                [[5, 5, 6, 6], [6, 7, 7, 8], [8, 9, 9, 10], [11, 11, 12, 13]],
                [[8, 8, 8, 9], [10, 10, 11, 11], [12, 13, 14, 14], [15, 16, 17, 18]],
            ],
            1: [
                [[2, 2, 3, 3], [3, 4, 4, 5], [4, 5, 6, 7], [6, 7, 9, 10]],
                [[3, 3, 4, 5], [4, 5, 6, 6], [6, 7, 8, 9], [8, 10, 11, 13]],
                [[4, 5, 6, 6], [6, 7, 8, 9], [8, 9, 10, 12], [11, 13, 14, 16]],
                [[6, 7, 8, 8], [8, 9, 10, 11], [11, 12, 14, 15], [15, 16, 18, 20]],
                [[9, 10, 11, 11], [12, 13, 14, 15], [15, 16, 18, 19], [20, 21, 23, 25]],
                [[13, 14, 14, 15], [16, 17, 18, 19], [21, 22, 23, 24], [26, 27, 29, 30]],
            ],
        },
        "male": {
            0: [
                [[1, 2, 2, 3], [2, 2, 3, 4], [3, 3, 4, 5], [4, 5, 6, 7]],
                [[2, 2, 3, 4], [3, 3, 4, 5], [4, 5, 6, 7], [5, 6, 8, 9]],
                [[3, 3, 4, 5], [4, 5, 5, 6], [5, 6, 7, 9], [7, 8, 10, 11]],
                [[4, 5, 6, 7], [6, 6, 7, 9], [7, 8, 10, 11], [9, 11, 12, 14]],
                [[6, 7, 8, 9], [8, 9, 10, 11], [10, 11, 13, 14], [13, 14, 16, 18]],
                [[9, 10, 11, 12], [11, 12, 13, 15], [14, 15, 16, 18], [17, 18, 20, 22]],
            ],
            1: [
                [[3, 4, 5, 6], [4, 5, 7, 8], [6, 7, 9, 11], [8, 10, 13, 16]],
                [[4, 5, 6, 7], [6, 7, 8, 10], [8, 9, 11, 14], [10, 13, 15, 18]],
                [[6, 7, 8, 9], [7, 9, 10, 12], [10, 12, 14, 16], [13, 15, 18, 21]],
                [[8, 9, 10, 12], [10, 11, 13, 15], [13, 15, 17, 19], [16, 19, 21, 24]],
                [[10, 12, 13, 15], [13, 15, 16, 18], [16, 18, 20, 23], [20, 23, 25, 28]],
                [[14, 15, 17, 18], [17, 19, 20, 22], [21, 23, 25, 27], [25, 28, 30, 32]],
            ],
        },
    },
    "very high": {
        "female": {
            0: [
                [[2, 2, 2, 3], [3, 3, 3, 4], [4, 4, 5, 6], [5, 6, 7, 8]],
                [[3, 3, 4, 4], [4, 4, 5, 6], [5, 6, 7, 8], [7, 8, 9, 10]],
                [[4, 5, 5, 6], [6, 6, 7, 8], [8, 9, 9, 11], [10, 11, 12, 14]],
                [[7, 7, 8, 9], [8, 9, 10, 11], [11, 12, 13, 14], [14, 15, 17, 18]],
                [[10, 11, 11, 12], [12, 13, 14, 15], [16, 17, 18, 19], [20, 21, 22, 24]],
                [[15, 16, 16, 17], [18, 19, 20, 21], [22, 23, 24, 26], [27, 28, 30, 31]],
            ],
            1: [
                [[5, 6, 6, 7], [7, 8, 9, 10], [9, 11, 12, 14], [13, 15, 17, 19]],
                [[7, 8, 9, 10], [9, 10, 12, 13], [12, 14, 15, 17], [16, 18, 21, 23]],
                [[9, 10, 11, 13], [12, 13, 15, 17], [16, 18, 19, 22], [21, 23, 25, 28]],
                [[13, 14, 15, 16], [16, 18, 19, 21], [21, 23, 24, 26], [26, 28, 31, 33]],
                [[17, 18, 20, 21], [22, 23, 25, 26], [27, 29, 30, 32], [33, 35, 37, 39]],
                [[23, 24, 26, 27], [28, 30, 31, 33], [34, 36, 37, 39], [41, 42, 44, 46]],
            ],
        },
        "male": {
            0: [
                [[3, 4, 4, 5], [4, 5, 6, 7], [5, 6, 8, 10], [7, 9, 11, 13]],
                [[4, 5, 6, 7], [5, 6, 8, 9], [7, 8, 10, 12], [9, 11, 13, 16]],
                [[6, 7, 8, 9], [7, 9, 10, 12], [10, 11, 13, 15], [12, 14, 16, 19]],
                [[8, 9, 10, 12], [10, 11, 13, 15], [13, 14, 16, 18], [16, 18, 20, 23]],
                [[11, 12, 14, 15], [14, 15, 17, 18], [17, 19, 20, 22], [20, 23, 25, 27]],
                [[15, 17, 18, 19], [18, 20, 21, 23], [22, 24, 26, 27], [26, 28, 30, 32]],
            ],
            1: [
                [[6, 7, 9, 11], [8, 10, 12, 14], [11, 13, 16, 19], [14, 17, 20, 24]],
                [[8, 9, 11, 13], [10, 12, 14, 17], [13, 16, 18, 22], [17, 20, 24, 28]],
                [[10, 12, 14, 16], [13, 15, 17, 20], [17, 19, 22, 25], [21, 24, 28, 31]],
                [[13, 15, 17, 19], [17, 19, 21, 24], [21, 23, 26, 29], [25, 28, 32, 35]],
                [[17, 19, 21, 23], [21, 23, 25, 28], [25, 28, 31, 33], [31, 33, 36, 40]],
                [[22, 24, 26, 28], [26, 28, 30, 33], [31, 33, 36, 38], [36, 39, 42, 44]],
            ],
        },
    },
}

# <75, 75-79, 80-84, >=85
SCORE2_OP_AGE_EDGES = (75, 80, 85)
# The chart has no upper age bound
SCORE2_OP_TABLE_AGE_RANGE = (70, None)

SCORE2_OP = {
    "low": {
        "female": {
            0: [
                [[6, 6, 6, 7], [7, 7, 8, 8], [9, 9, 10, 10], [10, 11, 12, 12]],
                [[9, 10, 10, 11], [11, 11, 12, 13], [13, 13, 14, 15], [15, 15, 16, 17]],
                [[15, 15, 16, 17], [16, 17, 18, 19], [18, 19, 20, 21], [20, 21, 22, 23]],
                [[23, 24, 25, 26], [24, 25, 26, 27], [26, 27, 28, 29], [28, 29, 30, 31]],
            ],
            1: [
                [[9, 10, 10, 11], [11, 12, 13, 14], [14, 15, 16, 16], [17, 18, 19, 20]],
                [[13, 14, 15, 15], [15, 16, 17, 18], [18, 19, 20, 21], [21, 22, 23, 24]],
                [[18, 19, 20, 21], [20, 21, 22, 23], [23, 24, 25, 26], [25, 26, 28, 29]],
                [[25, 26, 27, 28], [27, 28, 29, 30], [29, 30, 31, 32], [31, 32, 33, 34]],
            ],
        },
        "male": {
            0: [
                [[8, 8, 9, 10], [10, 11, 12, 13], [12, 13, 14, 16], [15, 16, 18, 19]],
                [[12, 13, 15, 17], [14, 15, 18, 20], [16, 18, 21, 23], [19, 21, 24, 27]],
                [[17, 20, 24, 28], [19, 22, 26, 31], [21, 25, 29, 34], [23, 27, 32, 37]],
                [[25, 30, 36, 43], [26, 32, 38, 45], [28, 33, 40, 47], [29, 35, 42, 49]],
            ],
            1: [
                [[12, 13, 14, 15], [14, 16, 17, 19], [18, 19, 21, 23], [22, 24, 26, 28]],
                [[15, 17, 19, 22], [18, 20, 23, 26], [21, 23, 26, 30], [24, 27, 31, 34]],
                [[19, 23, 27, 31], [22, 25, 30, 34], [24, 28, 33, 38], [26, 31, 36, 41]],
                [[25, 30, 36, 43], [26, 32, 38, 45], [27, 33, 40, 47], [29, 35, 42, 49]],
            ],
        },
    },
    "moderate": {
        "female": {
            0: [
                [[7, 7, 8, 8], [9, 9, 10, 11], [11, 11, 12, 13], [13, 14, 15, 16]],
                [[12, 12, 13, 14], [14, 15, 15, 16], [16, 17, 18, 19], [19, 20, 21, 23]],
                [[19, 20, 21, 22], [21, 22, 24, 25], [24, 25, 27, 28], [27, 28, 30, 31]],
                [[30, 32, 33, 34], [32, 34, 35, 37], [35, 36, 38, 39], [37, 39, 40, 42]],
            ],
            1: [
                [[12, 13, 13, 14], [15, 16, 17, 18], [18, 19, 20, 22], [22, 23, 25, 26]],
                [[17, 18, 19, 20], [20, 21, 22, 24], [24, 25, 26, 28], [27, 29, 30, 32]],
                [[24, 25, 27, 28], [27, 28, 30, 31], [30, 32, 33, 35], [34, 35, 37, 39]],
                [[34, 35, 37, 38], [36, 38, 39, 41], [39, 40, 42, 43], [41, 43, 44, 46]],
            ],
        },
        "male": {
            0: [
                [[10, 11, 12, 13], [12, 13, 15, 16], [15, 17, 18, 20], [19, 21, 23, 25]],
                [[15, 17, 19, 22], [17, 20, 23, 26], [21, 23, 27, 30], [24, 27, 31, 35]],
                [[22, 26, 31, 36], [25, 29, 34, 40], [27, 32, 37, 43], [30, 35, 41, 47]],
                [[32, 39, 47, 55], [34, 41, 49, 57], [36, 43, 51, 59], [37, 45, 53, 62]],
            ],
            1: [
                [[15, 16, 18, 20], [19, 20, 22, 24], [23, 25, 28, 30], [28, 31, 34, 36]],
                [[19, 22, 25, 29], [23, 26, 29, 33], [27, 30, 34, 38], [31, 35, 39, 44]],
                [[25, 30, 35, 40], [28, 33, 38, 44], [31, 36, 42, 48], [34, 40, 46, 53]],
                [[32, 39, 46, 55], [34, 41, 48, 57], [35, 43, 51, 59], [37, 45, 53, 61]],
            ],
        },
    },
    "high": {
        "female": {
            0: [
                [[11, 12, 13, 14], [14, 15, 16, 17], [17, 18, 19, 20], [21, 22, 24, 25]],
                [[18, 19, 20, 22], [22, 23, 24, 25], [25, 27, 28, 29], [29, 31, 32, 34]],
                [[29, 31, 32, 34], [32, 34, 36, 37], [36, 38, 39, 41], [40, 42, 44, 45]],
                [[44, 46, 48, 50], [47, 49, 51, 52], [50, 52, 54, 55], [53, 55, 57, 58]],
            ],
            1: [
                [[19, 20, 21, 22], [23, 24, 26, 27], [28, 29, 31, 33], [33, 35, 37, 39]],
                [[26, 28, 29, 31], [31, 32, 34, 36], [35, 37, 39, 41], [41, 43, 45, 47]],
                [[36, 38, 40, 41], [40, 42, 44, 46], [44, 46, 48, 50], [49, 51, 53, 55]],
                [[49, 51, 52, 54], [52, 53, 55, 57], [55, 56, 58, 60], [58, 59, 61, 63]],
            ],
        },
        "male": {
            0: [
                [[12, 14, 15, 16], [15, 17, 18, 20], [19, 20, 22, 24], [23, 25, 27, 29]],
                [[18, 20, 23, 26], [21, 24, 27, 30], [24, 27, 31, 34], [28, 32, 35, 39]],
                [[26, 30, 35, 40], [29, 33, 38, 44], [31, 36, 42, 47], [34, 40, 45, 51]],
                [[36, 43, 51, 58], [38, 45, 53, 61], [40, 47, 55, 63], [42, 49, 57, 65]],
            ],
            1: [
                [[18, 20, 22, 23], [22, 24, 26, 28], [27, 29, 32, 34], [33, 35, 38, 41]],
                [[23, 26, 29, 33], [27, 30, 34, 37], [31, 34, 38, 43], [35, 39, 44, 48]],
                [[29, 34, 39, 44], [32, 37, 42, 48], [35, 40, 46, 52], [38, 44, 50, 56]],
                [[36, 43, 50, 58], [38, 45, 52, 60], [40, 47, 54, 62], [41, 49, 56, 65]],
            ],
        },
    },
    "very high": {
        "female": {
            0: [
                [[26, 27, 28, 29], [29, 30, 31, 32], [33, 34, 35, 36], [37, 38, 39, 41]],
                [[34, 35, 36, 37], [37, 39, 40, 41], [41, 42, 43, 45], [44, 46, 47, 48]],
                [[44, 45, 47, 48], [47, 48, 49, 51], [50, 51, 52, 54], [53, 54, 55, 57]],
                [[56, 57, 58, 60], [58, 59, 60, 61], [60, 61, 62, 63], [62, 63, 64, 65]],
            ],
            1: [
                [[34, 36, 37, 38], [39, 40, 41, 43], [43, 44, 46, 47], [48, 49, 51, 52]],
                [[42, 43, 44, 46], [46, 47, 48, 49], [49, 51, 52, 53], [53, 55, 56, 58]],
                [[50, 51, 53, 54], [53, 54, 56, 57], [56, 57, 59, 60], [59, 60, 62, 63]],
                [[59, 60, 61, 63], [61, 62, 63, 65], [63, 64, 65, 66], [65, 66, 67, 68]],
            ],
        },
        "male": {
            0: [
                [[25, 26, 28, 29], [28, 30, 31, 33], [32, 33, 35, 36], [35, 37, 39, 40]],
                [[31, 33, 36, 38], [34, 36, 39, 41], [37, 39, 42, 44], [40, 42, 45, 48]],
                [[38, 41, 45, 48], [40, 43, 47, 51], [42, 46, 49, 53], [44, 48, 52, 56]],
                [[46, 50, 55, 60], [47, 52, 56, 61], [48, 53, 58, 63], [49, 54, 59, 64]],
            ],
            1: [
                [[31, 33, 34, 36], [35, 36, 38, 40], [39, 41, 42, 44], [43, 45, 47, 49]],
                [[36, 38, 41, 43], [39, 41, 44, 47], [42, 44, 47, 50], [45, 48, 51, 54]],
                [[40, 44, 48, 51], [43, 46, 50, 54], [45, 49, 52, 56], [47, 51, 55, 59]],
                [[46, 50, 55, 60], [47, 52, 56, 61], [48, 53, 58, 63], [49, 54, 59, 64]],
            ],
        },
    },
}

# ============================================================================
# SCORE2 / SCORE2-OP risk models
# ============================================================================

SCORE2_AGE_RANGE = (40, 70)
SCORE2_OP_MIN_AGE = 70

# Transformed predictors (cholesterol in mmol/L):
#   cage = (age - 60) / 5, csbp = (sbp - 120) / 20, ctc = tc - 6, chdl = (hdl - 1.3) / 0.5
SCORE2_COEFFICIENTS = {
    "male": {
        "cage": 0.3742,
        "smoker": 0.6012,
        "csbp": 0.2777,
        "diabetic": 0.6457,
        "ctc": 0.1458,
        "chdl": -0.2698,
        "smoker_cage": -0.0755,
        "csbp_cage": -0.0255,
        "ctc_cage": -0.0281,
        "chdl_cage": 0.0426,
        "diabetic_cage": -0.0983,
    },
    "female": {
        "cage": 0.4648,
        "smoker": 0.7744,
        "csbp": 0.3131,
        "diabetic": 0.8096,
        "ctc": 0.1002,
        "chdl": -0.2606,
        "smoker_cage": -0.1088,
        "csbp_cage": -0.0277,
        "ctc_cage": -0.0226,
        "chdl_cage": 0.0613,
        "diabetic_cage": -0.1272,
    },
}

SCORE2_BASELINE_SURVIVAL = {"male": 0.9605, "female": 0.9776}

# (scale1, scale2) per region
SCORE2_CALIBRATION = {
    "low": {"male": (-0.5699, 0.7476), "female": (-0.7380, 0.7019)},
    "moderate": {"male": (-0.1565, 0.8009), "female": (-0.3143, 0.7701)},
    "high": {"male": (0.3207, 0.9360), "female": (0.5710, 0.9369)},
    "very high": {"male": (0.5836, 0.8294), "female": (0.9412, 0.8329)},
}

# Transformed predictors: cage = age - 73, csbp = sbp - 150, ctc = tc - 6, chdl = hdl - 1.4
SCORE2_OP_COEFFICIENTS = {
    "male": {
        "cage": 0.0634,
        "diabetic": 0.4245,
        "smoker": 0.3524,
        "csbp": 0.0094,
        "ctc": 0.0850,
        "chdl": -0.3564,
        "diabetic_cage": -0.0174,
        "smoker_cage": -0.0247,
        "csbp_cage": -0.0005,
        "ctc_cage": 0.0073,
        "chdl_cage": 0.0091,
    },
    "female": {
        "cage": 0.0789,
        "diabetic": 0.6010,
        "smoker": 0.4921,
        "csbp": 0.0102,
        "ctc": 0.0605,
        "chdl": -0.3040,
        "diabetic_cage": -0.0107,
        "smoker_cage": -0.0255,
        "csbp_cage": -0.0004,
        "ctc_cage": -0.0009,
        "chdl_cage": 0.0154,
    },
}

SCORE2_OP_BASELINE_SURVIVAL = {"male": 0.7576, "female": 0.8082}
SCORE2_OP_MEAN_PREDICTOR = {"male": 0.0929, "female": 0.2290}

SCORE2_OP_CALIBRATION = {
    "low": {"male": (-0.34, 1.19), "female": (-0.52, 1.01)},
    "moderate": {"male": (0.01, 1.25), "female": (-0.10, 1.10)},
    "high": {"male": (0.08, 1.15), "female": (0.38, 1.09)},
    "very high": {"male": (0.05, 0.70), "female": (0.38, 0.69)},
}
