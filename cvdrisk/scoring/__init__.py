"""Cardiovascular risk scoring module.

This module provides vectorized implementations of:
- ESC SCORE charts (German recalibration, SCORE 2016, SCORE O.P.)
- ESC SCORE2 and SCORE2-OP charts and risk models
- ACC/AHA Pooled Cohort Equations
- Framingham general CVD and CHD charts and Cox models
- PROCAM 2002 and 2007
- REACH, TRA2°P and INVEST secondary-prevention scores
"""

from .base import RiskScore
from .esc import (
    EscScoreGer2016Table,
    EscScore2016Table,
    EscScoreOPTable,
    EscScore2Table,
    EscScore2OPTable,
    EscScore2Formula,
    EscScore2OPFormula,
    esc_score_ger_2016_table,
    esc_score_2016_table,
    esc_score_op_table,
    esc_score2_table,
    esc_score2_op_table,
    esc_score2_formula,
    esc_score2_op_formula,
)
from .ascvd import AscvdAccAha, ascvd_acc_aha
from .framingham import (
    FraminghamCvdTable,
    FraminghamCvdFormula,
    FraminghamChdTable,
    FraminghamChdFormula,
    ascvd_frs_cvd_table,
    ascvd_frs_cvd_formula,
    ascvd_frs_chd_table,
    ascvd_frs_chd_formula,
    frs_chd_average_risk,
)
from .procam import Procam2002, Procam2007, procam_score_2002, procam_score_2007
from .reach import (
    ReachNextCv,
    ReachCvDeath,
    reach_score_next_cv,
    reach_score_cv_death,
    reach_cv_history,
)
from .tra2p import Tra2pScore, tra2p_score
from .invest import InvestScore, invest_score
from .registry import get_score, list_scores
from .dataframe import compute_score_from_dataframe

__all__ = [
    # Base
    "RiskScore",
    # ESC
    "EscScoreGer2016Table",
    "EscScore2016Table",
    "EscScoreOPTable",
    "EscScore2Table",
    "EscScore2OPTable",
    "EscScore2Formula",
    "EscScore2OPFormula",
    "esc_score_ger_2016_table",
    "esc_score_2016_table",
    "esc_score_op_table",
    "esc_score2_table",
    "esc_score2_op_table",
    "esc_score2_formula",
    "esc_score2_op_formula",
    # ACC/AHA
    "AscvdAccAha",
    "ascvd_acc_aha",
    # Framingham
    "FraminghamCvdTable",
    "FraminghamCvdFormula",
    "FraminghamChdTable",
    "FraminghamChdFormula",
    "ascvd_frs_cvd_table",
    "ascvd_frs_cvd_formula",
    "ascvd_frs_chd_table",
    "ascvd_frs_chd_formula",
    "frs_chd_average_risk",
    # PROCAM
    "Procam2002",
    "Procam2007",
    "procam_score_2002",
    "procam_score_2007",
    # Secondary prevention
    "ReachNextCv",
    "ReachCvDeath",
    "reach_score_next_cv",
    "reach_score_cv_death",
    "reach_cv_history",
    "Tra2pScore",
    "tra2p_score",
    "InvestScore",
    "invest_score",
    # Registry and helpers
    "get_score",
    "list_scores",
    "compute_score_from_dataframe",
]
