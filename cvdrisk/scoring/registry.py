"""Risk score registry."""
from __future__ import annotations

from typing import List

from ..errors import InvalidOption
from .ascvd import AscvdAccAha
from .base import RiskScore
from .esc import (
    EscScore2016Table,
    EscScore2Formula,
    EscScore2OPFormula,
    EscScore2OPTable,
    EscScore2Table,
    EscScoreGer2016Table,
    EscScoreOPTable,
)
from .framingham import FraminghamChdFormula, FraminghamChdTable, FraminghamCvdFormula, FraminghamCvdTable
from .invest import InvestScore
from .procam import Procam2002, Procam2007
from .reach import ReachCvDeath, ReachNextCv
from .tra2p import Tra2pScore


# Global score registry
_SCORE_REGISTRY = {
    cls.name: cls
    for cls in (
        EscScoreGer2016Table,
        EscScore2016Table,
        EscScoreOPTable,
        EscScore2Table,
        EscScore2OPTable,
        EscScore2Formula,
        EscScore2OPFormula,
        AscvdAccAha,
        FraminghamCvdTable,
        FraminghamCvdFormula,
        FraminghamChdTable,
        FraminghamChdFormula,
        Procam2002,
        Procam2007,
        ReachNextCv,
        ReachCvDeath,
        Tra2pScore,
        InvestScore,
    )
}


def get_score(name: str) -> RiskScore:
    """Get a risk score calculator by name.

    Args:
        name: Score name, e.g. 'esc_score2_table' or 'procam_score_2007'

    Returns:
        Risk score calculator instance

    Raises:
        InvalidOption: If score name not recognized
    """
    name_lower = name.lower()

    if name_lower not in _SCORE_REGISTRY:
        raise InvalidOption(
            f"Unknown score: {name}. Available: {list(_SCORE_REGISTRY.keys())}"
        )

    return _SCORE_REGISTRY[name_lower]()


def list_scores() -> List[str]:
    """List available risk scores.

    Returns:
        List of score names
    """
    return list(_SCORE_REGISTRY.keys())
