"""CVD Risk Scores - Source Code Package

This package computes cardiovascular risk estimates for single patients
or whole cohorts from established clinical risk scores.

## Module Structure

- **config**: Process configuration (unit factors, rounding, error policy)
- **errors**: Error taxonomy raised by every score
- **normalize**: Input broadcasting, validation, unit conversion and banding
- **reference**: Published charts, risk tables and coefficients
- **scoring**: Score calculators, registry and DataFrame helpers

## Quick Start

```python
from cvdrisk import esc_score2_table, get_score, compute_score_from_dataframe

# Vectorized function call
esc_score2_table(
    sex=["male", "female"], age=[50, 55], totchol=[6.3, 5.2], hdl=[1.4, 1.6],
    sbp=[140, 125], smoker=[1, 0], risk="moderate", mmol=True,
)

# Single patient through the registry
calculator = get_score("tra2p_score")
calculator.compute(age=65, chf=1, ah=1, diabetic=1, stroke=0,
                   bypass_surg=0, other_surg=1, egfr=59, smoker=0)

# Whole cohort held in a DataFrame
risks = compute_score_from_dataframe(df, "ascvd_acc_aha", columns={"totchol": "tc"})
```
"""

# Import configuration
from .config import CONFIG, ProjectConfig, configure_logging, validate_config

# Error taxonomy
from .errors import (
    RiskScoreError,
    ShapeError,
    MissingInput,
    InvalidOption,
    InvalidStratum,
    DomainError,
)

# Scoring module exports
from .scoring import *  # noqa: F401,F403
from .scoring import __all__ as _scoring_all

__all__ = [
    # Config
    "CONFIG",
    "ProjectConfig",
    "configure_logging",
    "validate_config",
    # Errors
    "RiskScoreError",
    "ShapeError",
    "MissingInput",
    "InvalidOption",
    "InvalidStratum",
    "DomainError",
    # Modules
    "reference",
    "scoring",
] + list(_scoring_all)

# Version
__version__ = "0.1.0"
