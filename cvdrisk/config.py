"""Global configuration for the risk score package.

Every value can be overridden through an environment variable so that a
deployment can change unit factors or the per-record error policy without
touching code.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional


DOMAIN_ERROR_POLICIES = ("raise", "mask")


@dataclass
class ProjectConfig:
    """Project-wide configuration parameters.

    Attributes:
        mgdl_per_mmol_chol: mg/dL per mmol/L for total, HDL and LDL cholesterol.
        mgdl_per_mmol_tg: mg/dL per mmol/L for triglycerides.
        decimals: Rounding applied to formula-based risk percentages.
        domain_errors: "raise" aborts a batch on the first out-of-domain
            record, "mask" returns NaN for those records and warns.
        log_level: Level used by configure_logging().
    """

    mgdl_per_mmol_chol: float = float(os.environ.get("CVDRISK_MGDL_PER_MMOL_CHOL", "38.67"))
    mgdl_per_mmol_tg: float = float(os.environ.get("CVDRISK_MGDL_PER_MMOL_TG", "88.57"))
    decimals: int = int(os.environ.get("CVDRISK_DECIMALS", "2"))
    domain_errors: str = os.environ.get("CVDRISK_DOMAIN_ERRORS", "raise")
    log_level: str = os.environ.get("CVDRISK_LOG_LEVEL", "WARNING")


CONFIG = ProjectConfig()


def validate_config(cfg: ProjectConfig) -> None:
    """Validate configuration values and raise helpful errors.

    Args:
        cfg: ProjectConfig
    """
    if cfg.mgdl_per_mmol_chol <= 0 or cfg.mgdl_per_mmol_tg <= 0:
        raise ValueError(
            "Unit conversion factors must be positive. Check CVDRISK_MGDL_PER_MMOL_CHOL "
            "and CVDRISK_MGDL_PER_MMOL_TG."
        )
    if cfg.decimals < 0:
        raise ValueError("CVDRISK_DECIMALS must be >= 0.")
    if cfg.domain_errors not in DOMAIN_ERROR_POLICIES:
        raise ValueError(
            f"CVDRISK_DOMAIN_ERRORS must be one of {DOMAIN_ERROR_POLICIES}, got '{cfg.domain_errors}'."
        )
    if not isinstance(logging.getLevelName(cfg.log_level.upper()), int):
        raise ValueError(f"Unknown log level: {cfg.log_level}")


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a basic stream handler at the configured level.

    The package itself never installs handlers; applications and notebooks
    call this once if they want to see the score loggers.
    """
    level_name = (level or CONFIG.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
