"""Score a cohort held in a DataFrame."""
from __future__ import annotations

import inspect
import logging
from typing import Dict, Optional, Union

import pandas as pd

from .registry import get_score

logger = logging.getLogger(__name__)


def compute_score_from_dataframe(
    df: pd.DataFrame,
    name: str,
    columns: Optional[Dict[str, str]] = None,
    **options,
) -> Union[pd.Series, pd.DataFrame]:
    """
    Compute a risk score for every row of a DataFrame.

    Columns are matched to the calculator's parameters by name; ``columns``
    maps a parameter to a differently named column. Parameters without a
    matching column are left unset, so required ones raise MissingInput.

    Args:
        df: Input DataFrame, one patient per row
        name: Registered score name (see list_scores())
        columns: Optional mapping parameter name -> column name
        **options: Score options such as risk="moderate" or mmol=True

    Returns:
        Series of risks named after the score and aligned to df.index, or
        a DataFrame for scores returning several columns (Framingham CVD
        chart with heart_age=True)
    """
    calculator = get_score(name)
    columns = columns or {}
    missing_columns = [column for column in columns.values() if column not in df.columns]
    if missing_columns:
        logger.warning(f"{calculator.name}: mapped column(s) not in DataFrame: {missing_columns}")

    inputs = {}
    for parameter, signature_param in inspect.signature(calculator.compute_batch).parameters.items():
        if parameter in options:
            continue
        column = columns.get(parameter, parameter)
        if column in df.columns:
            inputs[parameter] = df[column].to_numpy()
        elif signature_param.default is inspect.Parameter.empty:
            inputs[parameter] = None

    logger.info(f"{calculator.name}: scoring {len(df)} row(s) from DataFrame")
    result = calculator.compute_batch(**inputs, **options)

    if isinstance(result, pd.DataFrame):
        result.index = df.index
        return result
    return pd.Series(result, index=df.index, name=calculator.name)
