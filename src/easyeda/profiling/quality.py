"""Structural data-quality checks."""

from __future__ import annotations

import pandas as pd

from easyeda.models.profiling import QualityIssues
from easyeda.profiling.statistics import hashable_values


def count_duplicate_rows(df: pd.DataFrame) -> int:
    """Rows that exactly repeat an earlier row, missing markers included."""
    if df.shape[1] == 0:
        return 0
    return int(df.apply(hashable_values).duplicated(keep="first").sum())


def distinct_count(series: pd.Series, *, include_missing: bool = False) -> int:
    """Distinct non-missing values, plus one missing level if requested."""
    n_distinct = int(hashable_values(series).nunique(dropna=True))
    if include_missing and series.isna().any():
        n_distinct += 1
    return n_distinct


def find_constant_variables(df: pd.DataFrame, max_distinct: int = 1) -> list[str]:
    """Columns with at most ``max_distinct`` distinct non-missing values."""
    return [str(col) for col in df.columns if distinct_count(df[col]) <= max_distinct]


def find_high_cardinality_variables(
    df: pd.DataFrame, columns: list[str], ratio: float = 0.9
) -> list[str]:
    """Categorical columns whose level count (missing included) exceeds ``ratio * n``."""
    threshold = len(df) * ratio
    return [
        col for col in columns if distinct_count(df[col], include_missing=True) > threshold
    ]


def assess_quality(
    df: pd.DataFrame,
    categorical_columns: list[str],
    *,
    constant_max_distinct: int = 1,
    high_cardinality_ratio: float = 0.9,
) -> QualityIssues:
    """Run every structural check on ``df``."""
    return QualityIssues(
        duplicate_rows=count_duplicate_rows(df),
        constant_variables=find_constant_variables(df, constant_max_distinct),
        high_cardinality_variables=find_high_cardinality_variables(
            df, categorical_columns, high_cardinality_ratio
        ),
    )
