"""Dataset profiler for tabular data.

Produces shape information, a variable type partition, a missing-value
table, numeric descriptive statistics, categorical frequency tables,
IQR outlier reports, pairwise correlations and structural quality
findings for an arbitrary DataFrame. The input is never modified.
"""

from __future__ import annotations

import pandas as pd
from loguru import logger

from easyeda.models.config import DEFAULT_CONFIG, EngineConfig
from easyeda.models.profiling import DatasetInfo, DatasetProfile, MissingEntry, OutlierReport
from easyeda.models.variables import VariableTypePartition
from easyeda.profiling.classify import classify_variables
from easyeda.profiling.quality import assess_quality
from easyeda.profiling.statistics import (
    detect_outliers,
    frequency_table,
    pairwise_correlation,
    summarize_numeric,
)
from easyeda.profiling.validation import ensure_valid_dataset


def _dataset_info(df: pd.DataFrame) -> DatasetInfo:
    incomplete = int(df.isna().any(axis=1).sum()) if df.shape[1] else 0
    return DatasetInfo(
        n_rows=len(df),
        n_cols=df.shape[1],
        variable_names=[str(c) for c in df.columns],
        variable_dtypes={str(c): str(t) for c, t in df.dtypes.items()},
        memory_usage_bytes=int(df.memory_usage(deep=True).sum()),
        complete_cases=len(df) - incomplete,
        incomplete_rows=incomplete,
    )


def analyze_missing(df: pd.DataFrame) -> list[MissingEntry]:
    """Missing count and percentage per column, most-missing first.

    The sort is stable, so ties keep column order.
    """
    n_rows = len(df)
    missing_counts = df.isna().sum()
    entries = [
        MissingEntry(
            variable=str(col),
            missing_count=int(count),
            missing_percentage=round(int(count) / n_rows * 100, 2),
        )
        for col, count in missing_counts.items()
    ]
    return sorted(entries, key=lambda e: -e.missing_count)


def profile_dataset(
    df: pd.DataFrame,
    *,
    partition: VariableTypePartition | None = None,
    config: EngineConfig | None = None,
) -> DatasetProfile:
    """Profile a dataset, producing descriptive and quality statistics.

    Args:
        df: Dataset to profile. Treated as read-only.
        partition: Variable type partition to reuse. Computed from the
            dtypes when omitted.
        config: Thresholds; defaults to ``DEFAULT_CONFIG``.

    Returns:
        DatasetProfile for the dataset.

    Raises:
        InvalidInputError: If ``df`` is not a DataFrame, has zero rows, or
            has duplicate column names.
    """
    df = ensure_valid_dataset(df)
    config = config or DEFAULT_CONFIG
    if partition is None:
        partition = classify_variables(df)
    n_rows = len(df)

    logger.info("Profiling dataset ({} rows x {} cols)", n_rows, df.shape[1])

    numeric_summary = [summarize_numeric(col, df[col]) for col in partition.numeric]

    categorical_columns = partition.categorical_like_in(df.columns)
    categorical_summary = [
        frequency_table(col, df[col], n_rows, top=config.top_categories)
        for col in categorical_columns
    ]

    outliers: list[OutlierReport] = []
    for col in partition.numeric:
        report = detect_outliers(
            col,
            df[col],
            n_rows,
            multiplier=config.outlier_iqr_multiplier,
            max_samples=config.max_outlier_samples,
        )
        if report is None:
            logger.debug("No outlier report for {}: no observed values", col)
            continue
        outliers.append(report)

    correlation_matrix = None
    if len(partition.numeric) >= 2:
        correlation_matrix = pairwise_correlation(df, partition.numeric)

    quality_issues = assess_quality(
        df,
        categorical_columns,
        constant_max_distinct=config.constant_max_distinct,
        high_cardinality_ratio=config.high_cardinality_ratio,
    )

    profile = DatasetProfile(
        dataset_info=_dataset_info(df),
        variable_types=partition,
        missing_analysis=analyze_missing(df),
        numeric_summary=numeric_summary,
        categorical_summary=categorical_summary,
        outliers=outliers,
        correlation_matrix=correlation_matrix,
        quality_issues=quality_issues,
    )

    logger.info(
        "Profiled dataset: {} numeric, {} categorical, {} with outliers, "
        "{} duplicate rows, {} constant, {} high cardinality",
        len(partition.numeric),
        len(categorical_columns),
        sum(1 for o in outliers if o.count > 0),
        quality_issues.duplicate_rows,
        len(quality_issues.constant_variables),
        len(quality_issues.high_cardinality_variables),
    )

    return profile
