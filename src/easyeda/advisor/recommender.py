"""Statistical test recommendations from a dataset's structure.

Test selection is a fixed decision table over the number of variables in
each type bucket:

    numeric >= 2                       -> Pearson, Spearman
    numeric >= 1 and binary >= 1       -> t-test, Mann-Whitney
    numeric >= 1 and categorical >= 1  -> ANOVA, Kruskal-Wallis
    categorical >= 2                   -> Chi-square

"Categorical" covers character and pandas category columns. A binary
variable is any column with exactly two distinct non-missing values,
whatever its bucket.
"""

from __future__ import annotations

import pandas as pd
from loguru import logger

from easyeda.advisor import guidance
from easyeda.advisor.normality import RandomState, run_normality_tests
from easyeda.models.config import DEFAULT_CONFIG, EngineConfig
from easyeda.models.recommendations import RecommendationSet, TestGuidance
from easyeda.models.variables import VariableTypePartition
from easyeda.profiling.classify import classify_variables
from easyeda.profiling.quality import distinct_count
from easyeda.profiling.statistics import count_outliers
from easyeda.profiling.validation import ensure_valid_dataset


def find_binary_variables(df: pd.DataFrame) -> list[str]:
    """Columns with exactly two distinct non-missing values, in column order."""
    return [str(col) for col in df.columns if distinct_count(df[col]) == 2]


def correlation_guidance(partition: VariableTypePartition) -> dict[str, TestGuidance]:
    """Correlation tests applicable to the dataset."""
    if len(partition.numeric) >= 2:
        return {"pearson": guidance.PEARSON, "spearman": guidance.SPEARMAN}
    return {}


def comparison_guidance(
    partition: VariableTypePartition, binary_variables: list[str]
) -> dict[str, TestGuidance]:
    """Group comparison tests applicable to the dataset."""
    n_numeric = len(partition.numeric)
    n_categorical = len(partition.categorical_like)
    tests: dict[str, TestGuidance] = {}

    if n_numeric >= 1 and binary_variables:
        tests["t_test"] = guidance.T_TEST
        tests["mann_whitney"] = guidance.MANN_WHITNEY

    if n_numeric >= 1 and n_categorical >= 1:
        tests["anova"] = guidance.ANOVA
        tests["kruskal_wallis"] = guidance.KRUSKAL_WALLIS

    if n_categorical >= 2:
        tests["chi_square"] = guidance.CHI_SQUARE

    return tests


def incomplete_row_rate(df: pd.DataFrame) -> float:
    """Percentage of rows with at least one missing value."""
    if df.shape[1] == 0:
        return 0.0
    return float(df.isna().any(axis=1).mean() * 100)


def general_recommendations(
    df: pd.DataFrame,
    partition: VariableTypePartition,
    config: EngineConfig = DEFAULT_CONFIG,
) -> dict[str, str]:
    """Caveats driven by sample size, missing data and outliers."""
    notes: dict[str, str] = {}
    n_rows = len(df)

    if n_rows < config.small_sample_threshold:
        notes["sample_size"] = guidance.SMALL_SAMPLE_MESSAGE.format(
            threshold=config.small_sample_threshold
        )
    elif n_rows > config.large_sample_threshold:
        notes["sample_size"] = guidance.LARGE_SAMPLE_MESSAGE.format(
            threshold=config.large_sample_threshold
        )

    missing_rate = incomplete_row_rate(df)
    if missing_rate > config.missing_rows_threshold_pct:
        notes["missing_data"] = guidance.MISSING_DATA_MESSAGE.format(rate=missing_rate)

    if any(
        count_outliers(df[col], config.outlier_iqr_multiplier) > 0 for col in partition.numeric
    ):
        notes["outliers"] = guidance.OUTLIER_MESSAGE

    return notes


def recommend_tests(
    df: pd.DataFrame,
    partition: VariableTypePartition | None = None,
    *,
    config: EngineConfig | None = None,
    random_state: RandomState = None,
) -> RecommendationSet:
    """Recommend statistical tests suited to the dataset's structure.

    Args:
        df: Dataset to inspect. Treated as read-only.
        partition: Variable type partition shared with the profiler.
            Computed from the dtypes when omitted.
        config: Thresholds; defaults to ``DEFAULT_CONFIG``.
        random_state: Seed or generator for normality-test subsampling.

    Returns:
        RecommendationSet with normality results, test guidance and caveats.

    Raises:
        InvalidInputError: If ``df`` is not a DataFrame, has zero rows, or
            has duplicate column names.
    """
    df = ensure_valid_dataset(df)
    config = config or DEFAULT_CONFIG
    if partition is None:
        partition = classify_variables(df)

    logger.info("Recommending tests ({} rows x {} cols)", len(df), df.shape[1])

    binary_variables = find_binary_variables(df)
    recommendations = RecommendationSet(
        normality_tests=run_normality_tests(
            df, partition.numeric, config=config, random_state=random_state
        ),
        correlation_tests=correlation_guidance(partition),
        comparison_tests=comparison_guidance(partition, binary_variables),
        general_recommendations=general_recommendations(df, partition, config),
        binary_variables=binary_variables,
    )

    logger.info(
        "Recommended {} correlation and {} comparison tests, {} caveats, "
        "{} normality results ({} failed)",
        len(recommendations.correlation_tests),
        len(recommendations.comparison_tests),
        len(recommendations.general_recommendations),
        len(recommendations.normality_tests),
        sum(1 for r in recommendations.normality_tests if r.failed),
    )

    return recommendations
