"""Shapiro-Wilk normality testing for numeric variables.

Samples larger than the Shapiro-Wilk limit are uniformly subsampled, which
makes the p-value depend on the random draw. Pass a seeded generator (or
an integer seed) as ``random_state`` for reproducible results.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
from loguru import logger
from scipy import stats

from easyeda.errors import StatisticalTestFailure
from easyeda.models.config import DEFAULT_CONFIG, EngineConfig
from easyeda.models.recommendations import NormalityTestResult
from easyeda.profiling.statistics import non_missing_values

RandomState = int | np.random.Generator | None

TEST_NAME = "Shapiro-Wilk"
NORMAL_INTERPRETATION = "Data appears normally distributed"
NOT_NORMAL_INTERPRETATION = "Data does not appear normally distributed"
FAILED_INTERPRETATION = "Test failed - check data quality"


def shapiro_wilk(variable: str, values: np.ndarray) -> tuple[float, float]:
    """Run Shapiro-Wilk on non-missing values.

    Raises:
        StatisticalTestFailure: If the sample is degenerate or scipy cannot
            produce a finite result.
    """
    if values.size < 3:
        raise StatisticalTestFailure(variable, f"need at least 3 observations, got {values.size}")
    if not np.all(np.isfinite(values)):
        raise StatisticalTestFailure(variable, "sample contains infinite values")
    if np.ptp(values) == 0:
        raise StatisticalTestFailure(variable, "all values are identical")

    try:
        statistic, p_value = stats.shapiro(values)
    except ValueError as e:
        raise StatisticalTestFailure(variable, str(e)) from e

    statistic = float(statistic)
    p_value = float(p_value)
    if math.isnan(statistic) or math.isnan(p_value):
        raise StatisticalTestFailure(variable, "test returned an undefined result")
    return statistic, min(max(p_value, 0.0), 1.0)


def check_normality(
    variable: str,
    series: pd.Series,
    *,
    rng: np.random.Generator,
    config: EngineConfig = DEFAULT_CONFIG,
) -> NormalityTestResult | None:
    """Test one numeric column for normality.

    Returns:
        NormalityTestResult (possibly an error entry), or None when the
        column has too few observations to attempt the test.
    """
    values = non_missing_values(series)
    if values.size < config.normality_min_observations:
        logger.debug("Skipping normality test for {}: {} observations", variable, values.size)
        return None

    subsampled = False
    if values.size > config.normality_max_sample:
        logger.debug(
            "Subsampling {} from {} to {} observations",
            variable,
            values.size,
            config.normality_max_sample,
        )
        values = rng.choice(values, size=config.normality_max_sample, replace=False)
        subsampled = True

    try:
        statistic, p_value = shapiro_wilk(variable, values)
    except StatisticalTestFailure as e:
        logger.warning("Normality test failed for {}: {}", variable, e.reason)
        return NormalityTestResult(
            variable=variable,
            test=TEST_NAME,
            interpretation=FAILED_INTERPRETATION,
            n_used=int(values.size),
            subsampled=subsampled,
            error=f"Could not perform test: {e.reason}",
        )

    is_normal = p_value > config.normality_alpha
    return NormalityTestResult(
        variable=variable,
        test=TEST_NAME,
        statistic=statistic,
        p_value=p_value,
        is_normal=is_normal,
        interpretation=NORMAL_INTERPRETATION if is_normal else NOT_NORMAL_INTERPRETATION,
        n_used=int(values.size),
        subsampled=subsampled,
    )


def run_normality_tests(
    df: pd.DataFrame,
    numeric_columns: list[str],
    *,
    config: EngineConfig = DEFAULT_CONFIG,
    random_state: RandomState = None,
) -> list[NormalityTestResult]:
    """Normality tests for the leading numeric columns of ``df``.

    Only the first ``config.normality_max_variables`` numeric columns (in
    declaration order) are tested. A failure on one column is recorded on
    that column's entry and never affects the others.
    """
    rng = np.random.default_rng(random_state)
    results: list[NormalityTestResult] = []
    for col in numeric_columns[: config.normality_max_variables]:
        result = check_normality(col, df[col], rng=rng, config=config)
        if result is not None:
            results.append(result)
    return results
