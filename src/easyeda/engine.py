"""Single entry point running the profiler and the test advisor together.

The variable type partition is computed once here and handed to both
components, so their bucket assignments always agree.
"""

from __future__ import annotations

import pandas as pd
from loguru import logger

from easyeda.advisor.normality import RandomState
from easyeda.advisor.recommender import recommend_tests
from easyeda.models.config import DEFAULT_CONFIG, EngineConfig
from easyeda.models.recommendations import AnalysisResult
from easyeda.profiling.classify import classify_variables
from easyeda.profiling.profiler import profile_dataset
from easyeda.profiling.validation import ensure_valid_dataset


def analyze(
    df: pd.DataFrame,
    *,
    config: EngineConfig | None = None,
    random_state: RandomState = None,
) -> AnalysisResult:
    """Profile ``df`` and recommend statistical tests for it.

    Args:
        df: Dataset to analyze. Treated as read-only.
        config: Thresholds; defaults to ``DEFAULT_CONFIG``.
        random_state: Seed or generator for normality-test subsampling.

    Returns:
        AnalysisResult holding the profile and the recommendations.

    Raises:
        InvalidInputError: If ``df`` is not a DataFrame, has zero rows, or
            has duplicate column names.
    """
    df = ensure_valid_dataset(df)
    config = config or DEFAULT_CONFIG
    partition = classify_variables(df)
    logger.info(
        "Analyzing dataset: {}",
        ", ".join(f"{n} {kind}" for kind, n in partition.counts().items()),
    )

    profile = profile_dataset(df, partition=partition, config=config)
    recommendations = recommend_tests(
        df, partition, config=config, random_state=random_state
    )
    return AnalysisResult(profile=profile, recommendations=recommendations)
