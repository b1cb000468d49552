"""Engine configuration.

Thresholds that drive defect detection and test selection. The defaults
reproduce the reference behaviour; callers may override any of them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EngineConfig(BaseModel):
    """Tunable thresholds for the profiler and the test advisor."""

    model_config = ConfigDict(frozen=True)

    top_categories: int = Field(
        default=10, ge=1, description="Categories kept per categorical frequency table"
    )
    outlier_iqr_multiplier: float = Field(
        default=1.5, gt=0.0, description="IQR multiplier for the outlier fences"
    )
    max_outlier_samples: int = Field(
        default=5, ge=0, description="Sample outlier values kept per variable"
    )
    constant_max_distinct: int = Field(
        default=1,
        ge=0,
        description="Variables with at most this many distinct non-missing values are constant",
    )
    high_cardinality_ratio: float = Field(
        default=0.9,
        gt=0.0,
        le=1.0,
        description="Distinct-value share of the row count above which a category is high cardinality",
    )
    normality_max_variables: int = Field(
        default=10, ge=0, description="Numeric variables tested for normality"
    )
    normality_min_observations: int = Field(
        default=3, ge=3, description="Minimum non-missing values to attempt Shapiro-Wilk"
    )
    normality_max_sample: int = Field(
        default=5000,
        ge=3,
        le=5000,
        description="Larger samples are uniformly subsampled to this size",
    )
    normality_alpha: float = Field(
        default=0.05, gt=0.0, lt=1.0, description="p-value above which data appears normal"
    )
    small_sample_threshold: int = Field(
        default=30, ge=0, description="Row counts below this trigger the small-sample caveat"
    )
    large_sample_threshold: int = Field(
        default=10000, ge=0, description="Row counts above this trigger the large-sample caveat"
    )
    missing_rows_threshold_pct: float = Field(
        default=10.0,
        ge=0.0,
        le=100.0,
        description="Share of incomplete rows (percent) above which missing data is flagged",
    )


DEFAULT_CONFIG = EngineConfig()
