"""Statistical test recommendation models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from easyeda.models.profiling import DatasetProfile


class NormalityTestResult(BaseModel):
    """Outcome of a normality test on one numeric variable.

    A failed test has ``error`` set and leaves statistic, p-value and
    ``is_normal`` undefined (None).
    """

    variable: str = Field(..., description="Variable name")
    test: str = Field(default="Shapiro-Wilk", description="Test performed")
    statistic: float | None = Field(default=None, description="Test statistic W")
    p_value: float | None = Field(default=None, ge=0.0, le=1.0, description="p-value")
    is_normal: bool | None = Field(default=None, description="p-value above alpha")
    interpretation: str = Field(..., description="Plain-language reading of the result")
    n_used: int = Field(default=0, ge=0, description="Observations the test was run on")
    subsampled: bool = Field(
        default=False, description="Whether a random subsample replaced the full data"
    )
    error: str | None = Field(default=None, description="Failure reason, None on success")

    @property
    def failed(self) -> bool:
        return self.error is not None


class TestGuidance(BaseModel):
    """Description of a statistical test applicable to the dataset."""

    name: str = Field(..., description="Short test name")
    description: str = Field(..., description="What the test is")
    applicable_when: str = Field(..., description="Conditions under which to use it")
    interpretation: str = Field(..., description="What the result means")


class RecommendationSet(BaseModel):
    """Test recommendations derived from a dataset's structure."""

    normality_tests: list[NormalityTestResult] = Field(
        default_factory=list, description="Per-variable normality tests"
    )
    correlation_tests: dict[str, TestGuidance] = Field(
        default_factory=dict, description="Correlation test guidance keyed by test id"
    )
    comparison_tests: dict[str, TestGuidance] = Field(
        default_factory=dict, description="Group comparison test guidance keyed by test id"
    )
    general_recommendations: dict[str, str] = Field(
        default_factory=dict, description="Caveats keyed by topic"
    )
    binary_variables: list[str] = Field(
        default_factory=list, description="Columns with exactly two distinct values"
    )


class AnalysisResult(BaseModel):
    """Profile and recommendations produced by one engine call."""

    profile: DatasetProfile
    recommendations: RecommendationSet
