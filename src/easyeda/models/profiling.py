"""Dataset profiling result models.

These models represent the output of the profiling stage, where a tabular
dataset is analyzed to produce descriptive statistics, frequency tables,
outlier reports, pairwise correlations and data-quality findings.

Statistics that have no meaningful value (e.g. the standard deviation of a
single observation) are ``None``. Consumers must check for ``None`` before
formatting; it is never a stand-in for zero.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from easyeda.models.variables import VariableTypePartition


class DatasetInfo(BaseModel):
    """Shape and layout of the profiled dataset."""

    n_rows: int = Field(..., ge=1, description="Number of rows")
    n_cols: int = Field(..., ge=0, description="Number of columns")
    variable_names: list[str] = Field(default_factory=list, description="Column names in order")
    variable_dtypes: dict[str, str] = Field(
        default_factory=dict, description="Column name -> pandas dtype string"
    )
    memory_usage_bytes: int = Field(..., ge=0, description="Deep memory usage of the dataset")
    complete_cases: int = Field(..., ge=0, description="Rows without any missing value")
    incomplete_rows: int = Field(..., ge=0, description="Rows with at least one missing value")


class MissingEntry(BaseModel):
    """Missing-value count for a single variable."""

    variable: str = Field(..., description="Variable name")
    missing_count: int = Field(..., ge=0, description="Number of missing values")
    missing_percentage: float = Field(
        ..., ge=0.0, le=100.0, description="Percentage of rows missing, 2 decimals"
    )


class NumericSummary(BaseModel):
    """Descriptive statistics of a numeric variable over its non-missing values.

    All statistics are rounded to 3 decimals and are None when undefined.
    """

    variable: str = Field(..., description="Variable name")
    n: int = Field(..., ge=0, description="Number of non-missing values")
    mean: float | None = Field(default=None, description="Arithmetic mean")
    sd: float | None = Field(default=None, description="Sample standard deviation (ddof=1)")
    median: float | None = Field(default=None, description="Median")
    min: float | None = Field(default=None, description="Minimum")
    max: float | None = Field(default=None, description="Maximum")
    q25: float | None = Field(default=None, description="First quartile (type 7)")
    q75: float | None = Field(default=None, description="Third quartile (type 7)")
    range: float | None = Field(default=None, description="max - min")
    iqr: float | None = Field(default=None, description="q75 - q25")
    skewness: float | None = Field(default=None, description="Sample skewness")


class CategoryCount(BaseModel):
    """Frequency of one category (or of the missing bucket)."""

    category: str = Field(..., description="Category label, '(missing)' for absent values")
    count: int = Field(..., ge=0, description="Number of occurrences")
    percentage: float = Field(..., ge=0.0, le=100.0, description="Percentage of all rows")
    is_missing: bool = Field(default=False, description="Whether this is the missing bucket")


class CategoricalSummary(BaseModel):
    """Top categories of a character or categorical variable."""

    variable: str = Field(..., description="Variable name")
    n_categories: int = Field(..., ge=0, description="Distinct levels, missing included")
    categories: list[CategoryCount] = Field(
        default_factory=list, description="Most frequent categories, descending by count"
    )


class OutlierReport(BaseModel):
    """IQR-fence outliers of a numeric variable."""

    variable: str = Field(..., description="Variable name")
    count: int = Field(..., ge=0, description="Values strictly outside the fences")
    percentage: float = Field(..., ge=0.0, le=100.0, description="Percentage of all rows")
    lower_bound: float = Field(..., description="Q1 - k * IQR, 3 decimals")
    upper_bound: float = Field(..., description="Q3 + k * IQR, 3 decimals")
    values: list[float] = Field(
        default_factory=list, description="First outlier values in original order"
    )


class CorrelationMatrix(BaseModel):
    """Pairwise-complete Pearson correlations between numeric variables.

    ``values[i][j]`` is the correlation of ``variables[i]`` and
    ``variables[j]``; None marks a pair without enough paired data.
    """

    variables: list[str] = Field(..., description="Row/column order of the matrix")
    values: list[list[float | None]] = Field(..., description="Square correlation matrix")
    method: str = Field(default="pearson", description="Correlation coefficient")

    def get(self, a: str, b: str) -> float | None:
        """Correlation between two variables, None when undefined."""
        i = self.variables.index(a)
        j = self.variables.index(b)
        return self.values[i][j]

    def strongest_pairs(self, limit: int = 5) -> list[tuple[str, str, float]]:
        """Defined off-diagonal pairs ordered by absolute correlation."""
        pairs: list[tuple[str, str, float]] = []
        for i, a in enumerate(self.variables):
            for j in range(i + 1, len(self.variables)):
                value = self.values[i][j]
                if value is not None:
                    pairs.append((a, self.variables[j], value))
        pairs.sort(key=lambda p: abs(p[2]), reverse=True)
        return pairs[:limit]


class QualityIssues(BaseModel):
    """Structural data-quality defects."""

    duplicate_rows: int = Field(
        default=0, ge=0, description="Rows duplicating an earlier row (0 when none)"
    )
    constant_variables: list[str] = Field(
        default_factory=list, description="Variables with at most one distinct value"
    )
    high_cardinality_variables: list[str] = Field(
        default_factory=list, description="Categories behaving like identifiers"
    )

    @property
    def has_issues(self) -> bool:
        return bool(
            self.duplicate_rows or self.constant_variables or self.high_cardinality_variables
        )


class DatasetProfile(BaseModel):
    """Complete profile of a tabular dataset.

    Per-variable sections are in column-declaration order, except the
    missing-value table which is sorted by missing count.
    """

    dataset_info: DatasetInfo = Field(..., description="Shape and layout")
    variable_types: VariableTypePartition = Field(..., description="Type bucket partition")
    missing_analysis: list[MissingEntry] = Field(
        default_factory=list, description="Missing counts, descending"
    )
    numeric_summary: list[NumericSummary] = Field(
        default_factory=list, description="Descriptive statistics per numeric variable"
    )
    categorical_summary: list[CategoricalSummary] = Field(
        default_factory=list, description="Frequency tables per categorical variable"
    )
    outliers: list[OutlierReport] = Field(
        default_factory=list, description="IQR outliers per numeric variable"
    )
    correlation_matrix: CorrelationMatrix | None = Field(
        default=None, description="Present only with two or more numeric variables"
    )
    quality_issues: QualityIssues = Field(
        default_factory=QualityIssues, description="Structural defects"
    )

    def numeric(self, variable: str) -> NumericSummary | None:
        """Numeric summary for ``variable``, if it is numeric."""
        return next((s for s in self.numeric_summary if s.variable == variable), None)

    def categorical(self, variable: str) -> CategoricalSummary | None:
        """Frequency table for ``variable``, if it has one."""
        return next((s for s in self.categorical_summary if s.variable == variable), None)

    def outlier(self, variable: str) -> OutlierReport | None:
        """Outlier report for ``variable``, if one was produced."""
        return next((o for o in self.outliers if o.variable == variable), None)
