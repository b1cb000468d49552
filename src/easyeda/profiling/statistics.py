"""Column-level statistics shared by the profiler and the test advisor.

Quantiles use linear interpolation between order statistics (Hyndman &
Fan type 7, numpy's default ``linear`` method). The IQR fence rule lives
here so that the profiler's outlier report and the advisor's outlier
caveat can never disagree.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from easyeda.models.profiling import (
    CategoricalSummary,
    CategoryCount,
    CorrelationMatrix,
    NumericSummary,
    OutlierReport,
)

MISSING_LABEL = "(missing)"


def round_stat(value: float | None, digits: int = 3) -> float | None:
    """Round a statistic, keeping undefined (None / NaN) values as None."""
    if value is None:
        return None
    value = float(value)
    if math.isnan(value):
        return None
    return round(value, digits)


def _hashable(value: object) -> object:
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value


def hashable_values(series: pd.Series) -> pd.Series:
    """``series`` with unhashable cells (lists, dicts, sets) replaced by their repr.

    Counting, factorizing and duplicate detection all hash cell values.
    Missing markers are hashable and stay missing.
    """
    if series.dtype != object:
        return series
    return series.map(_hashable)


def as_float_array(series: pd.Series) -> np.ndarray:
    """Numeric values of ``series`` as float64, missing values as NaN."""
    return series.to_numpy(dtype="float64", na_value=np.nan)


def non_missing_values(series: pd.Series) -> np.ndarray:
    """Float values of ``series`` with missing entries dropped, original order."""
    values = as_float_array(series)
    return values[~np.isnan(values)]


def quantile(values: np.ndarray, q: float) -> float | None:
    """Type-7 quantile of ``values``; None for an empty sample."""
    if values.size == 0:
        return None
    return float(np.quantile(values, q))


def iqr_fences(values: np.ndarray, multiplier: float = 1.5) -> tuple[float, float] | None:
    """Outlier fences ``[Q1 - k*IQR, Q3 + k*IQR]`` over non-missing values.

    Args:
        values: Non-missing numeric values.
        multiplier: IQR multiplier ``k``.

    Returns:
        (lower, upper) bounds, or None when there are no values.
    """
    if values.size == 0:
        return None
    q1 = float(np.quantile(values, 0.25))
    q3 = float(np.quantile(values, 0.75))
    iqr = q3 - q1
    return q1 - multiplier * iqr, q3 + multiplier * iqr


def outlier_mask(series: pd.Series, lower: float, upper: float) -> np.ndarray:
    """Boolean mask of values strictly outside ``[lower, upper]``.

    Missing values are never outliers.
    """
    values = as_float_array(series)
    with np.errstate(invalid="ignore"):
        return (values < lower) | (values > upper)


def count_outliers(series: pd.Series, multiplier: float = 1.5) -> int:
    """Number of IQR-fence outliers in a numeric column."""
    fences = iqr_fences(non_missing_values(series), multiplier)
    if fences is None:
        return 0
    return int(outlier_mask(series, *fences).sum())


def summarize_numeric(name: str, series: pd.Series) -> NumericSummary:
    """Descriptive statistics of a numeric column over its non-missing values.

    Statistics with no defined value (everything for an all-missing
    column, ``sd`` for a single value, ``skewness`` below three values or
    for a constant column) are left as None.
    """
    values = non_missing_values(series)
    n = int(values.size)
    if n == 0:
        return NumericSummary(variable=name, n=0)

    mean = round_stat(values.mean())
    sd = round_stat(values.std(ddof=1)) if n >= 2 else None
    median = round_stat(np.median(values))
    vmin = round_stat(values.min())
    vmax = round_stat(values.max())
    q25 = round_stat(quantile(values, 0.25))
    q75 = round_stat(quantile(values, 0.75))
    # Skewness of a zero-variance sample is 0/0.
    skewness = None
    if n >= 3 and np.ptp(values) > 0:
        skewness = round_stat(pd.Series(values).skew())

    return NumericSummary(
        variable=name,
        n=n,
        mean=mean,
        sd=sd,
        median=median,
        min=vmin,
        max=vmax,
        q25=q25,
        q75=q75,
        range=round_stat(vmax - vmin) if vmin is not None and vmax is not None else None,
        iqr=round_stat(q75 - q25) if q25 is not None and q75 is not None else None,
        skewness=skewness,
    )


def detect_outliers(
    name: str,
    series: pd.Series,
    n_rows: int,
    *,
    multiplier: float = 1.5,
    max_samples: int = 5,
) -> OutlierReport | None:
    """IQR-fence outlier report for a numeric column.

    Returns:
        OutlierReport, or None when the column has no non-missing values.
    """
    fences = iqr_fences(non_missing_values(series), multiplier)
    if fences is None:
        return None
    lower, upper = fences
    mask = outlier_mask(series, lower, upper)
    flagged = as_float_array(series)[mask]
    count = int(mask.sum())
    return OutlierReport(
        variable=name,
        count=count,
        percentage=round(count / n_rows * 100, 2),
        lower_bound=round(lower, 3),
        upper_bound=round(upper, 3),
        values=[float(v) for v in flagged[:max_samples]],
    )


def frequency_table(
    name: str, series: pd.Series, n_rows: int, *, top: int = 10
) -> CategoricalSummary:
    """Category frequencies of a column, missing values as their own bucket.

    Categories are ordered by descending count; ties keep the order in
    which each category (or the missing bucket) first appears.
    """
    values = hashable_values(series.astype(object))
    codes, uniques = pd.factorize(values)
    present = codes >= 0
    counts = np.bincount(codes[present], minlength=len(uniques))

    entries: list[CategoryCount] = [
        CategoryCount(
            category=str(label),
            count=int(cnt),
            percentage=round(int(cnt) / n_rows * 100, 2),
        )
        for label, cnt in zip(uniques, counts, strict=True)
    ]

    n_missing = int((~present).sum())
    if n_missing:
        # Codes are assigned in order of first appearance, so the number of
        # categories seen before the first missing value is max code + 1.
        first_missing = int(np.argmin(present))
        rank = int(codes[:first_missing].max()) + 1 if first_missing else 0
        entries.insert(
            rank,
            CategoryCount(
                category=MISSING_LABEL,
                count=n_missing,
                percentage=round(n_missing / n_rows * 100, 2),
                is_missing=True,
            ),
        )

    ranked = sorted(entries, key=lambda e: -e.count)
    return CategoricalSummary(variable=name, n_categories=len(entries), categories=ranked[:top])


def pairwise_correlation(df: pd.DataFrame, columns: list[str]) -> CorrelationMatrix:
    """Pearson correlation using pairwise-complete observations.

    The diagonal is exactly 1 for any column with at least one observed
    value. Off-diagonal cells with fewer than two paired observations or
    zero variance are undefined (None).
    """
    frame = pd.DataFrame({c: as_float_array(df[c]) for c in columns})
    corr = frame.corr(method="pearson", min_periods=2).to_numpy()
    observed = frame.notna().any().to_numpy()

    size = len(columns)
    values: list[list[float | None]] = [[None] * size for _ in range(size)]
    for i in range(size):
        values[i][i] = 1.0 if observed[i] else None
        for j in range(i + 1, size):
            cell = corr[i, j]
            value = None if np.isnan(cell) else float(np.clip(cell, -1.0, 1.0))
            values[i][j] = value
            values[j][i] = value

    return CorrelationMatrix(variables=list(columns), values=values)
