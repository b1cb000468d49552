"""Plain-text digest of a dataset profile.

The digest is the bounded summary handed to a narrative writer: an
overview, then at most five lines each for missing values, numeric
variables and outliers, then any quality issues. Blocks with nothing to
report are left out.
"""

from __future__ import annotations

from easyeda.models.profiling import DatasetProfile
from easyeda.reporting.formatting import format_number, format_percentage

MAX_LINES_PER_SECTION = 5


def _overview(profile: DatasetProfile) -> str:
    info = profile.dataset_info
    types = profile.variable_types
    return "\n".join(
        [
            "Dataset Overview:",
            f"- {info.n_rows} rows, {info.n_cols} columns",
            (
                f"- Variable types: {len(types.numeric)} numeric, "
                f"{len(types.character)} character, {len(types.categorical)} categorical, "
                f"{len(types.logical)} logical, {len(types.datetime)} date/time"
            ),
        ]
    )


def _missing(profile: DatasetProfile) -> str | None:
    entries = [e for e in profile.missing_analysis if e.missing_count > 0]
    if not entries:
        return None
    lines = [
        f"- {e.variable}: {e.missing_count} missing ({format_percentage(e.missing_percentage)})"
        for e in entries[:MAX_LINES_PER_SECTION]
    ]
    return "\n".join(["Missing Values:", *lines])


def _numeric(profile: DatasetProfile) -> str | None:
    if not profile.numeric_summary:
        return None
    lines = [
        (
            f"- {s.variable}: mean={format_number(s.mean, 2)}, "
            f"sd={format_number(s.sd, 2)}, skew={format_number(s.skewness, 2)}"
        )
        for s in profile.numeric_summary[:MAX_LINES_PER_SECTION]
    ]
    return "\n".join(["Numeric Variables Summary:", *lines])


def _outliers(profile: DatasetProfile) -> str | None:
    flagged = [o for o in profile.outliers if o.count > 0]
    if not flagged:
        return None
    lines = [
        f"- {o.variable}: {o.count} outliers ({format_percentage(o.percentage)})"
        for o in flagged[:MAX_LINES_PER_SECTION]
    ]
    return "\n".join(["Outliers Detected:", *lines])


def _quality(profile: DatasetProfile) -> str | None:
    issues = profile.quality_issues
    if not issues.has_issues:
        return None
    lines = ["Data Quality Issues:"]
    if issues.duplicate_rows:
        lines.append(f"- {issues.duplicate_rows} duplicate rows")
    if issues.constant_variables:
        lines.append(f"- Constant variables: {', '.join(issues.constant_variables)}")
    if issues.high_cardinality_variables:
        lines.append(
            f"- High cardinality variables: {', '.join(issues.high_cardinality_variables)}"
        )
    return "\n".join(lines)


def prepare_data_summary(profile: DatasetProfile) -> str:
    """Flatten a profile into the plain-text digest.

    Args:
        profile: Profile produced by ``profile_dataset``.

    Returns:
        Digest blocks separated by blank lines.
    """
    blocks = [
        _overview(profile),
        _missing(profile),
        _numeric(profile),
        _outliers(profile),
        _quality(profile),
    ]
    return "\n\n".join(b for b in blocks if b)
