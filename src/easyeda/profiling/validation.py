"""Input validation for datasets handed to the engine."""

from __future__ import annotations

from typing import Any

import pandas as pd
from loguru import logger
from pydantic import BaseModel, Field

from easyeda.errors import InvalidInputError

# Sizes past which analysis still runs but callers should consider reducing input.
LARGE_ROW_COUNT = 1_000_000
WIDE_COLUMN_COUNT = 1_000


class DatasetValidation(BaseModel):
    """Result of validating a candidate dataset."""

    is_valid: bool = Field(default=True, description="Whether the dataset can be profiled")
    messages: list[str] = Field(default_factory=list, description="Reasons it cannot")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal observations")


def validate_dataset(data: Any) -> DatasetValidation:
    """Check that ``data`` is a non-empty, well-formed DataFrame.

    Zero columns is accepted; zero rows and duplicate column names are not.

    Args:
        data: Candidate dataset.

    Returns:
        DatasetValidation with fatal messages and non-fatal warnings.
    """
    result = DatasetValidation()

    if not isinstance(data, pd.DataFrame):
        result.is_valid = False
        result.messages.append(
            f"Input must be a pandas DataFrame, got {type(data).__name__}"
        )
        return result

    if len(data) == 0:
        result.is_valid = False
        result.messages.append("Data frame is empty")
        return result

    names = pd.Index([str(c) for c in data.columns])
    if names.duplicated().any():
        dupes = sorted(set(names[names.duplicated()]))
        result.is_valid = False
        result.messages.append(f"Duplicate column names detected: {', '.join(dupes)}")

    if len(data) > LARGE_ROW_COUNT:
        result.warnings.append(
            "Large dataset detected. Consider sampling for better performance."
        )
    if data.shape[1] > WIDE_COLUMN_COUNT:
        result.warnings.append(
            "High-dimensional dataset detected. Analysis may be limited to subset of variables."
        )
    if any(str(c).strip() == "" for c in data.columns):
        result.warnings.append(
            "Some variables have empty names. Consider renaming for clarity."
        )

    return result


def ensure_valid_dataset(data: Any) -> pd.DataFrame:
    """Validate ``data`` and return it with string column names.

    Raises:
        InvalidInputError: If the dataset is not tabular, has zero rows,
            or has duplicate column names.
    """
    validation = validate_dataset(data)
    for warning in validation.warnings:
        logger.warning("Dataset validation: {}", warning)
    if not validation.is_valid:
        msg = "; ".join(validation.messages)
        raise InvalidInputError(msg)
    # Column names are addressed as strings everywhere downstream.
    return data.set_axis([str(c) for c in data.columns], axis=1)
