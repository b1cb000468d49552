"""Variable type classification by declared dtype.

A column's bucket depends only on its pandas dtype, never on its values,
so the same partition can be computed once and shared by every pass.
"""

from __future__ import annotations

import pandas as pd
from pandas.api import types as ptypes

from easyeda.models.variables import VariableKind, VariableTypePartition


def classify_dtype(dtype: object) -> VariableKind:
    """Map a pandas dtype to its variable bucket.

    Booleans are checked before numerics because pandas treats bool as a
    numeric dtype.
    """
    if isinstance(dtype, pd.CategoricalDtype):
        return VariableKind.CATEGORICAL
    if ptypes.is_bool_dtype(dtype):
        return VariableKind.LOGICAL
    if (
        ptypes.is_datetime64_any_dtype(dtype)
        or ptypes.is_timedelta64_dtype(dtype)
        or isinstance(dtype, pd.PeriodDtype)
    ):
        return VariableKind.DATETIME
    if ptypes.is_numeric_dtype(dtype) and not ptypes.is_complex_dtype(dtype):
        return VariableKind.NUMERIC
    return VariableKind.CHARACTER


def classify_variables(df: pd.DataFrame) -> VariableTypePartition:
    """Partition the columns of ``df`` into type buckets.

    Args:
        df: Dataset to classify.

    Returns:
        VariableTypePartition with every column in exactly one bucket.
    """
    buckets: dict[VariableKind, list[str]] = {kind: [] for kind in VariableKind}
    for name, dtype in df.dtypes.items():
        buckets[classify_dtype(dtype)].append(str(name))
    return VariableTypePartition(**{kind.value: names for kind, names in buckets.items()})
