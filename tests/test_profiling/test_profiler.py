"""Tests for profile_dataset end to end."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from easyeda.errors import InvalidInputError
from easyeda.models.config import EngineConfig
from easyeda.models.profiling import DatasetProfile
from easyeda.profiling.classify import classify_variables
from easyeda.profiling.profiler import analyze_missing, profile_dataset


@pytest.fixture()
def reference_df() -> pd.DataFrame:
    """One numeric variable with a single outlier and a two-level category."""
    return pd.DataFrame({"x": [1, 2, 3, 4, 100], "y": ["a", "a", "b", "b", "a"]})


@pytest.fixture()
def reference_profile(reference_df: pd.DataFrame) -> DatasetProfile:
    return profile_dataset(reference_df)


@pytest.fixture()
def messy_df() -> pd.DataFrame:
    """Mixed types with missing values, a duplicate row and a constant column."""
    return pd.DataFrame(
        {
            "height": [170.0, 182.5, np.nan, 165.0, 165.0, 240.0],
            "weight": [70.0, np.nan, np.nan, 60.0, 60.0, 90.0],
            "group": pd.Categorical(["a", "b", "a", None, None, "b"]),
            "note": ["x", None, "y", "z", "z", "w"],
            "active": [True, False, True, True, True, False],
            "site": ["s1", "s1", "s1", "s1", "s1", "s1"],
        }
    )


class TestReferenceExample:

    def test_numeric_summary(self, reference_profile: DatasetProfile) -> None:
        x = reference_profile.numeric("x")
        assert x is not None
        assert (x.n, x.mean, x.median, x.q25, x.q75, x.iqr) == (5, 22.0, 3.0, 2.0, 4.0, 2.0)

    def test_outliers(self, reference_profile: DatasetProfile) -> None:
        report = reference_profile.outlier("x")
        assert report is not None
        assert (report.lower_bound, report.upper_bound) == (-1.0, 7.0)
        assert report.values == [100.0]
        assert report.count == 1
        assert report.percentage == 20.0

    def test_categorical_summary(self, reference_profile: DatasetProfile) -> None:
        y = reference_profile.categorical("y")
        assert y is not None
        assert [(c.category, c.count, c.percentage) for c in y.categories] == [
            ("a", 3, 60.0),
            ("b", 2, 40.0),
        ]

    def test_no_quality_issues(self, reference_profile: DatasetProfile) -> None:
        assert not reference_profile.quality_issues.has_issues

    def test_no_correlation_with_one_numeric(self, reference_profile: DatasetProfile) -> None:
        assert reference_profile.correlation_matrix is None

    def test_dataset_info(self, reference_profile: DatasetProfile) -> None:
        info = reference_profile.dataset_info
        assert info.n_rows == 5
        assert info.n_cols == 2
        assert info.variable_names == ["x", "y"]
        assert info.variable_dtypes["x"] == "int64"
        assert info.complete_cases == 5
        assert info.incomplete_rows == 0
        assert info.memory_usage_bytes > 0


class TestMissingAnalysis:

    def test_sorted_descending_stable(self):
        df = pd.DataFrame(
            {
                "a": [1, 2, 3, 4],
                "b": [None, None, 3, 4],
                "c": [1, None, None, 4],
                "d": [None, 2, 3, 4],
            }
        )
        entries = analyze_missing(df)
        assert [e.variable for e in entries] == ["b", "c", "d", "a"]
        assert [e.missing_count for e in entries] == [2, 2, 1, 0]
        assert entries[0].missing_percentage == 50.0
        assert entries[2].missing_percentage == 25.0

    def test_percentage_rounded(self):
        df = pd.DataFrame({"a": [None, 1, 2]})
        assert analyze_missing(df)[0].missing_percentage == 33.33

    def test_idempotent(self, messy_df: pd.DataFrame) -> None:
        first = profile_dataset(messy_df).missing_analysis
        second = profile_dataset(messy_df).missing_analysis
        assert first == second


class TestMessyDataset:

    def test_partition(self, messy_df: pd.DataFrame) -> None:
        types = profile_dataset(messy_df).variable_types
        assert types.numeric == ["height", "weight"]
        assert types.categorical == ["group"]
        assert types.character == ["note", "site"]
        assert types.logical == ["active"]

    def test_quality(self, messy_df: pd.DataFrame) -> None:
        issues = profile_dataset(messy_df).quality_issues
        assert issues.duplicate_rows == 1
        assert issues.constant_variables == ["site"]
        assert issues.high_cardinality_variables == []

    def test_categorical_includes_missing_bucket(self, messy_df: pd.DataFrame) -> None:
        group = profile_dataset(messy_df).categorical("group")
        assert group is not None
        assert [(c.category, c.count) for c in group.categories] == [
            ("a", 2),
            ("b", 2),
            ("(missing)", 2),
        ]

    def test_correlation_present(self, messy_df: pd.DataFrame) -> None:
        matrix = profile_dataset(messy_df).correlation_matrix
        assert matrix is not None
        assert matrix.variables == ["height", "weight"]
        assert matrix.get("height", "height") == 1.0
        assert matrix.get("height", "weight") == matrix.get("weight", "height")

    def test_summaries_in_declaration_order(self, messy_df: pd.DataFrame) -> None:
        profile = profile_dataset(messy_df)
        assert [s.variable for s in profile.numeric_summary] == ["height", "weight"]
        assert [s.variable for s in profile.categorical_summary] == ["group", "note", "site"]
        assert [o.variable for o in profile.outliers] == ["height", "weight"]

    def test_categorical_before_character_keeps_column_order(self):
        df = pd.DataFrame(
            {
                "g": pd.Categorical(["p", "q", "r", "s"]),
                "note": ["w", "x", "y", "z"],
            }
        )
        profile = profile_dataset(df)
        assert [s.variable for s in profile.categorical_summary] == ["g", "note"]
        assert profile.quality_issues.high_cardinality_variables == ["g", "note"]

    def test_incomplete_rows(self, messy_df: pd.DataFrame) -> None:
        info = profile_dataset(messy_df).dataset_info
        assert info.incomplete_rows == 4
        assert info.complete_cases == 2

    def test_input_not_mutated(self, messy_df: pd.DataFrame) -> None:
        before = messy_df.copy()
        profile_dataset(messy_df)
        pd.testing.assert_frame_equal(messy_df, before)


class TestEdgeCases:

    def test_zero_rows_rejected(self):
        with pytest.raises(InvalidInputError):
            profile_dataset(pd.DataFrame({"x": pd.Series([], dtype=float)}))

    def test_non_dataframe_rejected(self):
        with pytest.raises(InvalidInputError):
            profile_dataset([1, 2, 3])

    def test_zero_columns(self):
        profile = profile_dataset(pd.DataFrame(index=range(3)))
        assert profile.dataset_info.n_cols == 0
        assert profile.missing_analysis == []
        assert profile.numeric_summary == []
        assert profile.correlation_matrix is None
        assert profile.quality_issues.duplicate_rows == 0

    def test_all_missing_numeric(self):
        df = pd.DataFrame({"x": [np.nan, np.nan, np.nan], "y": [1.0, 2.0, 3.0]})
        profile = profile_dataset(df)
        x = profile.numeric("x")
        assert x is not None
        assert x.n == 0
        assert x.mean is None
        assert profile.outlier("x") is None
        assert "x" in profile.quality_issues.constant_variables
        assert profile.correlation_matrix is not None
        assert profile.correlation_matrix.get("x", "x") is None
        assert profile.correlation_matrix.get("y", "y") == 1.0

    def test_unhashable_cells(self):
        df = pd.DataFrame({"x": [1.0, 2.0, 2.0], "tags": [["a"], ["b"], ["b"]]})
        profile = profile_dataset(df)
        assert profile.quality_issues.duplicate_rows == 1
        tags = profile.categorical("tags")
        assert tags is not None
        assert [(c.category, c.count) for c in tags.categories] == [("['b']", 2), ("['a']", 1)]

    def test_supplied_partition_is_used(self):
        df = pd.DataFrame({"x": [1.0, 2.0, 3.0], "code": [10, 20, 10]})
        partition = classify_variables(df).model_copy(
            update={"numeric": ["x"], "character": ["code"]}
        )
        profile = profile_dataset(df, partition=partition)
        assert profile.variable_types == partition
        assert profile.categorical("code") is not None
        assert profile.numeric("code") is None

    def test_config_top_categories(self):
        df = pd.DataFrame({"y": list("abcdef")})
        profile = profile_dataset(df, config=EngineConfig(top_categories=3))
        y = profile.categorical("y")
        assert y is not None
        assert len(y.categories) == 3
        assert y.n_categories == 6

    def test_non_string_column_names(self):
        profile = profile_dataset(pd.DataFrame({0: [1.0, 2.0], 1: ["a", "b"]}))
        assert profile.variable_types.numeric == ["0"]
        assert profile.variable_types.character == ["1"]
