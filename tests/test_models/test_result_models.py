"""Tests for configuration, partition and result model helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from easyeda.models import (
    CorrelationMatrix,
    EngineConfig,
    NormalityTestResult,
    QualityIssues,
    VariableKind,
    VariableTypePartition,
)


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()
        assert config.top_categories == 10
        assert config.high_cardinality_ratio == 0.9
        assert config.constant_max_distinct == 1
        assert config.normality_max_sample == 5000
        assert config.normality_alpha == 0.05

    def test_ratio_out_of_range(self):
        with pytest.raises(ValidationError):
            EngineConfig(high_cardinality_ratio=1.5)

    def test_sample_cap_limited_to_shapiro_range(self):
        with pytest.raises(ValidationError):
            EngineConfig(normality_max_sample=10000)

    def test_frozen(self):
        config = EngineConfig()
        with pytest.raises(ValidationError):
            config.top_categories = 3


class TestVariableTypePartition:

    def test_kind_of(self):
        partition = VariableTypePartition(numeric=["a"], character=["b"], logical=["c"])
        assert partition.kind_of("a") == VariableKind.NUMERIC
        assert partition.kind_of("c") == VariableKind.LOGICAL
        assert partition.kind_of("zz") is None

    def test_categorical_like_order(self):
        partition = VariableTypePartition(character=["b", "d"], categorical=["a"])
        assert partition.categorical_like == ["b", "d", "a"]

    def test_categorical_like_in_column_order(self):
        partition = VariableTypePartition(numeric=["n"], character=["b", "d"], categorical=["a"])
        assert partition.categorical_like_in(["a", "n", "d", "b"]) == ["a", "d", "b"]

    def test_counts(self):
        partition = VariableTypePartition(numeric=["a", "b"], datetime=["t"])
        counts = partition.counts()
        assert counts[VariableKind.NUMERIC] == 2
        assert counts[VariableKind.DATETIME] == 1
        assert counts[VariableKind.CHARACTER] == 0


class TestCorrelationMatrix:

    @pytest.fixture()
    def matrix(self) -> CorrelationMatrix:
        return CorrelationMatrix(
            variables=["a", "b", "c"],
            values=[
                [1.0, 0.2, -0.9],
                [0.2, 1.0, None],
                [-0.9, None, 1.0],
            ],
        )

    def test_get(self, matrix: CorrelationMatrix) -> None:
        assert matrix.get("a", "c") == -0.9
        assert matrix.get("b", "c") is None

    def test_strongest_pairs_skip_undefined(self, matrix: CorrelationMatrix) -> None:
        assert matrix.strongest_pairs() == [("a", "c", -0.9), ("a", "b", 0.2)]


class TestSmallModels:

    def test_quality_issues_default_clean(self):
        assert not QualityIssues().has_issues
        assert QualityIssues(duplicate_rows=2).has_issues

    def test_failed_normality_result(self):
        result = NormalityTestResult(
            variable="x",
            interpretation="Test failed - check data quality",
            error="Could not perform test: all values are identical",
        )
        assert result.failed
        assert result.p_value is None
