"""Pydantic data models shared across all easyeda components.

All models are re-exported here for convenient imports:
    from easyeda.models import DatasetProfile, RecommendationSet, EngineConfig
"""

from easyeda.models.config import DEFAULT_CONFIG, EngineConfig
from easyeda.models.profiling import (
    CategoricalSummary,
    CategoryCount,
    CorrelationMatrix,
    DatasetInfo,
    DatasetProfile,
    MissingEntry,
    NumericSummary,
    OutlierReport,
    QualityIssues,
)
from easyeda.models.recommendations import (
    AnalysisResult,
    NormalityTestResult,
    RecommendationSet,
    TestGuidance,
)
from easyeda.models.variables import VariableKind, VariableTypePartition

__all__ = [
    # config
    "EngineConfig",
    "DEFAULT_CONFIG",
    # variables
    "VariableKind",
    "VariableTypePartition",
    # profiling
    "DatasetInfo",
    "MissingEntry",
    "NumericSummary",
    "CategoryCount",
    "CategoricalSummary",
    "OutlierReport",
    "CorrelationMatrix",
    "QualityIssues",
    "DatasetProfile",
    # recommendations
    "NormalityTestResult",
    "TestGuidance",
    "RecommendationSet",
    "AnalysisResult",
]
