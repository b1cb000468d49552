"""Dataset profiling for tabular data."""

from easyeda.profiling.classify import classify_variables
from easyeda.profiling.profiler import profile_dataset
from easyeda.profiling.validation import validate_dataset

__all__ = ["classify_variables", "profile_dataset", "validate_dataset"]
