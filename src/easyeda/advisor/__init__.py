"""Statistical test recommendation."""

from easyeda.advisor.normality import run_normality_tests
from easyeda.advisor.recommender import find_binary_variables, recommend_tests

__all__ = ["find_binary_variables", "recommend_tests", "run_normality_tests"]
