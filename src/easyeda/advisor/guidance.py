"""Catalog of statistical test guidance and general caveat messages."""

from __future__ import annotations

from easyeda.models.recommendations import TestGuidance

PEARSON = TestGuidance(
    name="Pearson correlation",
    description="Pearson correlation for linear relationships between numeric variables",
    applicable_when="Both variables are numeric and approximately normally distributed",
    interpretation="Measures linear correlation strength (-1 to 1)",
)

SPEARMAN = TestGuidance(
    name="Spearman correlation",
    description="Spearman correlation for monotonic relationships",
    applicable_when="Variables are numeric but not necessarily normally distributed",
    interpretation="Measures monotonic correlation strength (-1 to 1)",
)

T_TEST = TestGuidance(
    name="t-test",
    description="Independent samples t-test",
    applicable_when=(
        "Comparing means of numeric variable between two groups (normally distributed)"
    ),
    interpretation="Tests if group means are significantly different",
)

MANN_WHITNEY = TestGuidance(
    name="Mann-Whitney U",
    description="Mann-Whitney U test (Wilcoxon rank-sum)",
    applicable_when="Comparing distributions between two groups (non-parametric)",
    interpretation="Tests if one group tends to have larger values than the other",
)

ANOVA = TestGuidance(
    name="ANOVA",
    description="Analysis of Variance (ANOVA)",
    applicable_when="Comparing means across multiple groups (normally distributed)",
    interpretation="Tests if at least one group mean differs significantly",
)

KRUSKAL_WALLIS = TestGuidance(
    name="Kruskal-Wallis",
    description="Kruskal-Wallis test",
    applicable_when="Comparing distributions across multiple groups (non-parametric)",
    interpretation="Non-parametric alternative to ANOVA",
)

CHI_SQUARE = TestGuidance(
    name="Chi-square",
    description="Chi-square test of independence",
    applicable_when="Testing association between two categorical variables",
    interpretation="Tests if variables are independent or associated",
)

SMALL_SAMPLE_MESSAGE = (
    "Small sample size (n < {threshold}). Consider non-parametric tests "
    "and be cautious with assumptions."
)
LARGE_SAMPLE_MESSAGE = (
    "Large sample size (n > {threshold}). Even small effects may be statistically significant."
)
MISSING_DATA_MESSAGE = (
    "High proportion of missing data ({rate:.1f}%). "
    "Consider missing data mechanisms and imputation strategies."
)
OUTLIER_MESSAGE = (
    "Outliers detected in numeric variables. "
    "Consider robust statistical methods or outlier treatment."
)
