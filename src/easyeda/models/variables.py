"""Variable type classification models."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class VariableKind(StrEnum):
    """Type bucket a column is assigned to, based on its declared dtype."""

    NUMERIC = "numeric"
    CHARACTER = "character"
    CATEGORICAL = "categorical"
    LOGICAL = "logical"
    DATETIME = "datetime"


class VariableTypePartition(BaseModel):
    """Disjoint partition of column names into type buckets.

    Every column of the classified dataset appears in exactly one list,
    and each list preserves column-declaration order.
    """

    model_config = ConfigDict(frozen=True)

    numeric: list[str] = Field(default_factory=list, description="Numeric columns")
    character: list[str] = Field(default_factory=list, description="Free-text / object columns")
    categorical: list[str] = Field(
        default_factory=list, description="Factor-like (pandas category) columns"
    )
    logical: list[str] = Field(default_factory=list, description="Boolean columns")
    datetime: list[str] = Field(default_factory=list, description="Date / time columns")

    def columns_of(self, kind: VariableKind) -> list[str]:
        """Return the column names assigned to ``kind``."""
        return list(getattr(self, kind.value))

    @property
    def categorical_like(self) -> list[str]:
        """Character and categorical columns, the ones with frequency tables."""
        return [*self.character, *self.categorical]

    def categorical_like_in(self, columns: Iterable[str]) -> list[str]:
        """Character and categorical columns, ordered as they appear in ``columns``."""
        wanted = set(self.categorical_like)
        return [str(col) for col in columns if str(col) in wanted]

    def kind_of(self, column: str) -> VariableKind | None:
        """Return the bucket ``column`` belongs to, or None if unknown."""
        for kind in VariableKind:
            if column in getattr(self, kind.value):
                return kind
        return None

    def counts(self) -> dict[VariableKind, int]:
        """Number of columns per bucket."""
        return {kind: len(getattr(self, kind.value)) for kind in VariableKind}
