"""Pydantic models for importance-weighted vectors.

Vectors handed to the index are validated against these schemas so that
malformed values fail fast instead of being persisted.
"""

import math
from collections.abc import Sequence

from pydantic import BaseModel, Field, field_validator

from importance_vectors.dimensions import MAX_VECTOR_DIMENSIONS
from importance_vectors.importance import (
    get_importance,
    modify_importance,
    search_vector,
    vector_with_importance,
)


def _check_finite(v: list[float]) -> list[float]:
    for i, val in enumerate(v):
        if not math.isfinite(val):
            raise ValueError(f"Vector contains non-finite value at index {i}: {val}")
    return v


class WeightedVector(BaseModel):
    """A stored vector: normalized embedding plus trailing importance slot.

    Attributes:
        values: Vector values (2-4096 dimensions), last one is sqrt(importance)
    """

    model_config = {"frozen": True}

    values: list[float] = Field(min_length=2, max_length=MAX_VECTOR_DIMENSIONS)

    @field_validator("values")
    @classmethod
    def validate_vector_values(cls, v: list[float]) -> list[float]:
        """Ensure values are finite and the importance slot decodes into [0, 1]."""
        _check_finite(v)
        if not 0.0 <= v[-1] <= 1.0:
            raise ValueError(f"Importance slot must be in [0, 1], got {v[-1]}")
        return v

    @classmethod
    def from_embedding(
        cls,
        embedding: Sequence[float],
        importance: float,
        max_dimensions: int = MAX_VECTOR_DIMENSIONS,
    ) -> "WeightedVector":
        """Encode a raw embedding with an importance weight."""
        return cls(values=vector_with_importance(embedding, importance, max_dimensions))

    @property
    def importance(self) -> float:
        """Importance recovered from the last slot."""
        return get_importance(self.values)

    @property
    def embedding(self) -> list[float]:
        """Normalized embedding prefix, without the importance slot."""
        return self.values[:-1]

    def reweighted(
        self, importance: float, max_dimensions: int = MAX_VECTOR_DIMENSIONS
    ) -> "WeightedVector":
        """Return a copy with a new importance and the same direction."""
        return WeightedVector(values=modify_importance(self.values, importance, max_dimensions))


class QueryVector(BaseModel):
    """A search vector: raw embedding plus a neutral zero slot.

    Attributes:
        values: Vector values (2-4096 dimensions), last one is always 0
    """

    model_config = {"frozen": True}

    values: list[float] = Field(min_length=2, max_length=MAX_VECTOR_DIMENSIONS)

    @field_validator("values")
    @classmethod
    def validate_vector_values(cls, v: list[float]) -> list[float]:
        """Ensure values are finite and the importance slot is neutral."""
        _check_finite(v)
        if v[-1] != 0:
            raise ValueError(f"Query vector importance slot must be 0, got {v[-1]}")
        return v

    @classmethod
    def from_embedding(
        cls, embedding: Sequence[float], max_dimensions: int = MAX_VECTOR_DIMENSIONS
    ) -> "QueryVector":
        """Build a search vector from a raw query embedding."""
        return cls(values=search_vector(embedding, max_dimensions))
