"""Importance weighting for embeddings stored in a vector index.

Terminology: an "embedding" is what the embedding model returns; a "vector"
is an embedding plus one trailing importance slot. Callers pass embeddings,
the index stores and searches vectors.

Stored vectors are the unit-normalized embedding followed by
``sqrt(importance)``. Search vectors are the embedding as given followed by
``0``, so the importance slot adds nothing to a dot-product score while both
vectors keep the same width.
"""

import math
from collections.abc import Sequence

from loguru import logger

from importance_vectors.dimensions import MAX_VECTOR_DIMENSIONS, truncate_for_encoding
from importance_vectors.normalize import normalize_vector


def validate_importance(importance: float) -> float:
    """Ensure importance is a finite number in [0, 1].

    Raises:
        ValueError: If importance is out of range or not finite
    """
    if not math.isfinite(importance) or not 0.0 <= importance <= 1.0:
        raise ValueError(f"importance must be in [0, 1], got {importance!r}")
    return float(importance)


def validate_embedding(embedding: Sequence[float]) -> None:
    """Ensure an embedding is non-empty and contains only finite floats.

    Raises:
        ValueError: If the embedding is empty or holds NaN/inf
    """
    if len(embedding) == 0:
        raise ValueError("Embedding must contain at least one dimension")
    for i, val in enumerate(embedding):
        if not math.isfinite(val):
            raise ValueError(f"Embedding contains non-finite value at index {i}: {val}")


def vector_with_importance(
    embedding: Sequence[float],
    importance: float,
    max_dimensions: int = MAX_VECTOR_DIMENSIONS,
) -> list[float]:
    """Build the vector to store for an embedding and its importance.

    Args:
        embedding: Raw embedding from the embedding model
        importance: 0 - 1, where 0 is no importance and 1 is full importance
        max_dimensions: Width cap of the vector index

    Returns:
        Normalized embedding with ``sqrt(importance)`` appended

    Raises:
        ValueError: If importance or embedding fail validation

    Example:
        >>> vector_with_importance([3.0, 4.0], 1.0)
        [0.6, 0.8, 1.0]
    """
    importance = validate_importance(importance)
    validate_embedding(embedding)

    normalized = normalize_vector(truncate_for_encoding(embedding, max_dimensions))
    return [*normalized, math.sqrt(importance)]


def search_vector(
    embedding: Sequence[float], max_dimensions: int = MAX_VECTOR_DIMENSIONS
) -> list[float]:
    """Build the vector to search with, ignoring the importance slot.

    The embedding is not normalized.

    Example:
        >>> search_vector([0.5, 0.5])
        [0.5, 0.5, 0.0]
    """
    validate_embedding(embedding)
    return [*(float(v) for v in truncate_for_encoding(embedding, max_dimensions)), 0.0]


def get_importance(vector: Sequence[float]) -> float:
    """Recover the importance stored in the last slot of a vector.

    Raises:
        ValueError: If the vector is empty
    """
    if len(vector) == 0:
        raise ValueError("Cannot read importance from an empty vector")
    return float(vector[-1]) ** 2


def modify_importance(
    vector: Sequence[float],
    importance: float,
    max_dimensions: int = MAX_VECTOR_DIMENSIONS,
) -> list[float]:
    """Replace the importance of an already-stored vector.

    The prefix is already unit length (and already capped), so re-encoding it
    only changes the last slot.

    Args:
        vector: Vector previously built by vector_with_importance
        importance: New importance in [0, 1]
        max_dimensions: Width cap of the vector index

    Returns:
        New vector; the input is left untouched

    Raises:
        ValueError: If the vector has no embedding prefix or importance is invalid
    """
    if len(vector) < 2:
        raise ValueError(f"Vector must have at least 2 dimensions, got {len(vector)}")

    logger.debug(f"Re-weighting vector: importance {get_importance(vector):.4f} -> {importance}")
    return vector_with_importance(vector[:-1], importance, max_dimensions)
