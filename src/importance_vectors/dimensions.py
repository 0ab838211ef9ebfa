"""Dimension cap shared by stored and query vectors.

The downstream ANN index rejects vectors wider than 4096. Every vector this
package produces carries one extra importance slot, so a 4096-wide embedding
gives up its final dimension to make room for it.
"""

from collections.abc import Sequence

from loguru import logger

MAX_VECTOR_DIMENSIONS = 4096


def vector_with_importance_dimension(
    dimensions: int, max_dimensions: int = MAX_VECTOR_DIMENSIONS
) -> int:
    """Return the stored/query vector width for an embedding width.

    Args:
        dimensions: Raw embedding dimensionality
        max_dimensions: Width cap of the vector index

    Returns:
        ``dimensions + 1``, or ``max_dimensions`` when the embedding already
        fills the cap

    Raises:
        ValueError: If dimensions is not in [1, max_dimensions]

    Example:
        >>> vector_with_importance_dimension(1536)
        1537
        >>> vector_with_importance_dimension(4096)
        4096
    """
    if dimensions < 1:
        raise ValueError(f"dimensions must be positive, got {dimensions}")
    if dimensions > max_dimensions:
        raise ValueError(f"dimensions {dimensions} exceed index limit {max_dimensions}")
    # +1 for the importance slot, but never past the cap
    return max_dimensions if dimensions == max_dimensions else dimensions + 1


def truncate_for_encoding(
    embedding: Sequence[float], max_dimensions: int = MAX_VECTOR_DIMENSIONS
) -> list[float]:
    """Drop the final dimension of an embedding that already fills the cap.

    Args:
        embedding: Raw embedding
        max_dimensions: Width cap of the vector index

    Returns:
        New list, one element shorter only when ``len(embedding) == max_dimensions``

    Raises:
        ValueError: If the embedding is wider than max_dimensions
    """
    if len(embedding) > max_dimensions:
        raise ValueError(
            f"Embedding has {len(embedding)} dimensions, index limit is {max_dimensions}"
        )
    if len(embedding) == max_dimensions:
        logger.debug(
            f"Dropping final dimension of {max_dimensions}-dim embedding for importance slot"
        )
        return list(embedding[: max_dimensions - 1])
    return list(embedding)
