"""Unit-length normalization for raw embeddings."""

import math
from collections.abc import Sequence

from loguru import logger


def normalize_vector(vector: Sequence[float]) -> list[float]:
    """Rescale a vector to unit Euclidean norm.

    A zero-magnitude vector is a valid degenerate input and maps to a
    same-length vector of zeros instead of raising.

    Args:
        vector: Values to normalize

    Returns:
        New list of the same length

    Example:
        >>> normalize_vector([3.0, 4.0])
        [0.6, 0.8]
    """
    scale = max((abs(float(v)) for v in vector), default=0.0)
    if scale == 0:
        logger.debug(f"Zero-magnitude vector of length {len(vector)} normalized to zeros")
        return [0.0] * len(vector)
    # Divide by the largest component first so the norm cannot overflow
    scaled = [float(v) / scale for v in vector]
    magnitude = math.hypot(*scaled)
    return [v / magnitude for v in scaled]
