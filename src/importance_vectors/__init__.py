"""Importance-weighted vectors for approximate nearest neighbor search.

This package folds a per-item importance weight (0-1) into the same
fixed-width vector used for similarity search, so a single ANN lookup can
rank by both signals. Storage, sharding and query orchestration belong to the
calling service; this package only builds and reads vector contents.

Architecture:
    - normalize: Unit-length rescaling of raw embeddings
    - dimensions: 4096-dimension cap shared by stored and query vectors
    - importance: Encode, search, decode and re-weight operations
    - models: Pydantic schemas for stored and query vectors
    - config: Hydra-backed configuration
    - encoder: Config-bound facade over the operations above

Usage:
    >>> from importance_vectors import ImportanceEncoder
    >>> encoder = ImportanceEncoder.from_config("default")
    >>> stored = encoder.encode(embedding, importance=0.5)
    >>> query = encoder.encode_query(query_embedding)
"""

__version__ = "0.1.0"

from importance_vectors.config import ImportanceConfig, load_config
from importance_vectors.dimensions import (
    MAX_VECTOR_DIMENSIONS,
    truncate_for_encoding,
    vector_with_importance_dimension,
)
from importance_vectors.encoder import ImportanceEncoder
from importance_vectors.importance import (
    get_importance,
    modify_importance,
    search_vector,
    vector_with_importance,
)
from importance_vectors.models import QueryVector, WeightedVector
from importance_vectors.normalize import normalize_vector

__all__ = [
    "MAX_VECTOR_DIMENSIONS",
    "ImportanceConfig",
    "ImportanceEncoder",
    "QueryVector",
    "WeightedVector",
    "get_importance",
    "load_config",
    "modify_importance",
    "normalize_vector",
    "search_vector",
    "truncate_for_encoding",
    "vector_with_importance",
    "vector_with_importance_dimension",
]
