"""Config-bound entry point for encoding, querying and re-weighting vectors."""

from collections.abc import Sequence
from pathlib import Path

from importance_vectors.config import ImportanceConfig, load_config
from importance_vectors.dimensions import vector_with_importance_dimension
from importance_vectors.importance import get_importance
from importance_vectors.models import QueryVector, WeightedVector


class ImportanceEncoder:
    """Encodes embeddings for one index using its configured dimension cap."""

    def __init__(self, config: ImportanceConfig):
        """Initialize encoder.

        Args:
            config: Configuration carrying embedding width and index cap
        """
        self.config = config
        self.max_dimensions = config.index.max_dimensions

    @classmethod
    def from_config(
        cls,
        config_name: str = "default",
        config_path: str | Path | None = None,
        overrides: list[str] | None = None,
    ) -> "ImportanceEncoder":
        """Create an encoder from Hydra YAML configuration."""
        return cls(load_config(config_name, config_path, overrides))

    def encode(self, embedding: Sequence[float], importance: float) -> WeightedVector:
        """Build the stored vector for an embedding.

        Args:
            embedding: Raw embedding
            importance: Importance in [0, 1]

        Returns:
            Validated stored vector

        Raises:
            ValueError: If importance or embedding are invalid
        """
        return WeightedVector.from_embedding(embedding, importance, self.max_dimensions)

    def encode_query(self, embedding: Sequence[float]) -> QueryVector:
        """Build the search vector for a query embedding."""
        return QueryVector.from_embedding(embedding, self.max_dimensions)

    def decode_importance(self, vector: WeightedVector | Sequence[float]) -> float:
        """Recover importance from a stored vector or its raw values."""
        if isinstance(vector, WeightedVector):
            return vector.importance
        return get_importance(vector)

    def reweight(
        self, vector: WeightedVector | Sequence[float], importance: float
    ) -> WeightedVector:
        """Return a new stored vector with the same direction and a new importance."""
        if not isinstance(vector, WeightedVector):
            vector = WeightedVector(values=list(vector))
        return vector.reweighted(importance, self.max_dimensions)

    def vector_dimensions(self, dimensions: int | None = None) -> int:
        """Vector width for an embedding width (defaults to the configured one)."""
        if dimensions is None:
            return self.config.vector_dimensions
        return vector_with_importance_dimension(dimensions, self.max_dimensions)
