"""Unit tests for the config-bound ImportanceEncoder."""

import math

import pytest
from pydantic import ValidationError

from importance_vectors.config import EmbeddingConfig, ImportanceConfig, IndexConfig
from importance_vectors.encoder import ImportanceEncoder
from importance_vectors.models import QueryVector, WeightedVector


@pytest.fixture
def encoder(importance_config: ImportanceConfig) -> ImportanceEncoder:
    """Encoder using the standard test configuration."""
    return ImportanceEncoder(importance_config)


@pytest.fixture
def small_encoder() -> ImportanceEncoder:
    """Encoder for an index capped at 4 dimensions."""
    return ImportanceEncoder(
        ImportanceConfig(
            embedding=EmbeddingConfig(model="test", dimensions=4),
            index=IndexConfig(index_name="small", max_dimensions=4),
        )
    )


class TestImportanceEncoder:
    """Tests for ImportanceEncoder."""

    def test_encode(self, encoder):
        """Encode returns a validated stored vector."""
        vector = encoder.encode([3.0, 4.0], 0.5)

        assert isinstance(vector, WeightedVector)
        assert vector.values == pytest.approx([0.6, 0.8, math.sqrt(0.5)])

    def test_encode_query(self, encoder):
        """Query encoding returns a validated query vector."""
        vector = encoder.encode_query([3.0, 4.0])

        assert isinstance(vector, QueryVector)
        assert vector.values == [3.0, 4.0, 0.0]

    def test_decode_importance_from_model(self, encoder):
        """Importance decodes from a stored vector model."""
        assert encoder.decode_importance(encoder.encode([1.0, 1.0], 0.3)) == pytest.approx(0.3)

    def test_decode_importance_from_values(self, encoder):
        """Importance decodes from raw values."""
        assert encoder.decode_importance([0.6, 0.8, 1.0]) == 1.0

    def test_reweight_model(self, encoder):
        """Re-weighting a model keeps direction."""
        stored = encoder.encode([1.0, 2.0, 2.0], 0.2)
        updated = encoder.reweight(stored, 0.7)

        assert updated.importance == pytest.approx(0.7)
        assert updated.embedding == pytest.approx(stored.embedding)

    def test_reweight_raw_values(self, encoder):
        """Raw stored values are validated and re-weighted."""
        updated = encoder.reweight([0.6, 0.8, 0.0], 1.0)
        assert updated.values == pytest.approx([0.6, 0.8, 1.0])

    def test_reweight_rejects_malformed_raw_values(self, encoder):
        """Raw values with an out-of-range importance slot are rejected."""
        with pytest.raises(ValidationError, match="Importance slot must be in"):
            encoder.reweight([0.6, 0.8, 2.0], 0.5)

    def test_vector_dimensions(self, encoder):
        """Defaults to the configured embedding width."""
        assert encoder.vector_dimensions() == 1537
        assert encoder.vector_dimensions(3072) == 3073
        assert encoder.vector_dimensions(4096) == 4096

    def test_small_cap(self, small_encoder):
        """Stored and query vectors honor the configured cap."""
        stored = small_encoder.encode([1.0, 1.0, 1.0, 1.0], 1.0)
        query = small_encoder.encode_query([1.0, 1.0, 1.0, 1.0])

        assert len(stored.values) == len(query.values) == 4
        assert small_encoder.vector_dimensions() == 4
        assert len(small_encoder.reweight(stored, 0.0).values) == 4

    def test_small_cap_rejects_wide_embedding(self, small_encoder):
        """Embeddings wider than the cap fail fast."""
        with pytest.raises(ValueError, match="index limit"):
            small_encoder.encode([1.0] * 5, 0.5)

    def test_from_config(self):
        """Encoder builds from the shipped Hydra config."""
        encoder = ImportanceEncoder.from_config(overrides=["embedding.dimensions=3072"])

        assert encoder.max_dimensions == 4096
        assert encoder.vector_dimensions() == 3073
