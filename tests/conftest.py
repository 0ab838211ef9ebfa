"""Pytest configuration for test discovery and shared fixtures.

This file ensures that:
- `src/` is importable
- Tests share a standard configuration and sample embeddings
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src directory is in path for imports
repo_root = Path(__file__).parent.parent
src_path = repo_root / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from importance_vectors.config import EmbeddingConfig, ImportanceConfig, IndexConfig  # noqa: E402


@pytest.fixture
def importance_config() -> ImportanceConfig:
    """Standard configuration for tests."""
    return ImportanceConfig(
        embedding=EmbeddingConfig(model="openai/text-embedding-3-small", dimensions=1536),
        index=IndexConfig(index_name="test-index"),
    )


@pytest.fixture
def config_dir() -> Path:
    """Directory holding the shipped Hydra configs."""
    return repo_root / "conf" / "importance"
