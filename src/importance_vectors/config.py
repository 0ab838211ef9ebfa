"""Configuration management for importance vectors using Hydra.

All configuration is loaded from YAML files in conf/importance/.
This module provides typed config objects and validation.
"""

from pathlib import Path

from hydra import compose, initialize_config_dir
from loguru import logger
from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel, Field, model_validator

from importance_vectors.dimensions import MAX_VECTOR_DIMENSIONS, vector_with_importance_dimension


class EmbeddingConfig(BaseModel):
    """Shape of the raw embeddings produced upstream.

    Attributes:
        model: Model identifier (e.g., "openai/text-embedding-3-small")
        dimensions: Raw embedding dimensionality
    """

    model: str
    dimensions: int = Field(ge=1, le=MAX_VECTOR_DIMENSIONS)


class IndexConfig(BaseModel):
    """Vector index constraints.

    Attributes:
        index_name: Name of the index/table holding the vectors
        max_dimensions: Widest vector the index accepts
    """

    index_name: str
    max_dimensions: int = Field(default=MAX_VECTOR_DIMENSIONS, ge=2, le=MAX_VECTOR_DIMENSIONS)


class ImportanceConfig(BaseModel):
    """Top-level configuration for importance-weighted vectors.

    Attributes:
        embedding: Embedding shape configuration
        index: Vector index configuration
    """

    embedding: EmbeddingConfig
    index: IndexConfig

    @model_validator(mode="after")
    def validate_fits_index(self) -> "ImportanceConfig":
        """Ensure embeddings can be stored in the configured index."""
        if self.embedding.dimensions > self.index.max_dimensions:
            raise ValueError(
                f"embedding.dimensions ({self.embedding.dimensions}) exceeds "
                f"index.max_dimensions ({self.index.max_dimensions})"
            )
        return self

    @property
    def vector_dimensions(self) -> int:
        """Width of the vector column the index must allocate."""
        return vector_with_importance_dimension(
            self.embedding.dimensions, self.index.max_dimensions
        )


def load_config(
    config_name: str = "default",
    config_path: str | Path | None = None,
    overrides: list[str] | None = None,
) -> ImportanceConfig:
    """Load importance vector configuration from Hydra YAML files.

    Args:
        config_name: Name of config file (without .yaml extension)
        config_path: Path to config directory (defaults to conf/importance/)
        overrides: List of config overrides (e.g., ["embedding.dimensions=3072"])

    Returns:
        Validated configuration object

    Example:
        >>> config = load_config("default")
        >>> config.vector_dimensions
        1537

        >>> config = load_config("default", overrides=["embedding.dimensions=4096"])
        >>> config.vector_dimensions
        4096
    """
    if config_path is None:
        # Default to conf/importance/ relative to repo root
        repo_root = Path(__file__).parent.parent.parent
        config_path = repo_root / "conf" / "importance"

    config_path = Path(config_path).resolve()

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config directory not found: {config_path}\n" f"Create it with: mkdir -p {config_path}"
        )

    with initialize_config_dir(
        config_dir=str(config_path), version_base=None, job_name="importance_vectors"
    ):
        cfg: DictConfig = compose(config_name=config_name, overrides=overrides or [])

    # Convert OmegaConf to dict and validate with Pydantic
    config_dict = OmegaConf.to_container(cfg, resolve=True)
    config = ImportanceConfig(**config_dict)  # type: ignore
    logger.debug(
        f"Loaded config {config_name!r}: {config.embedding.dimensions} embedding dims -> "
        f"{config.vector_dimensions} vector dims"
    )
    return config


def create_default_config() -> dict[str, dict[str, object]]:
    """Create a default configuration dictionary for bootstrapping.

    Returns:
        Dictionary suitable for writing to YAML

    Example:
        >>> import yaml
        >>> config = create_default_config()
        >>> with open("conf/importance/default.yaml", "w") as f:
        ...     yaml.dump(config, f)
    """
    return {
        "embedding": {
            "model": "openai/text-embedding-3-small",
            "dimensions": 1536,
        },
        "index": {
            "index_name": "${oc.env:IMPORTANCE_INDEX_NAME,embeddings}",
            "max_dimensions": MAX_VECTOR_DIMENSIONS,
        },
    }
