"""Fixed embedding dimensionality per provider and model.

The table is the only authority on which models exist: a model name is valid
exactly when ``vector_dims_for_model`` returns for it.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from .exceptions import UnsupportedValueError


class EmbeddingProvider(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"

    def __str__(self) -> str:
        return self.value


DEFAULT_PROVIDER = EmbeddingProvider.OPENAI

DEFAULT_MODEL_BY_PROVIDER: Mapping[EmbeddingProvider, str] = MappingProxyType(
    {
        EmbeddingProvider.OPENAI: "text-embedding-3-small",
        EmbeddingProvider.GEMINI: "text-embedding-004",
    }
)

EMBEDDING_DIMENSIONS: Mapping[EmbeddingProvider, Mapping[str, int]] = MappingProxyType(
    {
        EmbeddingProvider.OPENAI: MappingProxyType(
            {
                "text-embedding-3-small": 1536,
                "text-embedding-3-large": 3072,
            }
        ),
        EmbeddingProvider.GEMINI: MappingProxyType(
            {
                "text-embedding-004": 768,
                "embedding-001": 768,
            }
        ),
    }
)


def coerce_provider(provider: object) -> EmbeddingProvider:
    """Map a raw provider value onto the enum or raise ``UnsupportedValueError``."""
    if isinstance(provider, EmbeddingProvider):
        return provider
    try:
        return EmbeddingProvider(provider)
    except ValueError as e:
        raise UnsupportedValueError(f"Unsupported embedding provider: {provider}") from e


def default_model_for(provider: EmbeddingProvider | str) -> str:
    return DEFAULT_MODEL_BY_PROVIDER[coerce_provider(provider)]


def vector_dims_for_model(provider: EmbeddingProvider | str, model: str) -> int:
    """Return the vector length produced by ``model`` of ``provider``.

    Examples
    --------
    >>> vector_dims_for_model("openai", "text-embedding-3-large")
    3072
    """
    resolved = coerce_provider(provider)
    dims = EMBEDDING_DIMENSIONS[resolved].get(model)
    if not dims:
        raise UnsupportedValueError(f"Unsupported {resolved} embedding model: {model}")
    return dims
