"""Parse a host-supplied memory plugin config into a fully resolved ``MemoryConfig``.

Checks run in a fixed order so the same bad input always produces the same
error message: shape and unknown keys first, then the embedding block, then
numeric limits, and only then environment expansion of the API key.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from functools import lru_cache
from os import PathLike
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .dimensions import DEFAULT_PROVIDER, EmbeddingProvider, coerce_provider
from .dimensions import default_model_for, vector_dims_for_model
from .exceptions import MissingRequiredFieldError, RangeError, StructuralError
from .exceptions import UnsupportedValueError
from .paths import resolve_default_db_path
from .validation import assert_allowed_keys, resolve_env_vars

if TYPE_CHECKING:
    from .ui_hints import UiHint

log = logging.getLogger(__name__)

MEMORY_CATEGORIES = ("preference", "fact", "decision", "entity", "other")
MemoryCategory = Literal["preference", "fact", "decision", "entity", "other"]

DEFAULT_CAPTURE_MAX_CHARS = 500
CAPTURE_MAX_CHARS_MIN = 100
CAPTURE_MAX_CHARS_MAX = 10_000

TOP_LEVEL_KEYS = ("embedding", "dbPath", "autoCapture", "autoRecall", "captureMaxChars")
EMBEDDING_KEYS = ("provider", "apiKey", "model")


class EmbeddingConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    provider: EmbeddingProvider
    model: str
    # Fully resolved secret; kept out of repr so it never lands in logs
    api_key: str = Field(alias="apiKey", repr=False)

    @property
    def vector_dims(self) -> int:
        return vector_dims_for_model(self.provider, self.model)


class MemoryConfig(BaseModel):
    """Resolved memory plugin configuration; every field is populated."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    embedding: EmbeddingConfig
    db_path: str = Field(alias="dbPath")
    auto_capture: bool = Field(alias="autoCapture")
    auto_recall: bool = Field(alias="autoRecall")
    capture_max_chars: int = Field(
        alias="captureMaxChars", ge=CAPTURE_MAX_CHARS_MIN, le=CAPTURE_MAX_CHARS_MAX
    )

    def to_dict(self) -> dict[str, Any]:
        """Logical JSON form, in the same camelCase shape ``parse`` accepts."""
        return self.model_dump(mode="json", by_alias=True)


def _resolve_capture_max_chars(raw: object) -> int:
    if raw is None:
        return DEFAULT_CAPTURE_MAX_CHARS
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise StructuralError("captureMaxChars must be a number")
    message = (
        f"captureMaxChars must be between {CAPTURE_MAX_CHARS_MIN} and {CAPTURE_MAX_CHARS_MAX}"
    )
    if isinstance(raw, float) and not math.isfinite(raw):
        raise RangeError(message)
    value = math.trunc(raw)
    if value < CAPTURE_MAX_CHARS_MIN or value > CAPTURE_MAX_CHARS_MAX:
        raise RangeError(message)
    return value


def _resolve_embedding_model(provider: EmbeddingProvider, embedding: Mapping[str, Any]) -> str:
    if "model" not in embedding:
        return default_model_for(provider)
    model = embedding["model"]
    if not isinstance(model, str):
        raise UnsupportedValueError(f"embedding.model must be a string, got {model!r}")
    vector_dims_for_model(provider, model)
    return model


class MemoryConfigSchema:
    """Validator and resolver for the memory plugin config.

    The default database path is probed once, at construction, and reused for
    every ``parse`` call on this instance.
    """

    def __init__(
        self,
        default_db_path: str | None = None,
        *,
        home: str | PathLike[str] | None = None,
        exists: Callable[[str], bool] | None = None,
    ) -> None:
        if default_db_path is None:
            default_db_path = resolve_default_db_path(home=home, exists=exists)
        self._default_db_path = default_db_path
        log.debug("default memory database path: %s", default_db_path)

    @property
    def default_db_path(self) -> str:
        return self._default_db_path

    @property
    def ui_hints(self) -> Mapping[str, UiHint]:
        # Local import; ui_hints reads its placeholders from this module
        from .ui_hints import UI_HINTS

        return UI_HINTS

    def parse(self, value: object, environ: Mapping[str, str] | None = None) -> MemoryConfig:
        if not isinstance(value, Mapping):
            raise StructuralError("memory config required")
        assert_allowed_keys(value, TOP_LEVEL_KEYS, "memory config")

        embedding = value.get("embedding")
        if not isinstance(embedding, Mapping) or not isinstance(embedding.get("apiKey"), str):
            raise MissingRequiredFieldError("embedding.apiKey")
        assert_allowed_keys(embedding, EMBEDDING_KEYS, "embedding config")

        provider = (
            coerce_provider(embedding["provider"]) if "provider" in embedding else DEFAULT_PROVIDER
        )
        model = _resolve_embedding_model(provider, embedding)
        capture_max_chars = _resolve_capture_max_chars(value.get("captureMaxChars"))
        api_key = resolve_env_vars(embedding["apiKey"], environ)

        db_path = value.get("dbPath")
        resolved = MemoryConfig(
            embedding=EmbeddingConfig(provider=provider, model=model, api_key=api_key),
            db_path=db_path if isinstance(db_path, str) else self._default_db_path,
            auto_capture=value.get("autoCapture") is True,
            auto_recall=value.get("autoRecall") is not False,
            capture_max_chars=capture_max_chars,
        )
        log.debug(
            "resolved memory config: provider=%s model=%s db_path=%s",
            provider,
            model,
            resolved.db_path,
        )
        return resolved


# Built lazily on first use so importing the package never touches the filesystem
@lru_cache(maxsize=1)
def get_memory_config_schema() -> MemoryConfigSchema:
    return MemoryConfigSchema()


def parse_memory_config(value: object, environ: Mapping[str, str] | None = None) -> MemoryConfig:
    return get_memory_config_schema().parse(value, environ)
