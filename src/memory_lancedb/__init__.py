"""Validation and resolution of the memory plugin configuration."""

from .dimensions import (
    DEFAULT_MODEL_BY_PROVIDER,
    DEFAULT_PROVIDER,
    EMBEDDING_DIMENSIONS,
    EmbeddingProvider,
    default_model_for,
    vector_dims_for_model,
)
from .exceptions import (
    ConfigurationError,
    EnvironmentResolutionError,
    MissingRequiredFieldError,
    RangeError,
    StructuralError,
    UnsupportedValueError,
)
from .paths import LEGACY_STATE_DIRS, resolve_default_db_path
from .schema import (
    DEFAULT_CAPTURE_MAX_CHARS,
    MEMORY_CATEGORIES,
    EmbeddingConfig,
    MemoryCategory,
    MemoryConfig,
    MemoryConfigSchema,
    get_memory_config_schema,
    parse_memory_config,
)
from .ui_hints import UI_HINTS, UiHint, ui_hints_as_dict
from .validation import assert_allowed_keys, resolve_env_vars

__all__ = [
    "ConfigurationError",
    "StructuralError",
    "MissingRequiredFieldError",
    "UnsupportedValueError",
    "RangeError",
    "EnvironmentResolutionError",
    "EmbeddingProvider",
    "DEFAULT_PROVIDER",
    "DEFAULT_MODEL_BY_PROVIDER",
    "EMBEDDING_DIMENSIONS",
    "default_model_for",
    "vector_dims_for_model",
    "LEGACY_STATE_DIRS",
    "resolve_default_db_path",
    "assert_allowed_keys",
    "resolve_env_vars",
    "DEFAULT_CAPTURE_MAX_CHARS",
    "UI_HINTS",
    "UiHint",
    "ui_hints_as_dict",
    "MEMORY_CATEGORIES",
    "MemoryCategory",
    "EmbeddingConfig",
    "MemoryConfig",
    "MemoryConfigSchema",
    "get_memory_config_schema",
    "parse_memory_config",
]
