"""Presentation metadata for a settings UI.

Purely descriptive: nothing here is consulted while parsing a config.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from .dimensions import DEFAULT_MODEL_BY_PROVIDER, DEFAULT_PROVIDER, EmbeddingProvider
from .schema import DEFAULT_CAPTURE_MAX_CHARS


class UiHint(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    help: str | None = None
    placeholder: str | None = None
    sensitive: bool | None = None
    advanced: bool | None = None


UI_HINTS: Mapping[str, UiHint] = MappingProxyType(
    {
        "embedding.provider": UiHint(
            label="Embedding Provider",
            placeholder=DEFAULT_PROVIDER.value,
            help="Embedding provider to use: openai or gemini",
        ),
        "embedding.apiKey": UiHint(
            label="Embedding API Key",
            sensitive=True,
            placeholder="${OPENAI_API_KEY} or ${GEMINI_API_KEY}",
            help="API key for the selected embedding provider",
        ),
        "embedding.model": UiHint(
            label="Embedding Model",
            placeholder=DEFAULT_MODEL_BY_PROVIDER[EmbeddingProvider.OPENAI],
            help=(
                "Model to use (OpenAI: text-embedding-3-small/large, "
                "Gemini: text-embedding-004/embedding-001)"
            ),
        ),
        "dbPath": UiHint(
            label="Database Path",
            placeholder="~/.openclaw/memory/lancedb",
            advanced=True,
        ),
        "autoCapture": UiHint(
            label="Auto-Capture",
            help="Automatically capture important information from conversations",
        ),
        "autoRecall": UiHint(
            label="Auto-Recall",
            help="Automatically inject relevant memories into context",
        ),
        "captureMaxChars": UiHint(
            label="Capture Max Chars",
            help="Maximum message length eligible for auto-capture",
            advanced=True,
            placeholder=str(DEFAULT_CAPTURE_MAX_CHARS),
        ),
    }
)


def ui_hints_as_dict() -> dict[str, dict[str, object]]:
    """Render the catalog as plain dicts, leaving out unset attributes."""
    return {path: hint.model_dump(exclude_none=True) for path, hint in UI_HINTS.items()}
