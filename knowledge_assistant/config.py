"""Unified configuration for retrieval, answer composition, and storage."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_MAX_SOURCES = 3

DEFAULT_FALLBACK = (
    "I don’t have enough information in the knowledge base to answer that. "
    "Try rephrasing your question or add a relevant knowledge item."
)


@dataclass
class RetrievalConfig:
    """Keyword retrieval configuration.

    Parameters
    ----------
    max_matches : int
        Maximum number of items returned per query.  Defaults to the same
        constant as ``ComposerConfig.max_sources``.
    """

    max_matches: int = DEFAULT_MAX_SOURCES

    def __post_init__(self) -> None:
        if self.max_matches < 0:
            msg = f"max_matches must be >= 0, got {self.max_matches}"
            raise ValueError(msg)


@dataclass
class ComposerConfig:
    """Answer composition configuration.

    Parameters
    ----------
    max_sources : int
        Maximum number of matched items used in the answer and cited.
    fallback_text : str
        Answer returned when nothing in the knowledge base matches.
    """

    max_sources: int = DEFAULT_MAX_SOURCES
    fallback_text: str = DEFAULT_FALLBACK

    def __post_init__(self) -> None:
        if self.max_sources < 0:
            msg = f"max_sources must be >= 0, got {self.max_sources}"
            raise ValueError(msg)
        if not isinstance(self.fallback_text, str) or not self.fallback_text.strip():
            msg = "fallback_text must be a non-empty string"
            raise ValueError(msg)
        self.fallback_text = self.fallback_text.strip()


@dataclass
class StoreConfig:
    """Knowledge item store selection.

    Parameters
    ----------
    type : str
        Registered store name (``"memory"`` or ``"json"``).
    path : str
        File path for file-backed stores.  Ignored by ``"memory"``.
    """

    type: str = "memory"
    path: str = ""

    def __post_init__(self) -> None:
        if not self.type:
            msg = "store type must be a non-empty string"
            raise ValueError(msg)


@dataclass
class AssistantConfig:
    """Top-level configuration for the assistant.

    Parameters
    ----------
    retrieval : RetrievalConfig
        Retrieval engine settings.
    composer : ComposerConfig
        Answer composer settings.
    store : StoreConfig
        Item store settings.
    """

    retrieval: RetrievalConfig = field(default_factory=RetrievalConfig)
    composer: ComposerConfig = field(default_factory=ComposerConfig)
    store: StoreConfig = field(default_factory=StoreConfig)


def load_config(source: str | Path | dict[str, Any] | AssistantConfig | None = None) -> AssistantConfig:
    """Load an AssistantConfig from a YAML file, dict, or environment variables.

    Environment variables take precedence over values from *source*.

    Parameters
    ----------
    source : str | Path | dict | AssistantConfig | None
        A path to a YAML file, a raw dict, an existing config (returned
        unchanged), or ``None`` to use only environment variable overrides
        on defaults.

    Returns
    -------
    AssistantConfig

    Raises
    ------
    ValueError
        If a resulting value fails validation.
    """
    if isinstance(source, AssistantConfig):
        return source

    raw: dict[str, Any] = {}

    if isinstance(source, dict):
        raw = source
    elif source is not None:
        path = Path(source)
        if path.is_file():
            raw = _load_yaml(path)

    retrieval_raw = raw.get("retrieval") or {}
    composer_raw = raw.get("composer") or {}
    store_raw = raw.get("store") or {}

    retrieval = RetrievalConfig(
        max_matches=int(
            os.environ.get("ASSISTANT_RETRIEVAL_MAX_MATCHES", retrieval_raw.get("max_matches", DEFAULT_MAX_SOURCES))
        ),
    )
    composer = ComposerConfig(
        max_sources=int(
            os.environ.get("ASSISTANT_COMPOSER_MAX_SOURCES", composer_raw.get("max_sources", DEFAULT_MAX_SOURCES))
        ),
        fallback_text=os.environ.get(
            "ASSISTANT_COMPOSER_FALLBACK_TEXT", composer_raw.get("fallback_text", DEFAULT_FALLBACK)
        ),
    )
    store = StoreConfig(
        type=os.environ.get("ASSISTANT_STORE_TYPE", store_raw.get("type", "memory")),
        path=str(os.environ.get("ASSISTANT_STORE_PATH", store_raw.get("path", ""))),
    )

    return AssistantConfig(retrieval=retrieval, composer=composer, store=store)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file using PyYAML."""
    with open(path, encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}
