"""Public API: answer a chat message from the knowledge base."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from knowledge_assistant.compose import compose
from knowledge_assistant.config import AssistantConfig, load_config
from knowledge_assistant.models import ChatResponse
from knowledge_assistant.retrieval import RetrievalEngine
from knowledge_assistant.store import ItemStore, StoreRegistry

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 1000

FILE_BACKED_STORES: frozenset[str] = frozenset({"json"})


class MessageValidationError(ValueError):
    """Raised when a chat message is missing, not a string, empty, or too long."""


def validate_message(message: Any) -> str:
    """Return the trimmed chat message or raise.

    Parameters
    ----------
    message : Any
        Raw message from the caller.

    Returns
    -------
    str

    Raises
    ------
    MessageValidationError
        If *message* is missing, not a string, blank, or longer than
        ``MAX_MESSAGE_LENGTH`` characters after trimming.
    """
    if message is None:
        msg = "Message is required and must be a non-empty string."
        raise MessageValidationError(msg)
    if not isinstance(message, str):
        msg = "Message must be a string."
        raise MessageValidationError(msg)

    message = message.strip()
    if not message:
        msg = "Message is required and must be a non-empty string."
        raise MessageValidationError(msg)
    if len(message) > MAX_MESSAGE_LENGTH:
        msg = f"Message must be {MAX_MESSAGE_LENGTH} characters or fewer."
        raise MessageValidationError(msg)
    return message


def create_store(config: AssistantConfig | dict | str | Path | None = None) -> ItemStore:
    """Instantiate the item store selected by ``config.store``.

    Raises
    ------
    KeyError
        If the configured store type is not registered.
    ValueError
        If a file-backed store is selected without ``store.path``.
    """
    config = load_config(config)
    if config.store.type in FILE_BACKED_STORES and not config.store.path:
        msg = f"store.path is required for the {config.store.type!r} store"
        raise ValueError(msg)
    kwargs: dict[str, Any] = {"path": config.store.path} if config.store.path else {}
    return StoreRegistry.create(config.store.type, **kwargs)


def chat(
    message: Any,
    *,
    store: ItemStore,
    config: AssistantConfig | dict | str | Path | None = None,
) -> ChatResponse:
    """Answer *message* from the knowledge items in *store*.

    Parameters
    ----------
    message : Any
        Raw user message.
    store : ItemStore
        Knowledge base to retrieve from.
    config : AssistantConfig | dict | str | Path | None
        Retrieval and composer settings.  An ``AssistantConfig``, a dict, a
        YAML file path, or ``None`` for defaults.

    Returns
    -------
    ChatResponse
        The fallback answer with no sources when nothing matches.

    Raises
    ------
    MessageValidationError
        If *message* is rejected by :func:`validate_message`.
    """
    message = validate_message(message)
    config = load_config(config)

    engine = RetrievalEngine.from_config(store, config.retrieval)
    matches = engine.retrieve(message)
    response = compose(message, matches, config.composer)

    logger.info("Answered chat message matches=%d sources=%d", len(matches), len(response.sources))
    return response
