"""Deterministic answer composition from retrieved knowledge items."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import jinja2

from knowledge_assistant.config import ComposerConfig
from knowledge_assistant.models import ChatResponse, KnowledgeItem, Source

logger = logging.getLogger(__name__)

ANSWER_HEADER = "Based on the knowledge base:"
UNTITLED = "Untitled"
NO_CONTENT = "(No content provided)"

MULTI_MATCH_TEMPLATE = "{{ header }}{% for entry in entries %}\n- {{ entry.title }}: {{ entry.content }}{% endfor %}"

_env = jinja2.Environment(undefined=jinja2.StrictUndefined, autoescape=False)
_multi_match = _env.from_string(MULTI_MATCH_TEMPLATE)


def _text_or(value: object, default: str) -> str:
    """Return *value* trimmed, or *default* when it is not a non-blank string."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def citation(item: KnowledgeItem) -> Source:
    """Project *item* onto the citation fields returned with an answer.

    Parameters
    ----------
    item : KnowledgeItem
        A matched item.

    Returns
    -------
    Source
        ``source`` and ``url`` are set only when the item has non-empty values.
    """
    return Source(
        id=item.id,
        title=item.title,
        source=item.source or None,
        url=item.url or None,
    )


def compose(
    message: str,
    matches: Sequence[KnowledgeItem],
    config: ComposerConfig | None = None,
) -> ChatResponse:
    """Compose an answer for *message* from ranked *matches*.

    With no matches the configured fallback text is returned and nothing is
    cited.  A single match is answered with its content verbatim.  Several
    matches are listed one per line under a fixed header, in rank order.

    Parameters
    ----------
    message : str
        The user message.  The answer is built only from *matches*.
    matches : Sequence[KnowledgeItem]
        Retrieved items, best first.  Capped again at
        ``config.max_sources``.
    config : ComposerConfig | None
        Composer settings; defaults when ``None``.

    Returns
    -------
    ChatResponse
    """
    config = config or ComposerConfig()
    items = list(matches) if isinstance(matches, (list, tuple)) else []
    used = items[: max(0, config.max_sources)]

    if not used:
        logger.debug("No knowledge matched; returning fallback answer")
        return ChatResponse(answer=config.fallback_text, sources=[])

    sources = [citation(item) for item in used]

    if len(used) == 1:
        return ChatResponse(answer=_text_or(used[0].content, NO_CONTENT), sources=sources)

    entries = [
        {"title": _text_or(item.title, UNTITLED), "content": _text_or(item.content, NO_CONTENT)} for item in used
    ]
    answer = _multi_match.render(header=ANSWER_HEADER, entries=entries)
    logger.debug("Composed answer from %d items", len(used))
    return ChatResponse(answer=answer, sources=sources)
