"""RetrievalEngine: weighted keyword matching over the knowledge item store."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from knowledge_assistant.config import DEFAULT_MAX_SOURCES, AssistantConfig, RetrievalConfig, load_config
from knowledge_assistant.models import KnowledgeItem, ScoredMatch
from knowledge_assistant.retrieval.text import normalize, tokenize

if TYPE_CHECKING:
    from knowledge_assistant.store.base import ItemStore

logger = logging.getLogger(__name__)

TITLE_WEIGHT = 3
TAG_WEIGHT = 2
CONTENT_WEIGHT = 1


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def count_hits(keywords: Sequence[str], text: str) -> int:
    """Count the keywords that occur anywhere in *text*.

    Matching is by substring, so ``"pass"`` hits ``"password"``.

    Parameters
    ----------
    keywords : Sequence[str]
        Distinct query keywords.
    text : str
        Normalized field text.

    Returns
    -------
    int
    """
    if not text:
        return 0
    return sum(1 for kw in keywords if kw in text)


def score_item(item: KnowledgeItem, keywords: Sequence[str]) -> int:
    """Return the weighted relevance score of *item* for *keywords*.

    Title hits count three times, tag hits twice, and content hits once.

    Parameters
    ----------
    item : KnowledgeItem
        Candidate item.
    keywords : Sequence[str]
        Distinct query keywords from :func:`tokenize`.

    Returns
    -------
    int
        Zero when no keyword occurs in any field.
    """
    tags = item.tags if isinstance(item.tags, (list, tuple)) else []
    title_hits = count_hits(keywords, normalize(item.title))
    tag_hits = count_hits(keywords, normalize(" ".join(str(t) for t in tags)))
    content_hits = count_hits(keywords, normalize(item.content))
    return title_hits * TITLE_WEIGHT + tag_hits * TAG_WEIGHT + content_hits * CONTENT_WEIGHT


def _rank_key(match: ScoredMatch) -> tuple[int, str, str]:
    """Sort key: score descending, then normalized title, then id.

    Ids compare by code point, not locale collation.
    """
    item = match.item
    return (-match.score, normalize(item.title), str(item.id or ""))


# ---------------------------------------------------------------------------
# Ranking over an item snapshot
# ---------------------------------------------------------------------------


def rank_keywords(
    keywords: Sequence[str],
    items: Sequence[KnowledgeItem],
    *,
    limit: int = DEFAULT_MAX_SOURCES,
) -> list[ScoredMatch]:
    """Score, filter, sort, and cap *items* against already tokenized *keywords*.

    Parameters
    ----------
    keywords : Sequence[str]
        Distinct query keywords from :func:`tokenize`.
    items : Sequence[KnowledgeItem]
        Snapshot of the knowledge base.  Anything other than a list or
        tuple is treated as empty.
    limit : int
        Maximum number of matches to return.

    Returns
    -------
    list[ScoredMatch]
        Matches with a positive score, best first.
    """
    if not keywords or not isinstance(items, (list, tuple)):
        return []

    scored = [ScoredMatch(item=item, score=score_item(item, keywords)) for item in items]
    scored = [m for m in scored if m.score > 0]
    scored.sort(key=_rank_key)

    logger.debug("Scored %d/%d items for keywords=%s", len(scored), len(items), keywords)
    return scored[: max(0, limit)]


def rank_matches(
    message: object,
    items: Sequence[KnowledgeItem],
    *,
    limit: int = DEFAULT_MAX_SOURCES,
) -> list[ScoredMatch]:
    """Tokenize *message* and rank *items* with :func:`rank_keywords`."""
    return rank_keywords(tokenize(message), items, limit=limit)


def match_items(
    message: object,
    items: Sequence[KnowledgeItem],
    *,
    limit: int = DEFAULT_MAX_SOURCES,
) -> list[KnowledgeItem]:
    """Return the items of :func:`rank_matches` without their scores."""
    return [m.item for m in rank_matches(message, items, limit=limit)]


# ---------------------------------------------------------------------------
# RetrievalEngine
# ---------------------------------------------------------------------------


class RetrievalEngine:
    """Retrieve relevant knowledge items from a store.

    Parameters
    ----------
    store : ItemStore
        Source of knowledge items.  Only ``list()`` is used.
    max_matches : int
        Maximum number of items returned per query.
    """

    def __init__(self, store: ItemStore, *, max_matches: int = DEFAULT_MAX_SOURCES) -> None:
        self._store = store
        self._max_matches = max_matches

    @classmethod
    def from_config(
        cls,
        store: ItemStore,
        config: AssistantConfig | RetrievalConfig | dict | str | None = None,
    ) -> RetrievalEngine:
        """Construct a RetrievalEngine from a config object or raw source.

        Parameters
        ----------
        store : ItemStore
            Source of knowledge items.
        config : AssistantConfig | RetrievalConfig | dict | str | None
            A full config, just its retrieval section, a dict, a YAML file
            path, or ``None`` for defaults.

        Returns
        -------
        RetrievalEngine
        """
        if not isinstance(config, RetrievalConfig):
            config = load_config(config).retrieval
        return cls(store, max_matches=config.max_matches)

    @property
    def max_matches(self) -> int:
        return self._max_matches

    def retrieve(self, message: object) -> list[KnowledgeItem]:
        """Return up to ``max_matches`` items relevant to *message*, best first.

        The store is not read when the message has no keywords.

        Parameters
        ----------
        message : object
            Raw user message.

        Returns
        -------
        list[KnowledgeItem]
            Possibly empty.
        """
        keywords = tokenize(message)
        if not keywords:
            logger.debug("No keywords in message; skipping store scan")
            return []
        return [m.item for m in rank_keywords(keywords, self._store.list(), limit=self._max_matches)]
