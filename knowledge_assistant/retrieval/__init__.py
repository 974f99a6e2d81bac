"""Lexical retrieval of knowledge items."""

from knowledge_assistant.retrieval.engine import (
    RetrievalEngine,
    count_hits,
    match_items,
    rank_keywords,
    rank_matches,
    score_item,
)
from knowledge_assistant.retrieval.text import STOPWORDS, normalize, tokenize

__all__ = [
    "STOPWORDS",
    "RetrievalEngine",
    "count_hits",
    "match_items",
    "normalize",
    "rank_keywords",
    "rank_matches",
    "score_item",
    "tokenize",
]
