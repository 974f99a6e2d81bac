"""Text normalization and query tokenization."""

from __future__ import annotations

import re

STOPWORDS: frozenset[str] = frozenset(
    {
        "a",
        "an",
        "the",
        "and",
        "or",
        "but",
        "to",
        "of",
        "in",
        "on",
        "for",
        "with",
        "is",
        "are",
        "was",
        "were",
        "be",
        "been",
        "it",
        "this",
        "that",
        "as",
        "at",
        "by",
        "from",
    }
)

MIN_TOKEN_LENGTH = 2

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize(text: object) -> str:
    """Lowercase *text* and collapse every non-alphanumeric run to one space.

    Parameters
    ----------
    text : object
        Input text.  ``None`` is treated as the empty string; other
        non-string values are converted with ``str``.

    Returns
    -------
    str
        Normalized text with no leading or trailing whitespace.
    """
    if text is None:
        return ""
    return _NON_ALNUM.sub(" ", str(text).lower()).strip()


def tokenize(message: object) -> list[str]:
    """Extract distinct query keywords from *message*.

    Tokens shorter than two characters and stopwords are dropped, and
    duplicates are removed keeping the first occurrence.

    Parameters
    ----------
    message : object
        Raw user message.  Anything other than a string yields no keywords.

    Returns
    -------
    list[str]
        Keywords in first-occurrence order.
    """
    if not isinstance(message, str):
        return []

    normalized = normalize(message)
    if not normalized:
        return []

    seen: set[str] = set()
    keywords: list[str] = []
    for token in normalized.split(" "):
        if len(token) < MIN_TOKEN_LENGTH or token in STOPWORDS or token in seen:
            continue
        seen.add(token)
        keywords.append(token)
    return keywords
