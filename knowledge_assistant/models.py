"""Data models shared by the store, retrieval engine, and composer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class KnowledgeItem:
    """A titled, tagged unit of knowledge the assistant can answer from.

    Parameters
    ----------
    id : str
        Opaque identifier assigned by the store at creation.
    title : str
        Short title.
    content : str
        Answer text.
    tags : list[str]
        Free-form tags, in insertion order.
    source : str | None
        Optional origin label carried through to citations.
    url : str | None
        Optional link carried through to citations.
    """

    id: str
    title: str
    content: str
    tags: list[str] = field(default_factory=list)
    source: str | None = None
    url: str | None = None

    def copy(self) -> KnowledgeItem:
        """Return a copy that does not share the ``tags`` list."""
        return KnowledgeItem(
            id=self.id,
            title=self.title,
            content=self.content,
            tags=list(self.tags),
            source=self.source,
            url=self.url,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted representation, omitting empty optional fields."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags),
        }
        if self.source:
            data["source"] = self.source
        if self.url:
            data["url"] = self.url
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KnowledgeItem:
        """Construct an item from its persisted representation.

        Parameters
        ----------
        data : dict
            Must contain ``id``, ``title`` and ``content``.  ``tags``,
            ``source`` and ``url`` are optional.

        Returns
        -------
        KnowledgeItem
        """
        tags = data.get("tags") or []
        return cls(
            id=str(data["id"]),
            title=data["title"],
            content=data["content"],
            tags=list(tags) if isinstance(tags, list) else [],
            source=data.get("source") or None,
            url=data.get("url") or None,
        )


@dataclass
class ScoredMatch:
    """A knowledge item paired with its relevance score for one query."""

    item: KnowledgeItem
    score: int


@dataclass
class Source:
    """Citation projection of a matched knowledge item.

    Parameters
    ----------
    id : str
        Item identifier.
    title : str
        Item title as stored.
    source : str | None
        Origin label, when the item has one.
    url : str | None
        Link, when the item has one.
    """

    id: str
    title: str
    source: str | None = None
    url: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Return the citation dict, including ``source``/``url`` only when set."""
        data = {"id": self.id, "title": self.title}
        if self.source:
            data["source"] = self.source
        if self.url:
            data["url"] = self.url
        return data


@dataclass
class ChatResponse:
    """Answer to a chat message with the knowledge items it cites.

    Parameters
    ----------
    answer : str
        Composed answer text, or the fallback text when nothing matched.
    sources : list[Source]
        Citations in the same order the items appear in the answer.
    """

    answer: str
    sources: list[Source] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the response body shape ``{"answer": ..., "sources": [...]}``."""
        return {"answer": self.answer, "sources": [s.to_dict() for s in self.sources]}
