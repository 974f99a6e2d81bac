"""In-memory knowledge item store."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import replace
from typing import Any

from knowledge_assistant.models import KnowledgeItem
from knowledge_assistant.store.base import ItemStore, StoreRegistry
from knowledge_assistant.store.validation import validate_create, validate_update

logger = logging.getLogger(__name__)


def make_id() -> str:
    """Return a new item id of the form ``k_<epoch-ms>_<random hex>``."""
    return f"k_{int(time.time() * 1000)}_{uuid.uuid4().hex[:12]}"


@StoreRegistry.register("memory")
class InMemoryItemStore(ItemStore):
    """Keep knowledge items in a process-local list, newest first.

    Parameters
    ----------
    items : list[KnowledgeItem] | None
        Initial contents, in listing order.
    """

    def __init__(self, items: list[KnowledgeItem] | None = None) -> None:
        self._items: list[KnowledgeItem] = [item.copy() for item in items or []]

    def list(self) -> list[KnowledgeItem]:
        return [item.copy() for item in self._items]

    def get(self, item_id: str) -> KnowledgeItem | None:
        index = self._index(item_id)
        return None if index is None else self._items[index].copy()

    def create(self, data: dict[str, Any]) -> KnowledgeItem:
        cleaned = validate_create(data)
        item = KnowledgeItem(id=make_id(), **cleaned)
        self._commit([item, *self._items])
        logger.info("Created knowledge item id=%s title=%r", item.id, item.title)
        return item.copy()

    def update(self, item_id: str, data: dict[str, Any]) -> KnowledgeItem:
        index = self._index(item_id)
        if index is None:
            msg = f"Knowledge item {item_id!r} not found"
            raise KeyError(msg)
        cleaned = validate_update(data)
        updated = replace(self._items[index], **cleaned)
        items = self._items[:]
        items[index] = updated
        self._commit(items)
        logger.info("Updated knowledge item id=%s fields=%s", item_id, sorted(cleaned))
        return updated.copy()

    def delete(self, item_id: str) -> bool:
        index = self._index(item_id)
        if index is None:
            return False
        self._commit(self._items[:index] + self._items[index + 1 :])
        logger.info("Deleted knowledge item id=%s", item_id)
        return True

    def _index(self, item_id: str) -> int | None:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        return None

    def _commit(self, items: list[KnowledgeItem]) -> None:
        """Persist *items*, then make them the current contents."""
        self._save(items)
        self._items = items

    def _save(self, items: list[KnowledgeItem]) -> None:
        """Hook called with the new contents before every mutation takes effect."""
