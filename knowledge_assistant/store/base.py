"""Abstract knowledge item store and registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from knowledge_assistant.models import KnowledgeItem


class KnowledgeValidationError(ValueError):
    """Raised when knowledge item data fails validation.

    Parameters
    ----------
    details : list[dict[str, str]]
        One ``{"field": ..., "message": ...}`` entry per problem.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, details: list[dict[str, str]]) -> None:
        self.details = details
        fields = ", ".join(d["field"] for d in details)
        super().__init__(f"Invalid knowledge data: {fields}")


class ItemStore(ABC):
    """Storage for knowledge items.

    Implementations return copies so callers never mutate stored state.
    The retrieval engine depends only on ``list``.
    """

    name: str = ""

    @abstractmethod
    def list(self) -> list[KnowledgeItem]:
        """Return every stored item, newest first."""

    @abstractmethod
    def get(self, item_id: str) -> KnowledgeItem | None:
        """Return the item with *item_id*, or ``None`` if there is none."""

    @abstractmethod
    def create(self, data: dict[str, Any]) -> KnowledgeItem:
        """Validate *data* and store it as a new item.

        Parameters
        ----------
        data : dict
            ``title`` and ``content`` are required; ``tags``, ``source``
            and ``url`` are optional.

        Returns
        -------
        KnowledgeItem
            The stored item with its assigned ``id``.

        Raises
        ------
        KnowledgeValidationError
            If *data* is invalid.
        """

    @abstractmethod
    def update(self, item_id: str, data: dict[str, Any]) -> KnowledgeItem:
        """Apply a partial update to an existing item.

        Raises
        ------
        KeyError
            If *item_id* is unknown.
        KnowledgeValidationError
            If *data* is invalid.
        """

    @abstractmethod
    def delete(self, item_id: str) -> bool:
        """Remove an item; return ``False`` if *item_id* is unknown."""


class StoreRegistry:
    """Discover and instantiate registered item stores."""

    _stores: dict[str, type[ItemStore]] = {}

    @classmethod
    def register(cls, name: str):
        """Class decorator that registers a store under *name*.

        Parameters
        ----------
        name : str
            Lookup key used in configuration files.

        Returns
        -------
        Callable
            The original class, unmodified.
        """

        def decorator(klass: type[ItemStore]) -> type[ItemStore]:
            cls._stores[name] = klass
            klass.name = name
            return klass

        return decorator

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> ItemStore:
        """Instantiate a registered store.

        Parameters
        ----------
        name : str
            Registered store name.
        **kwargs
            Forwarded to the store constructor.

        Returns
        -------
        ItemStore

        Raises
        ------
        KeyError
            If *name* is not registered.
        """
        if name not in cls._stores:
            available = ", ".join(sorted(cls._stores)) or "(none)"
            msg = f"Unknown store {name!r}. Available: {available}"
            raise KeyError(msg)
        return cls._stores[name](**kwargs)

    @classmethod
    def available(cls) -> list[str]:
        """Return sorted list of registered store names."""
        return sorted(cls._stores)
