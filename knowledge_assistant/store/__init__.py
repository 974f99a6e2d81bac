"""Knowledge item storage with pluggable backends."""

from knowledge_assistant.store.base import ItemStore, KnowledgeValidationError, StoreRegistry
from knowledge_assistant.store.json_file import JsonFileItemStore
from knowledge_assistant.store.memory import InMemoryItemStore

__all__ = [
    "InMemoryItemStore",
    "ItemStore",
    "JsonFileItemStore",
    "KnowledgeValidationError",
    "StoreRegistry",
]
