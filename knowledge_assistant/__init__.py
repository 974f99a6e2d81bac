"""Knowledge-base-backed chat assistant with lexical retrieval."""

from knowledge_assistant.api import MAX_MESSAGE_LENGTH, MessageValidationError, chat, create_store, validate_message
from knowledge_assistant.compose import compose
from knowledge_assistant.config import AssistantConfig, ComposerConfig, RetrievalConfig, StoreConfig, load_config
from knowledge_assistant.models import ChatResponse, KnowledgeItem, ScoredMatch, Source
from knowledge_assistant.retrieval import RetrievalEngine, normalize, tokenize
from knowledge_assistant.store import (
    InMemoryItemStore,
    ItemStore,
    JsonFileItemStore,
    KnowledgeValidationError,
    StoreRegistry,
)

__all__ = [
    "MAX_MESSAGE_LENGTH",
    "AssistantConfig",
    "ChatResponse",
    "ComposerConfig",
    "InMemoryItemStore",
    "ItemStore",
    "JsonFileItemStore",
    "KnowledgeItem",
    "KnowledgeValidationError",
    "MessageValidationError",
    "RetrievalConfig",
    "RetrievalEngine",
    "ScoredMatch",
    "Source",
    "StoreConfig",
    "StoreRegistry",
    "chat",
    "compose",
    "create_store",
    "load_config",
    "normalize",
    "tokenize",
    "validate_message",
]
