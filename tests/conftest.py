"""Shared fixtures for knowledge assistant tests."""

import json

import pytest

from knowledge_assistant.models import KnowledgeItem
from knowledge_assistant.store import InMemoryItemStore


@pytest.fixture()
def sample_items():
    """A small knowledge base with overlapping vocabulary."""
    return [
        KnowledgeItem(
            id="k1",
            title="Reset your password",
            content="Open Settings, choose Security, then click Reset password.",
            tags=["account", "login"],
        ),
        KnowledgeItem(
            id="k2",
            title="Shipping times",
            content="Orders ship within two business days.",
            tags=["orders", "delivery"],
            source="Support handbook",
            url="https://example.com/shipping",
        ),
        KnowledgeItem(
            id="k3",
            title="Refund policy",
            content="Refunds are issued within 14 days of an order being returned.",
            tags=["orders", "billing"],
        ),
    ]


@pytest.fixture()
def memory_store(sample_items):
    """In-memory store preloaded with ``sample_items``."""
    return InMemoryItemStore(sample_items)


class CountingStore(InMemoryItemStore):
    """In-memory store that counts ``list`` calls."""

    def __init__(self, items=None):
        super().__init__(items)
        self.list_calls = 0

    def list(self):
        self.list_calls += 1
        return super().list()


@pytest.fixture()
def counting_store(sample_items):
    return CountingStore(sample_items)


@pytest.fixture()
def knowledge_file(tmp_path, sample_items):
    """JSON knowledge file containing ``sample_items``."""
    path = tmp_path / "knowledge.json"
    path.write_text(json.dumps([item.to_dict() for item in sample_items]), encoding="utf-8")
    return path
