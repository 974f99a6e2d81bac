"""Tests for the JSON file-backed item store."""

import json

import pytest

from knowledge_assistant.store import JsonFileItemStore, StoreRegistry


def test_loads_existing_file(knowledge_file):
    store = JsonFileItemStore(knowledge_file)
    assert [i.id for i in store.list()] == ["k1", "k2", "k3"]
    assert store.get("k2").url == "https://example.com/shipping"


def test_missing_file_starts_empty(tmp_path):
    store = JsonFileItemStore(tmp_path / "absent.json")
    assert store.list() == []
    assert not (tmp_path / "absent.json").exists()


def test_create_persists(tmp_path):
    path = tmp_path / "nested" / "kb.json"
    store = JsonFileItemStore(path)
    item = store.create({"title": "VPN", "content": "Use the client.", "tags": ["net"]})

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [{"id": item.id, "title": "VPN", "content": "Use the client.", "tags": ["net"]}]

    reopened = JsonFileItemStore(path)
    assert reopened.get(item.id) == item


def test_update_and_delete_persist(knowledge_file):
    store = JsonFileItemStore(knowledge_file)
    store.update("k1", {"title": "Password reset"})
    store.delete("k3")

    reopened = JsonFileItemStore(knowledge_file)
    assert [i.id for i in reopened.list()] == ["k1", "k2"]
    assert reopened.get("k1").title == "Password reset"


def test_non_list_file_starts_empty(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text('{"not": "a list"}', encoding="utf-8")
    assert JsonFileItemStore(path).list() == []


def test_malformed_entries_skipped(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text(json.dumps([{"id": "ok", "title": "t", "content": "c"}, {"title": "no id"}, "junk"]))
    assert [i.id for i in JsonFileItemStore(path).list()] == ["ok"]


def test_registry_creates_json_store(knowledge_file):
    store = StoreRegistry.create("json", path=knowledge_file)
    assert isinstance(store, JsonFileItemStore)
    assert store.name == "json"
    assert store.path == knowledge_file


def test_truncated_file_starts_empty(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text('[{"id": ', encoding="utf-8")
    assert JsonFileItemStore(path).list() == []


def test_non_utf8_file_starts_empty(tmp_path):
    path = tmp_path / "kb.json"
    path.write_bytes(b'[{"id": "\xff\xfe"}]')
    assert JsonFileItemStore(path).list() == []


def test_write_leaves_no_temporary_files(knowledge_file):
    store = JsonFileItemStore(knowledge_file)
    store.create({"title": "VPN", "content": "Use the client."})
    assert sorted(p.name for p in knowledge_file.parent.iterdir()) == [knowledge_file.name]


class TestFailedWrites:
    """A mutation whose write fails leaves memory and disk untouched."""

    @pytest.fixture()
    def blocked_store(self, knowledge_file):
        store = JsonFileItemStore(knowledge_file)
        knowledge_file.unlink()
        knowledge_file.mkdir()
        return store

    def test_create(self, blocked_store):
        with pytest.raises(OSError):
            blocked_store.create({"title": "VPN", "content": "Use the client."})
        assert [i.id for i in blocked_store.list()] == ["k1", "k2", "k3"]

    def test_update(self, blocked_store):
        with pytest.raises(OSError):
            blocked_store.update("k1", {"title": "Password reset"})
        assert blocked_store.get("k1").title == "Reset your password"

    def test_delete(self, blocked_store):
        with pytest.raises(OSError):
            blocked_store.delete("k2")
        assert blocked_store.get("k2") is not None

    def test_temporary_file_removed(self, blocked_store, knowledge_file):
        with pytest.raises(OSError):
            blocked_store.delete("k2")
        assert [p.name for p in knowledge_file.parent.iterdir()] == [knowledge_file.name]
