"""Tests for configuration loading."""

import pytest

from knowledge_assistant.config import (
    DEFAULT_FALLBACK,
    DEFAULT_MAX_SOURCES,
    AssistantConfig,
    ComposerConfig,
    RetrievalConfig,
    StoreConfig,
    load_config,
)


def test_load_config_defaults():
    config = load_config()
    assert isinstance(config, AssistantConfig)
    assert config.retrieval.max_matches == DEFAULT_MAX_SOURCES
    assert config.composer.max_sources == DEFAULT_MAX_SOURCES
    assert config.composer.fallback_text == DEFAULT_FALLBACK
    assert config.store.type == "memory"


def test_load_config_from_dict():
    config = load_config(
        {
            "retrieval": {"max_matches": 5},
            "composer": {"max_sources": 2, "fallback_text": "No idea."},
            "store": {"type": "json", "path": "kb.json"},
        }
    )
    assert config.retrieval.max_matches == 5
    assert config.composer.max_sources == 2
    assert config.composer.fallback_text == "No idea."
    assert config.store.type == "json"
    assert config.store.path == "kb.json"


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "assistant.yaml"
    path.write_text("retrieval:\n  max_matches: 4\nstore:\n  type: json\n  path: data/kb.json\n", encoding="utf-8")
    config = load_config(path)
    assert config.retrieval.max_matches == 4
    assert config.composer.max_sources == DEFAULT_MAX_SOURCES
    assert config.store.path == "data/kb.json"


def test_load_config_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == AssistantConfig()


def test_load_config_missing_file_uses_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yaml") == AssistantConfig()


def test_load_config_passes_config_through():
    config = AssistantConfig(composer=ComposerConfig(max_sources=1))
    assert load_config(config) is config


def test_load_config_env_override(monkeypatch):
    monkeypatch.setenv("ASSISTANT_RETRIEVAL_MAX_MATCHES", "7")
    monkeypatch.setenv("ASSISTANT_COMPOSER_FALLBACK_TEXT", "Env fallback")
    config = load_config()
    assert config.retrieval.max_matches == 7
    assert config.composer.fallback_text == "Env fallback"


def test_load_config_env_overrides_dict(monkeypatch):
    monkeypatch.setenv("ASSISTANT_STORE_TYPE", "json")
    monkeypatch.setenv("ASSISTANT_COMPOSER_MAX_SOURCES", "1")
    config = load_config({"store": {"type": "memory"}, "composer": {"max_sources": 5}})
    assert config.store.type == "json"
    assert config.composer.max_sources == 1


def test_caps_are_independent():
    config = load_config({"retrieval": {"max_matches": 10}})
    assert config.retrieval.max_matches == 10
    assert config.composer.max_sources == DEFAULT_MAX_SOURCES


class TestConfigValidation:
    """Validation tests for the config dataclasses."""

    def test_negative_max_matches_raises(self):
        with pytest.raises(ValueError, match="max_matches must be >= 0"):
            RetrievalConfig(max_matches=-1)

    def test_negative_max_sources_raises(self):
        with pytest.raises(ValueError, match="max_sources must be >= 0"):
            ComposerConfig(max_sources=-1)

    def test_zero_caps_ok(self):
        assert RetrievalConfig(max_matches=0).max_matches == 0
        assert ComposerConfig(max_sources=0).max_sources == 0

    def test_blank_fallback_raises(self):
        with pytest.raises(ValueError, match="fallback_text must be a non-empty string"):
            ComposerConfig(fallback_text="   ")

    def test_fallback_trimmed(self):
        assert ComposerConfig(fallback_text="  hi  ").fallback_text == "hi"

    def test_empty_store_type_raises(self):
        with pytest.raises(ValueError, match="store type"):
            StoreConfig(type="")

    def test_invalid_dict_value_raises(self):
        with pytest.raises(ValueError):
            load_config({"composer": {"max_sources": -2}})
