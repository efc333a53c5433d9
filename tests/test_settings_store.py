import json
import logging
import os
from dataclasses import FrozenInstanceError

import pytest

from passgen.password_settings import DEFAULT_SETTINGS, GenerationSettings
from passgen.settings_store import SETTINGS_KEY, JsonFileStore, SettingsStore


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(str(tmp_path / "data" / "settings.json"))


@pytest.fixture
def store(file_store):
    return SettingsStore(file_store)


def test_load_without_file_returns_defaults(store):
    assert store.load() == DEFAULT_SETTINGS


def test_loaded_defaults_cannot_be_mutated(store):
    loaded = store.load()
    with pytest.raises(FrozenInstanceError):
        loaded.length = 99
    assert DEFAULT_SETTINGS.length == 16


def test_save_then_load(store, file_store):
    settings = GenerationSettings(length=32, include_symbols=True, exclude_similar=True, symbol_set="#%")
    assert store.save(settings)
    assert store.load() == settings

    on_disk = json.loads(file_store.file_path.read_text(encoding="utf-8"))
    assert on_disk[SETTINGS_KEY]["length"] == 32
    assert on_disk[SETTINGS_KEY]["symbolSet"] == "#%"


def test_clear_restores_defaults(store):
    store.save(GenerationSettings(length=64))
    assert store.clear()
    assert store.load() == DEFAULT_SETTINGS


def test_clear_missing_key_is_ok(store):
    assert store.clear()


def test_corrupt_file_falls_back_to_defaults(store, file_store, caplog):
    file_store.file_path.parent.mkdir(parents=True)
    file_store.file_path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert store.load() == DEFAULT_SETTINGS
    assert "unreadable" in caplog.text


def test_invalid_persisted_settings_are_discarded(store, file_store, caplog):
    bad = GenerationSettings().to_dict()
    bad["length"] = 500
    file_store.set(SETTINGS_KEY, bad)
    with caplog.at_level(logging.WARNING):
        assert store.load() == DEFAULT_SETTINGS
    assert "Discarding" in caplog.text


def test_settings_without_any_class_are_discarded(store, file_store):
    data = GenerationSettings(include_uppercase=False, include_lowercase=False,
                              include_numbers=False, include_symbols=False).to_dict()
    file_store.set(SETTINGS_KEY, data)
    assert store.load() == DEFAULT_SETTINGS


def test_store_keeps_other_keys(file_store, store):
    file_store.set("theme", "dark")
    store.save(GenerationSettings(length=20))
    store.clear()
    assert file_store.get("theme") == "dark"


def test_non_object_document_reads_as_empty(file_store):
    file_store.file_path.parent.mkdir(parents=True)
    file_store.file_path.write_text("[1, 2, 3]", encoding="utf-8")
    assert file_store.get("anything", "fallback") == "fallback"


def test_is_available(file_store):
    assert file_store.is_available()
    assert file_store.get("__storage_test__") is None


def test_unwritable_location(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    store = JsonFileStore(str(blocker / "settings.json"))
    assert not store.set("k", "v")
    assert not store.is_available()


def test_failed_write_leaves_no_temp_file(file_store, monkeypatch):
    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", broken_replace)
    assert not file_store.set("k", "v")

    leftovers = list(file_store.file_path.parent.iterdir())
    assert leftovers == []


def test_unserializable_value_leaves_no_temp_file(file_store):
    assert not file_store.set("k", object())
    assert list(file_store.file_path.parent.iterdir()) == []
