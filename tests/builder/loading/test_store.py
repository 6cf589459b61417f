"""
Tests for the JSON-backed ItemStore.
"""

import json

from cheatsheet_toolkit.builder.loading import ItemStore
from cheatsheet_toolkit.core.models import SourceItem


def _items():
    return [
        SourceItem(id=0, name="Mass", definition="kg"),
        SourceItem(id=1, name="Time", definition="s", checked=False),
    ]


class TestItemStore:

    def test_when_file_missing_then_empty_store(self, tmp_path):
        store = ItemStore(tmp_path / "store.json")

        assert store.get_items() == []
        assert store.get_settings() == {}
        assert store.load_error is None
        assert store.data["version"] == ItemStore.CURRENT_VERSION

    def test_items_persist_across_instances(self, tmp_path):
        path = tmp_path / "store.json"
        ItemStore(path).set_items(_items())

        reloaded = ItemStore(path)

        assert reloaded.get_items() == _items()
        assert not path.with_suffix(".tmp").exists()

    def test_settings_persist_across_instances(self, tmp_path):
        path = tmp_path / "store.json"
        ItemStore(path).set_settings({"columns": 2, "body_font_size": 8})

        assert ItemStore(path).get_settings() == {"columns": 2, "body_font_size": 8}

    def test_toggle_flips_checked_and_saves(self, tmp_path):
        path = tmp_path / "store.json"
        store = ItemStore(path)
        store.set_items(_items())

        updated = store.toggle(1)

        assert updated.checked is True
        assert ItemStore(path).get_items()[1].checked is True

    def test_toggle_unknown_id_returns_none(self, tmp_path):
        store = ItemStore(tmp_path / "store.json")
        store.set_items(_items())

        assert store.toggle(99) is None
        assert store.get_items() == _items()

    def test_when_file_corrupted_then_load_error_and_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{broken", encoding="utf-8")

        store = ItemStore(path)

        assert "corrupted" in store.load_error
        assert store.get_items() == []

    def test_when_file_holds_array_then_load_error(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[]", encoding="utf-8")

        store = ItemStore(path)

        assert store.load_error == "Store file does not contain an object"

    def test_when_stored_items_invalid_then_ignored(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"version": 1, "items": [{"name": 5}]}), encoding="utf-8")

        assert ItemStore(path).get_items() == []
