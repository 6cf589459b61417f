"""
Tests for loading, selecting and exporting item sources.
"""

import json

import pytest

from cheatsheet_toolkit.builder.loading import (
    LoaderError,
    export_items,
    load_items,
    parse_items,
    select_checked,
)
from cheatsheet_toolkit.core.models import ContentItem, SourceItem


class TestParseItems:

    def test_when_ids_and_checked_missing_then_defaults_filled(self):
        # Arrange
        text = json.dumps([
            {"name": "Mass", "definition": "Amount of matter"},
            {"name": "Force", "definition": "Push or pull", "checked": None},
        ])

        # Act
        items = parse_items(text)

        # Assert
        assert items == [
            SourceItem(id=0, name="Mass", definition="Amount of matter", checked=True),
            SourceItem(id=1, name="Force", definition="Push or pull", checked=True),
        ]

    def test_when_ids_given_then_kept(self):
        text = json.dumps([{"id": 42, "name": "A", "definition": "B", "checked": False}])

        items = parse_items(text)

        assert items[0].id == 42
        assert items[0].checked is False

    def test_when_definition_has_stray_backslash_then_escaped_and_parsed(self):
        text = '[\n  {"name": "Stress", "definition": "\\sigma = F / A"}\n]'

        items = parse_items(text)

        assert items[0].definition == "\\sigma = F / A"

    def test_when_text_not_json_then_loader_error(self):
        with pytest.raises(LoaderError, match="Failed to parse JSON"):
            parse_items("not json at all")

    @pytest.mark.parametrize("data", [
        {"name": "A", "definition": "B"},
        [{"name": "A"}],
        [{"name": "A", "definition": 3}],
        [{"id": "seven", "name": "A", "definition": "B"}],
        ["just a string"],
    ])
    def test_when_shape_invalid_then_loader_error(self, data):
        with pytest.raises(LoaderError, match="Invalid item source"):
            parse_items(json.dumps(data))

    def test_empty_array_is_valid(self):
        assert parse_items("[]") == []


class TestLoadItems:

    def test_when_file_valid_then_items_loaded(self, source_file):
        path = source_file([{"name": "Ω", "definition": "ohm"}])

        items = load_items(path)

        assert [item.name for item in items] == ["Ω"]

    def test_when_suffix_not_json_then_error(self, tmp_path):
        path = tmp_path / "concepts.txt"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(LoaderError, match=".json"):
            load_items(path)

    def test_when_file_missing_then_error(self, tmp_path):
        with pytest.raises(LoaderError, match="does not exist"):
            load_items(tmp_path / "missing.json")

    def test_when_file_not_utf8_then_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_bytes(b"\xff\xfe\x00garbage")

        with pytest.raises(LoaderError, match="Failed to read"):
            load_items(path)


class TestSelectChecked:

    def test_unchecked_items_dropped_and_order_kept(self):
        items = [
            SourceItem(id=3, name="C", definition="c"),
            SourceItem(id=1, name="A", definition="a", checked=False),
            SourceItem(id=2, name="B", definition="b"),
        ]

        selected = select_checked(items)

        assert selected == [
            ContentItem(id=3, title="C", body="c"),
            ContentItem(id=2, title="B", body="b"),
        ]


class TestExportItems:

    def test_export_then_load_keeps_items(self, tmp_path):
        items = [
            SourceItem(id=0, name="Entropy", definition="ΔS ≥ 0"),
            SourceItem(id=5, name="Work", definition="W = F·d", checked=False),
        ]
        path = tmp_path / "exports" / "out.json"

        export_items(items, path)

        assert load_items(path) == items
        assert "ΔS" in path.read_text(encoding="utf-8")
