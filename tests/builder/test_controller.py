"""
Integration tests for the build controller.

Runs the whole pipeline (load, filter, formulas, layout, ReportLab) and
checks the written PDF with PyMuPDF.
"""

import fitz
import pytest

from cheatsheet_toolkit.builder import BuildError, BuilderConfig, build_sheet
from cheatsheet_toolkit.core.models import SourceItem


@pytest.fixture
def concepts(source_file):
    return source_file([
        {"name": "Mean μ", "definition": "μ = Σx / n"},
        {"name": "Variance", "definition": "σ² = Σ(x - μ)² / n", "checked": False},
        {"name": "Median", "definition": "Middle value of ordered data"},
    ])


class TestBuildSheet:

    def test_when_source_path_then_pdf_written_with_checked_items(self, concepts, tmp_path):
        # Arrange
        output = tmp_path / "out" / "sheet.pdf"

        # Act
        result = build_sheet(concepts, BuilderConfig(), output)

        # Assert
        assert output.exists()
        assert output.read_bytes() == result.pdf_bytes
        assert result.pdf_path == output
        assert result.item_count == 2
        assert result.page_count == 1
        assert [p.item_id for p in result.layout.placements] == [0, 2]

        with fitz.open(output) as doc:
            text = doc[0].get_text()
        assert "Median" in text
        assert "Variance" not in text

    def test_plain_text_mode_spells_out_symbols(self, concepts):
        result = build_sheet(concepts, BuilderConfig(plain_text_formulas=True))

        titles = [p.title_text for p in result.layout.placements]
        bodies = [p.body_text for p in result.layout.placements]
        assert titles[0] == "Mean mu"
        assert bodies[0] == "mu = Sigmax / n"
        assert result.pdf_path is None

    def test_symbol_mode_keeps_symbols(self, concepts):
        result = build_sheet(concepts, BuilderConfig(plain_text_formulas=False))
        assert result.layout.placements[0].title_text == "Mean μ"

    def test_when_items_given_directly_then_used(self):
        items = [SourceItem(id=i, name=f"Term {i}", definition="def") for i in range(5)]

        result = build_sheet(items, BuilderConfig(max_items_per_page=2))

        assert result.page_count == 3
        assert result.layout.page_indices == (0, 0, 1, 1, 2)

    def test_out_of_range_settings_are_clamped(self):
        items = [SourceItem(id=0, name="A", definition="a")]

        result = build_sheet(items, BuilderConfig(column_count=8, max_items_per_page=0))

        assert result.metadata["settings"]["column_count"] == 3
        assert result.metadata["settings"]["max_items_per_page"] == 1

    def test_metadata_reports_counts(self, concepts):
        result = build_sheet(concepts, BuilderConfig())

        assert result.metadata["item_count"] == 2
        assert result.metadata["page_count"] == 1
        assert result.metadata["overflow_item_ids"] == []
        assert "generated_at" in result.metadata
        assert result.warnings == ()

    def test_preview_written_when_requested(self, concepts, tmp_path):
        preview = tmp_path / "preview.png"

        result = build_sheet(concepts, BuilderConfig(), preview_path=preview)

        assert result.preview_path == preview
        assert preview.read_bytes().startswith(b"\x89PNG")


class TestBuildSheetErrors:

    def test_when_nothing_checked_then_build_error(self):
        items = [SourceItem(id=0, name="A", definition="a", checked=False)]

        with pytest.raises(BuildError, match="select at least one item"):
            build_sheet(items, BuilderConfig())

    def test_when_source_empty_then_build_error(self, source_file):
        with pytest.raises(BuildError, match="select at least one item"):
            build_sheet(source_file([]), BuilderConfig())

    def test_when_source_invalid_then_build_error_chains_loader_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('[{"name": "A"}]', encoding="utf-8")

        with pytest.raises(BuildError, match="Failed to load items") as exc_info:
            build_sheet(path, BuilderConfig())
        assert exc_info.value.__cause__ is not None

    def test_when_page_too_small_then_build_error(self):
        items = [SourceItem(id=0, name="A", definition="a")]

        with pytest.raises(BuildError, match="Invalid layout settings"):
            build_sheet(items, BuilderConfig(page_width=20, margin=10))
