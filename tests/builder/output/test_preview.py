"""
Tests for PDF page previews.
"""

import pytest
from PIL import Image

from cheatsheet_toolkit.builder.layout import LayoutConfig
from cheatsheet_toolkit.builder.output import render_preview, render_to_bytes, save_preview


@pytest.fixture
def pdf_bytes(make_items):
    data, _ = render_to_bytes(make_items(6), LayoutConfig(max_items_per_page=3))
    return data


class TestRenderPreview:

    def test_when_rendered_at_72_dpi_then_a4_point_size(self, pdf_bytes):
        image = render_preview(pdf_bytes, dpi=72)

        assert isinstance(image, Image.Image)
        assert image.mode == "RGB"
        width, height = image.size
        assert abs(width - 595) <= 1
        assert abs(height - 842) <= 1

    def test_higher_dpi_gives_larger_image(self, pdf_bytes):
        small = render_preview(pdf_bytes, dpi=50)
        large = render_preview(pdf_bytes, dpi=100)
        assert large.size[0] > small.size[0]

    def test_second_page_renders(self, pdf_bytes):
        assert render_preview(pdf_bytes, page_index=1, dpi=30).size[0] > 0

    @pytest.mark.parametrize("page_index", [-1, 2])
    def test_when_page_out_of_range_then_value_error(self, pdf_bytes, page_index):
        with pytest.raises(ValueError, match="out of range"):
            render_preview(pdf_bytes, page_index=page_index)


class TestSavePreview:

    def test_writes_png(self, pdf_bytes, tmp_path):
        target = tmp_path / "previews" / "page.png"

        written = save_preview(pdf_bytes, target, dpi=40)

        assert written == target
        with Image.open(target) as image:
            assert image.format == "PNG"
