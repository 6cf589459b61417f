"""
Module: builder.output.renderer

Purpose:
    Render laid-out items to PDF using ReportLab.
    ReportLabAdapter implements the layout engine's RendererAdapter on a
    ReportLab canvas: exact wrapping with font metrics, text drawing,
    page breaks and page headers.

Key Functions:
    - render_to_pdf(): Lay out and write a PDF file
    - render_to_bytes(): Lay out and return the PDF in memory

Key Classes:
    - ReportLabAdapter: RendererAdapter backed by a canvas

Dependencies:
    - reportlab: PDF generation and font metrics
    - builder.layout: layout_items, LayoutConfig, RenderError

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from cheatsheet_toolkit.core.models import ContentItem
from cheatsheet_toolkit.builder.layout import (
    LayoutConfig,
    LayoutResult,
    RenderError,
    TextStyle,
    layout_items,
)
from cheatsheet_toolkit.builder.layout.config import PT_TO_MM

logger = logging.getLogger(__name__)

# Fonts
FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
# Wrapping measures with the wider face so bold titles never exceed the column
WRAP_FONT = FONT_BOLD

_STYLE_FONTS = {
    TextStyle.NORMAL: FONT_REGULAR,
    TextStyle.BOLD: FONT_BOLD,
}


class ReportLabAdapter:
    """
    RendererAdapter drawing onto a ReportLab canvas.

    Layout coordinates are millimetres from the page top-left; the canvas
    works in points from the bottom-left, so every y is flipped.

    Attributes:
        page_count: Pages started so far (the canvas starts on page 1)

    Example:
        >>> c = canvas.Canvas("sheet.pdf", pagesize=(210 * mm, 297 * mm))
        >>> adapter = ReportLabAdapter(c, LayoutConfig())
        >>> adapter.wrap_text("Hello world", 7, 20.0)
        ['Hello world']
    """

    def __init__(self, c: canvas.Canvas, config: LayoutConfig) -> None:
        self._canvas = c
        self._config = config
        self.page_count = 1

    def wrap_text(self, text: str, font_size: float, available_width: float) -> List[str]:
        """
        Wrap text to the column width.

        Explicit newlines always break. Words wider than the column are
        split by characters. Empty text still takes one (empty) line.
        """
        width_pt = available_width * mm
        if width_pt <= 0:
            raise RenderError(f"Cannot wrap into non-positive width: {available_width}mm")

        lines: List[str] = []
        try:
            for paragraph in text.split("\n"):
                lines.extend(_wrap_paragraph(paragraph, WRAP_FONT, font_size, width_pt))
        except (KeyError, ValueError, TypeError) as e:
            raise RenderError(f"Failed to wrap text {text[:30]!r}: {e}") from e
        return lines

    def draw_text(
        self,
        lines: Sequence[str],
        x: float,
        y: float,
        font_size: float,
        style: TextStyle,
    ) -> None:
        """Draw lines with the first baseline at y, one line height apart."""
        line_height = font_size * self._config.line_height_multiplier * PT_TO_MM
        c = self._canvas
        try:
            c.setFont(_STYLE_FONTS[style], font_size)
            for i, line in enumerate(lines):
                c.drawString(x * mm, self._flip_y(y + i * line_height), line)
        except (KeyError, ValueError, TypeError, UnicodeError) as e:
            raise RenderError(f"Failed to draw text at ({x:.1f}, {y:.1f})mm: {e}") from e

    def add_page(self) -> None:
        """Close the current page."""
        self._canvas.showPage()
        self.page_count += 1

    def set_page_header(self, page_index: int) -> None:
        """Draw the header text at the top margin of the current page."""
        header = self._config.header_text
        if not header:
            return
        c = self._canvas
        c.saveState()
        c.setFont(FONT_REGULAR, self._config.page_header_font_size)
        c.drawString(self._config.margin * mm, self._flip_y(self._config.margin), header)
        c.restoreState()
        logger.debug(f"Drew header for page {page_index}")

    def _flip_y(self, y_mm: float) -> float:
        """Top-down millimetres to bottom-up points."""
        return (self._config.page_height - y_mm) * mm


def render_to_pdf(
    items: Sequence[ContentItem],
    config: LayoutConfig,
    output_path: Path,
    *,
    title: str = "",
) -> LayoutResult:
    """
    Lay out items and write the PDF file.

    Args:
        items: Items in output order
        config: Layout configuration
        output_path: Path to write PDF
        title: Document title metadata (defaults to the header text)

    Returns:
        LayoutResult describing where each item landed

    Raises:
        RenderError: If text cannot be wrapped or drawn
        OSError: If the PDF cannot be written

    Example:
        >>> layout = render_to_pdf(items, LayoutConfig(), Path("output/sheet.pdf"))
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    c = _new_canvas(str(output_path), config, title)
    layout = _draw(c, items, config)
    c.save()

    logger.info(f"Rendered {layout.page_count} pages to {output_path}")
    return layout


def render_to_bytes(
    items: Sequence[ContentItem],
    config: LayoutConfig,
    *,
    title: str = "",
) -> Tuple[bytes, LayoutResult]:
    """
    Lay out items and return the PDF in memory (for previews and downloads).

    Returns:
        Tuple of (PDF bytes, LayoutResult)
    """
    buf = io.BytesIO()
    c = _new_canvas(buf, config, title)
    layout = _draw(c, items, config)
    c.save()
    return buf.getvalue(), layout


def _new_canvas(target, config: LayoutConfig, title: str) -> canvas.Canvas:
    c = canvas.Canvas(target, pagesize=(config.page_width * mm, config.page_height * mm))
    c.setTitle(title or config.header_text)
    c.setCreator("cheatsheet_toolkit")
    return c


def _draw(c: canvas.Canvas, items: Sequence[ContentItem], config: LayoutConfig) -> LayoutResult:
    if not items:
        logger.warning("Empty layout, creating empty PDF")
    adapter = ReportLabAdapter(c, config)
    layout = layout_items(items, config, adapter)
    c.showPage()
    return layout


def _wrap_paragraph(paragraph: str, font: str, font_size: float, width_pt: float) -> List[str]:
    """Greedy word wrap of one paragraph; over-wide words are split by characters."""
    lines: List[str] = []
    current = ""
    for word in paragraph.split():
        candidate = f"{current} {word}" if current else word
        if stringWidth(candidate, font, font_size) <= width_pt:
            current = candidate
            continue
        if current:
            lines.append(current)
        while stringWidth(word, font, font_size) > width_pt:
            head = _longest_fitting_prefix(word, font, font_size, width_pt)
            lines.append(head)
            word = word[len(head):]
        current = word
    lines.append(current)
    return lines


def _longest_fitting_prefix(word: str, font: str, font_size: float, width_pt: float) -> str:
    """Longest prefix of word within width_pt; at least one character."""
    end = 1
    while end < len(word) and stringWidth(word[: end + 1], font, font_size) <= width_pt:
        end += 1
    return word[:end]
