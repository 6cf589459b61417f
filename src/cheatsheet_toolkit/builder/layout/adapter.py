"""
Module: builder.layout.adapter

Purpose:
    Contract between the layout engine and the document writer.
    The engine only decides positions; an adapter performs exact wrapping,
    draws text, adds pages and draws page headers.

Key Classes:
    - RendererAdapter: Protocol every document writer implements
    - TextStyle: Font style for draw_text
    - RenderError: Failure inside an adapter

Used By:
    - builder.layout.paginator: Calls the adapter once per item
    - builder.output.renderer: ReportLab implementation
"""

from __future__ import annotations

from enum import Enum
from typing import List, Protocol, Sequence


class RenderError(Exception):
    """Adapter could not wrap or draw text."""
    pass


class TextStyle(Enum):
    """Font style requested for a block of lines."""

    NORMAL = "normal"
    BOLD = "bold"


class RendererAdapter(Protocol):
    """
    Document writer driven by the layout engine.

    Calls are synchronous and order-sensitive. One adapter instance belongs
    to one document and one layout run at a time.
    """

    def wrap_text(self, text: str, font_size: float, available_width: float) -> List[str]:
        """Exact wrap of `text` into lines no wider than `available_width` (mm)."""
        ...

    def draw_text(
        self,
        lines: Sequence[str],
        x: float,
        y: float,
        font_size: float,
        style: TextStyle,
    ) -> None:
        """Draw `lines` with the first baseline at (x, y) mm from the page top-left."""
        ...

    def add_page(self) -> None:
        """Finish the current page and start a new one."""
        ...

    def set_page_header(self, page_index: int) -> None:
        """Draw the header of the current page."""
        ...
