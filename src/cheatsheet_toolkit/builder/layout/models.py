"""
Module: builder.layout.models

Purpose:
    Data models for the layout engine.
    Immutable dataclasses for column state, placement instructions,
    commit results and the final layout.

Key Classes:
    - ColumnState: Snapshot of one column cursor
    - PlacementInstruction: Where an item lands, handed to the renderer
    - CommitResult: Exact line counts returned after drawing
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.cursors: ColumnState snapshots
    - builder.layout.paginator: Creates instructions and results
    - builder.controller: Reports page counts and warnings
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ColumnState:
    """
    Vertical cursor of one column on the current page.

    Attributes:
        column_index: Column, 0-based
        cursor_y: Next free y offset from the page top (mm)
    """

    column_index: int
    cursor_y: float


@dataclass(frozen=True)
class PlacementInstruction:
    """
    Position and text of one item.

    Attributes:
        item_id: ContentItem id
        page_index: Page number (0-indexed)
        column_index: Column on that page (0-indexed)
        x: Left edge in mm
        y: Top offset in mm (the column cursor before the item)
        title_text: Title to draw
        body_text: Body to draw
        title_font_size: Title size in points
        body_font_size: Body size in points

    Example:
        >>> p = PlacementInstruction(3, 0, 1, 105.0, 14.5, "Mass", "kg", 9, 7)
        >>> p.slot
        (0, 1)
    """

    item_id: int
    page_index: int
    column_index: int
    x: float
    y: float
    title_text: str
    body_text: str
    title_font_size: float
    body_font_size: float

    @property
    def slot(self) -> Tuple[int, int]:
        """(page_index, column_index) pair."""
        return (self.page_index, self.column_index)


@dataclass(frozen=True)
class CommitResult:
    """
    Exact line counts reported after the renderer wrapped and drew an item.

    Attributes:
        title_line_count: Lines used by the title
        body_line_count: Lines used by the body
    """

    title_line_count: int
    body_line_count: int


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        placements: One instruction per input item, input order
        page_count: Number of pages produced
        warnings: Human-readable warnings (post-commit overflow)
        overflow_item_ids: Items whose exact height ran past the page bottom

    Example:
        >>> result = LayoutResult(placements=(p1, p2), page_count=1)
        >>> result.page_indices
        (0, 0)
    """

    placements: tuple[PlacementInstruction, ...] = ()
    page_count: int = 0
    warnings: list[str] = field(default_factory=list)
    overflow_item_ids: tuple[int, ...] = ()

    @property
    def page_indices(self) -> tuple[int, ...]:
        """Page index of every placement, in order."""
        return tuple(p.page_index for p in self.placements)

    @property
    def is_empty(self) -> bool:
        """Check if nothing was placed."""
        return len(self.placements) == 0

    def placements_on_page(self, page_index: int) -> tuple[PlacementInstruction, ...]:
        """All placements on one page, in emission order."""
        return tuple(p for p in self.placements if p.page_index == page_index)
