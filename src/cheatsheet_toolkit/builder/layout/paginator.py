"""
Module: builder.layout.paginator

Purpose:
    Placement driver. Walks the items once, in order, and places each one
    on a page and column using estimate-then-commit:
    the estimate decides whether to break, the renderer's exact line
    count decides how far the column cursor moves.

Key Functions:
    - layout_items(): Main layout function

Algorithm:
    For each item:
    1. Estimate its height from approximate line counts
    2. Let the advancer stay / move to next column / start a new page
    3. Emit a PlacementInstruction at the column cursor
    4. Ask the adapter to wrap and draw title and body (commit)
    5. Advance the column cursor by the exact height plus item spacing

    Overflow is not re-checked after the commit. When an item's exact
    height runs past the page bottom, it stays where it was placed and is
    reported in LayoutResult.overflow_item_ids.

Dependencies:
    - builder.layout.estimator, cursors, advancer: Engine parts
    - builder.layout.adapter: RendererAdapter contract

Used By:
    - builder.output.renderer: PDF rendering
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from cheatsheet_toolkit.core.models import ContentItem

from .adapter import RendererAdapter, TextStyle
from .advancer import Advance, AdvancerState, advance
from .config import LayoutConfig
from .cursors import ColumnCursorTable
from .estimator import committed_height, estimate_height
from .models import CommitResult, LayoutResult, PlacementInstruction

logger = logging.getLogger(__name__)


def layout_items(
    items: Sequence[ContentItem],
    config: LayoutConfig,
    adapter: RendererAdapter,
) -> LayoutResult:
    """
    Place every item and drive the adapter to draw it.

    Args:
        items: Items in output order (already filtered)
        config: Layout configuration
        adapter: Document writer; draws the header of page 0 before the
            first item and after every page break

    Returns:
        LayoutResult with one placement per item, in input order

    Raises:
        RenderError: If the adapter fails; nothing is retried

    Example:
        >>> result = layout_items(items, LayoutConfig(column_count=2), adapter)
        >>> result.page_count
        3
    """
    if not items:
        logger.warning("No items to lay out, returning empty layout")
        return LayoutResult()

    cursors = ColumnCursorTable(config.column_count, config.initial_y)
    state = AdvancerState()
    placements: List[PlacementInstruction] = []
    warnings: List[str] = []
    overflow_ids: List[int] = []

    adapter.set_page_header(state.page_index)

    for item in items:
        estimated = estimate_height(item, config)
        state, step = advance(
            state,
            estimated,
            cursors.get(state.column_index),
            config.effective_page_height,
            config.max_items_per_page,
            config.column_count,
        )

        if step is Advance.NEW_PAGE:
            cursors.reset_all(config.initial_y)
            adapter.add_page()
            adapter.set_page_header(state.page_index)
            logger.debug(f"Item {item.id} starts page {state.page_index}")
        elif step is Advance.NEXT_COLUMN:
            logger.debug(
                f"Item {item.id} moves to column {state.column_index} on page {state.page_index}"
            )

        cursor_y = cursors.get(state.column_index)
        instruction = PlacementInstruction(
            item_id=item.id,
            page_index=state.page_index,
            column_index=state.column_index,
            x=config.column_x(state.column_index),
            y=cursor_y,
            title_text=item.title,
            body_text=item.body,
            title_font_size=config.title_font_size,
            body_font_size=config.body_font_size,
        )
        placements.append(instruction)

        commit = _commit(adapter, instruction, config)
        content_bottom = cursor_y + committed_height(commit, config)
        cursors.set(state.column_index, content_bottom + config.item_spacing)

        if content_bottom > config.effective_page_height:
            message = (
                f"Item {item.id} overflows page {state.page_index} column {state.column_index}: "
                f"ends at {content_bottom:.1f}mm, limit {config.effective_page_height:.1f}mm "
                f"(estimated {estimated:.1f}mm)"
            )
            logger.warning(message)
            warnings.append(message)
            overflow_ids.append(item.id)

        state = state.placed()

    page_count = state.page_index + 1
    logger.info(f"Laid out {len(placements)} items onto {page_count} pages")

    return LayoutResult(
        placements=tuple(placements),
        page_count=page_count,
        warnings=warnings,
        overflow_item_ids=tuple(overflow_ids),
    )


def _commit(
    adapter: RendererAdapter,
    instruction: PlacementInstruction,
    config: LayoutConfig,
) -> CommitResult:
    """
    Wrap and draw one item through the adapter.

    Title first (bold), then body (normal) below the title lines and the
    title/body spacing.

    Returns:
        Exact line counts used
    """
    title_lines = adapter.wrap_text(
        instruction.title_text, instruction.title_font_size, config.wrap_width
    )
    adapter.draw_text(
        title_lines, instruction.x, instruction.y, instruction.title_font_size, TextStyle.BOLD
    )

    body_y = (
        instruction.y
        + len(title_lines) * config.title_line_height()
        + config.title_body_spacing
    )
    body_lines = adapter.wrap_text(
        instruction.body_text, instruction.body_font_size, config.wrap_width
    )
    adapter.draw_text(
        body_lines, instruction.x, body_y, instruction.body_font_size, TextStyle.NORMAL
    )

    return CommitResult(title_line_count=len(title_lines), body_line_count=len(body_lines))
