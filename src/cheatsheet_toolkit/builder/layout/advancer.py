"""
Module: builder.layout.advancer

Purpose:
    Page/column state machine. Decides, once per item and before it is
    placed, whether the item stays in the current column, moves to the
    next column, or starts a new page.

Algorithm:
    Columns fill sequentially, not row-major: column 0 takes items until
    it overflows, then column 1 begins, and so on.
    1. Count overflow: max_items_per_page > 0 and items_on_page >= cap.
       The counter is per page, so another column of the same page cannot
       take the item: start a new page.
    2. Height overflow: cursor_y + estimated_height > effective_page_height.
       Move to the next column (keeping its existing cursor and the page
       item count), or start a new page from the last column.
    3. Otherwise stay.
    The column moved into is not re-checked; an item that is also too tall
    for the next column is still placed there.

Key Functions:
    - advance(): Pure transition function

Key Classes:
    - AdvancerState: Immutable machine state
    - Advance: Transition taken

Used By:
    - builder.layout.paginator: Placement driver
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple


class Advance(Enum):
    """Transition taken for one item."""

    STAY = "stay"
    NEXT_COLUMN = "next_column"
    NEW_PAGE = "new_page"


@dataclass(frozen=True)
class AdvancerState:
    """
    Position of the layout run.

    Attributes:
        column_index: Current column on the page
        items_on_page: Items placed on the current page, all columns
        page_index: Current page
    """

    column_index: int = 0
    items_on_page: int = 0
    page_index: int = 0

    def placed(self) -> AdvancerState:
        """State after one more item landed on the current page."""
        return replace(self, items_on_page=self.items_on_page + 1)


def count_overflow(state: AdvancerState, max_items_per_page: int) -> bool:
    """True when the page already holds the maximum number of items."""
    return max_items_per_page > 0 and state.items_on_page >= max_items_per_page


def height_overflow(
    estimated_height: float,
    cursor_y: float,
    effective_page_height: float,
) -> bool:
    """True when the item would run past the bottom of the column."""
    return cursor_y + estimated_height > effective_page_height


def advance(
    state: AdvancerState,
    estimated_height: float,
    cursor_y: float,
    effective_page_height: float,
    max_items_per_page: int,
    column_count: int,
) -> Tuple[AdvancerState, Advance]:
    """
    Compute the state in which the next item is placed.

    Args:
        state: Current state
        estimated_height: Estimated item height (mm)
        cursor_y: Cursor of the current column (mm)
        effective_page_height: Bottom limit for cursors (mm)
        max_items_per_page: Item cap per page (0 = unlimited)
        column_count: Columns per page

    Returns:
        Tuple of (new state, transition). On NEW_PAGE the caller must reset
        all column cursors and draw the page header before placing the item.

    Example:
        >>> state, step = advance(AdvancerState(), 500.0, 10.0, 277.0, 0, 2)
        >>> step, state.column_index
        (<Advance.NEXT_COLUMN: 'next_column'>, 1)
    """
    if count_overflow(state, max_items_per_page):
        return _new_page(state), Advance.NEW_PAGE

    if not height_overflow(estimated_height, cursor_y, effective_page_height):
        return state, Advance.STAY

    if state.column_index < column_count - 1:
        return replace(state, column_index=state.column_index + 1), Advance.NEXT_COLUMN

    return _new_page(state), Advance.NEW_PAGE


def _new_page(state: AdvancerState) -> AdvancerState:
    return AdvancerState(column_index=0, items_on_page=0, page_index=state.page_index + 1)
