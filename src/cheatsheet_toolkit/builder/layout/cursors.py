"""
Module: builder.layout.cursors

Purpose:
    Per-column vertical cursor state for the current page.
    Owned by a single layout run; nothing else reads or writes cursors.

Key Classes:
    - ColumnCursorTable: get/set/reset of column cursors

Used By:
    - builder.layout.paginator: Placement driver
"""

from __future__ import annotations

from typing import List

from .models import ColumnState


class ColumnCursorTable:
    """
    Cursor y offsets, one per column.

    Example:
        >>> table = ColumnCursorTable(2, initial_y=13.5)
        >>> table.set(1, 40.0)
        >>> table.get(1)
        40.0
        >>> table.reset_all(13.5)
        >>> table.get(1)
        13.5
    """

    def __init__(self, column_count: int, initial_y: float) -> None:
        if column_count < 1:
            raise ValueError(f"column_count must be positive: {column_count}")
        self._cursors: List[float] = [initial_y] * column_count

    def __len__(self) -> int:
        return len(self._cursors)

    def get(self, column_index: int) -> float:
        """Current cursor of a column."""
        self._check(column_index)
        return self._cursors[column_index]

    def set(self, column_index: int, cursor_y: float) -> None:
        """Move a column cursor."""
        self._check(column_index)
        self._cursors[column_index] = cursor_y

    def reset_all(self, initial_y: float) -> None:
        """Put every column back at the page start (page break)."""
        self._cursors = [initial_y] * len(self._cursors)

    def states(self) -> tuple[ColumnState, ...]:
        """Snapshot of all columns."""
        return tuple(ColumnState(i, y) for i, y in enumerate(self._cursors))

    def _check(self, column_index: int) -> None:
        if not (0 <= column_index < len(self._cursors)):
            raise IndexError(
                f"column_index {column_index} out of range for {len(self._cursors)} columns"
            )
