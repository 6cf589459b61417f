"""
Unit tests for the column cursor table.
"""

import pytest

from cheatsheet_toolkit.builder.layout import ColumnCursorTable, ColumnState


class TestColumnCursorTable:

    def test_when_created_then_every_column_at_initial_y(self):
        table = ColumnCursorTable(3, initial_y=14.5)
        assert [table.get(i) for i in range(3)] == [14.5, 14.5, 14.5]
        assert len(table) == 3

    def test_when_set_then_only_that_column_moves(self):
        table = ColumnCursorTable(2, initial_y=10.0)
        table.set(1, 42.0)
        assert table.get(0) == 10.0
        assert table.get(1) == 42.0

    def test_when_reset_all_then_every_column_back_to_start(self):
        table = ColumnCursorTable(3, initial_y=10.0)
        table.set(0, 100.0)
        table.set(2, 50.0)

        table.reset_all(12.0)

        assert table.states() == (
            ColumnState(0, 12.0),
            ColumnState(1, 12.0),
            ColumnState(2, 12.0),
        )

    @pytest.mark.parametrize("index", [-1, 2])
    def test_when_column_out_of_range_then_index_error(self, index):
        table = ColumnCursorTable(2, initial_y=10.0)
        with pytest.raises(IndexError):
            table.get(index)
        with pytest.raises(IndexError):
            table.set(index, 1.0)

    def test_when_zero_columns_then_value_error(self):
        with pytest.raises(ValueError):
            ColumnCursorTable(0, initial_y=10.0)
