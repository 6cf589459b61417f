"""
Module: builder.layout.config

Purpose:
    Configuration for the pagination and column layout engine.
    Defines fonts, spacing, page geometry and paging limits.

Key Classes:
    - LayoutConfig: Immutable layout configuration
    - ConfigError: Raised for out-of-range configuration values

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.estimator: Height estimation
    - builder.layout.paginator: Placement driver
    - builder.output.renderer: Text wrapping and drawing
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# A4 portrait in millimetres
DEFAULT_PAGE_WIDTH_MM = 210.0
DEFAULT_PAGE_HEIGHT_MM = 297.0
DEFAULT_MARGIN_MM = 10.0

DEFAULT_CHARS_PER_LINE = 40
DEFAULT_HEADER_TEXT = "Study Guide"

# Column count is limited to what fits legibly on one page
MIN_COLUMNS = 1
MAX_COLUMNS = 3

# Approximate points -> millimetres factor used for line heights
PT_TO_MM = 0.35


class ConfigError(ValueError):
    """Layout configuration is out of range."""
    pass


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for one layout run (immutable).

    All lengths are in millimetres, font sizes in points.

    Attributes:
        title_font_size: Item title font size
        body_font_size: Item body font size
        line_height_multiplier: Scales every line height
        max_items_per_page: Item cap per page across all columns (0 = unlimited)
        column_count: Number of columns, 1 to 3
        item_spacing: Vertical gap after each item
        title_body_spacing: Vertical gap between title and body
        page_width: Page width
        page_height: Page height
        margin: Margin on every side
        header_font_size: Page header size (None = title_font_size)
        header_text: Page header drawn at the top of each page
        column_gutter: Width kept free at the right of each column
        chars_per_line: Divisor used by the line estimator

    Example:
        >>> config = LayoutConfig(column_count=2)
        >>> config.column_width
        95.0
    """

    # Fonts
    title_font_size: float = 9.0
    body_font_size: float = 7.0
    line_height_multiplier: float = 1.0

    # Paging
    max_items_per_page: int = 0
    column_count: int = 1

    # Spacing
    item_spacing: float = 1.0
    title_body_spacing: float = 0.5

    # Page geometry
    page_width: float = DEFAULT_PAGE_WIDTH_MM
    page_height: float = DEFAULT_PAGE_HEIGHT_MM
    margin: float = DEFAULT_MARGIN_MM

    # Page header
    header_font_size: Optional[float] = None
    header_text: str = DEFAULT_HEADER_TEXT

    # Wrapping
    column_gutter: float = 5.0
    chars_per_line: int = DEFAULT_CHARS_PER_LINE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not (MIN_COLUMNS <= self.column_count <= MAX_COLUMNS):
            raise ConfigError(
                f"column_count must be {MIN_COLUMNS}-{MAX_COLUMNS}: {self.column_count}"
            )
        if self.max_items_per_page < 0:
            raise ConfigError(f"max_items_per_page must be non-negative: {self.max_items_per_page}")
        if self.title_font_size <= 0 or self.body_font_size <= 0:
            raise ConfigError(
                f"font sizes must be positive: title={self.title_font_size}, body={self.body_font_size}"
            )
        if self.header_font_size is not None and self.header_font_size <= 0:
            raise ConfigError(f"header_font_size must be positive: {self.header_font_size}")
        if self.line_height_multiplier <= 0:
            raise ConfigError(f"line_height_multiplier must be positive: {self.line_height_multiplier}")
        if self.item_spacing < 0 or self.title_body_spacing < 0:
            raise ConfigError(
                f"spacing must be non-negative: item={self.item_spacing}, "
                f"title_body={self.title_body_spacing}"
            )
        if self.chars_per_line < 1:
            raise ConfigError(f"chars_per_line must be at least 1: {self.chars_per_line}")
        if self.margin < 0:
            raise ConfigError(f"margin must be non-negative: {self.margin}")
        if self.wrap_width <= 0:
            raise ConfigError("Margins and gutter exceed page width")
        if self.effective_page_height <= self.initial_y:
            raise ConfigError("Margins exceed page height")

    @property
    def page_header_font_size(self) -> float:
        """Font size of the per-page header."""
        if self.header_font_size is None:
            return self.title_font_size
        return self.header_font_size

    @property
    def column_width(self) -> float:
        """Width of one column (printable width split evenly)."""
        return (self.page_width - 2 * self.margin) / self.column_count

    @property
    def wrap_width(self) -> float:
        """Width available to text inside a column."""
        return self.column_width - self.column_gutter

    @property
    def effective_page_height(self) -> float:
        """Bottom limit for column cursors, measured from the page top."""
        return self.page_height - 2 * self.margin

    @property
    def initial_y(self) -> float:
        """Cursor start for every column, below the page header."""
        return self.margin + self.page_header_font_size * 0.5

    def title_line_height(self) -> float:
        """Height of one title line."""
        return self.title_font_size * self.line_height_multiplier * PT_TO_MM

    def body_line_height(self) -> float:
        """Height of one body line."""
        return self.body_font_size * self.line_height_multiplier * PT_TO_MM

    def column_x(self, column_index: int) -> float:
        """Left edge of a column."""
        return self.margin + column_index * self.column_width
