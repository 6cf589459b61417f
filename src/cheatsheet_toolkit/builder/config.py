"""
Module: builder.config

Purpose:
    User-facing settings for building a sheet. Holds the values exactly as
    a user entered them and performs the caller-side clamping before the
    layout engine sees them.

Key Classes:
    - BuilderConfig: Main configuration for building a sheet

Dependencies:
    - dataclasses (std)
    - builder.layout.config: LayoutConfig

Used By:
    - builder.controller: Main build controller
    - cli: Command line options
    - builder.loading.store: Persisted settings
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict

from cheatsheet_toolkit.builder.layout.config import (
    DEFAULT_HEADER_TEXT,
    DEFAULT_MARGIN_MM,
    DEFAULT_PAGE_HEIGHT_MM,
    DEFAULT_PAGE_WIDTH_MM,
    MAX_COLUMNS,
    MIN_COLUMNS,
    LayoutConfig,
)

# Item titles are drawn this many points larger than the body
TITLE_SIZE_BOOST = 2.0


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a sheet (immutable).

    Attributes:
        header_font_size: Page header size (pt)
        body_font_size: Body size (pt); titles use body + 2
        line_height: Line height multiplier
        max_items_per_page: Item cap per page
        column_count: Columns per page (experimental above 1)
        item_spacing: Gap after each item (mm)
        title_body_spacing: Gap between title and body (mm)
        plain_text_formulas: Spell out formula symbols in ASCII
        page_width: Page width (mm)
        page_height: Page height (mm)
        margin: Page margin (mm)
        header_text: Page header text

    Example:
        >>> config = BuilderConfig(column_count=5).sanitized()
        >>> config.column_count
        3
    """

    # Fonts
    header_font_size: float = 7.0
    body_font_size: float = 7.0
    line_height: float = 1.0

    # Paging
    max_items_per_page: int = 100
    column_count: int = 1

    # Spacing
    item_spacing: float = 1.0
    title_body_spacing: float = 0.5

    # Text
    plain_text_formulas: bool = True

    # Page
    page_width: float = DEFAULT_PAGE_WIDTH_MM
    page_height: float = DEFAULT_PAGE_HEIGHT_MM
    margin: float = DEFAULT_MARGIN_MM
    header_text: str = DEFAULT_HEADER_TEXT

    def __post_init__(self) -> None:
        """Validate values that clamping does not repair."""
        if self.header_font_size <= 0:
            raise ValueError(f"header_font_size must be positive: {self.header_font_size}")
        if self.body_font_size <= 0:
            raise ValueError(f"body_font_size must be positive: {self.body_font_size}")
        if self.line_height <= 0:
            raise ValueError(f"line_height must be positive: {self.line_height}")
        if self.title_body_spacing < 0:
            raise ValueError(f"title_body_spacing must be non-negative: {self.title_body_spacing}")

    def sanitized(self) -> BuilderConfig:
        """
        Clamp user input into the ranges the layout engine accepts.

        column_count goes to [1, 3]; max_items_per_page and item_spacing to >= 1.
        """
        return replace(
            self,
            column_count=min(MAX_COLUMNS, max(MIN_COLUMNS, int(self.column_count))),
            max_items_per_page=max(1, int(self.max_items_per_page)),
            item_spacing=max(1.0, float(self.item_spacing)),
        )

    def to_layout_config(self) -> LayoutConfig:
        """Build the engine configuration from the sanitized settings."""
        clean = self.sanitized()
        return LayoutConfig(
            title_font_size=clean.body_font_size + TITLE_SIZE_BOOST,
            body_font_size=clean.body_font_size,
            line_height_multiplier=clean.line_height,
            max_items_per_page=clean.max_items_per_page,
            column_count=clean.column_count,
            item_spacing=clean.item_spacing,
            title_body_spacing=clean.title_body_spacing,
            page_width=clean.page_width,
            page_height=clean.page_height,
            margin=clean.margin,
            header_font_size=clean.header_font_size,
            header_text=clean.header_text,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BuilderConfig:
        """
        Build from stored settings. Unknown keys are ignored, missing keys
        take defaults, values that cannot be converted fall back to defaults.
        """
        defaults = cls()
        values: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            default = getattr(defaults, f.name)
            values[f.name] = _coerce(data[f.name], default)
        return cls(**values)


def _coerce(value: Any, default: Any) -> Any:
    """Convert value to the type of default, returning default on failure."""
    if value is None:
        return default
    if isinstance(default, bool):
        return bool(value)
    try:
        return type(default)(value)
    except (ValueError, TypeError):
        return default
