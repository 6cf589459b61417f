"""
Module: builder.layout

Purpose:
    Pagination and multi-column layout engine.
    Decides the page, column and vertical offset of every item and drives
    a RendererAdapter to draw it.

Key Functions:
    - layout_items(): Main entry point for layout
    - estimate_lines(): Approximate line count
    - advance(): Page/column state transition

Key Classes:
    - LayoutConfig: Configuration for page layout
    - PlacementInstruction: Position of one item
    - LayoutResult: Final layout
    - RendererAdapter: Document writer contract

Dependencies:
    - cheatsheet_toolkit.core.models: ContentItem

Used By:
    - builder.output.renderer: PDF rendering
    - builder.controller: Main build controller
"""

from .adapter import RenderError, RendererAdapter, TextStyle
from .advancer import Advance, AdvancerState, advance
from .config import ConfigError, LayoutConfig
from .cursors import ColumnCursorTable
from .estimator import committed_height, estimate_height, estimate_lines
from .models import ColumnState, CommitResult, LayoutResult, PlacementInstruction
from .paginator import layout_items

__all__ = [
    # Config
    "LayoutConfig",
    "ConfigError",
    # Models
    "ColumnState",
    "PlacementInstruction",
    "CommitResult",
    "LayoutResult",
    # Engine
    "ColumnCursorTable",
    "Advance",
    "AdvancerState",
    "advance",
    "estimate_lines",
    "estimate_height",
    "committed_height",
    "layout_items",
    # Adapter contract
    "RendererAdapter",
    "RenderError",
    "TextStyle",
]
