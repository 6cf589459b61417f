"""
Module: builder

Purpose:
    Pipeline for generating printable study sheets from a list of named
    concepts. Loads the item source JSON, keeps checked items, lays them
    out in columns across pages and renders to PDF.

Key Functions:
    - load_items(): Load items from a JSON source
    - layout_items(): Pagination and column layout engine
    - build_sheet(): Main entry point for sheet generation

Key Classes:
    - BuilderConfig: User settings with clamping
    - LayoutConfig: Layout engine configuration
    - ItemStore: Persisted item list and settings

Dependencies:
    - reportlab: PDF generation
    - fitz (PyMuPDF), PIL: Previews
    - cheatsheet_toolkit.core: Item models and schema validation

Used By:
    - cheatsheet_toolkit.cli: Command line interface
"""

from .config import BuilderConfig
from .layout import LayoutConfig, layout_items
from .loading import ItemStore, LoaderError, load_items, parse_items
from .controller import BuildError, BuildResult, build_sheet

__all__ = [
    # Config
    "BuilderConfig",
    "LayoutConfig",
    # Loading
    "load_items",
    "parse_items",
    "ItemStore",
    "LoaderError",
    # Layout
    "layout_items",
    # Controller
    "build_sheet",
    "BuildResult",
    "BuildError",
]
