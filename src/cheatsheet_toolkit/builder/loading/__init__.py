"""
Loading and persistence of item sources.

Contains:
- loader: Parse/validate source JSON, select checked items, export
- store: JSON-backed persistence of the working list and settings
"""

from .loader import LoaderError, export_items, load_items, parse_items, select_checked
from .store import ItemStore

__all__ = [
    "LoaderError",
    "parse_items",
    "load_items",
    "select_checked",
    "export_items",
    "ItemStore",
]
