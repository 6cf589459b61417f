"""
Core Models Package

Immutable item models shared by loading, layout and output.
"""

from .items import ContentItem, SourceItem

__all__ = [
    "ContentItem",
    "SourceItem",
]
