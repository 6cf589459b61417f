"""
Cheat Sheet Toolkit Core Package

Shared data models and validation used by every builder stage.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Items are frozen dataclasses; filtering or text substitution creates
     new instances instead of mutating the loaded list.

2. **Two Item Shapes**
   - `SourceItem` mirrors the JSON source format (name/definition/checked).
   - `ContentItem` is what the layout engine sees (title/body), already
     filtered to checked items.
"""

from .models import ContentItem, SourceItem

__all__ = [
    "ContentItem",
    "SourceItem",
]
