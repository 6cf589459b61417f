"""
Module: items

Purpose:
    Provides the two item dataclasses that flow through the pipeline.
    SourceItem mirrors one entry of the JSON source array; ContentItem
    is the title+body unit handed to the layout engine.

Key Functions:
    - SourceItem.from_dict() / SourceItem.to_dict(): Serialization
    - SourceItem.to_content(): Convert to a layout ContentItem

Dependencies:
    - dataclasses (std)

Used By:
    - builder.loading.loader
    - builder.loading.store
    - builder.layout.paginator
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ContentItem:
    """
    One title+body text unit to be placed (immutable).

    Identity is `id`; uniqueness is the caller's responsibility.

    Attributes:
        id: Item identifier
        title: Title text (drawn bold)
        body: Body text

    Example:
        >>> item = ContentItem(id=0, title="Entropy", body="A measure of disorder.")
        >>> item.title
        'Entropy'
    """

    id: int
    title: str
    body: str

    def with_text(self, title: str, body: str) -> ContentItem:
        """Return a copy with replaced title/body text."""
        return replace(self, title=title, body=body)


@dataclass(frozen=True)
class SourceItem:
    """
    One entry of the item source JSON array (immutable).

    Attributes:
        id: Identifier (array index when the source omitted it)
        name: Concept name, becomes the item title
        definition: Concept definition, becomes the item body
        checked: False excludes the item from the generated sheet

    Invariants:
        - A missing or null `checked` in the source means checked
    """

    id: int
    name: str
    definition: str
    checked: bool = True

    def to_content(self) -> ContentItem:
        """Convert to the layout-facing ContentItem."""
        return ContentItem(id=self.id, title=self.name, body=self.definition)

    def toggled(self) -> SourceItem:
        """Return a copy with `checked` flipped."""
        return replace(self, checked=not self.checked)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the source JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "definition": self.definition,
            "checked": self.checked,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: int) -> SourceItem:
        """
        Build from one source JSON object.

        Args:
            data: Source object with name/definition and optional id/checked
            index: Array position, used when `id` is missing
        """
        raw_id: Optional[int] = data.get("id")
        return cls(
            id=raw_id if raw_id is not None else index,
            name=data["name"],
            definition=data["definition"],
            checked=data.get("checked") is not False,
        )
