"""
Persistence of the working item list and sheet settings.

JSON-backed store so a user's last list (with checked states) and layout
settings survive between runs. Malformed data falls back to an empty
store and is reported through `load_error`, never raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from cheatsheet_toolkit.core.models import SourceItem
from cheatsheet_toolkit.core.schemas import ValidationError, validate_items

logger = logging.getLogger(__name__)


class ItemStore:
    """Lightweight JSON-backed store for the item list and settings."""

    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        self.path = path
        self.data: Dict[str, Any] = {}
        self.load_error: Optional[str] = None

        if self.path.exists():
            try:
                self.data = json.loads(self.path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                self.load_error = f"Store file is corrupted: {e}"
                self.data = {}
            except OSError as e:
                self.load_error = f"Failed to read store: {e}"
                self.data = {}
            if not isinstance(self.data, dict):
                self.load_error = "Store file does not contain an object"
                self.data = {}

        if self.load_error:
            logger.warning(self.load_error)

        if "version" not in self.data:
            self.data["version"] = self.CURRENT_VERSION

    def get_items(self) -> List[SourceItem]:
        """Stored items; an invalid stored list is dropped with a warning."""
        raw = self.data.get("items", [])
        try:
            validate_items(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring stored items: {e}")
            return []
        return [SourceItem.from_dict(entry, index) for index, entry in enumerate(raw)]

    def set_items(self, items: List[SourceItem]) -> None:
        self.data["items"] = [item.to_dict() for item in items]
        self._save()

    def toggle(self, item_id: int) -> Optional[SourceItem]:
        """
        Flip `checked` on the item with `item_id`.

        Returns:
            The updated item, or None if no item has that id
        """
        items = self.get_items()
        updated: Optional[SourceItem] = None
        for i, item in enumerate(items):
            if item.id == item_id:
                updated = item.toggled()
                items[i] = updated
        if updated is None:
            return None
        self.set_items(items)
        return updated

    def get_settings(self) -> Dict[str, Any]:
        settings = self.data.get("settings", {})
        return dict(settings) if isinstance(settings, dict) else {}

    def set_settings(self, settings: Dict[str, Any]) -> None:
        self.data["settings"] = dict(settings)
        self._save()

    def _save(self) -> None:
        """Safely write the store with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(self.data, indent=2, ensure_ascii=False), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save store: {e}")
            if temp_path.exists():
                temp_path.unlink()
