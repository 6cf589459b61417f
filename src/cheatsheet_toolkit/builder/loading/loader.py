"""
Module: builder.loading.loader

Purpose:
    Load the item source JSON (an array of name/definition objects) from a
    file or pasted text, validate it, and select the items that go on the
    sheet.

Key Functions:
    - parse_items(): Parse and validate source text
    - load_items(): Read and parse a .json file
    - select_checked(): Drop unchecked items, convert to ContentItem
    - export_items(): Write items back to a .json file

Key Classes:
    - LoaderError: Exception for loading failures

Dependencies:
    - json (std)
    - cheatsheet_toolkit.core.schemas: validate_items
    - cheatsheet_toolkit.core.models: SourceItem, ContentItem

Used By:
    - builder.controller: Main build controller
    - builder.loading.store: Persisted item list
    - cli: export command
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List

from cheatsheet_toolkit.core.models import ContentItem, SourceItem
from cheatsheet_toolkit.core.schemas import ValidationError, validate_items

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".json"

# A backslash that does not start a valid JSON escape, e.g. "\sigma" in a formula
_STRAY_BACKSLASH = re.compile(r'\\(?!["\\/bfnrt])')


class LoaderError(Exception):
    """Error loading items from a source."""
    pass


def parse_items(text: str) -> List[SourceItem]:
    """
    Parse item source text.

    Process:
    1. json.loads the text
    2. On a decode error, escape stray backslashes on definition lines
       (formulas pasted from chat output) and try once more
    3. Validate against the item schema
    4. Fill missing ids with the array index, missing/null checked with True

    Args:
        text: JSON array text

    Returns:
        SourceItems in source order

    Raises:
        LoaderError: If the text is not valid JSON or fails validation

    Example:
        >>> items = parse_items('[{"name": "Mass", "definition": "kg"}]')
        >>> items[0].id, items[0].checked
        (0, True)
    """
    data = _decode(text)
    try:
        validate_items(data)
    except ValidationError as e:
        raise LoaderError(
            f"Invalid item source: expected an array of objects with name and definition ({e})"
        ) from e

    items = [SourceItem.from_dict(entry, index) for index, entry in enumerate(data)]
    logger.debug(f"Parsed {len(items)} items")
    return items


def load_items(path: Path) -> List[SourceItem]:
    """
    Load items from a .json file.

    Raises:
        LoaderError: If the file is missing, not .json, unreadable or invalid
    """
    if path.suffix.lower() != SOURCE_SUFFIX:
        raise LoaderError(f"Please provide a {SOURCE_SUFFIX} file: {path}")
    if not path.exists():
        raise LoaderError(f"Item source does not exist: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Failed to read {path}: {e}") from e

    items = parse_items(text)
    logger.info(f"Loaded {len(items)} items from {path}")
    return items


def select_checked(items: Iterable[SourceItem]) -> List[ContentItem]:
    """Keep checked items, in order, as layout ContentItems."""
    return [item.to_content() for item in items if item.checked]


def export_items(items: Iterable[SourceItem], path: Path) -> Path:
    """
    Write items to a .json file (id, name, definition, checked).

    Raises:
        LoaderError: If the file cannot be written
    """
    payload = [item.to_dict() for item in items]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        raise LoaderError(f"Failed to write {path}: {e}") from e
    logger.info(f"Exported {len(payload)} items to {path}")
    return path


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as first_error:
        sanitized = _escape_stray_backslashes(text)
        if sanitized == text:
            raise LoaderError(f"Failed to parse JSON: {first_error}") from first_error
        try:
            data = json.loads(sanitized)
        except json.JSONDecodeError:
            raise LoaderError(f"Failed to parse JSON: {first_error}") from first_error
        logger.warning("Parsed JSON after escaping stray backslashes in definitions")
        return data


def _escape_stray_backslashes(text: str) -> str:
    """Escape invalid backslash escapes on lines holding a definition."""
    lines = text.split("\n")
    return "\n".join(
        _STRAY_BACKSLASH.sub(r"\\\\", line) if '"definition":' in line else line
        for line in lines
    )
