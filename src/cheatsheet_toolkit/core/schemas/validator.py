"""
Schema Validation Utilities

Validates the item source JSON against `items.schema.json`.

The source format is an ordered array of
`{id?: integer, name: string, definition: string, checked?: boolean|null}`.
Any schema violation fails the whole document; there is no partial load.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


ITEMS_SCHEMA_NAME = "items"

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_items(data: Any) -> None:
    """
    Validate a parsed item source document.

    Args:
        data: Result of `json.loads` on the source text

    Raises:
        ValidationError: If data is not an array of valid item objects.
            `errors` lists every violation found, `path` points at the first.
    """
    schema = _load_schema(ITEMS_SCHEMA_NAME)
    validator = jsonschema.Draft7Validator(schema)
    violations = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if not violations:
        return

    first = violations[0]
    path = _format_path(first.absolute_path)
    raise ValidationError(
        f"Invalid item source at {path or '<root>'}: {first.message}",
        path=path,
        errors=[f"{_format_path(e.absolute_path) or '<root>'}: {e.message}" for e in violations],
    )


def _format_path(parts) -> str:
    """Render a jsonschema path deque like `[2].name`."""
    rendered = ""
    for part in parts:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else str(part)
    return rendered
