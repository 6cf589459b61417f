import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

# Add src to sys.path so we can import cheatsheet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from cheatsheet_toolkit.core.models import ContentItem  # noqa: E402


class RecordingAdapter:
    """
    Deterministic RendererAdapter for layout tests.

    Wraps every paragraph into chunks of `chars_per_line` characters
    (empty text -> one line) unless `line_counts` pins the number of lines
    for a given text. Records every call in order.
    """

    def __init__(self, chars_per_line: int = 40, line_counts: Optional[Dict[str, int]] = None):
        self.chars_per_line = chars_per_line
        self.line_counts = line_counts or {}
        self.calls: List[tuple] = []

    def wrap_text(self, text: str, font_size: float, available_width: float) -> List[str]:
        self.calls.append(("wrap", text))
        if text in self.line_counts:
            return [text] * self.line_counts[text]
        lines: List[str] = []
        for paragraph in text.split("\n"):
            if not paragraph:
                lines.append("")
                continue
            for start in range(0, len(paragraph), self.chars_per_line):
                lines.append(paragraph[start:start + self.chars_per_line])
        return lines

    def draw_text(self, lines: Sequence[str], x: float, y: float, font_size: float, style) -> None:
        self.calls.append(("draw", tuple(lines), x, y, font_size, style))

    def add_page(self) -> None:
        self.calls.append(("add_page",))

    def set_page_header(self, page_index: int) -> None:
        self.calls.append(("header", page_index))

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def recording_adapter():
    """Fresh recording adapter."""
    return RecordingAdapter()


@pytest.fixture
def make_items():
    """Factory for ContentItem lists."""
    def _create(count: int, title: str = "Term", body: str = "Short definition."):
        return [ContentItem(id=i, title=f"{title} {i}", body=body) for i in range(count)]
    return _create


@pytest.fixture
def source_file(tmp_path: Path):
    """Write a source JSON array and return its path."""
    def _write(entries, name: str = "concepts.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def adapter_factory():
    """Build a RecordingAdapter with custom wrapping."""
    return RecordingAdapter
