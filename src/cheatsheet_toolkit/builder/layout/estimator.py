"""
Module: builder.layout.estimator

Purpose:
    Cheap line-count and height prediction used to decide whether an item
    fits in the current column before it is drawn.

    The estimate ignores the real column width and font metrics. It will
    disagree with the renderer's exact wrap; only the break decision uses
    it; cursor advance always uses the exact count (see committed_height).

Key Functions:
    - estimate_lines(): Approximate wrapped line count
    - estimate_height(): Approximate item height in mm
    - committed_height(): Exact item height from a CommitResult

Dependencies:
    - math (std)

Used By:
    - builder.layout.paginator: Placement driver
"""

from __future__ import annotations

import math

from cheatsheet_toolkit.core.models import ContentItem

from .config import DEFAULT_CHARS_PER_LINE, LayoutConfig
from .models import CommitResult


def estimate_lines(text: str, chars_per_line: int = DEFAULT_CHARS_PER_LINE) -> int:
    """
    Estimate how many lines a text needs.

    Args:
        text: Text to measure
        chars_per_line: Assumed characters per line

    Returns:
        ceil(len(text) / chars_per_line) + number of explicit line breaks

    Example:
        >>> estimate_lines("x" * 81)
        3
        >>> estimate_lines("a\\nb")
        2
    """
    return math.ceil(len(text) / chars_per_line) + text.count("\n")


def estimate_height(item: ContentItem, config: LayoutConfig) -> float:
    """
    Estimate the vertical space an item will take, spacing included.

    Args:
        item: Item to measure
        config: Layout configuration

    Returns:
        Estimated height in mm
    """
    title_lines = estimate_lines(item.title, config.chars_per_line)
    body_lines = estimate_lines(item.body, config.chars_per_line)
    return (
        title_lines * config.title_line_height()
        + config.title_body_spacing
        + body_lines * config.body_line_height()
        + config.item_spacing
    )


def committed_height(commit: CommitResult, config: LayoutConfig) -> float:
    """
    Height actually consumed by a drawn item, without the trailing item spacing.

    Args:
        commit: Exact line counts from the renderer
        config: Layout configuration

    Returns:
        Height in mm
    """
    return (
        commit.title_line_count * config.title_line_height()
        + config.title_body_spacing
        + commit.body_line_count * config.body_line_height()
    )
