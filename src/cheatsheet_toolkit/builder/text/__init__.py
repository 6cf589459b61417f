"""
Text helpers applied outside the layout engine.

Contains:
- formulas: Plain-text spelling of formula symbols
- prompt: Chat prompt producing the item source JSON
"""

from .formulas import plain_text_item, replace_special_chars
from .prompt import build_prompt

__all__ = [
    "replace_special_chars",
    "plain_text_item",
    "build_prompt",
]
