"""
Module: builder.text.formulas

Purpose:
    Plain-text rendering of formula symbols. The standard PDF fonts cannot
    draw most Greek letters and math symbols, so in text mode they are
    spelled out in ASCII (σ -> sigma, ² -> ^2, ≤ -> <=).

Key Functions:
    - replace_special_chars(): Substitute symbols in one string
    - plain_text_item(): Substitute symbols in an item's title and body

Used By:
    - builder.controller: Applied before layout when plain-text mode is on
"""

from __future__ import annotations

from typing import Dict, Optional

from cheatsheet_toolkit.core.models import ContentItem


# Greek letters
GREEK: Dict[str, str] = {
    "σ": "sigma",
    "Σ": "Sigma",
    "μ": "mu",
    "π": "pi",
    "ρ": "rho",
    "θ": "theta",
    "Θ": "Theta",
    "α": "alpha",
    "β": "beta",
    "γ": "gamma",
    "Γ": "Gamma",
    "δ": "delta",
    "Δ": "Delta",
    "ε": "epsilon",
    "λ": "lambda",
    "Λ": "Lambda",
    "φ": "phi",
    "Φ": "Phi",
    "ω": "omega",
    "Ω": "Omega",
}

# Math operators and symbols
OPERATORS: Dict[str, str] = {
    "√": "sqrt",
    "∛": "cbrt",
    "∜": "4thrt",
    "²": "^2",
    "³": "^3",
    "⁴": "^4",
    "⁵": "^5",
    "⁰": "^0",
    "⁻": "^-",
    "⁺": "^+",
    "±": "+/-",
    "∓": "-/+",
    "×": "x",
    "÷": "/",
    "∞": "inf",
    "≈": "~=",
    "≠": "!=",
    "≤": "<=",
    "≥": ">=",
    "∑": "sum",
    "∏": "prod",
    "∫": "int",
    "∂": "partial",
    "∇": "nabla",
    "∈": "in",
    "∉": "not in",
    "⊂": "subset",
    "⊃": "supset",
    "∩": "intersect",
    "∪": "union",
}

SUBSCRIPTS: Dict[str, str] = {
    "₁": "_1",
    "₂": "_2",
    "₃": "_3",
    "₄": "_4",
    "₅": "_5",
    "₆": "_6",
    "₇": "_7",
    "₈": "_8",
    "₉": "_9",
    "₀": "_0",
}

# Physics/chemistry arrows
ARROWS: Dict[str, str] = {
    "→": "->",
    "←": "<-",
    "↔": "<->",
    "⇌": "<=>",
}

# Every key is a single character and no replacement contains a key,
# so one translate pass equals sequential replacement.
_TABLE = str.maketrans({**GREEK, **OPERATORS, **SUBSCRIPTS, **ARROWS})


def replace_special_chars(text: Optional[str], enabled: bool = True) -> str:
    """
    Spell out formula symbols in ASCII.

    Args:
        text: Text to convert (None is treated as empty)
        enabled: False returns the text unchanged (symbol mode)

    Returns:
        Converted text

    Example:
        >>> replace_special_chars("σ² = E[(X−μ)²]")
        'sigma^2 = E[(X−mu)^2]'
    """
    if not text:
        return ""
    if not enabled:
        return text
    return text.translate(_TABLE)


def plain_text_item(item: ContentItem, enabled: bool = True) -> ContentItem:
    """Return the item with symbols replaced in title and body."""
    if not enabled:
        return item
    return item.with_text(
        replace_special_chars(item.title),
        replace_special_chars(item.body),
    )
