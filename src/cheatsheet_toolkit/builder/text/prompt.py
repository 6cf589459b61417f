"""
Module: builder.text.prompt

Purpose:
    Build the instruction text a user pastes into a chat assistant to turn
    a plain list of concepts into the item source JSON.

Key Functions:
    - build_prompt(): Prompt text for a concept list
"""

from __future__ import annotations

from typing import Iterable, Union

PROMPT_HEADER = (
    "Please turn the following list of study concepts into a JSON array "
    "where each item has a 'name' and a 'definition'."
)

FORMULA_INSTRUCTIONS = (
    ", including any formulas. For formulas, use plain text notation rather "
    "than LaTeX or markup. Example: 'sigma_p = sqrt(w_1^2 * sigma_1^2 + "
    "w_2^2 * sigma_2^2 + 2*w_1*w_2*rho_12*sigma_1*sigma_2)' for portfolio risk.\""
)


def build_prompt(concepts: Union[str, Iterable[str]], include_formulas: bool = False) -> str:
    """
    Build the prompt for a list of concepts.

    Args:
        concepts: Free text, or an iterable of concept names (one per line)
        include_formulas: Ask for formulas in plain-text notation

    Returns:
        Prompt text ending with the JSON format example

    Example:
        >>> print(build_prompt(["Entropy", "Enthalpy"]))
        Please turn the following list ...
    """
    if not isinstance(concepts, str):
        concepts = "\n".join(c.strip() for c in concepts if c.strip())

    prompt = (
        f"{PROMPT_HEADER}\n\n"
        f"Concepts:\n{concepts}\n\n"
        "Format example:\n"
        "[\n"
        "  {\n"
        '    "name": "Concept Name",\n'
        '    "definition": "A clear, concise definition'
    )
    prompt += FORMULA_INSTRUCTIONS if include_formulas else '."'
    prompt += "\n  }\n]\n\nOnly return the JSON array, nothing else."
    return prompt
