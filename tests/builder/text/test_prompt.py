"""
Tests for the chat prompt builder.
"""

from cheatsheet_toolkit.builder.text import build_prompt
from cheatsheet_toolkit.builder.text.prompt import FORMULA_INSTRUCTIONS, PROMPT_HEADER


class TestBuildPrompt:

    def test_concept_list_joined_one_per_line(self):
        prompt = build_prompt(["  Entropy ", "", "Enthalpy"])

        assert prompt.startswith(PROMPT_HEADER)
        assert "Concepts:\nEntropy\nEnthalpy\n" in prompt
        assert prompt.endswith("Only return the JSON array, nothing else.")

    def test_free_text_used_verbatim(self):
        prompt = build_prompt("Entropy, enthalpy")
        assert "Concepts:\nEntropy, enthalpy\n" in prompt

    def test_formula_instructions_only_when_requested(self):
        assert FORMULA_INSTRUCTIONS not in build_prompt(["Risk"])
        assert FORMULA_INSTRUCTIONS in build_prompt(["Risk"], include_formulas=True)

    def test_format_example_names_required_keys(self):
        prompt = build_prompt(["X"])
        assert '"name": "Concept Name"' in prompt
        assert '"definition": "A clear, concise definition."' in prompt
