"""Prompt template modules, one per tool family.

Importing a module registers its templates; ``marketgenius.prompts`` imports
all of them and then checks every content type is covered.
"""
from __future__ import annotations


def fenced(text: str, lang: str = "") -> str:
    """Wrap user-pasted text in a Markdown code fence."""
    return f"```{lang}\n{text}\n```"
