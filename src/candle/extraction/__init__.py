"""Finder matching and subtree rendering."""

from .engine import apply_finder, element_text, extract, iter_results
from .tree import VOID_ELEMENTS, open_tag, reindent_script, render

__all__ = [
    # Engine
    "apply_finder",
    "element_text",
    "extract",
    "iter_results",
    # Tree printer
    "VOID_ELEMENTS",
    "open_tag",
    "reindent_script",
    "render",
]
