"""Input decoding, document parsing and directive parsing."""

from .directives import ROOT_SELECTOR, compile_selector, parse_directives
from .document import iter_elements, parse_document
from .encoding import resolve_encoding, sniff_charset

__all__ = [
    "ROOT_SELECTOR",
    "compile_selector",
    "iter_elements",
    "parse_directives",
    "parse_document",
    "resolve_encoding",
    "sniff_charset",
]
