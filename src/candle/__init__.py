"""
candle - Shine a little light on your HTML using the command line.

Usage:
    from candle import Extractor, CandleConfig

    extractor = Extractor(CandleConfig())
    for line in extractor.iter_lines(html_bytes, "h1 attr{class}, h1 {text}"):
        print(line)
"""

__version__ = "0.2.0"

from .core import Extractor, extract_from_html
from .exceptions import (
    CandleError,
    ConfigError,
    DirectiveError,
    InputError,
    InvalidSelectorError,
    NoDirectivesError,
)
from .extraction import extract, iter_results, render
from .models import CandleConfig, Finder, Operation, OperationKind
from .parsing import parse_directives, parse_document, resolve_encoding

__all__ = [
    "__version__",
    # Core
    "Extractor",
    "extract_from_html",
    # Building blocks
    "extract",
    "iter_results",
    "parse_directives",
    "parse_document",
    "render",
    "resolve_encoding",
    # Models
    "CandleConfig",
    "Finder",
    "Operation",
    "OperationKind",
    # Errors
    "CandleError",
    "ConfigError",
    "DirectiveError",
    "InputError",
    "InvalidSelectorError",
    "NoDirectivesError",
]
