"""Parser for the directive mini-language.

A directive string is a comma-separated list of clauses, each a CSS selector
followed by an operation:

    h1 {text}
    a attr{href}
    article {html}

so `"h1 attr{class}, h1 {text}"` yields two finders, in that order.
"""

import logging
import re
from typing import Optional

import soupsieve

from ..exceptions import InvalidSelectorError, NoDirectivesError
from ..models.directives import Finder, Operation

logger = logging.getLogger(__name__)

DIRECTIVE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)
    (?:
        (?P<text>\{text\})
        |
        (?P<html>\{html\})
        |
        attr\{
            (?P<attr>[^}]+)
        \}
    )
    [,]?\s*
    """,
    re.VERBOSE,
)

# Selector used when the directive string is empty: the whole document
ROOT_SELECTOR = ":root"


def compile_selector(selector: str) -> soupsieve.SoupSieve:
    """
    Compile a CSS selector.

    Raises:
        InvalidSelectorError: If the selector is empty or doesn't compile
    """
    if not selector:
        raise InvalidSelectorError(selector, "expected a selector before the operation")
    try:
        return soupsieve.compile(selector)
    except (soupsieve.SelectorSyntaxError, NotImplementedError) as e:
        # soupsieve rejects pseudo-elements and at-rules with NotImplementedError
        raise InvalidSelectorError(selector, str(e)) from e


def parse_directives(spec: Optional[str]) -> list[Finder]:
    """
    Turn a directive string into finders.

    An empty string (or None) means "print the whole document", and yields a
    single {html} finder on the root element. A string of only whitespace is
    not empty and has no operation, so it is rejected like any other.

    Args:
        spec: Directive string, e.g. "h1 attr{class}, h1 {text}"

    Returns:
        Finders in the order their clauses appear

    Raises:
        InvalidSelectorError: If any clause's selector fails to compile
        NoDirectivesError: If no clause carries a recognizable operation
    """
    if not spec:
        return [Finder(ROOT_SELECTOR, compile_selector(ROOT_SELECTOR), Operation.html())]

    finders: list[Finder] = []
    for match in DIRECTIVE_RE.finditer(spec):
        selector = match.group("selector").strip()
        if match.group("text") is not None:
            operation = Operation.text()
        elif match.group("html") is not None:
            operation = Operation.html()
        else:
            operation = Operation.attr(match.group("attr"))
        finders.append(Finder(selector, compile_selector(selector), operation))

    if not finders:
        raise NoDirectivesError()

    logger.debug(f"Parsed {len(finders)} finder(s): {', '.join(str(f) for f in finders)}")
    return finders
