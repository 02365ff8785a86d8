"""Applying finders to a parsed document."""

import logging
from collections.abc import Iterator, Sequence
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from ..models.directives import Finder, OperationKind
from ..parsing.document import iter_elements
from .tree import DEFAULT_INDENT_WIDTH, render

logger = logging.getLogger(__name__)


def element_text(element: Tag) -> str:
    """
    Concatenate every descendant text node, in document order.

    Script and style contents count as text; comments, doctypes and CDATA
    sections do not. Nothing is trimmed or inserted between nodes.
    """
    return "".join(
        node
        for node in element.descendants
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString)
    )


def apply_finder(finder: Finder, element: Tag, indent_width: int = DEFAULT_INDENT_WIDTH) -> Optional[str]:
    """
    Run a finder's operation on an element it matched.

    Returns:
        The extracted value, or None if the element has nothing to offer
        (e.g. the requested attribute is absent)
    """
    operation = finder.operation
    if operation.kind is OperationKind.TEXT:
        return element_text(element)
    if operation.kind is OperationKind.HTML:
        return render(element, 0, indent_width)

    value = element.get(operation.attribute)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return value


def iter_results(
    document: BeautifulSoup,
    finders: Sequence[Finder],
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> Iterator[str]:
    """
    Yield extracted values element by element.

    Each element is offered to every finder in declaration order before
    moving to the next element, so the values for one element come out
    together: "h2 attr{class}, h2 {text}" gives class, text, class, text.
    """
    for element in iter_elements(document):
        for finder in finders:
            if finder.compiled.match(element):
                value = apply_finder(finder, element, indent_width)
                if value is not None:
                    yield value


def extract(
    document: BeautifulSoup,
    finders: Sequence[Finder],
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> list[str]:
    """Collect every extracted value from a document, in output order."""
    results = list(iter_results(document, finders, indent_width))
    logger.debug(f"Extracted {len(results)} value(s)")
    return results
