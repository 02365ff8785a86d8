"""Building the read-only document tree."""

from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

DEFAULT_PARSER = "html5lib"


def parse_document(text: str, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """
    Parse decoded HTML into a BeautifulSoup tree.

    Multi-valued attributes are disabled so `class="a b"` reads back as the
    original string rather than a list.

    Args:
        text: Decoded HTML
        parser: BeautifulSoup tree builder name

    Returns:
        The parsed document
    """
    return BeautifulSoup(text, parser, multi_valued_attributes=None)


def iter_elements(document: BeautifulSoup) -> Iterator[Tag]:
    """
    Yield every element in document order.

    The BeautifulSoup object itself is the parentless root and is never
    yielded; only real elements below it are.
    """
    for node in document.descendants:
        if isinstance(node, Tag) and node.parent is not None:
            yield node
