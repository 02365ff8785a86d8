"""Extractor ties decoding, parsing and matching together."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup

from ..exceptions import InputError
from ..extraction.engine import extract, iter_results
from ..models.config import CandleConfig
from ..models.directives import Finder
from ..parsing.directives import parse_directives
from ..parsing.document import parse_document
from ..parsing.encoding import resolve_encoding

logger = logging.getLogger(__name__)


class Extractor:
    """
    Primary API for candle.

    Example:
        extractor = Extractor(CandleConfig(parser="html5lib"))
        for line in extractor.iter_lines(html_bytes, "h1 attr{class}, h1 {text}"):
            print(line)
    """

    def __init__(self, config: CandleConfig | None = None):
        self.config = config or CandleConfig()

    def load(self, raw: bytes) -> BeautifulSoup:
        """Decode raw HTML bytes and parse them into a document."""
        logger.debug(f"Parsing {len(raw)} bytes with {self.config.parser}")
        text = resolve_encoding(raw, self.config.charset_scan_chars)
        return parse_document(text, self.config.parser)

    def prepare(self, raw: bytes, directives: str | None) -> tuple[BeautifulSoup, list[Finder]]:
        """
        Parse directives and document.

        Directives are parsed first so a bad directive string fails before
        any work is done on the document.

        Raises:
            InputError: If `raw` is empty
            DirectiveError: If the directive string is unusable
        """
        finders = parse_directives(directives)
        return self._load_checked(raw), finders

    def _load_checked(self, raw: bytes) -> BeautifulSoup:
        if not raw:
            raise InputError("No HTML to read")
        return self.load(raw)

    def run(self, raw: bytes, directives: str | None) -> list[str]:
        """Extract every value from `raw`, untrimmed."""
        document, finders = self.prepare(raw, directives)
        return extract(document, finders, self.config.indent_width)

    def iter_lines(self, raw: bytes, directives: str | None) -> Iterator[str]:
        """
        Yield output lines, trimmed unless the config says otherwise.

        All parse-time errors are raised before the first line is yielded.
        """
        document, finders = self.prepare(raw, directives)
        return self._lines(document, finders)

    def lines_for(self, raw: bytes, finders: list[Finder]) -> Iterator[str]:
        """
        Yield output lines for finders that were parsed ahead of time.

        Raises:
            InputError: If `raw` is empty
        """
        return self._lines(self._load_checked(raw), finders)

    def _lines(self, document: BeautifulSoup, finders: list[Finder]) -> Iterator[str]:
        for value in iter_results(document, finders, self.config.indent_width):
            yield value.strip() if self.config.trim_results else value


def extract_from_html(html: str | bytes, directives: str | None, config: CandleConfig | None = None) -> list[str]:
    """
    Convenience wrapper: extract trimmed values from an HTML string or bytes.

    Example:
        >>> extract_from_html('<h1 class="foo">Hello, <i>world!</i></h1>', "h1 i {text}")
        ['world!']
    """
    raw = html.encode("utf-8") if isinstance(html, str) else html
    return list(Extractor(config).iter_lines(raw, directives))
