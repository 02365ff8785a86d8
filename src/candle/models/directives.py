"""Finder and operation models produced by the directive parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from soupsieve import SoupSieve


class OperationKind(str, Enum):
    """What a finder pulls out of each element it matches."""

    TEXT = "text"
    HTML = "html"
    ATTR = "attr"


@dataclass(frozen=True)
class Operation:
    """
    An operation applied to matched elements.

    `attribute` is only set for ATTR operations.
    """

    kind: OperationKind
    attribute: str | None = None

    @staticmethod
    def text() -> Operation:
        """Concatenated descendant text."""
        return Operation(OperationKind.TEXT)

    @staticmethod
    def html() -> Operation:
        """Pretty-printed subtree."""
        return Operation(OperationKind.HTML)

    @staticmethod
    def attr(name: str) -> Operation:
        """Value of the named attribute."""
        return Operation(OperationKind.ATTR, name)

    def __str__(self) -> str:
        if self.kind is OperationKind.ATTR:
            return f"attr{{{self.attribute}}}"
        return f"{{{self.kind.value}}}"


@dataclass(frozen=True)
class Finder:
    """A compiled CSS selector paired with the operation to run on its matches."""

    selector: str
    compiled: SoupSieve = field(repr=False, compare=False)
    operation: Operation

    def __str__(self) -> str:
        return f"{self.selector} {self.operation}"
