"""Indented pretty-printing of element subtrees for the {html} operation."""

from bs4.element import Comment, NavigableString, PreformattedString, Tag
from bs4.dammit import EntitySubstitution

DEFAULT_INDENT_WIDTH = 2

# https://developer.mozilla.org/en-US/docs/Glossary/Void_element
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def _indentation(level: int, width: int) -> str:
    return " " * (level * width)


def open_tag(element: Tag) -> str:
    """Render an element's opening tag with its attributes in source order."""
    parts = [element.name]
    for key, value in element.attrs.items():
        if isinstance(value, list):
            value = " ".join(value)
        if value is None:
            value = ""
        parts.append(f"{key}={EntitySubstitution.substitute_xml(value, make_quoted_attribute=True)}")
    return f"<{' '.join(parts)}>"


def _leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())


def reindent_script(text: str, indent: str) -> str:
    """
    Relocate script source under a new indentation.

    Blank lines are dropped. The first remaining line's leading whitespace is
    taken as the baseline and removed from every line (only whitespace is
    ever removed), so indentation relative to the first line survives.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return ""

    baseline = _leading_whitespace(lines[0])
    shifted = []
    for line in lines:
        strip = min(baseline, _leading_whitespace(line))
        shifted.append(f"{indent}{line[strip:]}")
    return "\n".join(shifted)


def _render_children(out: list[str], element: Tag, indent_level: int, indent_width: int) -> None:
    indent_plus_one = _indentation(indent_level + 1, indent_width)

    for child in element.children:
        if isinstance(child, Comment):
            out.append(f"\n{indent_plus_one}<!-- {child.strip()} -->")
        elif isinstance(child, Tag):
            out.append("\n")
            out.append(render(child, indent_level + 1, indent_width))
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            # Whitespace-only text is formatting, not content
            if not child.strip():
                continue
            if element.name == "script":
                out.append(f"\n{reindent_script(str(child), indent_plus_one)}")
            else:
                out.append(f"\n{indent_plus_one}{child}")


def render(element: Tag, indent_level: int = 0, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """
    Pretty-print an element and its descendants.

    Every tag, text node and comment goes on its own line, indented by
    `indent_width` spaces per level. Void elements render on a single line
    with a synthetic closing tag.

    Args:
        element: Root of the subtree to print
        indent_level: Nesting level of `element` itself
        indent_width: Spaces per level

    Returns:
        The rendering, without a trailing newline
    """
    indent = _indentation(indent_level, indent_width)
    tag_name = element.name

    if tag_name in VOID_ELEMENTS:
        # Can't have children, even if the parser attached some
        return f"{indent}{open_tag(element)}</{tag_name}>"

    out = [indent, open_tag(element)]
    _render_children(out, element, indent_level, indent_width)
    out.append(f"\n{indent}</{tag_name}>")
    return "".join(out)
