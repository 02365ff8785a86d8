"""Character encoding resolution for raw HTML bytes."""

import logging
import re
from typing import Optional

import webencodings

logger = logging.getLogger(__name__)

# Number of decoded characters searched for a charset declaration
DEFAULT_SCAN_CHARS = 1024

META_CHARSET_RE = re.compile(r"""<meta\s+charset=["']([^'"]+)["']""", re.IGNORECASE)


def sniff_charset(text: str, scan_chars: int = DEFAULT_SCAN_CHARS) -> Optional[str]:
    """
    Find a `<meta charset>` declaration near the start of a document.

    Args:
        text: Decoded document text
        scan_chars: How many leading characters to search

    Returns:
        The declared charset label, or None if there isn't one in range
    """
    match = META_CHARSET_RE.search(text[:scan_chars])
    return match.group(1) if match else None


def resolve_encoding(raw: bytes, scan_chars: int = DEFAULT_SCAN_CHARS) -> str:
    """
    Decode HTML bytes, honoring a charset declared near the top of the document.

    The buffer is first decoded as UTF-8 (invalid sequences replaced) so the
    prefix can be searched. If it declares a charset that the WHATWG label
    registry knows, the whole original buffer is decoded again with it.

    Args:
        raw: Document bytes
        scan_chars: How many leading characters to search for the declaration

    Returns:
        Decoded document text
    """
    text = raw.decode("utf-8", errors="replace")

    label = sniff_charset(text, scan_chars)
    if label is None:
        return text

    encoding = webencodings.lookup(label)
    if encoding is None:
        logger.debug(f"Ignoring unknown charset {label!r}, using UTF-8")
        return text

    logger.debug(f"Decoding document as {encoding.name} (declared {label!r})")
    decoded, _ = webencodings.decode(raw, encoding, errors="replace")
    return decoded
