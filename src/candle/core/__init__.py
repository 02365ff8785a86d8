"""Core extraction API."""

from .extractor import Extractor, extract_from_html

__all__ = ["Extractor", "extract_from_html"]
