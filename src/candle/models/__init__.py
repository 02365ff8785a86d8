"""Candle configuration and directive models."""

from .config import CandleConfig
from .directives import Finder, Operation, OperationKind

__all__ = [
    # Config
    "CandleConfig",
    # Directives
    "Finder",
    "Operation",
    "OperationKind",
]
