"""Exception types raised by candle."""

from typing import Optional


class CandleError(Exception):
    """Base class for all candle errors."""


class InputError(CandleError):
    """Raised when there is no HTML to read."""


class ConfigError(CandleError):
    """Raised when a configuration file can't be loaded or validated."""


class DirectiveError(CandleError):
    """Base class for problems with the directive string."""


class InvalidSelectorError(DirectiveError):
    """
    Raised when a directive's CSS selector fails to compile.

    Attributes:
        selector: The selector text exactly as it was handed to the compiler
        diagnostic: The compiler's description of the problem
    """

    def __init__(self, selector: str, diagnostic: Optional[str] = None):
        self.selector = selector
        self.diagnostic = diagnostic or "invalid selector"
        super().__init__(f'Bad CSS selector "{selector}": {self.diagnostic}')


class NoDirectivesError(DirectiveError):
    """Raised when the directive string contains no recognizable operation."""

    MESSAGE = "Please specify {text}, {html}, or attr{ATTRIBUTE}"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.MESSAGE)
