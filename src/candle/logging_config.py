import logging
import sys
from typing import Optional

LOG_FORMAT = "candle: %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None, force: bool = False) -> logging.Logger:
    """
    Configure the `candle` logger.

    Log records go to stderr, and optionally to a file; stdout is reserved
    for extracted results.

    Args:
        level: Logging level name; unknown names mean WARNING
        log_file: Optional extra log file
        force: Replace handlers left over from an earlier call

    Returns:
        The `candle` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("candle")
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if log_file:
            handlers.append(logging.FileHandler(log_file))
        for handler in handlers:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

    # Keep records out of the root logger
    logger.propagate = False

    return logger
