"""
Logging configuration for queryset-gen.

Usage in modules:
    from queryset_gen.logging_config import get_logger
    logger = get_logger(__name__)

All loggers live under the "queryset_gen" hierarchy. Levels are set by the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "queryset_gen"


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a logger under the queryset_gen hierarchy.

    Args:
        name: Module __name__, or None for the root queryset_gen logger.

    Returns:
        logging.Logger instance
    """
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(_LOGGER_NAME + "."):
        return logging.getLogger(name)
    # "tests.test_cli" -> "queryset_gen.test_cli"
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the queryset_gen logger hierarchy.

    Levels:
        --verbose / -v  -> DEBUG   (per-method planning detail)
        (default)       -> INFO    (loading, generation and output lines)
        --quiet / -q    -> WARNING (warnings and errors only)

    Args:
        verbose: Enable DEBUG-level output.
        quiet:   Suppress INFO output (WARNING+ only).
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)

    # Avoid duplicate handlers when called multiple times
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
