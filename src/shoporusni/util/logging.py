from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = (logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def level_for(verbose: int, quiet: bool = False) -> int:
    """Map -v counts onto a logging level: errors by default, debug at -vvv."""
    if quiet:
        return logging.CRITICAL + 1
    return _LEVELS[max(0, min(verbose, len(_LEVELS) - 1))]


def configure_logging(verbose: int = 0, quiet: bool = False) -> None:
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=level_for(verbose, quiet),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
