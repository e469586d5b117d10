from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "vttmerge"

_CONFIGURED = False


def setup_logging(level: str) -> None:
    """Attach a stderr Rich handler to the package logger once."""
    global _CONFIGURED
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level, logging.WARNING))
    if _CONFIGURED:
        return
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    _CONFIGURED = True
