"""Logging helpers shared across the package."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "iGallery"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it when *name* is given."""

    if name is None or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(level: int | str = logging.INFO, *, rich_output: bool = True) -> logging.Logger:
    """Attach a single console handler to the package logger.

    Calling this more than once only updates the level.
    """

    logger = get_logger()
    logger.setLevel(level)
    if not any(getattr(h, "_igallery_handler", False) for h in logger.handlers):
        if rich_output:
            handler: logging.Handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
            handler.setFormatter(logging.Formatter("%(message)s"))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
        handler._igallery_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
