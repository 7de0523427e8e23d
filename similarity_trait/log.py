"""Centralized logging helpers."""

import logging
from typing import Final, Optional

_LOGGER_NAME: Final = "similarity_trait"


def get_logger(component: Optional[str] = None, level: int = logging.WARNING) -> logging.Logger:
    """
    Return the package logger (or a child of it), installing a single
    stream handler on the package logger the first time it is asked for.
    """
    root = logging.getLogger(_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    return root.getChild(component) if component else root
