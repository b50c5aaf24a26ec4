"""Logging setup for the extractor."""
from __future__ import annotations

import logging
import sys

_CONFIGURED = False


def configure_logging(debug: bool = False) -> None:
    """Configure root logging to write to stderr, DEBUG when ``debug`` is set."""

    global _CONFIGURED

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    if _CONFIGURED:
        return

    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    _CONFIGURED = True


__all__ = ["configure_logging"]
