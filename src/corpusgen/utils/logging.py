"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain configured loggers.
    - Apply the verbosity level from configuration.

Notes/Edge cases:
    - Logging configuration is idempotent: a single stderr handler is attached
      to the ``corpusgen`` root logger no matter how often it is configured.
    - Records never go to stdout, which carries the generated corpus.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]

ROOT_LOGGER_NAME = "corpusgen"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_FLAG = "_corpusgen_handler"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach the package stderr handler (once) and set ``level``.

    Repeated calls rebind the existing handler to the current ``sys.stderr``.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for h in root.handlers:
        if getattr(h, _HANDLER_FLAG, False) and isinstance(h, logging.StreamHandler):
            h.stream = sys.stderr
            break
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_FLAG, True)
        root.addHandler(handler)
    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package root logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
