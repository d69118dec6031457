"""Shared logging configuration for the umbral creation simulator.

Call ``configure_logging()`` once at an entry point. Logs go to stderr so the
report on stdout stays clean. The function is idempotent: if the root logger
already has handlers, it does nothing (level included).
"""

import logging
import sys


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logger with a single stderr console handler.

    Only configures if the root logger has no handlers (idempotent).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(fmt))
    root.addHandler(console)

    root.setLevel(level)
