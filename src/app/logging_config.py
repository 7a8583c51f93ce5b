# src/app/logging_config.py
"""
One stream handler on the root logger, shared by every gridmap entry point.

Lines go to stdout unless a stream is given; gridmap-solve passes stderr so
the drawn map stays alone on stdout. Calling configure_logging() again only
changes the root level, which is how --log-level overrides a profile.

gridmap.search logs each level's frontier size at DEBUG, a found route at
INFO and a failed or exhausted search at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: default logging level (e.g., logging.INFO, logging.DEBUG)
        stream: where log lines go; stdout when omitted
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    formatter = logging.Formatter(fmt=LOG_FORMAT)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
