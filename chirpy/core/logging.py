"""Logging configuration helpers."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from chirpy.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with a single stdout handler.

    The level comes from ``CHIRPY_LOG_LEVEL`` unless given explicitly. Calling
    this again replaces the previous handler instead of stacking a new one.
    """

    level_name = (level or settings.log_level).upper()
    resolved = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved)
    root.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
