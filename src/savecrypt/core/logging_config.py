"""Lightweight logging setup for applications embedding savecrypt."""

import logging
import sys
from typing import Optional

from .config import get_log_level


def configure_logging(level: Optional[int] = None) -> None:
    # Configure root logger once; keep output simple for terminals.
    if level is None:
        level = get_log_level()
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )
