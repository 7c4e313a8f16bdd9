"""easy_envar.utils.logger

Minimal logger setup used across the package.

Handlers write to stderr: stdout is reserved for build directives.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "EASY_ENVAR_LOG_LEVEL"


def _resolve_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str = "easy_envar", level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        # Configure once; repeated imports must not stack handlers.
        handler = logging.StreamHandler()
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level or os.getenv(LOG_LEVEL_ENV, "INFO")))
    return logger
