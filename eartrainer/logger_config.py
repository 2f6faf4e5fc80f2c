from __future__ import annotations

import logging
import sys

try:
    from .constants import LOG_LEVEL, LOGGER_NAME
except ImportError:
    from constants import LOG_LEVEL, LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(LOG_LEVEL)
