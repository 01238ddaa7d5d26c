from __future__ import annotations

import logging
import os

level = os.getenv("RESULTS_LOG_LEVEL", "WARNING").upper()
if level not in logging.getLevelNamesMapping():
    level = "WARNING"

logger = logging.getLogger(__package__)
if not logger.handlers:
    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
