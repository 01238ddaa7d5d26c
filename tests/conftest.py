from __future__ import annotations

import logging

from results.logging import logger


def pytest_configure() -> None:
    logger.setLevel(logging.ERROR)  # set log levels very high for tests
