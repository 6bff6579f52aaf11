from __future__ import annotations

from typing import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop sinks the CLI bound to a test runner's streams."""

    yield
    logger.remove()
    logger.disable("truedl")
