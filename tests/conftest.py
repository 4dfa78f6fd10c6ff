import sys
from collections.abc import Callable, Iterator

import pytest
from loguru import logger

from failure.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached Settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def here() -> Callable[[], tuple[str, int]]:
    """Return a helper reporting the caller's file and current line."""

    def location() -> tuple[str, int]:
        frame = sys._getframe(1)
        return frame.f_code.co_filename, frame.f_lineno

    return location


@pytest.fixture
def loguru_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Forward loguru records into pytest's caplog handler."""
    sink_id = logger.add(caplog.handler, level="DEBUG", format="{message}")
    yield caplog
    logger.remove(sink_id)
