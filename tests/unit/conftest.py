"""Fixtures for unit tests."""

from typing import Generator

import pytest
import structlog
from structlog.testing import LogCapture


@pytest.fixture(autouse=True)
def log_output() -> Generator[LogCapture, None, None]:
    """Route structlog events into a capture that tests can inspect."""
    capture = LogCapture()
    structlog.configure(processors=[capture], cache_logger_on_first_use=False)
    yield capture
    structlog.reset_defaults()
