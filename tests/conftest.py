import logging
import random
from io import StringIO

import pytest

from browserkit.config.settings import clear_settings_cache
from browserkit.infrastructure.beacon import BeaconSender

# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep BROWSERKIT_* variables and cached settings out of every test."""
    import os

    for name in list(os.environ):
        if name.upper().startswith("BROWSERKIT_"):
            monkeypatch.delenv(name)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def tty_stream():
    """A text stream that claims to be a terminal."""
    stream = StringIO()
    stream.isatty = lambda: True  # type: ignore[method-assign]
    return stream


@pytest.fixture
def seeded_rng():
    """Deterministic random source for color allocation."""
    return random.Random(1234)


# ============================================================================
# Record Fixtures
# ============================================================================


@pytest.fixture
def make_record():
    """Factory for stdlib log records."""

    def _make(
        message: str = "hi",
        level: int = logging.INFO,
        name: str = "app",
        args: tuple = (),
        exc_info=None,
        **extra,
    ) -> logging.LogRecord:
        record = logging.LogRecord(
            name=name,
            level=level,
            pathname="test.py",
            lineno=1,
            msg=message,
            args=args,
            exc_info=exc_info,
        )
        record.__dict__.update(extra)
        return record

    return _make


class RecordingSender(BeaconSender):
    """Beacon sender that keeps every URL instead of sending it."""

    def __init__(self) -> None:
        self.urls: list[str] = []
        self.closed = False

    def send(self, url: str) -> None:
        self.urls.append(url)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def recording_sender():
    return RecordingSender()


@pytest.fixture
def isolated_logger(request):
    """A non-propagating logger that is cleaned up after the test."""
    logger = logging.getLogger(f"browserkit.tests.{request.node.name}")
    logger.propagate = False
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
