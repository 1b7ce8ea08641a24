import io
import logging

import pytest

from mcversion.versioning import runtime


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("mcversion")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream

    logger.removeHandler(handler)
    log_stream.close()


@pytest.fixture
def fresh_runtime(monkeypatch):
    """Give the test an unresolved process-wide runtime."""
    monkeypatch.setattr(runtime, "_host", None)
    monkeypatch.setattr(runtime, "_resolver", None)
    yield runtime
