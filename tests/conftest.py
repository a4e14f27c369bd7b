import io

import pytest
import logging

from versionkit.versioning.tags import clear_unparseable_tags


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("versionkit")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


@pytest.fixture(autouse=True)
def reset_unparseable_tags():
    """Each test starts without previously reported tags."""
    clear_unparseable_tags()
    yield
    clear_unparseable_tags()
