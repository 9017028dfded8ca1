"""Shared fixtures for the muko test suite."""

import logging
from pathlib import Path

import pytest

SAMPLE_HOSTS = [
    "127.0.0.1\tlocalhost",
    "::1             localhost ip6-localhost",
    "",
    "# The following lines are managed by hand",
    "10.0.0.5 intranet.example",
    "127.0.0.1 foo.test #muko: foo",
    "#127.0.0.1   bar.test   #muko: bar",
]


@pytest.fixture(autouse=True)
def _reset_muko_logger():
    """Drop handlers so each test gets a handler bound to its own stderr."""
    logger = logging.getLogger("muko")
    logger.handlers.clear()
    yield
    logger.handlers.clear()


@pytest.fixture
def hosts_file(tmp_path: Path) -> Path:
    """Write the sample hosts content to a temporary file."""
    path = tmp_path / "hosts"
    path.write_text("\n".join(SAMPLE_HOSTS) + "\n")
    return path


@pytest.fixture
def sample_lines() -> list:
    """A fresh copy of the sample hosts lines."""
    return list(SAMPLE_HOSTS)
