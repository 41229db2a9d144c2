"""Pytest configuration and fixtures for datelayout tests."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datelayout can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datelayout.format.interpreter import interpret  # noqa: E402


@pytest.fixture(autouse=True)
def clear_interpret_cache():
    """Start every test with an empty template cache."""
    interpret._clear_cache()
    yield
    interpret._clear_cache()


@pytest.fixture
def set_local_timezone():
    """Switch the process-local timezone using a POSIX TZ string.

    Usage: ``set_local_timezone("EST5")`` makes local time UTC-5 with no
    daylight saving. The original TZ is restored afterwards.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    original = os.environ.get("TZ")

    def _set(name: str) -> None:
        os.environ["TZ"] = name
        time.tzset()

    yield _set

    if original is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = original
    time.tzset()
