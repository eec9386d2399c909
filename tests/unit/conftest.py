"""Pytest fixtures for unit tests."""

import os
import time

import pytest

from samples import make_event


@pytest.fixture
def event_factory():
    """Build code hook events with overridable slots, phase, intent and bot."""
    return make_event


@pytest.fixture(autouse=True)
def restore_timezone():
    """Restore TZ and re-run tzset after tests that process a request."""
    saved = os.environ.get("TZ")
    yield
    if saved is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = saved
    if hasattr(time, "tzset"):
        time.tzset()
