"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_CANVAS_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_CANVAS_NETWORK_TESTS") != "1",
    reason="Requires a Canvas instance. Set RUN_CANVAS_NETWORK_TESTS=1 to run",
)
