"""Shared fixtures: per-test debug output directory."""

import pytest


@pytest.fixture
def debug_dir(tmp_path, request):
    """Directory for debug dumps of the current test case."""
    d = tmp_path / "debug" / request.node.name
    d.mkdir(parents=True)
    return d
