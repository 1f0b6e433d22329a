"""Fixtures for end-to-end CLI tests."""

import logging

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name, unused-argument


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def zero_threshold(clean_trace_threshold_env, monkeypatch):
    """Make every traced command count as slow."""
    monkeypatch.setenv("HOSTUTILS_TRACE_THRESHOLD", "0")


@pytest.fixture(autouse=True)
def _reset_logger_levels():
    """Undo -L overrides so they do not leak into later tests."""
    names = ("hostutils", "hostutils.tracing")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
