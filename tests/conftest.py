"""Global pytest fixtures for hostutils."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from hostutils import tracing
from hostutils.config import TRACE_THRESHOLD_ENV

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {"unit": pytest.mark.unit, "e2e": pytest.mark.e2e}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items with the name of their top-level test folder (unit/e2e)."""
    for item in items:
        path = item.path.resolve()
        for name, marker in DIRECTORY_MARKERS.items():
            if TESTS_ROOT / name in path.parents and not any(
                m.name == name for m in item.iter_markers()
            ):
                item.add_marker(marker)


class FakeClock:
    """Manually advanced stand-in for `hostutils.tracing.utc_now`."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward by *seconds*."""
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    """Return a fresh fake clock starting at 2024-01-01T00:00:00Z."""
    return FakeClock()


@pytest.fixture
def clean_trace_threshold_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset the trace threshold and give the module functions a fresh tracer.

    The default tracer remembers the threshold it resolved, so it is replaced
    for each test.
    """
    monkeypatch.delenv(TRACE_THRESHOLD_ENV, raising=False)
    monkeypatch.setattr(tracing, "_default_tracer", tracing.Tracer())
