"""Pytest fixtures and collection rules shared across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from cellgrid.buffer import Buffer
from cellgrid.geometry import Rect


@pytest.fixture
def make_buffer() -> Callable[[int, int], Buffer]:
    """Return a factory for blank buffers anchored at the origin."""

    def _make(width: int, height: int) -> Buffer:
        return Buffer.empty(Rect(x=0, y=0, width=width, height=height))

    return _make


@pytest.fixture
def repo_root() -> Path:
    """Return the repository root directory."""

    return Path(__file__).resolve().parents[1]


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no filesystem or terminal access.
    - `integration`: tests touching files, the rich console, or the CLI.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
