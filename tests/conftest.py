"""Shared fixtures for person_record tests."""

from typing import Callable

import pytest


@pytest.fixture
def force_draw(monkeypatch) -> Callable[[float], None]:
    """Pin the process-wide random draw to a fixed value."""

    def _force(value: float) -> None:
        monkeypatch.setattr("person_record.core.random.random", lambda: value)

    return _force
