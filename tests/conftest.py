# Shared fixtures for the sevendate test suite.
# The system clock is pinned by patching sevendate.timesource._now.

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest


@pytest.fixture
def freeze_clock(monkeypatch: pytest.MonkeyPatch) -> Callable[[datetime], None]:
    def _freeze(moment: datetime) -> None:
        monkeypatch.setattr("sevendate.timesource._now", lambda: moment)

    return _freeze
