# Shared data models for sevendate.
# Lives in its own module to avoid circular imports between cli, core and notation.

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Scope(str, Enum):
    day = "day"
    week = "week"
    seven_month = "7month"

    @property
    def magnitude(self) -> int:
        # Number of trailing base-7 digits replaced by '-'.
        return _MAGNITUDES[self]


_MAGNITUDES = {
    Scope.day: 0,
    Scope.week: 1,
    Scope.seven_month: 2,
}


@dataclass(frozen=True)
class Configuration:
    scope: Scope = Scope.day
    digital: bool = False
    # Kept exactly as typed so error messages echo the user's token.
    path: Optional[str] = None


@dataclass(frozen=True)
class TimePoint:
    year: int
    # 0-indexed: January 1st is day 0.
    day_of_year: int
    moment: datetime
    source: str
