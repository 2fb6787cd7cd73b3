# Core orchestration logic for sevendate.
# This file coordinates time resolution and formatting.
#
# It intentionally contains no CLI parsing and no formatting rules of its own.

from __future__ import annotations

from sevendate.models import Configuration
from sevendate.notation import format_7date
from sevendate.timesource import resolve_time_point


def render(config: Configuration) -> str:
    # Entry point for a single invocation.
    # Errors from the time source propagate to the CLI boundary.
    point = resolve_time_point(config)
    return format_7date(point, config.scope, config.digital)
