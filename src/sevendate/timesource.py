# Time source resolution for sevendate.
# Produces the instant to display, either from a file's modification time
# or from the system clock, decomposed into local calendar fields.
#
# This is the only module that touches the clock or the filesystem.

from __future__ import annotations

import os
from datetime import datetime

from sevendate.exceptions import FileAccessError
from sevendate.models import Configuration, TimePoint


def _now() -> datetime:
    # Indirection point so tests can pin the clock.
    return datetime.now()


def last_modified(path: str) -> datetime:
    # st_mtime is exposed under the same name on every platform Python
    # supports, so no per-OS field selection is needed here.
    # os.stat rather than Path.stat: Path("") would silently mean ".".
    try:
        mtime = os.stat(path).st_mtime
    except OSError as exc:
        raise FileAccessError(path) from exc
    return datetime.fromtimestamp(mtime)


def resolve_time_point(config: Configuration) -> TimePoint:
    if config.path is not None:
        moment = last_modified(config.path)
        source = "mtime"
    else:
        moment = _now()
        source = "clock"

    # tm_yday is 1-indexed; the 7date calendar starts at day 0.
    fields = moment.timetuple()
    return TimePoint(
        year=fields.tm_year,
        day_of_year=fields.tm_yday - 1,
        moment=moment,
        source=source,
    )
