# Scope truncation, padding, and notation assembly for sevendate.
# This module is pure logic and must remain side-effect free.
#
# Standard notation:  <scoped day>.<year>        e.g. 12-.2016
# Digital notation:   <year>-<4 char scoped day> e.g. 2016-012-

from __future__ import annotations

from sevendate.base7 import encode_base7
from sevendate.models import Scope, TimePoint

PLACEHOLDER = "-"

DIGITAL_WIDTH = 4


def apply_scope(digits: str, scope: Scope) -> str:
    # Day precision passes the string through untouched.
    k = scope.magnitude
    if k == 0:
        return digits

    # Make sure there are k trailing positions to blank out plus one
    # significant digit in front of them.
    padded = digits.rjust(k + 1, "0")
    return padded[:-k] + PLACEHOLDER * k


def zero_pad4(s: str) -> str:
    # rjust rather than zfill: zfill treats a leading '-' as a sign.
    return s.rjust(DIGITAL_WIDTH, "0")


def standard_notation(day_part: str, year: int) -> str:
    return f"{day_part}.{year}"


def digital_notation(day_part: str, year: int) -> str:
    return f"{year}-{zero_pad4(day_part)}"


def format_7date(point: TimePoint, scope: Scope, digital: bool) -> str:
    day_part = apply_scope(encode_base7(point.day_of_year), scope)
    if digital:
        return digital_notation(day_part, point.year)
    return standard_notation(day_part, point.year)
