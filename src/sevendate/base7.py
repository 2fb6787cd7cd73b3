# Base-7 encoding of day-of-year values.
# This module is pure logic and must remain side-effect free.

from __future__ import annotations

_DIGITS = "0123456"


def encode_base7(n: int) -> str:
    # Negative input has no representation; "" is returned as a sentinel
    # and must not be confused with zero, which is "0".
    if n < 0:
        return ""
    if n == 0:
        return "0"

    # Remainders come out least significant first.
    digits = []
    while n > 0:
        n, rem = divmod(n, 7)
        digits.append(_DIGITS[rem])

    return "".join(reversed(digits))
