"""Integer parsing with a single default-to-zero policy."""

import re

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int_or_zero(value: object) -> int:
    """
    Parse a decimal integer (optional sign, ASCII digits only); anything else is 0.

    Whitespace, underscores, decimals and exponents are rejected, so "1_000",
    " 5" and "1.5" all give 0. Used for both nonce and amount.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not _INT_RE.fullmatch(value):
        return 0
    return int(value)
