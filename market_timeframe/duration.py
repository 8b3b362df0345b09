"""
Duration parsing for timeframe literals.

A literal is a non-negative integer quantity followed by exactly one unit letter:

    '15m'  -> 15 minutes  -> 900000 ms
    '4h'   -> 4 hours     -> 14400000 ms
    '1M'   -> 1 month     -> 2592000000 ms (30-day month)

Lowercase 'm' is minutes and uppercase 'M' is months. Days, weeks and years
accept both cases.
"""

import re
from types import MappingProxyType
from typing import Mapping

from market_timeframe.errors import FormatError

# Seconds per unit letter. Months and years are fixed 30 / 365 day approximations.
UNIT_SECONDS: Mapping[str, int] = MappingProxyType({
    's': 1,
    'm': 60,
    'h': 3600,
    'd': 86400,
    'D': 86400,
    'w': 604800,
    'W': 604800,
    'M': 2592000,
    'y': 31536000,
    'Y': 31536000,
})

UNIT_MILLISECONDS: Mapping[str, int] = MappingProxyType(
    {unit: seconds * 1000 for unit, seconds in UNIT_SECONDS.items()}
)

_LITERAL_PATTERN = re.compile(r'([0-9]+)([smhdDwWMyY])')


def parse_duration_ms(literal: str) -> int:
    """
    Convert a timeframe literal into its duration in milliseconds.

    Args:
        literal: Timeframe literal such as '1m', '15m', '4h' or '2D'.
            Surrounding whitespace is ignored.

    Returns:
        Duration in milliseconds.

    Raises:
        FormatError: If the literal is not <digits><unit letter>.
    """
    if not isinstance(literal, str):
        raise FormatError(literal)
    match = _LITERAL_PATTERN.fullmatch(literal.strip())
    if match is None:
        raise FormatError(literal)
    quantity, unit = match.groups()
    return int(quantity) * UNIT_MILLISECONDS[unit]


def is_valid_literal(literal: str) -> bool:
    """Whether the literal would parse without raising."""
    try:
        parse_duration_ms(literal)
    except FormatError:
        return False
    return True
