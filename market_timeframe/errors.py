"""
Exceptions raised by market_timeframe.

Every error keeps the offending input around so callers can log it.
"""

from typing import Any

EMPTY_INPUT_MARK = '∅'


def render_input(value: Any) -> str:
    """Render an offending input for an error message, '∅' when empty or missing."""
    if value is None or (isinstance(value, str) and value == ''):
        return EMPTY_INPUT_MARK
    return str(value)


class TimeframeError(Exception):
    """Base class for all market_timeframe errors"""
    pass


class FormatError(TimeframeError, ValueError):
    """Raised when a literal or date-like value cannot be interpreted."""

    def __init__(self, raw_input: Any, message: str = None):
        self.raw_input = raw_input
        if message is None:
            message = (
                f"Timeframe format not viable: input ⟦ {render_input(raw_input)} ⟧ "
                f"must look like <quantity><unit>, e.g. '15m' or '4h'"
            )
        super().__init__(message)


class InvalidDateError(FormatError, TypeError):
    """Raised when a date-constructible value does not yield a valid date."""

    def __init__(self, raw_input: Any):
        super().__init__(
            raw_input,
            f"Input ⟦ {render_input(raw_input)} ⟧ is not a valid date value",
        )


class UnsupportedTimeframeSourceError(TimeframeError, TypeError):
    """Raised when a Timeframe is requested from something other than a literal or a Timeframe."""

    def __init__(self, source: Any):
        self.source = source
        super().__init__(
            f"Creating a timeframe from {type(source).__name__} is not supported yet; "
            f"pass a literal such as '1m' or an existing Timeframe"
        )
