"""
Date helpers: epoch conversion, UTC-midnight truncation, day enumeration and
legible formatting for debug output.

Date-constructible values are datetimes, pandas Timestamps, epoch milliseconds
(int or float) and strings pandas can parse. Naive values are taken as UTC.
"""

import datetime
import numbers
import typing
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd
import pytz

from market_timeframe.config import get_config
from market_timeframe.errors import InvalidDateError

EPOCH = pytz.utc.localize(datetime.datetime(1970, 1, 1))
_ONE_MS = datetime.timedelta(milliseconds=1)

ISO_APPROX_MARK = '≍'


@dataclass(frozen=True)
class MonthDay:
    """One day of a month; epoch is UTC midnight of that day in milliseconds."""
    year: int
    month: int
    day: int
    epoch: int


def epoch_ms_to_datetime(epoch_ms: int) -> datetime.datetime:
    return EPOCH + datetime.timedelta(milliseconds=epoch_ms)


def datetime_to_epoch_ms(t: datetime.datetime) -> int:
    if t.tzinfo is None:
        t = pytz.utc.localize(t)
    return (t - EPOCH) // _ONE_MS


def timestamp_to_epoch_ms(ts: pd.Timestamp) -> int:
    """Epoch milliseconds of a Timestamp at any resolution, without going through nanoseconds."""
    return datetime_to_epoch_ms(ts.to_pydatetime(warn=False))


def to_utc_timestamp(value=None) -> pd.Timestamp:
    """
    Turn a date-constructible value into a UTC pandas Timestamp.

    Args:
        value: datetime, date, Timestamp, epoch milliseconds or date string.
            Defaults to now.

    Raises:
        InvalidDateError: If the value does not give a valid date.
    """
    if value is None:
        return pd.Timestamp.now(tz='UTC')

    if isinstance(value, bool) or not isinstance(value, (numbers.Real, str, datetime.date)):
        raise InvalidDateError(value)

    try:
        if isinstance(value, numbers.Real):
            ts = pd.Timestamp(epoch_ms_to_datetime(value))
        else:
            ts = pd.Timestamp(value)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(value) from e

    if pd.isna(ts):
        raise InvalidDateError(value)

    if ts.tzinfo is None:
        return ts.tz_localize('UTC')
    return ts.tz_convert('UTC')


def truncate_to_utc_midnight(value=None) -> datetime.datetime:
    """UTC midnight at or before the given instant (default now)."""
    return to_utc_timestamp(value).normalize().to_pydatetime()


def enumerate_days_of_current_month(today=None) -> List[MonthDay]:
    """
    Days 2 through today of the current UTC month, each with its UTC-midnight epoch.

    Day 1 is not included, so this is empty on the first of the month.
    """
    midnight = truncate_to_utc_midnight(today)
    return [
        MonthDay(
            year=midnight.year,
            month=midnight.month,
            day=day,
            epoch=datetime_to_epoch_ms(midnight.replace(day=day)),
        )
        for day in range(2, midnight.day + 1)
    ]


def _locale_string(t: datetime.datetime) -> str:
    # en-US style: 8/24/2024, 10:35:12 PM
    hour = t.hour % 12 or 12
    meridiem = 'AM' if t.hour < 12 else 'PM'
    return f"{t.month}/{t.day}/{t.year}, {hour}:{t.minute:02d}:{t.second:02d} {meridiem}"


def format_legible(value=None, include_iso: bool = False, tz: Optional[str] = None) -> typing.Tuple:
    """
    Epoch, local and (optionally) ISO renderings of a date-constructible value.

        >>> format_legible(1724553312842, include_iso=True, tz='America/New_York')
        (1724553312842, '8/24/2024 @ 10:35:12 PM', '≍', '2024-08-25 @ 02:35:12.842Z')

    Args:
        value: Any date-constructible value, defaults to now.
        include_iso: Whether to append '≍' and the UTC ISO string.
        tz: pytz zone name for the local rendering. Falls back to the configured
            display_timezone, then to the machine's local zone.

    Raises:
        InvalidDateError: If the value does not give a valid date.
    """
    ts = to_utc_timestamp(value)
    epoch_ms = timestamp_to_epoch_ms(ts)

    zone = tz or get_config().display_timezone
    if zone:
        local = ts.tz_convert(pytz.timezone(zone)).to_pydatetime()
    else:
        local = ts.to_pydatetime().astimezone()

    legible = (epoch_ms, _locale_string(local).replace(', ', ' @ ', 1))
    if not include_iso:
        return legible

    iso = f"{ts.strftime('%Y-%m-%dT%H:%M:%S')}.{ts.microsecond // 1000:03d}Z"
    return legible + (ISO_APPROX_MARK, iso.replace('T', ' @ '))
