"""
Batch planning for paginated fetches.

Splits [start_time, end_time) into contiguous batches of at most batch_size
periods, e.g. to warm up a fetcher that is limited to N candles per request.

    plan_batches(60000, T, T + 10 * 60000, batch_size=4)

    Batch 1: T            -> T + 3 min   (periods 0-3)
    Batch 2: T + 4 min    -> T + 7 min   (periods 4-7)
    Batch 3: T + 8 min    -> T + 10 min  (periods 8-9, end forced to end_time)

Every batch but the last ends at the start of its final period. The last batch
always ends exactly at end_time.
"""

import datetime
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import pandas as pd

from market_timeframe.config import get_config
from market_timeframe.timeframe import Timeframe
from market_timeframe.util.time import datetime_to_epoch_ms, epoch_ms_to_datetime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Batch:
    """Epoch-millisecond bounds of one batch."""
    start_time: int
    end_time: int

    def to_datetime(self) -> Tuple[datetime.datetime, datetime.datetime]:
        """Bounds as UTC-aware datetimes."""
        return epoch_ms_to_datetime(self.start_time), epoch_ms_to_datetime(self.end_time)


def _duration_ms(timeframe: Union[int, Timeframe]) -> int:
    if isinstance(timeframe, Timeframe):
        return timeframe.duration_ms
    return timeframe


def plan_batches(
        duration_ms: Union[int, Timeframe],
        start_time: int,
        end_time: int,
        batch_size: Optional[int] = None,
        ) -> List[Batch]:
    """
    Split a time range into contiguous batches of at most batch_size periods.

    Args:
        duration_ms: Period length in milliseconds, or a Timeframe
        start_time: Range start in epoch milliseconds, expected < end_time
        end_time: Range end in epoch milliseconds
        batch_size: Periods per batch, defaults to the configured size (1441)

    Returns:
        Ordered list of Batch. Empty when the range is shorter than one period.
        A reversed range is not rejected and also gives an empty list.

    Raises:
        ValueError: If batch_size or duration_ms is not positive.
    """
    duration_ms = _duration_ms(duration_ms)
    if batch_size is None:
        batch_size = get_config().default_batch_size
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    if duration_ms <= 0:
        raise ValueError(f"duration_ms must be positive, got {duration_ms}")

    total_intervals = (end_time - start_time) // duration_ms
    num_batches = -(-total_intervals // batch_size)
    step = batch_size * duration_ms

    batches = []
    for i in range(num_batches):
        batch_start = start_time + i * step
        if i == num_batches - 1:
            batch_end = end_time
        else:
            batch_end = batch_start + step - duration_ms
        batches.append(Batch(start_time=batch_start, end_time=batch_end))

    logger.debug(f"Planned {len(batches)} batch(es) for {total_intervals} interval(s) "
                 f"of {duration_ms} ms, batch_size={batch_size}")
    return batches


def plan_datetime_batches(
        timeframe: Union[str, Timeframe],
        t_from: datetime.datetime,
        t_to: datetime.datetime,
        batch_size: Optional[int] = None,
        ) -> List[Tuple[datetime.datetime, datetime.datetime]]:
    """
    plan_batches over datetimes. Naive datetimes are taken as UTC.

    Returns:
        List of (t_from, t_to) tuples as UTC-aware datetimes.
    """
    timeframe = Timeframe.of(timeframe)
    batches = plan_batches(
        timeframe,
        datetime_to_epoch_ms(t_from),
        datetime_to_epoch_ms(t_to),
        batch_size=batch_size,
    )
    return [batch.to_datetime() for batch in batches]


def batches_to_frame(batches: List[Batch]) -> pd.DataFrame:
    """
    Tabulate batches.

    Returns:
        DataFrame with int64 start_time/end_time columns and UTC datetime
        t_from/t_to columns, one row per batch.
    """
    df = pd.DataFrame(
        {
            'start_time': [batch.start_time for batch in batches],
            'end_time': [batch.end_time for batch in batches],
        },
        dtype='int64',
    )
    df['t_from'] = _epoch_ms_column(df['start_time'])
    df['t_to'] = _epoch_ms_column(df['end_time'])
    return df


def _epoch_ms_column(epochs: pd.Series) -> pd.Series:
    # millisecond resolution keeps dates past 2262 in range
    values = epochs.to_numpy(dtype='int64').astype('datetime64[ms]')
    return pd.Series(values, index=epochs.index).dt.tz_localize('UTC')
