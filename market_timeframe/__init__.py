"""market_timeframe: timeframe literals, period alignment and batch planning."""

from market_timeframe.batch import Batch, batches_to_frame, plan_batches, plan_datetime_batches
from market_timeframe.duration import UNIT_MILLISECONDS, UNIT_SECONDS, parse_duration_ms
from market_timeframe.errors import (FormatError, InvalidDateError, TimeframeError,
                                     UnsupportedTimeframeSourceError)
from market_timeframe.registry import (TF_1D, TF_1H, TF_1M, TF_2M, TF_3M, TF_5M, TF_15M,
                                       TimeframeRegistry, clear_default_registry,
                                       default_registry, resolve_timeframe)
from market_timeframe.timeframe import (Timeframe, compute_congruent_start_key,
                                        compute_congruent_start_keys, compute_elapsed_count,
                                        milliseconds_left_until_next, now_ms)
from market_timeframe.util.time import (MonthDay, enumerate_days_of_current_month,
                                        format_legible, truncate_to_utc_midnight)

__all__ = [
    'Batch',
    'FormatError',
    'InvalidDateError',
    'MonthDay',
    'TF_15M',
    'TF_1D',
    'TF_1H',
    'TF_1M',
    'TF_2M',
    'TF_3M',
    'TF_5M',
    'Timeframe',
    'TimeframeError',
    'TimeframeRegistry',
    'UNIT_MILLISECONDS',
    'UNIT_SECONDS',
    'UnsupportedTimeframeSourceError',
    'batches_to_frame',
    'clear_default_registry',
    'compute_congruent_start_key',
    'compute_congruent_start_keys',
    'compute_elapsed_count',
    'default_registry',
    'enumerate_days_of_current_month',
    'format_legible',
    'milliseconds_left_until_next',
    'now_ms',
    'parse_duration_ms',
    'plan_batches',
    'plan_datetime_batches',
    'resolve_timeframe',
    'truncate_to_utc_midnight',
]
