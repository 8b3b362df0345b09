"""
Timeframe value object.

A Timeframe pairs a literal ('1m') with its duration in milliseconds (60000) and
answers period questions against epoch-millisecond timestamps:

    tf = Timeframe('1m')
    tf.compute_congruent_start_key(1700000012345)  # -> 1699999980000
    tf.compute_elapsed_count(now - 120000, now)    # -> 2

Boundaries are epoch-0 relative. '1D' lines up with UTC midnight because a day
divides epoch time evenly; '1M' does not line up with calendar months.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

import numpy as np

from market_timeframe.duration import parse_duration_ms
from market_timeframe.errors import FormatError, UnsupportedTimeframeSourceError


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return time.time_ns() // 1_000_000


def compute_congruent_start_key(duration_ms: int, epoch: Optional[int] = None) -> int:
    """Start of the period of length duration_ms that contains epoch (default now)."""
    if epoch is None:
        epoch = now_ms()
    return (epoch // duration_ms) * duration_ms


def compute_congruent_start_keys(duration_ms: int, epochs) -> np.ndarray:
    """
    Vectorised compute_congruent_start_key over an array-like of epoch milliseconds.

    Returns:
        numpy int64 array of period start keys, same shape as epochs.
    """
    epochs = np.asarray(epochs, dtype=np.int64)
    return (epochs // duration_ms) * duration_ms


def compute_elapsed_count(duration_ms: int, start_timestamp: int, end_timestamp: Optional[int] = None) -> int:
    """Number of complete periods between two timestamps. Negative when end < start."""
    if end_timestamp is None:
        end_timestamp = now_ms()
    return (end_timestamp - start_timestamp) // duration_ms


def milliseconds_left_until_next(duration_ms: int, now: Optional[int] = None) -> int:
    """Milliseconds from now until the next period boundary."""
    if now is None:
        now = now_ms()
    return compute_congruent_start_key(duration_ms, now) + duration_ms - now


@dataclass(frozen=True)
class Timeframe:
    """
    Immutable (literal, duration_ms) pair.

    Construct directly with Timeframe('15m') to bypass any registry, or use
    Timeframe.of(...) which passes existing instances through untouched.

    Attributes:
        literal: Canonical literal, surrounding whitespace stripped
        duration_ms: Period duration in milliseconds, always parse_duration_ms(literal) and positive
    """
    literal: str
    duration_ms: int = field(init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.literal, str):
            raise UnsupportedTimeframeSourceError(self.literal)
        duration_ms = parse_duration_ms(self.literal)
        if duration_ms == 0:
            raise FormatError(self.literal, f"Timeframe ⟦ {self.literal} ⟧ has a zero duration")
        object.__setattr__(self, 'literal', self.literal.strip())
        object.__setattr__(self, 'duration_ms', duration_ms)

    @classmethod
    def of(cls, value: Union[str, 'Timeframe']) -> 'Timeframe':
        """
        Build a Timeframe from a literal, or return an existing Timeframe as is.

        Raises:
            UnsupportedTimeframeSourceError: For any other input type.
            FormatError: For a malformed literal.
        """
        if isinstance(value, Timeframe):
            return value
        if isinstance(value, str):
            return cls(value)
        raise UnsupportedTimeframeSourceError(value)

    def to_literal(self) -> str:
        return self.literal

    def to_milliseconds(self) -> int:
        return self.duration_ms

    def compute_congruent_start_key(self, epoch: Optional[int] = None) -> int:
        """Start boundary of the period containing epoch (default now)."""
        return compute_congruent_start_key(self.duration_ms, epoch)

    def compute_elapsed_count(self, start_timestamp: int, end_timestamp: Optional[int] = None) -> int:
        """Complete periods between start_timestamp and end_timestamp (default now)."""
        return compute_elapsed_count(self.duration_ms, start_timestamp, end_timestamp)

    @property
    def milliseconds_left_until_next(self) -> int:
        return milliseconds_left_until_next(self.duration_ms)

    def to_dict(self) -> Dict[str, int]:
        return {self.literal: self.duration_ms}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __repr__(self) -> str:
        return f"Timeframe! {self.literal} has interval duration of {self.duration_ms} ms."

    def __str__(self) -> str:
        return f"{self.duration_ms}milliseconds"
