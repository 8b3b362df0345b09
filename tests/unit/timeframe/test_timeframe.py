"""
Unit tests for market_timeframe.timeframe.

Covers construction, alignment, elapsed counts and serialization of Timeframe.
"""

import dataclasses
import json

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from market_timeframe.errors import FormatError, UnsupportedTimeframeSourceError
from market_timeframe.timeframe import (Timeframe, compute_congruent_start_key,
                                        compute_congruent_start_keys, compute_elapsed_count,
                                        milliseconds_left_until_next)


class TestConstruction:
    """Building Timeframe values."""

    def test_from_literal(self):
        tf = Timeframe("15m")
        assert tf.literal == "15m"
        assert tf.duration_ms == 900_000

    def test_literal_is_stripped(self):
        assert Timeframe(" 1h ").literal == "1h"

    def test_invalid_literal_raises_format_error(self):
        with pytest.raises(FormatError):
            Timeframe("5x")

    @pytest.mark.parametrize("literal", ["0m", "0s", " 0D "])
    def test_zero_duration_raises_format_error(self, literal):
        """A zero quantity parses but cannot make a Timeframe."""
        with pytest.raises(FormatError) as exc_info:
            Timeframe(literal)
        assert exc_info.value.raw_input == literal

    def test_format_error_keeps_unstripped_input(self):
        with pytest.raises(FormatError) as exc_info:
            Timeframe(" 5x ")
        assert exc_info.value.raw_input == " 5x "

    @pytest.mark.parametrize("source", [60000, None, 1.5, ["1m"]])
    def test_non_string_raises_type_error(self, source):
        with pytest.raises(UnsupportedTimeframeSourceError):
            Timeframe(source)
        with pytest.raises(TypeError):
            Timeframe(source)

    def test_of_passes_existing_instance_through(self):
        tf = Timeframe("1m")
        assert Timeframe.of(tf) is tf

    def test_of_builds_from_literal(self):
        assert Timeframe.of("3m").duration_ms == 180_000

    def test_of_rejects_other_types(self):
        with pytest.raises(UnsupportedTimeframeSourceError):
            Timeframe.of(180_000)

    def test_is_immutable(self):
        tf = Timeframe("1m")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tf.literal = "2m"  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            tf.duration_ms = 1  # type: ignore[misc]

    def test_value_equality(self):
        assert Timeframe("1m") == Timeframe("1m")
        assert hash(Timeframe("1m")) == hash(Timeframe("1m"))
        assert Timeframe("1d") != Timeframe("1D")


class TestAlignment:
    """compute_congruent_start_key and milliseconds_left_until_next."""

    def test_start_key_for_minute(self):
        assert Timeframe("1m").compute_congruent_start_key(1_700_000_012_345) == 1_699_999_980_000

    def test_start_key_on_boundary_is_itself(self):
        assert Timeframe("1m").compute_congruent_start_key(1_699_999_980_000) == 1_699_999_980_000

    def test_daily_key_is_utc_midnight(self):
        # 2024-08-25 02:35:12.842 UTC -> 2024-08-25 00:00 UTC
        assert Timeframe("1D").compute_congruent_start_key(1_724_553_312_842) == 1_724_544_000_000

    def test_start_key_defaults_to_now(self, frozen_now):
        assert Timeframe("1m").compute_congruent_start_key() == frozen_now

    def test_milliseconds_left_until_next(self, frozen_now):
        assert Timeframe("1m").milliseconds_left_until_next == 60_000
        assert Timeframe("1h").milliseconds_left_until_next == milliseconds_left_until_next(3_600_000, frozen_now)

    def test_milliseconds_left_mid_period(self):
        assert milliseconds_left_until_next(60_000, now=1_699_999_980_000 + 15_000) == 45_000

    @given(epoch=st.integers(min_value=0, max_value=2**53))
    def test_start_key_is_floor_multiple(self, epoch):
        key = compute_congruent_start_key(60_000, epoch)
        assert key == (epoch // 60_000) * 60_000
        assert key <= epoch < key + 60_000

    def test_vectorised_start_keys(self):
        keys = compute_congruent_start_keys(60_000, [0, 59_999, 60_000, 1_700_000_012_345])
        assert keys.dtype == np.int64
        assert keys.tolist() == [0, 0, 60_000, 1_699_999_980_000]


class TestElapsedCount:
    """compute_elapsed_count."""

    def test_two_minutes(self, frozen_now):
        tf = Timeframe("1m")
        assert tf.compute_elapsed_count(frozen_now - 120_000) == 2
        assert tf.compute_elapsed_count(frozen_now - 120_000, frozen_now) == 2

    def test_partial_period_not_counted(self):
        assert compute_elapsed_count(60_000, 0, 119_999) == 1

    def test_negative_when_reversed(self):
        assert compute_elapsed_count(60_000, 120_000, 0) == -2
        assert compute_elapsed_count(60_000, 90_000, 0) == -2


class TestRepresentation:
    """Explicit accessors and serialization."""

    def test_explicit_accessors(self):
        tf = Timeframe("1h")
        assert tf.to_literal() == "1h"
        assert tf.to_milliseconds() == 3_600_000

    def test_to_dict(self):
        assert Timeframe("1m").to_dict() == {"1m": 60_000}

    def test_to_json_round_trip(self):
        tf = Timeframe("4h")
        ((literal, duration_ms),) = json.loads(tf.to_json()).items()
        assert Timeframe(literal).duration_ms == duration_ms == tf.duration_ms

    def test_repr_names_literal_and_duration(self):
        text = repr(Timeframe("1m"))
        assert "1m" in text
        assert "60000 ms" in text

    def test_str_is_milliseconds(self):
        assert str(Timeframe("1m")) == "60000milliseconds"


pytestmark = [pytest.mark.unit, pytest.mark.timeframe]
