"""
Timeframe Registry

A registry owns the literal -> Timeframe mapping and hands out one instance per
literal, so timeframes obtained from the same registry can be compared with `is`.

    registry = TimeframeRegistry()
    assert registry.resolve('1m') is registry.resolve('1m')

A process-wide default registry backs resolve_timeframe() and the TF_* constants.
"""

import logging
import threading
from typing import Dict, Iterable, List, Union

from market_timeframe.config import get_config
from market_timeframe.duration import is_valid_literal
from market_timeframe.errors import UnsupportedTimeframeSourceError
from market_timeframe.timeframe import Timeframe

logger = logging.getLogger(__name__)


class TimeframeRegistry:
    """Cache of Timeframe instances keyed by literal."""

    def __init__(self, preload: Iterable[str] = ()):
        self._timeframes: Dict[str, Timeframe] = {}
        self._lock = threading.Lock()
        for literal in preload:
            self.resolve(literal)

    def resolve(self, value: Union[str, Timeframe]) -> Timeframe:
        """
        Get the cached Timeframe for a literal, building it on first request.

        A Timeframe argument is cached under its own literal when no entry exists
        yet and is returned as is either way.

        Raises:
            UnsupportedTimeframeSourceError: For anything but a str or Timeframe.
            FormatError: For a malformed literal.
        """
        if isinstance(value, Timeframe):
            with self._lock:
                if value.literal not in self._timeframes:
                    self._timeframes[value.literal] = value
                    logger.debug(f"Registered existing timeframe '{value.literal}'")
            return value

        if not isinstance(value, str):
            raise UnsupportedTimeframeSourceError(value)

        key = value.strip()
        timeframe = self._timeframes.get(key)
        if timeframe is not None:
            return timeframe

        with self._lock:
            # another resolver may have published it while we waited
            timeframe = self._timeframes.get(key)
            if timeframe is None:
                timeframe = Timeframe(value)
                self._timeframes[timeframe.literal] = timeframe
                logger.debug(f"Created timeframe '{timeframe.literal}' ({timeframe.duration_ms} ms)")
        return timeframe

    def clear(self) -> None:
        """Drop all cached timeframes. Instances already handed out stay valid."""
        with self._lock:
            count = len(self._timeframes)
            self._timeframes = {}
        logger.debug(f"Cleared {count} cached timeframe(s)")

    def literals(self) -> List[str]:
        return list(self._timeframes.keys())

    def __contains__(self, literal: str) -> bool:
        return isinstance(literal, str) and literal.strip() in self._timeframes

    def __len__(self) -> int:
        return len(self._timeframes)


def _preload_literals() -> List[str]:
    literals = []
    for literal in get_config().preregistered_literals or []:
        if is_valid_literal(literal):
            literals.append(literal)
        else:
            logger.warning(f"Skipping invalid preregistered timeframe literal {literal!r}")
    return literals


default_registry = TimeframeRegistry(preload=_preload_literals())


def resolve_timeframe(value: Union[str, Timeframe]) -> Timeframe:
    """Resolve a literal or Timeframe against the default registry."""
    return default_registry.resolve(value)


def clear_default_registry() -> None:
    default_registry.clear()


TF_1M = resolve_timeframe('1m')
TF_2M = resolve_timeframe('2m')
TF_3M = resolve_timeframe('3m')
TF_5M = resolve_timeframe('5m')
TF_15M = resolve_timeframe('15m')
TF_1H = resolve_timeframe('1h')
TF_1D = resolve_timeframe('1D')
