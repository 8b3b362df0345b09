"""
CLI Command implementations
"""
from .batches_command import BatchesCommand
from .date_command import DateCommand
from .timeframe_command import TimeframeCommand

__all__ = [
    'TimeframeCommand',
    'BatchesCommand',
    'DateCommand',
]
