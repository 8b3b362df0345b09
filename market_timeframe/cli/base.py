import functools
import logging
import sys
from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace

from market_timeframe.util.time import timestamp_to_epoch_ms, to_utc_timestamp


class BaseCommand(ABC):
    """Base class for all CLI commands"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name (e.g., 'timeframe', 'batches')"""
        pass

    @property
    @abstractmethod
    def help(self) -> str:
        """Help description for the command"""
        pass

    def add_range_args(self, parser: ArgumentParser):
        """Add the --from/--to range arguments"""
        parser.add_argument('--from', dest='date_from', type=str, required=True,
                            help='Range start, epoch milliseconds or a date string')
        parser.add_argument('--to', dest='date_to', type=str, required=True,
                            help='Range end, epoch milliseconds or a date string')

    def parse_epoch_ms(self, value: str) -> int:
        """Epoch milliseconds from a digit string or any date string"""
        if value.lstrip('-').isdigit():
            return int(value)
        return timestamp_to_epoch_ms(to_utc_timestamp(value))

    def setup_logging(self, verbose: bool = False):
        """Setup logging configuration"""
        level = logging.DEBUG if verbose else logging.INFO
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)-5.5s] %(message)s",
            handlers=[logging.StreamHandler(sys.stdout)]
        )

    @abstractmethod
    def add_arguments(self, parser: ArgumentParser):
        """Add command-specific arguments"""
        pass

    @abstractmethod
    def handle(self, args: Namespace) -> int:
        """Execute the command, return exit code"""
        pass


def handle_common_errors(func):
    """Decorator to handle common CLI errors"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            print("\n⚠️  Operation cancelled by user")
            return 130
        except Exception as e:
            print(f"❌ Error: {e}")
            logging.exception("Command failed with exception")
            return 1
    return wrapper
