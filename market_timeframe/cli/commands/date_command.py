from argparse import ArgumentParser, Namespace

from market_timeframe.cli.base import BaseCommand, handle_common_errors
from market_timeframe.util.time import (enumerate_days_of_current_month, format_legible,
                                        truncate_to_utc_midnight)


class DateCommand(BaseCommand):
    name = "date"
    help = "Date inspection helpers"

    def add_arguments(self, parser: ArgumentParser):
        subparsers = parser.add_subparsers(dest='action', required=True, help='Date operations')

        legible_parser = subparsers.add_parser('legible', help='Show epoch, local and ISO forms')
        legible_parser.add_argument('value', nargs='?', default=None,
                                    help='Epoch milliseconds or date string (default: now)')
        legible_parser.add_argument('--iso', action='store_true', help='Append the UTC ISO form')
        legible_parser.add_argument('--tz', type=str, default=None, help='Display timezone, e.g. Asia/Seoul')

        midnight_parser = subparsers.add_parser('midnight', help='Truncate to UTC midnight')
        midnight_parser.add_argument('value', nargs='?', default=None,
                                     help='Epoch milliseconds or date string (default: now)')

        subparsers.add_parser('month-days', help='List days of the current UTC month so far')

    @handle_common_errors
    def handle(self, args: Namespace) -> int:
        self.setup_logging(getattr(args, 'verbose', False))

        if args.action == 'legible':
            value = self._parse_value(args.value)
            print(' '.join(str(part) for part in format_legible(value, include_iso=args.iso, tz=args.tz)))
            return 0
        elif args.action == 'midnight':
            print(truncate_to_utc_midnight(self._parse_value(args.value)).isoformat())
            return 0
        elif args.action == 'month-days':
            for month_day in enumerate_days_of_current_month():
                print(f"{month_day.year}-{month_day.month:02d}-{month_day.day:02d}\t{month_day.epoch}")
            return 0

        return 1

    def _parse_value(self, value):
        if value is None:
            return None
        return self.parse_epoch_ms(value)
