from argparse import ArgumentParser, Namespace

from market_timeframe.cli.base import BaseCommand, handle_common_errors
from market_timeframe.registry import resolve_timeframe
from market_timeframe.util.time import format_legible


class TimeframeCommand(BaseCommand):
    name = "timeframe"
    help = "Inspect timeframe literals"

    def add_arguments(self, parser: ArgumentParser):
        subparsers = parser.add_subparsers(dest='action', required=True, help='Timeframe operations')

        parse_parser = subparsers.add_parser('parse', help='Show the duration of one or more literals')
        parse_parser.add_argument('literals', nargs='+', help="Timeframe literals, e.g. 1m 4h 2D")

        align_parser = subparsers.add_parser('align', help='Show the period boundary around an instant')
        align_parser.add_argument('literal', help="Timeframe literal, e.g. 15m")
        align_parser.add_argument('--epoch', type=int, default=None,
                                  help='Epoch milliseconds to align (default: now)')

    @handle_common_errors
    def handle(self, args: Namespace) -> int:
        self.setup_logging(getattr(args, 'verbose', False))

        if args.action == 'parse':
            return self._handle_parse(args)
        elif args.action == 'align':
            return self._handle_align(args)

        return 1

    def _handle_parse(self, args: Namespace) -> int:
        for literal in args.literals:
            timeframe = resolve_timeframe(literal)
            print(f"{timeframe.literal}\t{timeframe.duration_ms}\t{timeframe.to_json()}")
        return 0

    def _handle_align(self, args: Namespace) -> int:
        timeframe = resolve_timeframe(args.literal)
        start_key = timeframe.compute_congruent_start_key(args.epoch)
        print(f"Timeframe: {timeframe.literal} ({timeframe.duration_ms} ms)")
        print(f"  Period start: {' '.join(str(part) for part in format_legible(start_key, include_iso=True))}")
        if args.epoch is None:
            print(f"  Next period in: {timeframe.milliseconds_left_until_next} ms")
        return 0
