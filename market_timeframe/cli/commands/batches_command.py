from argparse import ArgumentParser, Namespace

from market_timeframe.batch import batches_to_frame, plan_batches
from market_timeframe.cli.base import BaseCommand, handle_common_errors
from market_timeframe.registry import resolve_timeframe


class BatchesCommand(BaseCommand):
    name = "batches"
    help = "Plan contiguous fetch batches over a time range"

    def add_arguments(self, parser: ArgumentParser):
        parser.add_argument('--timeframe', type=str, required=True,
                            help="Period literal, e.g. 1m")
        self.add_range_args(parser)
        parser.add_argument('--batch-size', type=int, default=None,
                            help='Periods per batch (default: configured size)')

    @handle_common_errors
    def handle(self, args: Namespace) -> int:
        self.setup_logging(getattr(args, 'verbose', False))

        timeframe = resolve_timeframe(args.timeframe)
        start_time = self.parse_epoch_ms(args.date_from)
        end_time = self.parse_epoch_ms(args.date_to)

        batches = plan_batches(timeframe, start_time, end_time, batch_size=args.batch_size)
        if not batches:
            print("Range is shorter than one period, nothing to plan.")
            return 0

        print(f"Planned {len(batches)} batch(es) of {timeframe.literal}:")
        print(batches_to_frame(batches).to_string())
        return 0
