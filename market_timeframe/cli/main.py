#!/usr/bin/env python3
"""
Market Timeframe CLI

Usage:
    market-timeframe timeframe parse 1m 4h 2D
    market-timeframe timeframe align 15m --epoch 1724553312842
    market-timeframe batches --timeframe 1m --from 2024-01-01 --to 2024-01-03 --batch-size 1440
    market-timeframe date legible 1724553312842 --iso --tz America/New_York
"""
import sys
import traceback
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, RawDescriptionHelpFormatter

from market_timeframe.cli.commands import BatchesCommand, DateCommand, TimeframeCommand
from market_timeframe.config import TimeframeConfig, set_config


class MarketTimeframeCLI:
    """Main CLI application class"""

    def __init__(self):
        self.commands = {
            cmd.name: cmd() for cmd in [
                TimeframeCommand,
                BatchesCommand,
                DateCommand,
            ]
        }

    def create_parser(self) -> ArgumentParser:
        """Create the main argument parser with all subcommands"""
        parser = ArgumentParser(
            prog='market-timeframe',
            description='Timeframe literals, period alignment and batch planning',
            epilog="""
Examples:
  Show durations:
    market-timeframe timeframe parse 1m 4h 2D

  Plan 1-minute fetch batches of one day each:
    market-timeframe batches --timeframe 1m --from 2024-01-01 --to 2024-01-03 --batch-size 1440
            """,
            formatter_class=RawDescriptionHelpFormatter
        )

        # Global options
        parser.add_argument('--verbose', '-v', action='store_true',
                            help='Enable verbose logging')
        parser.add_argument('--config', type=str, default=None,
                            help='Path to a YAML configuration file')

        subparsers = parser.add_subparsers(
            dest='command',
            required=True,
            help='Available commands',
            metavar='COMMAND'
        )

        for command in self.commands.values():
            cmd_parser = subparsers.add_parser(
                command.name,
                help=command.help,
                formatter_class=ArgumentDefaultsHelpFormatter
            )
            command.add_arguments(cmd_parser)

        return parser

    def run(self, args=None) -> int:
        """Run the CLI application"""
        parser = self.create_parser()

        try:
            parsed_args = parser.parse_args(args)
        except SystemExit as e:
            return e.code

        if parsed_args.command in self.commands:
            try:
                if parsed_args.config:
                    set_config(TimeframeConfig.load(parsed_args.config))
                return self.commands[parsed_args.command].handle(parsed_args)
            except KeyboardInterrupt:
                print("\n⚠️  Operation cancelled by user")
                return 130
            except Exception as e:
                if parsed_args.verbose:
                    traceback.print_exc()
                else:
                    print(f"❌ Error: {e}")
                return 1

        parser.print_help()
        return 1


def main() -> int:
    """Main entry point"""
    cli = MarketTimeframeCLI()
    return cli.run()


if __name__ == '__main__':
    sys.exit(main())
