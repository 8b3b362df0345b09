"""
Unit tests for the market-timeframe command-line interface.
"""

import pytest

from market_timeframe.cli.main import MarketTimeframeCLI
from market_timeframe.config import set_config

SAMPLE_MS = 1_724_553_312_842


class TestTimeframeCommand:

    def test_parse(self, cli, capsys):
        assert cli.run(['timeframe', 'parse', '1m', '2D']) == 0
        out = capsys.readouterr().out
        assert '1m\t60000\t{"1m": 60000}' in out
        assert '2D\t172800000' in out

    def test_parse_invalid_literal(self, cli, capsys):
        assert cli.run(['timeframe', 'parse', '5x']) == 1
        assert 'Error' in capsys.readouterr().out

    def test_align(self, cli, capsys):
        assert cli.run(['timeframe', 'align', '1D', '--epoch', str(SAMPLE_MS)]) == 0
        out = capsys.readouterr().out
        assert 'Timeframe: 1D (86400000 ms)' in out
        assert '1724544000000' in out
        assert '2024-08-25 @ 00:00:00.000Z' in out


class TestBatchesCommand:

    def test_plan(self, cli, capsys):
        code = cli.run(['batches', '--timeframe', '1m', '--from', '2024-01-01',
                        '--to', '2024-01-01T00:10:00', '--batch-size', '4'])
        assert code == 0
        out = capsys.readouterr().out
        assert 'Planned 3 batch(es) of 1m' in out
        assert '1704067800000' in out

    def test_epoch_bounds(self, cli, capsys):
        code = cli.run(['batches', '--timeframe', '1m', '--from', '0', '--to', '600000', '--batch-size', '4'])
        assert code == 0
        assert 'Planned 3 batch(es)' in capsys.readouterr().out

    def test_far_future_bounds(self, cli, capsys):
        code = cli.run(['batches', '--timeframe', '1D', '--from', '3000-01-01',
                        '--to', '3000-01-03', '--batch-size', '1'])
        assert code == 0
        out = capsys.readouterr().out
        assert 'Planned 2 batch(es) of 1D' in out
        assert '32503680000000' in out

    def test_empty_range(self, cli, capsys):
        assert cli.run(['batches', '--timeframe', '1h', '--from', '0', '--to', '60000']) == 0
        assert 'nothing to plan' in capsys.readouterr().out


class TestDateCommand:

    def test_legible(self, cli, capsys):
        assert cli.run(['date', 'legible', str(SAMPLE_MS), '--iso', '--tz', 'America/New_York']) == 0
        assert capsys.readouterr().out.strip() == \
            '1724553312842 8/24/2024 @ 10:35:12 PM ≍ 2024-08-25 @ 02:35:12.842Z'

    def test_legible_uses_config_file(self, cli, capsys, tmp_path):
        path = tmp_path / "timeframe.yaml"
        path.write_text("display_timezone: UTC\n")
        assert cli.run(['--config', str(path), 'date', 'legible', str(SAMPLE_MS)]) == 0
        assert capsys.readouterr().out.strip() == '1724553312842 8/25/2024 @ 2:35:12 AM'

    def test_midnight(self, cli, capsys):
        assert cli.run(['date', 'midnight', '2024-08-25T02:35:12Z']) == 0
        assert capsys.readouterr().out.strip() == '2024-08-25T00:00:00+00:00'

    def test_invalid_date(self, cli, capsys):
        assert cli.run(['date', 'midnight', 'garbage']) == 1
        assert 'Error' in capsys.readouterr().out

    def test_month_days(self, cli, capsys):
        assert cli.run(['date', 'month-days']) == 0


class TestMainParser:

    def test_missing_command(self, cli):
        assert cli.run([]) == 2


@pytest.fixture
def cli():
    yield MarketTimeframeCLI()
    set_config(None)


pytestmark = [pytest.mark.unit, pytest.mark.cli]
