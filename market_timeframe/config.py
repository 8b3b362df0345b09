"""
Configuration management for market_timeframe
"""
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 1441

DEFAULT_PRELOADED_LITERALS = [
    '1m', '3m', '5m', '15m', '30m', '45m',
    '1h', '2h', '3h', '4h', '8h', '12h', '16h', '20h', '24h',
    '2d', '2D',
]


@dataclass
class TimeframeConfig:
    """Library and CLI settings"""

    # Batch planner
    default_batch_size: Optional[int] = DEFAULT_BATCH_SIZE

    # pytz zone name used for legible formatting (None = machine local time)
    display_timezone: Optional[str] = None

    # Literals resolved into the default registry on import
    preregistered_literals: Optional[List[str]] = field(
        default_factory=lambda: list(DEFAULT_PRELOADED_LITERALS))

    @classmethod
    def from_file(cls, path: Path) -> 'TimeframeConfig':
        """Load configuration from a YAML file, keys absent from the file stay None"""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        config_data = {field_.name: None for field_ in fields(cls)}
        config_data.update(data)
        return cls(**config_data)

    @classmethod
    def from_env(cls) -> 'TimeframeConfig':
        """Load configuration from environment variables, unset ones stay None"""
        config_data = {field_.name: None for field_ in fields(cls)}

        batch_size = os.getenv('MARKET_TIMEFRAME_BATCH_SIZE')
        if batch_size is not None:
            try:
                config_data['default_batch_size'] = int(batch_size)
            except ValueError:
                logger.warning(f"Ignoring non-integer MARKET_TIMEFRAME_BATCH_SIZE={batch_size!r}")

        display_timezone = os.getenv('MARKET_TIMEFRAME_DISPLAY_TZ')
        if display_timezone:
            config_data['display_timezone'] = display_timezone

        preload = os.getenv('MARKET_TIMEFRAME_PRELOAD')
        if preload is not None:
            config_data['preregistered_literals'] = [
                literal.strip() for literal in preload.split(',') if literal.strip()
            ]

        return cls(**config_data)

    @classmethod
    def default(cls) -> 'TimeframeConfig':
        """Create default configuration"""
        return cls()

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> 'TimeframeConfig':
        """
        Load configuration with the following priority:
        1. Specified config file (if provided)
        2. Environment variables
        3. Default values
        """
        config = cls.merge_configs(cls.default(), cls.from_env())

        if config_path:
            config = cls.merge_configs(config, cls.from_file(Path(config_path)))

        return config

    @staticmethod
    def merge_configs(base: 'TimeframeConfig', override: 'TimeframeConfig') -> 'TimeframeConfig':
        """Merge two configurations, with override taking precedence"""
        base_dict = base.__dict__.copy()

        # Only override non-None values
        for key, value in override.__dict__.items():
            if value is not None:
                base_dict[key] = value

        return TimeframeConfig(**base_dict)

    def to_yaml(self, path: Path):
        """Save configuration to a YAML file"""
        with open(path, 'w') as f:
            yaml.dump(self.__dict__, f, default_flow_style=False, sort_keys=True)


_config: Optional[TimeframeConfig] = None


def get_config() -> TimeframeConfig:
    """Process-wide configuration, loaded from defaults and environment on first use"""
    global _config
    if _config is None:
        _config = TimeframeConfig.load()
    return _config


def set_config(config: TimeframeConfig) -> None:
    """Replace the process-wide configuration"""
    global _config
    _config = config
