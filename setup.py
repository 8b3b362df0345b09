from setuptools import setup, find_packages

setup(
    name="market_timeframe",
    version="0.1.0",
    packages=find_packages(include=["market_timeframe", "market_timeframe.*"]),
    install_requires=[
        "pandas>=2.0",
        "numpy",
        "pytz",
        "pyyaml",
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'hypothesis>=6.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'market-timeframe=market_timeframe.cli.main:main',
        ],
    },
    description="Timeframe literals, period alignment and batch planning for market data",
    keywords="market data, timeframe, candles, time range",
    python_requires=">=3.8",
)
