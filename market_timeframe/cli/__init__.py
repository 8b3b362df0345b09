"""
Command-line interface for market_timeframe
"""
