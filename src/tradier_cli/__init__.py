"""Command-line interface for the Tradier brokerage API."""
