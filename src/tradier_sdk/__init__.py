"""Async client, configuration and errors for the Tradier brokerage API."""

from tradier_sdk.client import Client
from tradier_sdk.config import AppConfig, load_config
from tradier_sdk.exceptions import ErrorCode, TradierError

__all__ = ["AppConfig", "Client", "ErrorCode", "TradierError", "load_config"]
