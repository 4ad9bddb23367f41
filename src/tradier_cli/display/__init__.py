"""Turn raw Tradier API responses into tables and key/value blocks."""

from tradier_cli.display.accounts import (
    render_balance,
    render_gain_loss,
    render_historical_balances,
    render_history,
    render_order,
    render_orders,
    render_position_group,
    render_position_groups,
    render_positions,
)
from tradier_cli.display.generic import render_generic
from tradier_cli.display.markets import (
    render_calendar,
    render_clock,
    render_easy_to_borrow,
    render_option_chain,
    render_option_expirations,
    render_option_lookup,
    render_option_strikes,
    render_price_history,
    render_quotes,
    render_securities,
    render_time_sales,
)
from tradier_cli.display.occ import humanize_option_symbol
from tradier_cli.display.streaming import render_session
from tradier_cli.display.tables import Renderer, print_result, render_kv, render_table
from tradier_cli.display.trading import render_order_result
from tradier_cli.display.user import render_profile
from tradier_cli.display.watchlists import render_watchlist, render_watchlists

__all__ = [
    "Renderer",
    "humanize_option_symbol",
    "print_result",
    "render_balance",
    "render_calendar",
    "render_clock",
    "render_easy_to_borrow",
    "render_gain_loss",
    "render_generic",
    "render_historical_balances",
    "render_history",
    "render_kv",
    "render_option_chain",
    "render_option_expirations",
    "render_option_lookup",
    "render_option_strikes",
    "render_order",
    "render_order_result",
    "render_orders",
    "render_position_group",
    "render_position_groups",
    "render_positions",
    "render_price_history",
    "render_profile",
    "render_quotes",
    "render_securities",
    "render_session",
    "render_table",
    "render_time_sales",
    "render_watchlist",
    "render_watchlists",
]
