"""Streaming session commands.

These only create the short-lived session id; consuming the event stream is up
to the caller.
"""

from __future__ import annotations

import typer

from tradier_cli._common import api_request, build_typer, get_state, handle_error, run_async, show
from tradier_cli.display import render_session
from tradier_sdk import TradierError

app = build_typer("Create streaming sessions.")


@app.command("market-session", help="Create a market data streaming session.")
def market_session(ctx: typer.Context) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "create_market_session"))
        show(state, data, render_session)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("account-session", help="Create an account events streaming session.")
def account_session(ctx: typer.Context) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "create_account_session"))
        show(state, data, render_session)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)
