"""User profile commands."""

from __future__ import annotations

import typer

from tradier_cli._common import api_request, build_typer, get_state, handle_error, run_async, show
from tradier_cli.display import render_profile
from tradier_sdk import TradierError

app = build_typer("User profile.")


@app.command("profile", help="Show the user profile and linked accounts.")
def profile(ctx: typer.Context) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_profile"))
        show(state, data, render_profile)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)
