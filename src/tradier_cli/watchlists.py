"""Watchlist commands."""

from __future__ import annotations

import typer

from tradier_cli._common import api_request, build_typer, get_state, handle_error, run_async, show
from tradier_cli.display import render_generic, render_watchlist, render_watchlists
from tradier_sdk import TradierError

app = build_typer("Create, edit and view watchlists.")


@app.command("list", help="List watchlists.")
def list_watchlists(ctx: typer.Context) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_watchlists"))
        show(state, data, render_watchlists)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("get", help="Show one watchlist and its symbols.")
def get_watchlist(
    ctx: typer.Context,
    watchlist_id: str = typer.Option(..., "--id", help="Watchlist ID."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_watchlist", watchlist_id))
        show(state, data, render_watchlist)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("create", help="Create a watchlist.")
def create_watchlist(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Watchlist name."),
    symbols: str = typer.Option(..., "--symbols", help="Comma-separated symbols."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "create_watchlist", name, symbols))
        show(state, data, render_watchlist)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("update", help="Rename a watchlist or replace its symbols.")
def update_watchlist(
    ctx: typer.Context,
    watchlist_id: str = typer.Option(..., "--id", help="Watchlist ID."),
    name: str = typer.Option(..., "--name", help="Watchlist name."),
    symbols: str | None = typer.Option(None, "--symbols", help="Comma-separated symbols."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "update_watchlist", watchlist_id, name, symbols=symbols))
        show(state, data, render_watchlist)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("delete", help="Delete a watchlist.")
def delete_watchlist(
    ctx: typer.Context,
    watchlist_id: str = typer.Option(..., "--id", help="Watchlist ID."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "delete_watchlist", watchlist_id))
        show(state, data, render_generic)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("add-symbols", help="Add symbols to a watchlist.")
def add_symbols(
    ctx: typer.Context,
    watchlist_id: str = typer.Option(..., "--id", help="Watchlist ID."),
    symbols: str = typer.Option(..., "--symbols", help="Comma-separated symbols to add."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "add_watchlist_symbols", watchlist_id, symbols))
        show(state, data, render_watchlist)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("remove-symbol", help="Remove one symbol from a watchlist.")
def remove_symbol(
    ctx: typer.Context,
    watchlist_id: str = typer.Option(..., "--id", help="Watchlist ID."),
    symbol: str = typer.Option(..., "--symbol", help="Symbol to remove."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "remove_watchlist_symbol", watchlist_id, symbol))
        show(state, data, render_watchlist)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)
