"""Market data commands."""

from __future__ import annotations

import typer

from tradier_cli._common import api_request, build_typer, get_state, handle_error, run_async, show
from tradier_cli.display import (
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
from tradier_sdk import TradierError

app = build_typer("Quotes, option chains, history and market status.")

GREEKS_HELP = "Include greeks: true|false"


@app.command("quotes", help="Snapshot quotes for one or more symbols.")
def quotes(
    ctx: typer.Context,
    symbols: str = typer.Option(..., "--symbols", help="Comma-separated symbols. Example: AAPL,MSFT"),
    greeks: str | None = typer.Option(None, "--greeks", help=GREEKS_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_quotes", symbols, greeks=greeks))
        show(state, data, render_quotes)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("post-quotes", help="Quotes via form POST, for long symbol lists.")
def post_quotes(
    ctx: typer.Context,
    symbols: str = typer.Option(..., "--symbols", help="Comma-separated symbols."),
    greeks: str | None = typer.Option(None, "--greeks", help=GREEKS_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "post_quotes", symbols, greeks=greeks))
        show(state, data, render_quotes)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("options-chains", help="Option chain for one underlying and expiration.")
def options_chains(
    ctx: typer.Context,
    symbol: str = typer.Option(..., "--symbol", help="Underlying symbol."),
    expiration: str = typer.Option(..., "--expiration", help="Expiration date YYYY-MM-DD."),
    greeks: str | None = typer.Option(None, "--greeks", help=GREEKS_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_option_chains", symbol, expiration, greeks=greeks))
        show(state, data, render_option_chain)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("options-expirations", help="List option expirations.")
def options_expirations(
    ctx: typer.Context,
    symbol: str = typer.Option(..., "--symbol", help="Underlying symbol."),
    include_all_roots: str | None = typer.Option(None, "--include-all-roots", help="true|false"),
    strikes: str | None = typer.Option(None, "--strikes", help="Include strikes: true|false"),
    contract_size: str | None = typer.Option(None, "--contract-size", help="Include contract size: true|false"),
    expiration_type: str | None = typer.Option(None, "--expiration-type", help="Include expiration type: true|false"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "get_option_expirations",
                symbol,
                include_all_roots=include_all_roots,
                strikes=strikes,
                contract_size=contract_size,
                expiration_type=expiration_type,
            )
        )
        show(state, data, render_option_expirations)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("options-strikes", help="List option strikes for an expiration.")
def options_strikes(
    ctx: typer.Context,
    symbol: str = typer.Option(..., "--symbol", help="Underlying symbol."),
    expiration: str = typer.Option(..., "--expiration", help="Expiration date YYYY-MM-DD."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_option_strikes", symbol, expiration))
        show(state, data, render_option_strikes)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("options-lookup", help="Look up option symbols for an underlying.")
def options_lookup(
    ctx: typer.Context,
    underlying: str = typer.Option(..., "--underlying", help="Underlying symbol."),
    strike: str | None = typer.Option(None, "--strike", help="Strike price filter."),
    expiration: str | None = typer.Option(None, "--expiration", help="Expiration date filter YYYY-MM-DD."),
    option_type: str | None = typer.Option(None, "--type", help="call|put"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "get_option_lookup",
                underlying,
                strike=strike,
                expiration=expiration,
                option_type=option_type,
            )
        )
        show(state, data, render_option_lookup)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("history", help="Historical OHLCV bars.")
def history(
    ctx: typer.Context,
    symbol: str = typer.Option(..., "--symbol", help="Security symbol."),
    interval: str | None = typer.Option(None, "--interval", help="daily|weekly|monthly"),
    start: str | None = typer.Option(None, "--start", help="Start date YYYY-MM-DD."),
    end: str | None = typer.Option(None, "--end", help="End date YYYY-MM-DD."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_price_history", symbol, interval=interval, start=start, end=end))
        show(state, data, render_price_history)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("timesales", help="Intraday time and sales bars.")
def timesales(
    ctx: typer.Context,
    symbol: str = typer.Option(..., "--symbol", help="Security symbol."),
    interval: str | None = typer.Option(None, "--interval", help="tick|1min|5min|15min"),
    start: str | None = typer.Option(None, "--start", help="Start datetime YYYY-MM-DD HH:MM."),
    end: str | None = typer.Option(None, "--end", help="End datetime YYYY-MM-DD HH:MM."),
    session_filter: str | None = typer.Option(None, "--session-filter", help="open|all"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "get_time_sales",
                symbol,
                interval=interval,
                start=start,
                end=end,
                session_filter=session_filter,
            )
        )
        show(state, data, render_time_sales)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("calendar", help="Market calendar for a month.")
def calendar(
    ctx: typer.Context,
    month: str | None = typer.Option(None, "--month", help="Month (1-12)."),
    year: str | None = typer.Option(None, "--year", help="Year (2000-2050)."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_calendar", month=month, year=year))
        show(state, data, render_calendar)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("clock", help="Current market state.")
def clock(ctx: typer.Context) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_clock"))
        show(state, data, render_clock)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("etb", help="Easy-to-borrow securities.")
def etb(ctx: typer.Context) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_easy_to_borrow"))
        show(state, data, render_easy_to_borrow)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("lookup", help="Look up securities by symbol or name prefix.")
def lookup(
    ctx: typer.Context,
    query: str = typer.Option(..., "--query", help="Search query."),
    exchanges: str | None = typer.Option(None, "--exchanges", help="Exchange codes, e.g. Q,N"),
    types: str | None = typer.Option(None, "--types", help="stock,etf,index"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "lookup_symbols", query, exchanges=exchanges, types=types))
        show(state, data, render_securities)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("search", help="Search companies by name.")
def search(
    ctx: typer.Context,
    query: str = typer.Option(..., "--query", help="Search query."),
    indexes: str | None = typer.Option(None, "--indexes", help="Include indexes: true|false"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "search_companies", query, indexes=indexes))
        show(state, data, render_securities)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)
