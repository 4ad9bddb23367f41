"""Order entry commands: place, change, cancel."""

from __future__ import annotations

import typer

from tradier_cli._common import (
    ACCOUNT_ID_HELP,
    api_request,
    build_typer,
    get_state,
    handle_error,
    parse_key_value,
    require_account_id,
    run_async,
    show,
)
from tradier_cli.display import render_order_result
from tradier_sdk import TradierError

app = build_typer(
    """Trading commands (`place`, `change`, `cancel`).

    Examples:
      tradier trading place --class equity --symbol AAPL --side buy --quantity 10 --type market --duration day
      tradier trading place --class multileg --symbol AAPL --type debit --duration day --price 1.50 \\
        --leg AAPL220617C00270000,buy_to_open,1 --leg AAPL220617C00280000,sell_to_open,1
    """
)


def build_leg_params(legs: list[str]) -> dict[str, str]:
    """Expand ``OPTION_SYMBOL,SIDE,QUANTITY`` legs into Tradier's indexed form fields."""
    params: dict[str, str] = {}
    for index, raw in enumerate(legs):
        parts = [part.strip() for part in raw.split(",")]
        if len(parts) != 3 or not all(parts):
            raise typer.BadParameter(f"--leg must look like OPTION_SYMBOL,SIDE,QUANTITY, got {raw!r}")
        option_symbol, side, quantity = parts
        params[f"option_symbol[{index}]"] = option_symbol
        params[f"side[{index}]"] = side
        params[f"quantity[{index}]"] = quantity
    return params


def build_order_params(
    *,
    order_class: str,
    symbol: str | None = None,
    side: str | None = None,
    quantity: str | None = None,
    order_type: str | None = None,
    duration: str | None = None,
    price: str | None = None,
    stop: str | None = None,
    tag: str | None = None,
    option_symbol: str | None = None,
    preview: bool = False,
    legs: list[str] | None = None,
    extra: list[str] | None = None,
) -> dict[str, str]:
    candidates = {
        "class": order_class,
        "symbol": symbol,
        "side": side,
        "quantity": quantity,
        "type": order_type,
        "duration": duration,
        "price": price,
        "stop": stop,
        "tag": tag,
        "option_symbol": option_symbol,
        "preview": "true" if preview else None,
    }
    params = {key: value for key, value in candidates.items() if value}
    params.update(build_leg_params(legs or []))
    for raw in extra or []:
        key, value = parse_key_value(raw, field_name="--param")
        params[key] = value
    return params


@app.command("place", help="Place a new order.")
def place(
    ctx: typer.Context,
    order_class: str = typer.Option(..., "--class", help="equity|option|multileg|combo|oto|oco|otoco"),
    symbol: str | None = typer.Option(None, "--symbol", help="Symbol (underlying for option orders)."),
    side: str | None = typer.Option(None, "--side", help="buy|sell|sell_short|buy_to_cover|buy_to_open|..."),
    quantity: str | None = typer.Option(None, "--quantity", help="Quantity."),
    order_type: str | None = typer.Option(None, "--type", help="market|limit|stop|stop_limit|debit|credit|even"),
    duration: str | None = typer.Option(None, "--duration", help="day|gtc|pre|post"),
    price: str | None = typer.Option(None, "--price", help="Limit price."),
    stop: str | None = typer.Option(None, "--stop", help="Stop price."),
    tag: str | None = typer.Option(None, "--tag", help="User-defined order tag."),
    option_symbol: str | None = typer.Option(None, "--option-symbol", help="OCC option symbol for single-leg orders."),
    preview: bool = typer.Option(False, "--preview", help="Validate without submitting."),
    legs: list[str] | None = typer.Option(None, "--leg", help="Repeatable OPTION_SYMBOL,SIDE,QUANTITY leg."),
    extra: list[str] | None = typer.Option(None, "--param", help="Repeatable raw KEY=VALUE, e.g. price[1]=2.10"),
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    params = build_order_params(
        order_class=order_class,
        symbol=symbol,
        side=side,
        quantity=quantity,
        order_type=order_type,
        duration=duration,
        price=price,
        stop=stop,
        tag=tag,
        option_symbol=option_symbol,
        preview=preview,
        legs=legs,
        extra=extra,
    )
    try:
        data = run_async(api_request(state, "place_order", require_account_id(state, account_id), params))
        show(state, data, render_order_result)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("change", help="Modify an open order.")
def change(
    ctx: typer.Context,
    order_id: str = typer.Option(..., "--order-id", help="Order ID to modify."),
    order_type: str | None = typer.Option(None, "--type", help="market|limit|stop|stop_limit"),
    duration: str | None = typer.Option(None, "--duration", help="day|gtc|pre|post"),
    price: str | None = typer.Option(None, "--price", help="New limit price."),
    stop: str | None = typer.Option(None, "--stop", help="New stop price."),
    tag: str | None = typer.Option(None, "--tag", help="New user-defined order tag."),
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    candidates = {"type": order_type, "duration": duration, "price": price, "stop": stop, "tag": tag}
    params = {key: value for key, value in candidates.items() if value}
    try:
        data = run_async(api_request(state, "change_order", require_account_id(state, account_id), order_id, params))
        show(state, data, render_order_result)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("cancel", help="Cancel an open order.")
def cancel(
    ctx: typer.Context,
    order_id: str = typer.Option(..., "--order-id", help="Order ID to cancel."),
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "cancel_order", require_account_id(state, account_id), order_id))
        show(state, data, render_order_result)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)
