"""Account commands: balances, history, orders, positions and position groups."""

from __future__ import annotations

import typer

from tradier_cli._common import (
    ACCOUNT_ID_HELP,
    api_request,
    build_typer,
    get_state,
    handle_error,
    require_account_id,
    run_async,
    show,
)
from tradier_cli.display import (
    render_balance,
    render_gain_loss,
    render_generic,
    render_historical_balances,
    render_history,
    render_order,
    render_orders,
    render_position_group,
    render_position_groups,
    render_positions,
)
from tradier_sdk import TradierError

app = build_typer("Account balances, positions, orders and history.")
position_groups_app = build_typer("Manage position groups.")
app.add_typer(position_groups_app, name="position-groups")


@app.command("balance", help="Show account balances and buying power.")
def balance(
    ctx: typer.Context,
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_balances", require_account_id(state, account_id)))
        show(state, data, render_balance)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("gainloss", help="Show realized gain/loss for closed positions.")
def gain_loss(
    ctx: typer.Context,
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
    page: str | None = typer.Option(None, "--page", help="Page number for pagination."),
    limit: str | None = typer.Option(None, "--limit", help="Number of results to return."),
    sort_by: str | None = typer.Option(None, "--sort-by", help="closedate|opendate|symbol|gainloss"),
    sort: str | None = typer.Option(None, "--sort", help="asc|desc"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "get_gain_loss",
                require_account_id(state, account_id),
                page=page,
                limit=limit,
                sort_by=sort_by,
                sort=sort,
            )
        )
        show(state, data, render_gain_loss)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("historical-balances", help="Show account value over a period.")
def historical_balances(
    ctx: typer.Context,
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
    period: str | None = typer.Option(None, "--period", help="WEEK|MONTH|YTD|YEAR|YEAR_3|YEAR_5|ALL"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(state, "get_historical_balances", require_account_id(state, account_id), period=period)
        )
        show(state, data, render_historical_balances)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("history", help="Show account activity.")
def history(
    ctx: typer.Context,
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
    page: str | None = typer.Option(None, "--page", help="Page number for pagination."),
    limit: str | None = typer.Option(None, "--limit", help="Number of events to return."),
    activity_type: str | None = typer.Option(
        None,
        "--type",
        help="trade|option|ach|wire|dividend|fee|tax|journal|check|transfer|adjustment",
    ),
    start: str | None = typer.Option(None, "--start", help="Start date (YYYY-MM-DD)."),
    end: str | None = typer.Option(None, "--end", help="End date (YYYY-MM-DD)."),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "get_history",
                require_account_id(state, account_id),
                page=page,
                limit=limit,
                activity_type=activity_type,
                start=start,
                end=end,
            )
        )
        show(state, data, render_history)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("order", help="Show one order and its legs.")
def order(
    ctx: typer.Context,
    order_id: str = typer.Option(..., "--order-id", help="Order ID."),
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
    include_tags: str | None = typer.Option(None, "--include-tags", help="Include user-defined tags: true|false"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "get_order",
                require_account_id(state, account_id),
                order_id,
                include_tags=include_tags,
            )
        )
        show(state, data, render_order)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("orders", help="List orders for the account.")
def orders(
    ctx: typer.Context,
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
    page: str | None = typer.Option(None, "--page", help="Page number for pagination."),
    limit: str | None = typer.Option(None, "--limit", help="Number of orders to return."),
    include_tags: str | None = typer.Option(None, "--include-tags", help="Include user-defined tags: true|false"),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "get_orders",
                require_account_id(state, account_id),
                page=page,
                limit=limit,
                include_tags=include_tags,
            )
        )
        show(state, data, render_orders)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@app.command("positions", help="List open positions.")
def positions(
    ctx: typer.Context,
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_positions", require_account_id(state, account_id)))
        show(state, data, render_positions)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@position_groups_app.command("list", help="List position groups.")
def list_position_groups(
    ctx: typer.Context,
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(api_request(state, "get_position_groups", require_account_id(state, account_id)))
        show(state, data, render_position_groups)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@position_groups_app.command("create", help="Create a position group.")
def create_position_group(
    ctx: typer.Context,
    label: str = typer.Option(..., "--label", help="Position group label."),
    symbols: str = typer.Option(..., "--symbols", help="Comma-separated symbols."),
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "create_position_group",
                require_account_id(state, account_id),
                label=label,
                symbols=symbols,
            )
        )
        show(state, data, render_position_group)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@position_groups_app.command("update", help="Replace a position group label and symbols.")
def update_position_group(
    ctx: typer.Context,
    group_id: str = typer.Option(..., "--group-id", help="Position group ID."),
    label: str = typer.Option(..., "--label", help="Position group label."),
    symbols: str = typer.Option(..., "--symbols", help="Comma-separated symbols."),
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(
                state,
                "update_position_group",
                require_account_id(state, account_id),
                group_id,
                label=label,
                symbols=symbols,
            )
        )
        show(state, data, render_position_group)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)


@position_groups_app.command("delete", help="Delete a position group.")
def delete_position_group(
    ctx: typer.Context,
    group_id: str = typer.Option(..., "--group-id", help="Position group ID."),
    account_id: str | None = typer.Option(None, "--account-id", help=ACCOUNT_ID_HELP),
) -> None:
    state = get_state(ctx)
    try:
        data = run_async(
            api_request(state, "delete_position_group", require_account_id(state, account_id), group_id)
        )
        show(state, data, render_generic)
    except TradierError as exc:
        handle_error(exc, json_output=state.json_output)
