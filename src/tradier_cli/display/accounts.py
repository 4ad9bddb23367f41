"""Renderers for /v1/accounts payloads: balances, positions, orders, history, gain/loss, groups."""

from __future__ import annotations

from typing import Any, NamedTuple

from tradier_cli.display.formatting import fixed, money, pct, short_date, whole
from tradier_cli.display.navigator import (
    as_row_set,
    descend,
    first_present,
    maybe_row_set,
    number_field,
    string_field,
)
from tradier_cli.display.occ import humanize_option_symbol
from tradier_cli.display.tables import document_renderer, emit, render_kv, render_table

BUYING_POWER_FALLBACK_KEYS = ("pdt", "margin", "cash")
MULTILEG_FOOTNOTE = "  * = multileg order. Use 'tradier accounts order --order-id <id>' to view all legs."


@document_renderer
def render_balance(root: dict[str, Any]) -> None:
    b = descend(root, "balances")
    if b is None:
        emit("No balance data found.")
        return

    render_kv(
        [
            ("Account", string_field(b, "account_number")),
            ("Type", string_field(b, "account_type")),
            ("Total Equity", money(number_field(b, "total_equity"))),
            ("Total Cash", money(number_field(b, "total_cash"))),
            ("Market Value", money(number_field(b, "market_value"))),
            ("Open P/L", money(number_field(b, "open_pl"))),
            ("Close P/L", money(number_field(b, "close_pl"))),
            ("Stock Long Value", money(number_field(b, "stock_long_value"))),
            ("Option Long Value", money(number_field(b, "option_long_value"))),
            ("Option Short Value", money(number_field(b, "option_short_value"))),
            ("Short Market Value", money(number_field(b, "short_market_value"))),
            ("Current Requirement", money(number_field(b, "current_requirement"))),
            ("Uncleared Funds", money(number_field(b, "uncleared_funds"))),
            ("Pending Cash", money(number_field(b, "pending_cash"))),
            ("Pending Orders", string_field(b, "pending_orders_count")),
        ]
    )

    bp = buying_power(b)
    if bp is None:
        return

    pairs = [
        ("Stock Buying Power", money(number_field(bp, "stock_buying_power"))),
        ("Option Buying Power", money(number_field(bp, "option_buying_power"))),
    ]
    day_trade = number_field(bp, "day_trade_buying_power")
    if day_trade != 0:
        pairs.append(("Day Trade Buying Power", money(day_trade)))
    pairs.append(("Fed Call", money(number_field(bp, "fed_call"))))
    pairs.append(("Maintenance Call", money(number_field(bp, "maintenance_call"))))
    short_value = number_field(bp, "stock_short_value")
    if short_value != 0:
        pairs.append(("Stock Short Value", money(short_value)))

    emit()
    emit("Buying Power:")
    render_kv(pairs)


def buying_power(balances: dict[str, Any]) -> dict[str, Any] | None:
    """Buying power lives under the account's own type key; fall back to pdt, margin, cash."""
    keys = (string_field(balances, "account_type"), *BUYING_POWER_FALLBACK_KEYS)
    return first_present(*[(lambda key=key: descend(balances, key)) for key in keys])


@document_renderer
def render_gain_loss(root: dict[str, Any]) -> None:
    gl = descend(root, "gainloss")
    if gl is None:
        emit("No gain/loss data found.")
        return

    rows = [
        [
            string_field(p, "symbol"),
            string_field(p, "quantity"),
            money(number_field(p, "cost")),
            money(number_field(p, "proceeds")),
            money(number_field(p, "gain_loss")),
            pct(number_field(p, "gain_loss_percent")),
            short_date(string_field(p, "open_date")),
            short_date(string_field(p, "close_date")),
        ]
        for p in as_row_set(gl.get("closed_position"))
    ]
    render_table(["SYMBOL", "QTY", "COST", "PROCEEDS", "GAIN/LOSS", "GAIN%", "OPEN DATE", "CLOSE DATE"], rows)


@document_renderer
def render_historical_balances(root: dict[str, Any]) -> None:
    balances = maybe_row_set(root.get("balances"))
    if balances is None:
        emit("No historical balance data found.")
        return

    rows = [[short_date(string_field(b, "date")), money(number_field(b, "value"))] for b in balances]
    render_table(["DATE", "VALUE"], rows)


class EventDetail(NamedTuple):
    symbol: str = ""
    quantity: str = ""
    price: str = ""
    description: str = ""


def _read_detail(detail: dict[str, Any]) -> EventDetail:
    quantity = number_field(detail, "quantity")
    return EventDetail(
        symbol=humanize_option_symbol(string_field(detail, "symbol")),
        quantity=whole(quantity) if quantity != 0 else "",
        price=money(number_field(detail, "price")),
        description=string_field(detail, "description"),
    )


def event_detail(event: dict[str, Any]) -> EventDetail:
    """Read the detail object stored under the key named by the event's own ``type``."""
    event_type = string_field(event, "type")
    if not event_type:
        return EventDetail()
    detail = descend(event, event_type)
    if detail is None:
        return EventDetail()
    return _read_detail(detail)


@document_renderer
def render_history(root: dict[str, Any]) -> None:
    h = descend(root, "history")
    if h is None:
        emit("No history data found.")
        return

    rows = []
    for event in as_row_set(h.get("event")):
        detail = event_detail(event)
        rows.append(
            [
                short_date(string_field(event, "date")),
                string_field(event, "type"),
                detail.symbol,
                detail.quantity,
                detail.price,
                money(number_field(event, "amount")),
                detail.description,
            ]
        )
    render_table(["DATE", "TYPE", "SYMBOL", "QTY", "PRICE", "AMOUNT", "DESCRIPTION"], rows)


@document_renderer
def render_order(root: dict[str, Any]) -> None:
    o = descend(root, "order")
    if o is None:
        emit("No order data found.")
        return

    render_kv(
        [
            ("Order ID", string_field(o, "id")),
            ("Class", string_field(o, "class")),
            ("Symbol", string_field(o, "symbol")),
            ("Option Symbol", humanize_option_symbol(string_field(o, "option_symbol"))),
            ("Side", string_field(o, "side")),
            ("Quantity", string_field(o, "quantity")),
            ("Type", string_field(o, "type")),
            ("Price", fixed(number_field(o, "price"))),
            ("Stop", fixed(number_field(o, "stop_price"))),
            ("Status", string_field(o, "status")),
            ("Duration", string_field(o, "duration")),
            ("Avg Fill Price", money(number_field(o, "avg_fill_price"))),
            ("Exec Quantity", string_field(o, "exec_quantity")),
            ("Remaining", string_field(o, "remaining_quantity")),
            ("Created", short_date(string_field(o, "create_date"))),
        ]
    )

    legs = as_row_set(o.get("leg"))
    if not legs:
        return

    emit()
    emit("Legs:")
    rows = [
        [
            humanize_option_symbol(string_field(leg, "option_symbol")),
            string_field(leg, "side"),
            string_field(leg, "quantity"),
            string_field(leg, "type"),
            fixed(number_field(leg, "price")),
            string_field(leg, "status"),
            money(number_field(leg, "avg_fill_price")),
        ]
        for leg in legs
    ]
    render_table(["OPTION SYMBOL", "SIDE", "QTY", "TYPE", "PRICE", "STATUS", "AVG FILL"], rows)


def order_price(order: dict[str, Any]) -> str:
    """Limit, stop, or ``limit/stop``; blank when neither is set."""
    parts = [fixed(value) for value in (number_field(order, "price"), number_field(order, "stop_price")) if value != 0]
    return "/".join(parts)


def order_option_symbol(order: dict[str, Any]) -> tuple[str, bool]:
    """Humanized option symbol for a list row and whether it stands in for several legs."""
    symbol = humanize_option_symbol(string_field(order, "option_symbol"))
    if symbol:
        return symbol, False
    legs = as_row_set(order.get("leg"))
    if not legs:
        return "", False
    symbol = humanize_option_symbol(string_field(legs[0], "option_symbol"))
    if len(legs) > 1:
        return f"{symbol} *", True
    return symbol, False


@document_renderer
def render_orders(root: dict[str, Any]) -> None:
    o = descend(root, "orders")
    if o is None:
        emit("No orders found.")
        return

    rows = []
    show_footnote = False
    for order in as_row_set(o.get("order")):
        option_symbol, multileg = order_option_symbol(order)
        show_footnote = show_footnote or multileg
        rows.append(
            [
                string_field(order, "id"),
                string_field(order, "class"),
                string_field(order, "symbol"),
                option_symbol,
                string_field(order, "side"),
                string_field(order, "quantity"),
                string_field(order, "type"),
                order_price(order),
                string_field(order, "status"),
                string_field(order, "duration"),
                money(number_field(order, "avg_fill_price")),
                short_date(string_field(order, "create_date")),
            ]
        )
    render_table(
        ["ID", "CLASS", "SYMBOL", "OPTION SYMBOL", "SIDE", "QTY", "TYPE", "PRICE", "STATUS", "DURATION", "AVG FILL", "CREATED"],
        rows,
    )

    if show_footnote:
        emit(MULTILEG_FOOTNOTE)


@document_renderer
def render_positions(root: dict[str, Any]) -> None:
    p = descend(root, "positions")
    if p is None:
        emit("No positions found.")
        return

    rows = [
        [
            string_field(pos, "symbol"),
            string_field(pos, "quantity"),
            money(number_field(pos, "cost_basis")),
            short_date(string_field(pos, "date_acquired")),
        ]
        for pos in as_row_set(p.get("position"))
    ]
    render_table(["SYMBOL", "QTY", "COST BASIS", "DATE ACQUIRED"], rows)


@document_renderer
def render_position_groups(root: dict[str, Any]) -> None:
    groups = first_present(
        lambda: maybe_row_set(root.get("position_groups")),
        lambda: _nested_row_set(root, "positiongroups", "positiongroup"),
    )
    if groups is None:
        emit("No position groups found.")
        return

    rows = [[string_field(g, "id"), string_field(g, "label")] for g in groups]
    render_table(["ID", "LABEL"], rows)


@document_renderer
def render_position_group(root: dict[str, Any]) -> None:
    group = first_present(
        lambda: descend(root, "position_group"),
        lambda: descend(root, "positiongroup"),
        lambda: root if string_field(root, "id") or string_field(root, "label") else None,
    )
    if group is None:
        emit("Position group updated.")
        return

    render_kv([("ID", string_field(group, "id")), ("Label", string_field(group, "label"))])


def _nested_row_set(root: dict[str, Any], envelope: str, key: str) -> list[dict[str, Any]] | None:
    container = descend(root, envelope)
    if container is None:
        return None
    return maybe_row_set(container.get(key))
