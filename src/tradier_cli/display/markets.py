"""Renderers for /v1/markets payloads."""

from __future__ import annotations

from typing import Any

from tradier_cli.display.formatting import fixed, pct, short_date, signed
from tradier_cli.display.navigator import (
    as_row_set,
    as_string_sequence,
    descend,
    maybe_row_set,
    number_field,
    string_field,
)
from tradier_cli.display.occ import humanize_option_symbol
from tradier_cli.display.tables import document_renderer, emit, render_kv, render_table

OHLCV_HEADERS = ["OPEN", "HIGH", "LOW", "CLOSE", "VOLUME"]


@document_renderer
def render_quotes(root: dict[str, Any]) -> None:
    q = descend(root, "quotes")
    if q is None:
        emit("No quote data found.")
        return

    rows = [
        [
            string_field(quote, "symbol"),
            fixed(number_field(quote, "last")),
            signed(number_field(quote, "change")),
            pct(number_field(quote, "change_percentage")),
            string_field(quote, "volume"),
            fixed(number_field(quote, "bid")),
            fixed(number_field(quote, "ask")),
            fixed(number_field(quote, "open")),
            fixed(number_field(quote, "high")),
            fixed(number_field(quote, "low")),
        ]
        for quote in as_row_set(q.get("quote"))
    ]
    render_table(["SYMBOL", "LAST", "CHANGE", "CHG%", "VOLUME", "BID", "ASK", "OPEN", "HIGH", "LOW"], rows)


@document_renderer
def render_option_chain(root: dict[str, Any]) -> None:
    o = descend(root, "options")
    if o is None:
        emit("No options chain data found.")
        return

    rows = [
        [
            humanize_option_symbol(string_field(opt, "symbol")),
            string_field(opt, "option_type"),
            fixed(number_field(opt, "strike")),
            fixed(number_field(opt, "last")),
            fixed(number_field(opt, "bid")),
            fixed(number_field(opt, "ask")),
            string_field(opt, "volume"),
            string_field(opt, "open_interest"),
        ]
        for opt in as_row_set(o.get("option"))
    ]
    render_table(["OPTION", "TYPE", "STRIKE", "LAST", "BID", "ASK", "VOLUME", "OPEN INT"], rows)


def _scalar_or_sequence(value: Any) -> list[str]:
    # a single expiration/strike arrives as a bare scalar instead of a one-element array
    if isinstance(value, (str, int, float)):
        return as_string_sequence([value])
    return as_string_sequence(value)


@document_renderer
def render_option_expirations(root: dict[str, Any]) -> None:
    exp = descend(root, "expirations")
    if exp is None:
        emit("No expiration data found.")
        return

    dates = _scalar_or_sequence(exp.get("date"))
    if not dates:
        dates = [short_date(string_field(e, "date")) for e in as_row_set(exp.get("expiration"))]

    render_table(["EXPIRATION"], [[d] for d in dates])


@document_renderer
def render_option_strikes(root: dict[str, Any]) -> None:
    s = descend(root, "strikes")
    if s is None:
        emit("No strikes data found.")
        return

    render_table(["STRIKE"], [[strike] for strike in _scalar_or_sequence(s.get("strike"))])


@document_renderer
def render_option_lookup(root: dict[str, Any]) -> None:
    symbols = _lookup_rows(root)
    if symbols is None:
        emit("No options symbols found.")
        return

    rows = [
        [
            humanize_option_symbol(string_field(sym, "symbol")),
            string_field(sym, "rootSymbol"),
            fixed(number_field(sym, "strike")),
            short_date(string_field(sym, "expiration_date")),
            string_field(sym, "option_type"),
        ]
        for sym in symbols
    ]
    render_table(["OPTION", "ROOT", "STRIKE", "EXPIRATION", "TYPE"], rows)


def _lookup_rows(root: dict[str, Any]) -> list[dict[str, Any]] | None:
    container = descend(root, "symbols")
    if container is not None and "option" in container:
        return maybe_row_set(container.get("option"))
    return maybe_row_set(root.get("symbols"))


@document_renderer
def render_price_history(root: dict[str, Any]) -> None:
    h = descend(root, "history")
    if h is None:
        emit("No historical data found.")
        return

    rows = [[short_date(string_field(day, "date")), *_ohlcv(day)] for day in as_row_set(h.get("day"))]
    render_table(["DATE", *OHLCV_HEADERS], rows)


@document_renderer
def render_time_sales(root: dict[str, Any]) -> None:
    s = descend(root, "series")
    if s is None:
        emit("No time and sales data found.")
        return

    rows = [[string_field(tick, "timestamp"), *_ohlcv(tick)] for tick in as_row_set(s.get("data"))]
    render_table(["TIMESTAMP", *OHLCV_HEADERS], rows)


def _ohlcv(bar: dict[str, Any]) -> list[str]:
    return [
        fixed(number_field(bar, "open")),
        fixed(number_field(bar, "high")),
        fixed(number_field(bar, "low")),
        fixed(number_field(bar, "close")),
        string_field(bar, "volume"),
    ]


@document_renderer
def render_calendar(root: dict[str, Any]) -> None:
    cal = descend(root, "calendar")
    if cal is None:
        emit("No calendar data found.")
        return

    days = descend(cal, "days")
    if days is None:
        emit("No calendar days found.")
        return

    rows = []
    for day in as_row_set(days.get("day")):
        session = descend(day, "open")
        rows.append(
            [
                short_date(string_field(day, "date")),
                string_field(day, "status"),
                string_field(day, "description"),
                string_field(session, "start"),
                string_field(session, "end"),
            ]
        )
    render_table(["DATE", "STATUS", "DESCRIPTION", "OPEN", "CLOSE"], rows)


@document_renderer
def render_clock(root: dict[str, Any]) -> None:
    c = descend(root, "clock")
    if c is None:
        emit("No clock data found.")
        return

    render_kv(
        [
            ("Date", string_field(c, "date")),
            ("State", string_field(c, "state")),
            ("Description", string_field(c, "description")),
            ("Next State", string_field(c, "next_state")),
            ("Next Change", string_field(c, "next_change")),
        ]
    )


@document_renderer
def render_easy_to_borrow(root: dict[str, Any]) -> None:
    sec = descend(root, "securities")
    if sec is None:
        emit("No ETB data found.")
        return

    render_table(["SYMBOL"], [[string_field(s, "symbol")] for s in as_row_set(sec.get("security"))])


@document_renderer
def render_securities(root: dict[str, Any]) -> None:
    sec = descend(root, "securities")
    if sec is None:
        emit("No securities found.")
        return

    rows = [
        [
            string_field(s, "symbol"),
            string_field(s, "exchange"),
            string_field(s, "type"),
            string_field(s, "description"),
        ]
        for s in as_row_set(sec.get("security"))
    ]
    render_table(["SYMBOL", "EXCHANGE", "TYPE", "DESCRIPTION"], rows)
