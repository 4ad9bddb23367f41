"""Renderers for watchlist listings and single watchlists."""

from __future__ import annotations

from typing import Any

from tradier_cli.display.navigator import as_row_set, descend, first_present, string_field
from tradier_cli.display.tables import document_renderer, emit, render_table


@document_renderer
def render_watchlists(root: dict[str, Any]) -> None:
    wl = descend(root, "watchlists")
    if wl is None:
        emit("No watchlists found.")
        return

    rows = [[string_field(w, "id"), string_field(w, "name")] for w in as_row_set(wl.get("watchlist"))]
    render_table(["ID", "NAME"], rows)


@document_renderer
def render_watchlist(root: dict[str, Any]) -> None:
    # create/update/add-symbols sometimes answer with the bare watchlist object
    wl = first_present(
        lambda: descend(root, "watchlist"),
        lambda: root if string_field(root, "id") else None,
    )
    if wl is None:
        emit("Watchlist updated.")
        return

    emit(f"Watchlist: {string_field(wl, 'name')} ({string_field(wl, 'id')})")

    items = descend(wl, "items")
    if items is None:
        return

    symbols = as_row_set(items.get("item"))
    if symbols:
        emit()
        render_table(["SYMBOL"], [[string_field(s, "symbol")] for s in symbols])
