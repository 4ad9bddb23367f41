"""Renderer for the authenticated user's profile."""

from __future__ import annotations

from typing import Any

from tradier_cli.display.navigator import as_row_set, descend, string_field
from tradier_cli.display.tables import document_renderer, emit, render_table


@document_renderer
def render_profile(root: dict[str, Any]) -> None:
    p = descend(root, "profile")
    if p is None:
        emit("No profile data found.")
        return

    emit(f"User: {string_field(p, 'name')} ({string_field(p, 'id')})")
    emit()

    accounts = as_row_set(p.get("account"))
    if not accounts:
        return

    rows = [
        [
            string_field(a, "account_number"),
            string_field(a, "classification"),
            string_field(a, "status"),
            string_field(a, "type"),
            string_field(a, "option_level"),
            string_field(a, "day_trader"),
        ]
        for a in accounts
    ]
    render_table(["ACCOUNT", "CLASSIFICATION", "STATUS", "TYPE", "OPTION LEVEL", "DAY TRADER"], rows)
