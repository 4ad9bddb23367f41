"""Renderer for order placement, modification and cancellation responses."""

from __future__ import annotations

from tradier_cli.display.navigator import descend, parse, string_field
from tradier_cli.display.tables import emit_raw, render_kv


def render_order_result(data: bytes) -> None:
    # anything other than an {"order": {...}} envelope is shown as the API sent it
    o = descend(parse(data), "order")
    if o is None:
        emit_raw(data)
        return

    pairs = [
        ("Order ID", string_field(o, "id")),
        ("Status", string_field(o, "status")),
    ]
    partner_id = string_field(o, "partner_id")
    if partner_id:
        pairs.append(("Partner ID", partner_id))
    render_kv(pairs)
