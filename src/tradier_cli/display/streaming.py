"""Renderer for streaming session creation responses."""

from __future__ import annotations

from tradier_cli.display.navigator import descend, parse, string_field
from tradier_cli.display.tables import emit_raw, render_kv


def render_session(data: bytes) -> None:
    s = descend(parse(data), "stream")
    if s is None:
        emit_raw(data)
        return

    render_kv(
        [
            ("Session ID", string_field(s, "sessionid")),
            ("URL", string_field(s, "url")),
        ]
    )
