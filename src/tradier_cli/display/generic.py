"""Fallback renderer for endpoints without a dedicated view (deletes, status acks)."""

from __future__ import annotations

from typing import Any, Callable

from tradier_cli.display.navigator import display_value, first_present, string_field
from tradier_cli.display.tables import document_renderer, emit, render_kv


def _enveloped_status(root: dict[str, Any]) -> str | None:
    """``{"position_group": {"status": "ok"}}`` style acknowledgements."""
    if len(root) != 1:
        return None
    (envelope,) = root.values()
    return string_field(envelope, "status") or None


def _status_line(root: dict[str, Any]) -> bool:
    status = first_present(
        lambda: string_field(root, "status") or None,
        lambda: _enveloped_status(root),
    )
    if not status:
        return False
    emit(f"Status: {status}")
    return True


def _field_dump(root: dict[str, Any]) -> bool:
    if not root:
        return False
    render_kv([(str(key), display_value(value)) for key, value in root.items()])
    return True


def _ok(_: dict[str, Any]) -> bool:
    emit("OK")
    return True


# Tried in order; the first strategy that prints something wins.
GENERIC_STRATEGIES: tuple[Callable[[dict[str, Any]], bool], ...] = (_status_line, _field_dump, _ok)


@document_renderer
def render_generic(root: dict[str, Any]) -> None:
    for strategy in GENERIC_STRATEGIES:
        if strategy(root):
            return
