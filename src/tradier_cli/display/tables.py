"""Rich-backed printers and the parse-or-print-raw renderer plumbing."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Sequence

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from tradier_cli.display.navigator import parse, pretty_json

NO_RESULTS = "No results found."

UNBOUNDED_WIDTH = 100_000

Renderer = Callable[[bytes], None]


def get_console() -> Console:
    return Console(highlight=False)


def emit(text: str = "") -> None:
    get_console().out(text, highlight=False)


def emit_raw(data: bytes) -> None:
    emit(data.decode("utf-8", errors="replace"))


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    if not rows:
        emit(NO_RESULTS)
        return

    table = Table(box=box.ROUNDED, header_style="", highlight=False)
    for header in headers:
        table.add_column(Text(header), justify="left", no_wrap=True, overflow="ignore")
    for row in rows:
        # payload text is never rich markup
        table.add_row(*[Text(str(cell)) for cell in row])
    _print_unwrapped(table)


def render_kv(pairs: Sequence[tuple[str, str]]) -> None:
    table = Table(box=box.ROUNDED, show_header=False, highlight=False)
    table.add_column(no_wrap=True, overflow="ignore")
    table.add_column(no_wrap=True, overflow="ignore")
    for label, value in pairs:
        table.add_row(Text(label), Text(value))
    _print_unwrapped(table)


def _print_unwrapped(table: Table) -> None:
    """Print ``table`` at its natural width, one line per row, even past the console edge."""
    console = get_console()
    natural = Measurement.get(console, console.options.update_width(UNBOUNDED_WIDTH), table)
    table.width = natural.maximum
    console.print(table, crop=False)


def document_renderer(fn: Callable[[dict[str, Any]], None]) -> Renderer:
    """Adapt ``fn(root)`` to raw bytes, printing the bytes verbatim when they are not a JSON object."""

    @wraps(fn)
    def render(data: bytes) -> None:
        root = parse(data)
        if root is None:
            emit_raw(data)
            return
        fn(root)

    return render


def print_result(data: bytes, renderer: Renderer, *, raw: bool = False) -> None:
    if not raw:
        renderer(data)
        return
    try:
        emit(pretty_json(data))
    except ValueError:
        emit_raw(data)
