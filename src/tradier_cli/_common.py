"""Shared CLI context, rendering, and API request helpers."""

from __future__ import annotations

import asyncio
from difflib import get_close_matches
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any

import click
from rich.console import Console
from rich.text import Text
import typer
from typer.core import TyperGroup

from tradier_cli.display import Renderer, print_result
from tradier_sdk import AppConfig, Client, ErrorCode, TradierError

HELP_CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 110,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

ACCOUNT_ID_HELP = "Account ID (defaults to config value)."


@dataclass
class CLIState:
    config: AppConfig
    json_output: bool
    sandbox: bool


class SuggestionGroup(TyperGroup):
    """Click command group that appends close-match suggestions for unknown commands."""

    def resolve_command(
        self,
        ctx: click.Context,
        args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as exc:
            if args:
                attempted = args[0]
                matches = get_close_matches(attempted, list(self.list_commands(ctx)), n=3, cutoff=0.45)
                if matches:
                    exc.message = f"{exc.message}\n\nDid you mean: {', '.join(matches)}"
            raise


def build_typer(help_text: str) -> typer.Typer:
    """Create Typer apps with consistent help ergonomics across command groups."""

    return typer.Typer(
        help=help_text,
        cls=SuggestionGroup,
        no_args_is_help=True,
        rich_markup_mode="markdown",
        context_settings=HELP_CONTEXT_SETTINGS,
    )


def get_state(ctx: typer.Context) -> CLIState:
    value = ctx.obj
    if not isinstance(value, CLIState):
        raise RuntimeError("CLI context not initialized")
    return value


def run_async(awaitable: Any) -> Any:
    return asyncio.run(awaitable)


def configure_logging(cfg: AppConfig, *, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.logging.level.upper(), logging.WARNING)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if cfg.logging.log_file is not None:
        cfg.logging.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(cfg.logging.log_file))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)


def require_account_id(state: CLIState, account_id: str | None) -> str:
    resolved = (account_id or "").strip() or state.config.account_id(state.sandbox)
    if not resolved:
        raise TradierError(
            ErrorCode.ACCOUNT_REQUIRED,
            "--account-id is required",
            suggestion="Pass --account-id or set api.production_account_id / api.sandbox_account_id in config.",
        )
    return resolved


async def api_request(state: CLIState, method: str, *args: Any, **kwargs: Any) -> bytes:
    """Open a client for the active environment and call one endpoint method by name."""
    api_key = state.config.api_key(state.sandbox)
    if not api_key:
        env = "sandbox" if state.sandbox else "production"
        raise TradierError(
            ErrorCode.CONFIG_MISSING,
            f"no {env} API key configured",
            details={"environment": env},
            suggestion=f"Set api.{env}_api_key in config.json or TRADIER_API_{env.upper()}_API_KEY.",
        )
    async with Client(
        state.config.base_url(state.sandbox),
        api_key,
        timeout_seconds=state.config.runtime.request_timeout_seconds,
    ) as client:
        return await getattr(client, method)(*args, **kwargs)


def show(state: CLIState, data: bytes, renderer: Renderer) -> None:
    print_result(data, renderer, raw=state.json_output)


def parse_key_value(raw: str, *, field_name: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise typer.BadParameter(f"{field_name} must look like KEY=VALUE, got {raw!r}")
    return key, value.strip()


def handle_error(exc: TradierError, *, json_output: bool) -> None:
    suggestion = exc.suggestion or _default_suggestion(exc.code)
    error_payload = exc.to_error_payload()
    if suggestion and "suggestion" not in error_payload:
        error_payload["suggestion"] = suggestion
    if json_output:
        payload = {"ok": False, "error": error_payload}
        print(json.dumps(payload, default=str, separators=(",", ":")))
    else:
        console = Console(stderr=True, highlight=False)
        console.print(Text(f"Error: {exc.message}", style="red"))
        if suggestion:
            console.print(Text(suggestion))
    raise typer.Exit(code=exc.exit_code)


def _default_suggestion(code: ErrorCode) -> str | None:
    suggestions = {
        ErrorCode.INVALID_ARGS: "Run `tradier --help` or `<command> --help` for valid usage.",
        ErrorCode.TIMEOUT: "Retry the command or increase `runtime.request_timeout_seconds` in config.",
        ErrorCode.UNAUTHORIZED: "Check the API key for the selected environment (--sandbox).",
    }
    return suggestions.get(code)
