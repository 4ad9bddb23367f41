"""Root Typer app and command registration."""

from __future__ import annotations

from pydantic import ValidationError
import typer

from tradier_cli import accounts, markets, streaming, trading, user, watchlists
from tradier_cli._common import CLIState, build_typer, configure_logging, handle_error
from tradier_sdk import ErrorCode, TradierError, load_config

app = build_typer(
    """Command-line interface for the Tradier brokerage API.

    Examples:
      tradier accounts balance
      tradier markets quotes --symbols AAPL,MSFT
      tradier --json accounts positions --account-id 6YA00001
    """
)

app.add_typer(accounts.app, name="accounts")
app.add_typer(markets.app, name="markets")
app.add_typer(trading.app, name="trading")
app.add_typer(watchlists.app, name="watchlists")
app.add_typer(user.app, name="user")
app.add_typer(streaming.app, name="streaming")


@app.callback()
def root(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Print the raw API response as indented JSON."),
    sandbox: bool = typer.Option(False, "--sandbox", help="Use the sandbox environment and its credentials."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests to stderr."),
) -> None:
    try:
        cfg = load_config()
    except ValidationError as exc:
        handle_error(
            TradierError(
                ErrorCode.INVALID_ARGS,
                f"invalid configuration: {exc.errors()[0].get('msg', exc)}",
                details={"errors": len(exc.errors())},
                suggestion="Fix config.json or the TRADIER_* environment variables.",
            ),
            json_output=json_output,
        )
        return
    configure_logging(cfg, verbose=verbose)
    ctx.obj = CLIState(
        config=cfg,
        json_output=json_output or cfg.output.default_format == "json",
        sandbox=sandbox or cfg.sandbox,
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
