"""Main CLI application module."""

import typer

from .account_commands import accounts_app
from .server_commands import register_server_commands

app = typer.Typer(
    help="CRM API command line: run the server and inspect stored accounts",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_server_commands(app)
app.add_typer(accounts_app, name="accounts")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
