"""Read-only account inspection commands."""

import asyncio
from collections.abc import Sequence
from enum import Enum

import typer
from loguru import logger
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from crm_api.core.exceptions import AccountError
from crm_api.core.services.accounts import AccountUseCases, build_account_use_cases
from crm_api.core.services.database.db_session import DbSessionService
from crm_api.core.services.side_effects import build_side_effects
from crm_api.entities.account import Account
from crm_api.entities.kinds import ACCOUNT_KINDS
from crm_api.runtime.context import get_config

from .utils import console

accounts_app = typer.Typer(help="Inspect stored customers and users")


class KindName(str, Enum):
    customers = "customers"
    users = "users"


def _render(title: str, accounts: Sequence[Account]) -> None:
    if not accounts:
        console.print(f"[yellow]No {title.lower()} found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Email", style="blue")
    table.add_column("First Name", style="magenta")
    table.add_column("Last Name", style="magenta")
    table.add_column("Confirmed", style="yellow")
    table.add_column("Active", style="yellow")

    for account in accounts:
        table.add_row(
            account.id,
            account.email,
            account.first_name,
            account.last_name,
            "yes" if account.email_confirmed else "no",
            "yes" if account.is_active else "no",
        )

    console.print(table)
    console.print(f"\n[green]Found {len(accounts)} {title.lower()}[/green]")


def _run(kind_name: KindName, action) -> Sequence[Account]:
    """Run ``action(use_cases)`` inside a database session.

    Exits with code 1 when the database cannot be queried.
    """
    kind = ACCOUNT_KINDS[kind_name.value]
    side_effects = build_side_effects(get_config().side_effects.backend)
    database_service = DbSessionService()
    try:
        with database_service.get_session() as session:
            use_cases: AccountUseCases = build_account_use_cases(kind, session, side_effects)
            return asyncio.run(action(use_cases))
    except SQLAlchemyError as e:
        logger.bind(error_type=type(e).__name__).error("Account query failed: {}", e)
        console.print("[red]Database query failed.[/red] Create the tables with: crm-api init-db")
        raise typer.Exit(code=1) from e
    finally:
        database_service.engine.dispose()


@accounts_app.command("list")
def list_accounts(
    kind: KindName = typer.Argument(..., help="Which accounts to list"),
) -> None:
    """List every stored account of one kind, newest first."""
    accounts = _run(kind, lambda use_cases: use_cases.list.handle())
    _render(kind.value.capitalize(), accounts)


@accounts_app.command("search")
def search_accounts(
    kind: KindName = typer.Argument(..., help="Which accounts to search"),
    query: str = typer.Argument(..., help="Text matched against names and email"),
) -> None:
    """Search accounts by first name, last name or email."""
    try:
        accounts = _run(kind, lambda use_cases: use_cases.search.handle(query))
    except AccountError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from e
    _render(kind.value.capitalize(), accounts)
