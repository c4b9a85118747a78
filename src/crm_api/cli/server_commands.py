"""Server and database commands."""

import typer
from rich.panel import Panel

from .utils import console


def register_server_commands(app: typer.Typer) -> None:
    app.command(name="serve")(serve)
    app.command(name="init-db")(init_db)


def serve(
    host: str | None = typer.Option(None, help="Host to bind to (defaults to app.host)"),
    port: int | None = typer.Option(None, help="Port to bind to (defaults to app.port)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    Start the HTTP server with uvicorn.
    """
    import uvicorn

    from crm_api.runtime.context import get_config

    app_config = get_config().app
    bind_host = host or app_config.host
    bind_port = port or app_config.port

    console.print(Panel.fit("[bold green]Starting CRM API[/bold green]", border_style="green"))
    console.print(f"[blue]Server will be available at:[/blue] http://{bind_host}:{bind_port}")

    uvicorn.run(
        "crm_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,
    )


def init_db() -> None:
    """Create the customers and users tables."""
    from crm_api.runtime.init_db import init_db as create_tables

    create_tables()
    console.print("[green]Database tables created[/green]")
