"""Command line entry points for running and preparing the service."""

import typer
from rich.console import Console
from rich.panel import Panel

console = Console()

app = typer.Typer(
    help="User API CLI - run the service and manage its database",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind (default: config app.host)"),
    port: int | None = typer.Option(None, help="Port to bind (default: config app.port)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the HTTP server with uvicorn."""
    import uvicorn

    from src.user_api.runtime.context import get_config

    config = get_config()
    bind_host = host or config.app.host
    bind_port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Starting User API on {bind_host}:{bind_port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run(
        "src.user_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        access_log=False,  # Requests are logged by the middleware
    )


@app.command(name="init-db")
def init_db() -> None:
    """Create the database tables."""
    from src.user_api.runtime.init_db import init_db as create_tables
    from src.user_api.runtime.context import get_config

    create_tables()
    console.print(
        f"[green]✅ Tables created in[/green] {get_config().database.url}"
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
