"""Recordings CLI - Main entry point."""
import typer
from rich.console import Console
from rich.table import Table

from recordings.cli import catalog

app = typer.Typer(
    name="recordings",
    help="Recordings - album, artist and label catalog",
    add_completion=True,
)

console = Console()

app.add_typer(catalog.app, name="catalog", help="Catalog browsing commands")


@app.command()
def version():
    """Show version information."""
    from recordings import __version__
    console.print(f"Recordings v{__version__}")


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Listen address"),
    port: int = typer.Option(None, "--port", help="Listen port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API server."""
    import uvicorn
    from recordings.config import LISTEN_HOST, LISTEN_PORT

    uvicorn.run(
        "recordings.main:app",
        host=host or LISTEN_HOST,
        port=port or LISTEN_PORT,
        reload=reload,
    )


@app.command("init-db")
def init_db():
    """Create the catalog tables on the configured store."""
    from sqlalchemy.exc import SQLAlchemyError
    from recordings.config import get_settings
    from recordings.database import create_db_engine, init_db as create_tables

    engine = create_db_engine(get_settings().store_url)
    try:
        create_tables(engine)
    except SQLAlchemyError as e:
        console.print(f"[red]Failed to create tables: {e}[/red]")
        raise typer.Exit(1)
    finally:
        engine.dispose()

    console.print("[green]Tables created[/green]")


@app.command()
def status():
    """Check system status."""
    from sqlalchemy import text
    from sqlalchemy.exc import SQLAlchemyError
    from recordings.config import get_settings, LISTEN_HOST, LISTEN_PORT
    from recordings.database import create_db_engine

    settings = get_settings()

    table = Table(title="Recordings Status")
    table.add_column("Component", style="cyan")
    table.add_column("Status", style="green")

    engine = create_db_engine(settings.store_url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        table.add_row("Database", "Connected")
    except SQLAlchemyError as e:
        table.add_row("Database", f"[red]Error: {e}[/red]")
    finally:
        engine.dispose()

    table.add_row("Listen address", f"{LISTEN_HOST}:{LISTEN_PORT}")
    table.add_row("Log level", settings.log_level)

    console.print(table)


if __name__ == "__main__":
    app()
