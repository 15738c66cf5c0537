"""Recordings CLI - Catalog commands."""
import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer()
console = Console()


def open_session():
    """Open a session on the configured store.

    Returns the engine too; the caller disposes it when done.
    """
    from recordings.config import get_settings
    from recordings.database import create_db_engine, create_session_factory

    engine = create_db_engine(get_settings().store_url)
    return engine, create_session_factory(engine)()


@app.command()
def albums(
    query: str = typer.Option(None, "--query", "-q", help="Filter by title substring"),
):
    """List albums with their artists and label."""
    from recordings.services.catalog import CatalogService
    from recordings.services.fetchers import StoreError

    engine, db = open_session()
    try:
        try:
            results = CatalogService(db).list_albums(query)
        except StoreError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

        if not results:
            console.print("[yellow]No albums found[/yellow]")
            return

        table = Table(title=f"Albums (Total: {len(results)})")
        table.add_column("ID", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Price", justify="right")
        table.add_column("Label")
        table.add_column("Artists")

        for album in results:
            table.add_row(
                str(album.id),
                album.title,
                f"{album.price:.2f}",
                album.label.name or "[dim]missing[/dim]",
                ", ".join(a.name for a in album.artists),
            )

        console.print(table)
    finally:
        db.close()
        engine.dispose()
