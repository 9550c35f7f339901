"""Database and server CLI commands."""

from pathlib import Path

import typer
from rich.panel import Panel
from rich.table import Table

from src.music_api.core.errors import MusicValidationError
from src.music_api.core.services import (
    DbManageService,
    DbSessionService,
    validate_music,
)
from src.music_api.entities.service.music import MusicRepository
from src.music_api.runtime.init_db import init_db

from .utils import console, load_musics_file

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command(name="init")
def init(
    drop: bool = typer.Option(
        False, "--drop", help="Drop existing tables before creating them"
    ),
) -> None:
    """Create the database tables."""
    if drop:
        typer.confirm("This removes every stored music. Continue?", abort=True)
    init_db(drop=drop)
    console.print("[green]✅ Database tables are ready[/green]")


@db_app.command(name="seed")
def seed(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON array of musics"),
) -> None:
    """Bulk-insert musics from a JSON file, in file order."""
    musics = load_musics_file(file)

    for index, music in enumerate(musics):
        try:
            validate_music(music)
        except MusicValidationError as e:
            console.print(f"[red]Entry {index}: {e.message}[/red]")
            raise typer.Exit(1) from e

    database_service = DbSessionService()
    DbManageService(database_service.engine).create_all()
    with database_service.session_scope() as session:
        created = MusicRepository(session).bulk_create(musics)

    table = Table(title=f"Inserted {len(created)} musics")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Artist")
    for music in created:
        table.add_row(str(music.id), music.title or "", music.artist or "")
    console.print(table)


def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind the server to"),
    port: int = typer.Option(8000, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the Music API server.
    """
    import uvicorn

    console.print(
        Panel.fit(
            "[bold green]Starting Music API Server[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.music_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=False,
    )
