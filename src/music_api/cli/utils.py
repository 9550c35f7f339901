"""Shared utilities for CLI commands."""

import json
from pathlib import Path

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console

from src.music_api.entities.service.music import Music

# Initialize Rich console for colored output
console = Console()

_musics_adapter = TypeAdapter(list[Music])


def load_musics_file(path: Path) -> list[Music]:
    """Read a JSON array of music objects (camelCase or snake_case keys)."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Could not read {path}: {e}[/red]")
        raise typer.Exit(1) from e

    try:
        return _musics_adapter.validate_python(raw)
    except ValidationError as e:
        console.print(f"[red]{path} does not contain a list of musics:[/red]\n{e}")
        raise typer.Exit(1) from e
