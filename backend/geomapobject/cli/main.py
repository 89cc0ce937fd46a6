from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape as escape_markup

from geomapobject import __version__
from geomapobject.autozoom import MAX_ZOOM, resolve_strategy
from geomapobject.config import AppConfig
from geomapobject.errors import MapObjectError
from geomapobject.mapobject import MapObject
from geomapobject.validation import parse_markers


app = typer.Typer(help="mapobject CLI - map definition (YAML/JSON) -> static URL, script URL, JSON")
console = Console()

MapFile = typer.Argument(..., exists=True, dir_okay=False, help="Map definition (YAML or JSON)")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def load_definition(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise typer.BadParameter(f"Cannot parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter(f"{path} must contain a mapping of map fields")
    return data


def _build_map(path: Path) -> MapObject:
    cfg = AppConfig.load()
    fields = load_definition(path)
    if not fields.get("key") and cfg.api_key:
        fields["key"] = cfg.api_key
    try:
        return MapObject.from_fields(fields, cfg.endpoints)
    except MapObjectError as exc:
        console.print(f"[red]Invalid map[/red] ({type(exc).__name__}):", escape_markup(str(exc)))
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show CLI version."""
    rprint(f"mapobject {__version__}")


@app.command("static-url")
def static_url(
    path: Path = MapFile,
    raw: bool = typer.Option(False, "--raw", help="Separate parameters with '&' instead of '&amp;'"),
) -> None:
    """Print the static map image URL."""
    typer.echo(_build_map(path).static_map_url(escape=not raw))


@app.command("javascript-url")
def javascript_url(
    path: Path = MapFile,
    raw: bool = typer.Option(False, "--raw", help="Separate parameters with '&' instead of '&amp;'"),
) -> None:
    """Print the URL that loads the dynamic maps script."""
    typer.echo(_build_map(path).javascript_url(escape=not raw))


@app.command("json")
def json_payload(path: Path = MapFile) -> None:
    """Print the client side JSON (API key removed)."""
    typer.echo(_build_map(path).json())


@app.command()
def autozoom(
    path: Path = MapFile,
    max_zoom: Optional[int] = typer.Option(
        None, help="Maximum zoom level (defaults to the file's autozoom, else 21)"
    ),
) -> None:
    """Suggest a zoom level and center for the markers in a map definition."""
    fields = load_definition(path)
    if max_zoom is None:
        max_zoom = fields.get("autozoom", MAX_ZOOM)
    try:
        markers = parse_markers(fields.get("markers"))
        zoom, center = resolve_strategy(max_zoom).calculate_zoom_and_center(markers)
    except MapObjectError as exc:
        console.print(f"[red]Autozoom failed[/red] ({type(exc).__name__}):", escape_markup(str(exc)))
        raise typer.Exit(code=1)
    if not markers:
        console.print("[yellow]No markers[/yellow]: using the fallback center.")
    typer.echo(f"zoom={zoom} center={center}")


def _main(argv: list[str] | None = None) -> int:
    try:
        app()
        return 0
    except Exception as exc:  # noqa: BLE001
        console.print(f"[red]Error:[/red] {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(_main(sys.argv[1:]))
