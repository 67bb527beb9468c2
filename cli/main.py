"""modgraph CLI: entry-point for workshop dependency resolution.

Usage:
    python cli/main.py --help

Commands:
    resolve            → fetch a workshop item and its dependency graph
    inspect-page       → parse a saved workshop item page
    inspect-scenarios  → parse a saved scenarios page
    serve              → run the HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from modgraph.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import Optional

import typer

from modgraph.config import settings
from modgraph.workshop import (
    HttpxFetcher,
    WorkshopError,
    WorkshopResolver,
    parse_root_page,
    parse_scenarios_page,
)

app = typer.Typer(
    name="modgraph",
    help="Resolve Arma Reforger workshop dependencies.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_file(path: Path) -> str:
    if not path.exists():
        typer.echo(f"❌ File not found: {path}")
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8", errors="replace")


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------
@app.command("resolve")
def resolve(
    url: str = typer.Argument(..., help="Workshop item URL."),
    depth: Optional[int] = typer.Option(
        None, "--depth", "-d", min=0, help="Maximum dependency depth (default from settings)."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Origin for relative dependency links."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Resolve a workshop item's scenarios and transitive dependencies."""
    _configure_logging(verbose)

    with HttpxFetcher() as fetcher:
        resolver = WorkshopResolver(fetcher, base_url=base_url)
        try:
            result = resolver.resolve(url, depth)
        except WorkshopError as exc:
            typer.echo(f"❌ {exc}")
            raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    typer.echo(f"[resolve] Root      : {result.root_id}")
    typer.echo(f"[resolve] Scenarios : {len(result.scenarios)}")
    for scenario in result.scenarios:
        typer.echo(f"  {scenario}")
    typer.echo(f"[resolve] Dependencies : {len(result.dependency_ids)}")
    for dep_id in result.dependency_ids:
        typer.echo(f"  {dep_id}")
    for error in result.errors:
        typer.echo(f"⚠️  {error}")


# ---------------------------------------------------------------------------
# Offline inspection
# ---------------------------------------------------------------------------
@app.command("inspect-page")
def inspect_page(
    path: Path = typer.Argument(..., help="Saved workshop item HTML."),
    hint: Optional[str] = typer.Option(None, "--hint", help="Identifier to fall back on."),
    base_url: str = typer.Option(
        settings.workshop_base_url, "--base-url", help="Origin for relative dependency links."
    ),
) -> None:
    """Parse a saved workshop page and print its id and dependency links."""
    html = _read_file(path)
    try:
        page = parse_root_page(html, id_hint=hint, base_url=base_url)
    except WorkshopError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)

    typer.echo(f"[inspect-page] ID           : {page.identifier}")
    typer.echo(f"[inspect-page] Dependencies : {len(page.dependency_urls)}")
    for dep_url in page.dependency_urls:
        typer.echo(f"  {dep_url}")


@app.command("inspect-scenarios")
def inspect_scenarios(
    path: Path = typer.Argument(..., help="Saved scenarios page HTML."),
) -> None:
    """Parse a saved scenarios page and print the scenario ids."""
    scenarios = parse_scenarios_page(_read_file(path))
    if not scenarios:
        typer.echo("[inspect-scenarios] No scenarios found.")
        return
    for scenario in scenarios:
        typer.echo(scenario)


# ---------------------------------------------------------------------------
# API server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option(settings.api_host, help="Bind address."),
    port: int = typer.Option(settings.api_port, help="Bind port."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    _configure_logging(False)
    uvicorn.run("modgraph.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
