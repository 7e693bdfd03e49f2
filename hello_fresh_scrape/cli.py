"""Typer CLI for hello-fresh-scrape: extract Hello Fresh recipes to JSON."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import requests
import typer
from rich.console import Console
from rich.markup import escape

from dotenv import load_dotenv
# load .env immediately so subsequent imports (which read settings at import time)
# pick up values from the .env file
load_dotenv()

# Configure top-level logging early so other modules pick it up.
import logging
from hello_fresh_scrape.settings import settings

log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
handlers = [logging.StreamHandler()]
if settings.LOG_FILE:
    handlers.append(logging.FileHandler(settings.LOG_FILE))
logging.basicConfig(
    level=log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    handlers=handlers,
)

# Quiet noisy third-party loggers while keeping our app logs
logging.getLogger("urllib3").setLevel(logging.WARNING)

from hello_fresh_scrape.errors import ScrapeError
from hello_fresh_scrape.ingest.sitemap import collections, is_collection_page
from hello_fresh_scrape.orchestrate import run as orchestrator

app = typer.Typer(add_completion=False)
# stdout carries the JSON, messages go to stderr
console = Console(stderr=True)


def _render(
    list_collections: bool,
    page: str,
    yield_names: bool,
    html_file: Optional[Path],
    check: bool,
) -> str:
    if list_collections:
        return "".join(c + "\n" for c in collections())
    if html_file is not None:
        with open(html_file, "rb") as fh:
            recipes = orchestrator.recipes_from_html(fh, resolve_yields=yield_names)
    else:
        if check and not is_collection_page(page, collections()):
            raise ScrapeError(f"{page} is not a listed recipe collection")
        recipes = orchestrator.scrape_recipes(page, resolve_yields=yield_names)
    return orchestrator.dump_recipes(recipes)


@app.command()
def scrape(
    list_collections: bool = typer.Option(
        False, "-l", "--list", help="List available collections to scrape recipes from."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write output to FILE (default standard output).", metavar="FILE"
    ),
    page: str = typer.Option(settings.RECIPE_PAGE, "-p", "--page", help="Page to scrape recipes from."),
    yield_names: bool = typer.Option(
        False, "-y", "--yield-names", help="Convert recipe IngredientYield IDs to names."
    ),
    html_file: Optional[Path] = typer.Option(
        None, "-f", "--file", help="Read a saved HTML page instead of fetching one."
    ),
    check: bool = typer.Option(
        False, "--check", help="Refuse pages that are not listed in the collections sitemap."
    ),
):
    """Extract recipes from Hello Fresh to JSON output."""
    try:
        data = _render(list_collections, page, yield_names, html_file, check)
    except (ScrapeError, requests.RequestException, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(data, nl=False)
        return
    try:
        output.write_text(data, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/red] writing recipe output: {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
