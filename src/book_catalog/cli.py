"""Command line interface for book catalog."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .domain.entities import Catalog
from .exceptions import BookCatalogError
from .models.config import Config, create_default_config, load_config
from .testing.fixtures import build_sample_catalog

console = Console()
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _books_table(title: str, books, max_rows: int) -> Table:
    """Render books as a rich table, truncated to ``max_rows`` rows."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Author")
    table.add_column("Price", justify="right", style="green")

    for index, book in enumerate(books[:max_rows], start=1):
        table.add_row(str(index), book.title, book.author, str(book.price))

    if len(books) > max_rows:
        table.caption = f"... and {len(books) - max_rows} more"
    return table


def _catalog_report(catalog: Catalog, author: Optional[str]) -> dict:
    report = {
        "name": catalog.name,
        "books": [book.to_dict() for book in catalog],
        "titles": catalog.titles(),
        "total_price": str(catalog.total_price()),
        "cheapest": [book.to_dict() for book in catalog.cheapest()],
    }
    if author is not None:
        report["author"] = author
        report["by_author"] = [book.to_dict() for book in catalog.find_by_author(author)]
    return report


@click.group()
@click.version_option(package_name="book-catalog")
@click.option('--verbose', is_flag=True, help='Verbose output')
def cli(verbose: bool):
    """Build and query in-memory book catalogs."""
    _setup_logging(verbose)


@cli.command()
@click.option('--count', type=click.IntRange(min=0), help='Number of books to generate')
@click.option('--seed', type=int, help='Random seed for reproducible samples')
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option('--author', help='Also list the books by this author')
@click.option('--json', 'as_json', is_flag=True, help='Print a JSON report instead of tables')
def sample(
    count: Optional[int],
    seed: Optional[int],
    config: Optional[Path],
    author: Optional[str],
    as_json: bool
):
    """Generate a sample catalog and show its aggregates."""
    try:
        cfg = load_config(config) if config else Config.default()
        if count is not None:
            cfg.sample.count = count
        if seed is not None:
            cfg.sample.seed = seed
        cfg.validate()

        catalog = build_sample_catalog(cfg.sample)
        logger.debug("Built %s with %d books", catalog.name, len(catalog))

        if as_json:
            click.echo(json.dumps(_catalog_report(catalog, author), indent=2))
            return

        books = list(catalog)
        if cfg.display.show_table:
            console.print(_books_table(catalog.name, books, cfg.display.max_rows))

        cheapest = catalog.cheapest()
        summary = [
            f"Books: {len(catalog)}",
            f"Total price: {catalog.total_price()}",
        ]
        if cheapest:
            summary.append(
                f"Cheapest ({cheapest[0].price}): " + "; ".join(str(book) for book in cheapest)
            )
        else:
            summary.append("Cheapest: -")
        console.print(Panel("\n".join(summary), title="Summary", expand=False))

        if author is not None:
            matches = catalog.find_by_author(author)
            if matches:
                console.print(_books_table(f"Books by {author}", matches, cfg.display.max_rows))
            else:
                console.print(f"[yellow]No books by {author}[/yellow]")

    except BookCatalogError as e:
        console.print(f"\n[red]Error: {e}[/red]")
        sys.exit(1)


@cli.command('init-config')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init_config(path: Path, force: bool):
    """Write a default configuration file to PATH."""
    if path.exists() and not force:
        console.print(f"[red]Error: {path} already exists (use --force to overwrite)[/red]")
        sys.exit(1)
    create_default_config(path)
    console.print(f"[green]Wrote default configuration to {path}[/green]")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
