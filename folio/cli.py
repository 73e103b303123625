"""Command-line interface for Folio.

This module defines the CLI commands using Click framework.
All commands run against the project in the current directory.

Commands:
- list: Print one page of a collection, newest first.
- home: Print the featured sections of the home page.
- tags: Print every tag with its item and page counts.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path

import click

from . import __version__
from .config import ConfigError, SiteConfig, load_config
from .listing import build_home
from .loader import ContentError, SiteContent, load_site
from .models import ContentItem
from .pagination import PaginationError

COLLECTIONS = ("posts", "projects")


def _report_errors(func):
    """Turn content and configuration errors into a failed exit."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ContentError as exc:
            rel_path = _relative(exc.source_path)
            click.echo(click.style("Invalid content:", fg="red", bold=True), err=True)
            click.echo(click.style(f"  File: {rel_path}", fg="yellow"), err=True)
            click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
            raise SystemExit(1) from None
        except ConfigError as exc:
            click.echo(click.style("Invalid configuration:", fg="red", bold=True), err=True)
            click.echo(click.style(f"  Key: {exc.key}", fg="yellow"), err=True)
            click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
            raise SystemExit(1) from None

    return wrapper


def _relative(path: Path) -> Path:
    try:
        return path.relative_to(Path.cwd())
    except ValueError:
        return path


def _load(drafts: bool) -> tuple[SiteConfig, SiteContent]:
    project_root = Path.cwd()
    config = load_config(project_root)
    return config, load_site(project_root, config, include_drafts=drafts)


def _format_item(item: ContentItem) -> str:
    line = f"{item.publish_date.isoformat()}  {item.title}"
    if item.is_featured:
        line += "  " + click.style("[featured]", fg="cyan")
    return line


@click.group()
@click.version_option(version=__version__, prog_name="folio")
@click.option("--verbose", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Folio content listing tool."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="list")
@click.argument("collection", type=click.Choice(COLLECTIONS))
@click.option("--page", "page_number", type=int, default=1, show_default=True, help="Page to show")
@click.option("--featured", is_flag=True, help="Only featured items")
@click.option("--drafts", is_flag=True, help="Include draft content")
@_report_errors
def list_items(collection: str, page_number: int, featured: bool, drafts: bool):
    """Print one page of COLLECTION, newest first."""
    config, content = _load(drafts)
    items = content.get(collection)
    if featured:
        items = items.featured()
    try:
        page = items.page(page_number, config.page_size_for(collection))
    except PaginationError as exc:
        raise click.BadParameter(str(exc), param_hint="--page") from exc

    if not page.items:
        click.echo("No items.")
        return
    for item in page:
        click.echo(_format_item(item))
    click.echo(f"Page {page.number} of {page.total_pages}")


@cli.command()
@click.option("--drafts", is_flag=True, help="Include draft content")
@_report_errors
def home(drafts: bool):
    """Print the featured sections of the home page."""
    config, content = _load(drafts)
    view = build_home(content.posts, content.projects, config)
    click.echo(click.style(view.title, bold=True))
    if view.hero and view.hero.title:
        click.echo(view.hero.title)
    for heading, items in (
        ("Featured projects", view.featured_projects),
        ("Featured posts", view.featured_posts),
    ):
        if not items:
            continue
        click.echo("")
        click.echo(click.style(heading, bold=True))
        for item in items:
            click.echo(f"{item.publish_date.isoformat()}  {item.title}")


@cli.command()
@click.option("--drafts", is_flag=True, help="Include draft content")
@_report_errors
def tags(drafts: bool):
    """Print every tag with its item and page counts."""
    config, content = _load(drafts)
    tagged = content.posts.tags()
    if not tagged:
        click.echo("No tags.")
        return
    page_size = config.page_size_for("posts")
    for tag in sorted(tagged):
        items = tagged[tag]
        click.echo(f"{tag}  {len(items)} items, {items.total_pages(page_size)} pages")


def main():
    """Entry point for the CLI application."""
    cli()
