"""Listing views assembled from content collections.

These are the derived views the page layer renders: the home page sections,
the paginated index of a collection and the paginated per-tag indexes.
Empty sections are represented by empty lists, never by errors.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .collections import ContentCollection
from .config import Hero, SiteConfig, Subscribe
from .models import ContentItem
from .pagination import ListingPage
from .utils import slugify


@dataclass
class HomeView:
    """Sections of the home page.

    Attributes:
        title: Site title.
        hero: Hero section, if configured.
        subscribe: Subscribe form, if configured.
        featured_projects: Featured projects, newest first.
        featured_posts: Featured posts, newest first.
    """

    title: str
    hero: Hero | None = None
    subscribe: Subscribe | None = None
    featured_projects: list[ContentItem] = field(default_factory=list)
    featured_posts: list[ContentItem] = field(default_factory=list)


def build_home(
    posts: Iterable[ContentItem],
    projects: Iterable[ContentItem],
    config: SiteConfig,
) -> HomeView:
    """Build the home page view.

    Args:
        posts: All blog posts.
        projects: All projects.
        config: Site configuration.

    Returns:
        HomeView with the featured sections sorted newest first.
    """
    return HomeView(
        title=config.title,
        hero=config.hero,
        subscribe=config.subscribe,
        featured_projects=list(ContentCollection(projects).sorted().featured()),
        featured_posts=list(ContentCollection(posts).sorted().featured()),
    )


def build_index(
    items: Iterable[ContentItem], page_size: int, base_url: str
) -> list[ListingPage[ContentItem]]:
    """Build every page of a collection index.

    Args:
        items: Items of the collection.
        page_size: Items per page.
        base_url: URL of the first index page, e.g. '/blog'.

    Returns:
        ListingPages sorted newest first; empty when there are no items.
    """
    return ContentCollection(items).pages(page_size, base_url=base_url)


def build_tag_index(
    posts: Iterable[ContentItem], page_size: int, base_url: str = "/tags"
) -> dict[str, list[ListingPage[ContentItem]]]:
    """Build the paginated index of every tag.

    Tags are keyed by slug, so spellings that share a slug ("Web Dev" and
    "web-dev") are merged into one index under '<base_url>/<slug>/'.
    """
    by_slug: dict[str, list[ContentItem]] = {}
    for item in posts:
        for slug in dict.fromkeys(slugify(tag) for tag in item.tags):
            by_slug.setdefault(slug, []).append(item)
    base = base_url.rstrip("/")
    return {
        slug: ContentCollection(items).pages(page_size, base_url=f"{base}/{slug}")
        for slug, items in sorted(by_slug.items())
    }
