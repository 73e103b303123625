"""Content item model for Folio.

Key types:
- Dated: Protocol describing anything the ordering code can work with.
- ContentItem: Frozen dataclass for a blog post or project entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Dated(Protocol):
    """Protocol for records that can be ordered and filtered.

    Only ``publish_date`` is required. ``is_featured`` is read with a
    ``False`` default, so records without the attribute are never featured.
    """

    @property
    def publish_date(self) -> date:
        """Return the publication date of the record."""
        ...


@dataclass(frozen=True)
class ContentItem:
    """Represents a single published item of a collection.

    Attributes:
        slug: URL-friendly identifier.
        title: Human-readable title.
        publish_date: Publication date (day granularity).
        is_featured: Whether the item is highlighted on the home page.
        excerpt: Short summary shown in listings.
        tags: Tags attached to the item.
        updated_date: Optional date of the last revision.
        collection: Name of the collection (e.g., 'posts').
        body: Markdown body, kept verbatim.
        path: Path to the source file, if the item was loaded from disk.
        data: Raw front matter mapping.
    """

    slug: str
    title: str
    publish_date: date
    is_featured: bool = False
    excerpt: str = ""
    tags: tuple[str, ...] = ()
    updated_date: date | None = None
    collection: str = ""
    body: str = field(default="", repr=False)
    path: Path | None = None
    data: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.publish_date, date):
            raise TypeError(
                f"publish_date must be a date, got {type(self.publish_date).__name__}"
            )
        if isinstance(self.publish_date, datetime):
            object.__setattr__(self, "publish_date", self.publish_date.date())
        if not isinstance(self.is_featured, bool):
            raise TypeError(
                f"is_featured must be a bool, got {type(self.is_featured).__name__}"
            )
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))
