from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from .models import ContentItem
from .ordering import filter_featured, sort_by_date
from .pagination import ListingPage, iter_pages, paginate, total_pages


class ContentCollection(Sequence[ContentItem]):
    """Lightweight helper for working with lists of content items in calling code."""

    def __init__(self, items: Iterable[ContentItem]):
        self._items = list(items)
        # Newest-first view, reused by latest()/page()/pages()
        self._sorted_cache: ContentCollection | None = None

    def __iter__(self) -> Iterator[ContentItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, item):
        return self._items[item]

    def featured(self) -> ContentCollection:
        return ContentCollection(filter_featured(self._items))

    def with_tag(self, tag: str) -> ContentCollection:
        return ContentCollection(i for i in self._items if tag in i.tags)

    def sorted(self, reverse: bool = True) -> ContentCollection:
        """Sort items by publication date.

        Items published on the same day keep their current relative order.

        Args:
            reverse: If True (default), newest first. If False, oldest first.

        Returns:
            A new ContentCollection with sorted items.
        """
        if not reverse:
            return ContentCollection(sort_by_date(self._items, reverse=False))
        if self._sorted_cache is None:
            self._sorted_cache = ContentCollection(sort_by_date(self._items))
        return self._sorted_cache

    def latest(self, count: int = 5) -> ContentCollection:
        return ContentCollection(self.sorted()[:count])

    def total_pages(self, page_size: int) -> int:
        return total_pages(self._items, page_size)

    def page(
        self, number: int, page_size: int, base_url: str | None = None
    ) -> ListingPage[ContentItem]:
        """Return one page of the newest-first listing."""
        return paginate(self.sorted()._items, page_size, number, base_url=base_url)

    def pages(
        self, page_size: int, base_url: str | None = None
    ) -> list[ListingPage[ContentItem]]:
        return list(iter_pages(self.sorted()._items, page_size, base_url=base_url))

    def tags(self) -> TagCollection:
        """Group items by tag, keeping each tag's items in collection order."""
        mapping: dict[str, list[ContentItem]] = {}
        for item in self._items:
            for tag in item.tags:
                mapping.setdefault(tag, []).append(item)
        return TagCollection(mapping)

    def __repr__(self) -> str:  # pragma: no cover - for debugging
        return f"ContentCollection({len(self._items)} items)"


class TagCollection(Mapping[str, ContentCollection]):
    """Mapping of tag name to ContentCollection with convenience helpers."""

    def __init__(self, mapping: Mapping[str, Iterable[ContentItem]]):
        self._mapping = {k: ContentCollection(v) for k, v in mapping.items()}

    def __getitem__(self, key: str) -> ContentCollection:
        return self._mapping[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:  # pragma: no cover - for debugging
        return f"TagCollection({len(self._mapping)} tags)"
