"""Pagination of content listings.

This module slices an already ordered sequence into fixed-size pages and
computes the metadata a listing needs to render "page X of Y" together with
previous/next links.

Key items:
- total_pages: Number of pages for a sequence and page size.
- page_slice: Items of a single page.
- paginate: A ListingPage with items and navigation metadata.
- iter_pages: Every ListingPage of a sequence.
- page_url: URL of a numbered page under a listing base URL.

The page size is always passed explicitly; nothing here reads site
configuration.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence, Sized
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class PaginationError(ValueError):
    """Raised when a page size or page number breaks the paginator contract."""


@dataclass(frozen=True)
class ListingPage(Generic[T]):
    """A single page of a paginated listing.

    Attributes:
        items: Items shown on this page.
        number: 1-based page number.
        size: Configured page size.
        total_items: Number of items across all pages.
        total_pages: Number of pages.
        start: Zero-based offset of the first item on this page.
        end: Zero-based offset of the last item, or start - 1 when empty.
        url: URL of this page, when a base URL was given.
        previous_url: URL of the previous page, if any.
        next_url: URL of the next page, if any.
    """

    items: list[T]
    number: int
    size: int
    total_items: int
    total_pages: int
    start: int
    end: int
    url: str | None = None
    previous_url: str | None = None
    next_url: str | None = None

    @property
    def has_previous(self) -> bool:
        return 1 < self.number <= self.total_pages

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def previous_number(self) -> int | None:
        return self.number - 1 if self.has_previous else None

    @property
    def next_number(self) -> int | None:
        return self.number + 1 if self.has_next else None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _check_page_size(page_size: int) -> None:
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise PaginationError(
            f"Page size must be an integer, got {type(page_size).__name__}"
        )
    if page_size <= 0:
        raise PaginationError(f"Page size must be positive, got {page_size}")


def _check_page_number(page_number: int) -> None:
    if isinstance(page_number, bool) or not isinstance(page_number, int):
        raise PaginationError(
            f"Page number must be an integer, got {type(page_number).__name__}"
        )
    if page_number < 1:
        raise PaginationError(f"Page numbers start at 1, got {page_number}")


def total_pages(items: Sized | int, page_size: int) -> int:
    """Return the number of pages needed to show all items.

    Args:
        items: The items, or their count.
        page_size: Maximum number of items per page.

    Returns:
        ceil(len(items) / page_size); 0 when there are no items.

    Raises:
        PaginationError: If page_size is not a positive integer.
    """
    _check_page_size(page_size)
    count = items if isinstance(items, int) else len(items)
    return -(-count // page_size)


def page_slice(items: Sequence[T], page_size: int, page_number: int) -> list[T]:
    """Return the items of one page.

    Args:
        items: Ordered items.
        page_size: Maximum number of items per page.
        page_number: 1-based page number.

    Returns:
        The items at offsets (N-1)*P through (N-1)*P + P - 1, clipped to the
        sequence. Pages past the end are empty.

    Raises:
        PaginationError: If page_size or page_number is out of contract.
    """
    _check_page_size(page_size)
    _check_page_number(page_number)
    start = (page_number - 1) * page_size
    return list(items[start : start + page_size])


def page_url(base_url: str, number: int) -> str:
    """Build the URL of a listing page.

    Page 1 lives at the base URL itself; later pages get a numeric segment.

    Examples:
        >>> page_url("/blog", 1)
        '/blog/'

        >>> page_url("/blog/", 3)
        '/blog/3/'
    """
    _check_page_number(number)
    base = ("/" + base_url.strip("/")).rstrip("/")
    if number == 1:
        return f"{base}/"
    return f"{base}/{number}/"


def paginate(
    items: Sequence[T],
    page_size: int,
    page_number: int,
    base_url: str | None = None,
) -> ListingPage[T]:
    """Build a ListingPage for one page of items.

    Args:
        items: Ordered items.
        page_size: Maximum number of items per page.
        page_number: 1-based page number.
        base_url: Optional listing URL used to fill the URL fields.

    Returns:
        ListingPage with the page items and navigation metadata.
    """
    sliced = page_slice(items, page_size, page_number)
    pages = total_pages(items, page_size)
    start = (page_number - 1) * page_size

    url = previous_url = next_url = None
    if base_url is not None:
        url = page_url(base_url, page_number)
        if 1 < page_number <= pages:
            previous_url = page_url(base_url, page_number - 1)
        if page_number < pages:
            next_url = page_url(base_url, page_number + 1)

    return ListingPage(
        items=sliced,
        number=page_number,
        size=page_size,
        total_items=len(items),
        total_pages=pages,
        start=start,
        end=start + len(sliced) - 1,
        url=url,
        previous_url=previous_url,
        next_url=next_url,
    )


def iter_pages(
    items: Sequence[T], page_size: int, base_url: str | None = None
) -> Iterator[ListingPage[T]]:
    """Yield every page of items, from page 1 to the last page.

    Nothing is yielded for an empty sequence.
    """
    for number in range(1, total_pages(items, page_size) + 1):
        yield paginate(items, page_size, number, base_url=base_url)
