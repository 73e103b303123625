"""Ordering and filtering of content items.

All functions are pure: they never mutate their input and always return a
fresh list. Items only need to satisfy the ``Dated`` protocol.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import TypeVar

from .models import Dated

T = TypeVar("T", bound=Dated)


def publish_day(item: Dated) -> date:
    """Return the publication date of an item at day granularity.

    Args:
        item: Any object exposing ``publish_date``.

    Returns:
        The date part of ``publish_date``.

    Raises:
        TypeError: If ``publish_date`` is not a date.
    """
    value = item.publish_date
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(
            f"publish_date must be a date, got {type(value).__name__}: {value!r}"
        )
    return value


def compare_publish_date(a: Dated, b: Dated) -> int:
    """Compare two items so that the later publication date sorts first.

    Suitable for ``functools.cmp_to_key``.

    Returns:
        A negative number if ``a`` is newer, positive if older, 0 if equal.
    """
    day_a, day_b = publish_day(a), publish_day(b)
    if day_a > day_b:
        return -1
    if day_a < day_b:
        return 1
    return 0


def sort_by_date(items: Iterable[T], reverse: bool = True) -> list[T]:
    """Sort items by publication date, newest first.

    The sort is stable: items published on the same day keep their
    relative input order, in either direction.

    Args:
        items: Items to sort.
        reverse: If True (default), newest first. If False, oldest first.

    Returns:
        A new sorted list.
    """
    return sorted(items, key=publish_day, reverse=reverse)


def is_featured(item: object) -> bool:
    """Return True only if the item's ``is_featured`` flag is exactly True."""
    return getattr(item, "is_featured", False) is True


def filter_featured(items: Iterable[T]) -> list[T]:
    """Return the featured items, preserving their order."""
    return [item for item in items if is_featured(item)]
