from datetime import date

from folio.collections import ContentCollection, TagCollection
from folio.models import ContentItem


def make_item(title, publish_date, featured=False, tags=()):
    return ContentItem(
        slug=title.lower(),
        title=title,
        publish_date=publish_date,
        is_featured=featured,
        tags=tags,
    )


def titles(items):
    return [i.title for i in items]


def test_collection_filters_and_latest():
    items = ContentCollection(
        [
            make_item("A", date(2024, 1, 2), tags=("python",)),
            make_item("B", date(2024, 1, 3), featured=True),
            make_item("C", date(2024, 1, 1), featured=True, tags=("python", "web")),
        ]
    )
    assert len(items) == 3
    assert titles(items.featured()) == ["B", "C"]
    assert titles(items.with_tag("python")) == ["A", "C"]
    assert titles(items.latest(2)) == ["B", "A"]
    assert titles(items.sorted(reverse=False)) == ["C", "A", "B"]
    # cached descending view
    assert items.sorted() is items.sorted()
    assert titles(items.sorted()) == ["B", "A", "C"]
    # underlying order unchanged
    assert titles(items) == ["A", "B", "C"]


def test_sorted_keeps_input_order_for_same_day():
    items = ContentCollection(
        [
            make_item("First", date(2024, 1, 1)),
            make_item("Second", date(2024, 1, 1)),
            make_item("Newer", date(2024, 2, 1)),
            make_item("Third", date(2024, 1, 1)),
        ]
    )
    assert titles(items.sorted()) == ["Newer", "First", "Second", "Third"]


def test_paging_uses_newest_first_order():
    items = ContentCollection(make_item(f"P{n}", date(2024, 1, n)) for n in range(1, 11))
    assert items.total_pages(8) == 2
    first = items.page(1, 8, base_url="/blog")
    assert titles(first) == [f"P{n}" for n in range(10, 2, -1)]
    assert first.next_url == "/blog/2/"
    second = items.page(2, 8)
    assert titles(second) == ["P2", "P1"]
    assert items.page(3, 8).items == []

    pages = items.pages(8, base_url="/blog")
    assert [p.url for p in pages] == ["/blog/", "/blog/2/"]


def test_empty_collection():
    items = ContentCollection([])
    assert list(items.sorted()) == []
    assert list(items.featured()) == []
    assert items.page(1, 8).items == []
    assert items.total_pages(8) == 0
    assert items.pages(8) == []
    assert len(items.tags()) == 0


def test_tags_grouping():
    a = make_item("A", date(2024, 1, 1), tags=("python",))
    b = make_item("B", date(2024, 1, 2), tags=("python", "web"))
    tags = ContentCollection([a, b]).tags()
    assert isinstance(tags, TagCollection)
    assert list(tags) == ["python", "web"]
    assert titles(tags["python"]) == ["A", "B"]
    assert titles(tags["web"].sorted()) == ["B"]
    assert tags.get("missing") is None
    assert list(tags.keys()) == ["python", "web"]
