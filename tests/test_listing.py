from datetime import date

from folio.config import Hero, SiteConfig, Subscribe
from folio.listing import build_home, build_index, build_tag_index
from folio.models import ContentItem


def make_item(title, publish_date, featured=False, tags=()):
    return ContentItem(
        slug=title.lower().replace(" ", "-"),
        title=title,
        publish_date=publish_date,
        is_featured=featured,
        tags=tags,
    )


def titles(items):
    return [i.title for i in items]


def test_home_featured_sections():
    config = SiteConfig(
        title="meronz",
        hero=Hero(title="Hello!"),
        subscribe=Subscribe(form_url="#"),
    )
    posts = [
        make_item("Old", date(2023, 1, 1), featured=True),
        make_item("Plain", date(2024, 1, 1)),
        make_item("New", date(2024, 6, 1), featured=True),
    ]
    projects = [make_item("Tool", date(2022, 1, 1))]
    view = build_home(posts, projects, config)
    assert view.title == "meronz"
    assert view.hero.title == "Hello!"
    assert view.subscribe.form_url == "#"
    assert titles(view.featured_posts) == ["New", "Old"]
    # no featured projects: the section is hidden
    assert view.featured_projects == []


def test_index_pages():
    posts = [make_item(f"Post {n}", date(2024, 1, n)) for n in range(1, 11)]
    pages = build_index(posts, 8, "/blog")
    assert len(pages) == 2
    assert titles(pages[0])[0] == "Post 10"
    assert titles(pages[1]) == ["Post 2", "Post 1"]
    assert pages[0].url == "/blog/"
    assert pages[1].previous_url == "/blog/"
    assert build_index([], 8, "/blog") == []


def test_tag_index():
    posts = [
        make_item("A", date(2024, 1, 1), tags=("Web Dev",)),
        make_item("B", date(2024, 1, 2), tags=("python", "Web Dev")),
        make_item("C", date(2024, 1, 3), tags=("python",)),
    ]
    index = build_tag_index(posts, 1)
    assert list(index) == ["python", "web-dev"]
    python_pages = index["python"]
    assert [p.url for p in python_pages] == ["/tags/python/", "/tags/python/2/"]
    assert titles(python_pages[0]) == ["C"]
    assert index["web-dev"][0].url == "/tags/web-dev/"


def test_tag_index_merges_tags_with_same_slug():
    posts = [
        make_item("A", date(2024, 1, 1), tags=("Web Dev",)),
        make_item("B", date(2024, 1, 2), tags=("web-dev",)),
        make_item("C", date(2024, 1, 3), tags=("Web Dev", "web-dev")),
    ]
    index = build_tag_index(posts, 8)
    assert list(index) == ["web-dev"]
    (page,) = index["web-dev"]
    assert titles(page) == ["C", "B", "A"]
    assert page.url == "/tags/web-dev/"
