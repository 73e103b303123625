"""Site configuration for Folio.

This module loads site metadata (title, navigation links, hero section,
subscribe form) and the per-collection page sizes from folio.yaml.

Key items:
- SiteConfig: Dataclass holding the whole site configuration.
- load_config: Loads folio.yaml with defaults applied.
- ConfigError: Raised for invalid configuration values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILENAME = "folio.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "title": "Folio",
    "description": "",
    "posts_per_page": 8,
    "projects_per_page": 8,
    "content_dir": "content",
}


class ConfigError(Exception):
    """Invalid site configuration.

    Attributes:
        key: Configuration key that holds the invalid value.
        message: Human-readable error message.
    """

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"{key}: {message}")


@dataclass(frozen=True)
class Image:
    src: str
    alt: str = ""
    caption: str = ""


@dataclass(frozen=True)
class Link:
    text: str
    href: str


@dataclass(frozen=True)
class Hero:
    title: str = ""
    text: str = ""
    image: Image | None = None
    actions: list[Link] = field(default_factory=list)


@dataclass(frozen=True)
class Subscribe:
    form_url: str
    title: str = ""
    text: str = ""


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide configuration.

    Attributes:
        title: Site title.
        description: Site description used in metadata.
        subtitle: Optional tagline.
        logo: Optional logo image.
        image: Optional default social preview image.
        header_nav_links: Links shown in the header.
        footer_nav_links: Links shown in the footer.
        social_links: Links to social profiles.
        hero: Optional home page hero section.
        subscribe: Optional newsletter form.
        posts_per_page: Page size for the posts listing.
        projects_per_page: Page size for the projects listing.
        content_dir: Directory holding the content collections.
    """

    title: str = DEFAULT_CONFIG["title"]
    description: str = DEFAULT_CONFIG["description"]
    subtitle: str = ""
    logo: Image | None = None
    image: Image | None = None
    header_nav_links: list[Link] = field(default_factory=list)
    footer_nav_links: list[Link] = field(default_factory=list)
    social_links: list[Link] = field(default_factory=list)
    hero: Hero | None = None
    subscribe: Subscribe | None = None
    posts_per_page: int = DEFAULT_CONFIG["posts_per_page"]
    projects_per_page: int = DEFAULT_CONFIG["projects_per_page"]
    content_dir: str = DEFAULT_CONFIG["content_dir"]

    def page_size_for(self, collection: str) -> int:
        """Return the page size configured for a collection.

        Args:
            collection: Collection name, e.g. 'posts' or 'projects'.

        Returns:
            projects_per_page for 'projects', posts_per_page otherwise.
        """
        if collection == "projects":
            return self.projects_per_page
        return self.posts_per_page


def load_config(project_root: Path) -> SiteConfig:
    """Load site configuration from folio.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        SiteConfig with defaults applied for missing keys.

    Raises:
        ConfigError: If the file is not a mapping or holds invalid values.
    """
    config_path = project_root / CONFIG_FILENAME
    raw = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(CONFIG_FILENAME, f"Invalid YAML: {exc}") from exc
        if not isinstance(loaded, dict):
            raise ConfigError(CONFIG_FILENAME, "Expected a mapping at the top level")
        raw.update(loaded)
    return parse_config(raw)


def parse_config(raw: dict[str, Any]) -> SiteConfig:
    """Build a SiteConfig from a plain mapping.

    Keys may be written in snake_case or in camelCase (``postsPerPage``).
    Missing or null values fall back to the defaults.

    Args:
        raw: Mapping as loaded from YAML.

    Returns:
        Validated SiteConfig.
    """
    return SiteConfig(
        title=str(_setting(raw, "title")),
        description=str(_setting(raw, "description") or ""),
        subtitle=str(_setting(raw, "subtitle") or ""),
        logo=_parse_image(_setting(raw, "logo"), "logo"),
        image=_parse_image(_setting(raw, "image"), "image"),
        header_nav_links=_parse_links(
            _setting(raw, "header_nav_links", "headerNavLinks"), "header_nav_links"
        ),
        footer_nav_links=_parse_links(
            _setting(raw, "footer_nav_links", "footerNavLinks"), "footer_nav_links"
        ),
        social_links=_parse_links(
            _setting(raw, "social_links", "socialLinks"), "social_links"
        ),
        hero=_parse_hero(_setting(raw, "hero")),
        subscribe=_parse_subscribe(_setting(raw, "subscribe")),
        posts_per_page=_positive_int(
            _setting(raw, "posts_per_page", "postsPerPage"), "posts_per_page"
        ),
        projects_per_page=_positive_int(
            _setting(raw, "projects_per_page", "projectsPerPage"), "projects_per_page"
        ),
        content_dir=str(_setting(raw, "content_dir", "contentDir")),
    )


def _setting(raw: dict[str, Any], key: str, camel_key: str | None = None) -> Any:
    for name in (camel_key, key):
        if name and raw.get(name) is not None:
            return raw[name]
    return DEFAULT_CONFIG.get(key)


def _positive_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(key, f"Expected a positive integer, got {value!r}")
    return value


def _mapping(value: Any, key: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(key, f"Expected a mapping, got {type(value).__name__}")
    return value


def _parse_image(value: Any, key: str) -> Image | None:
    if value is None:
        return None
    data = _mapping(value, key)
    if not data.get("src"):
        raise ConfigError(key, "Image requires 'src'")
    return Image(
        src=str(data["src"]),
        alt=str(data.get("alt") or ""),
        caption=str(data.get("caption") or ""),
    )


def _parse_links(value: Any, key: str) -> list[Link]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(key, f"Expected a list of links, got {type(value).__name__}")
    links = []
    for index, entry in enumerate(value):
        data = _mapping(entry, f"{key}[{index}]")
        if not data.get("href"):
            raise ConfigError(f"{key}[{index}]", "Link requires 'href'")
        links.append(Link(text=str(data.get("text") or ""), href=str(data["href"])))
    return links


def _parse_hero(value: Any) -> Hero | None:
    if value is None:
        return None
    data = _mapping(value, "hero")
    return Hero(
        title=str(data.get("title") or ""),
        text=str(data.get("text") or ""),
        image=_parse_image(data.get("image"), "hero.image"),
        actions=_parse_links(data.get("actions"), "hero.actions"),
    )


def _parse_subscribe(value: Any) -> Subscribe | None:
    if value is None:
        return None
    data = _mapping(value, "subscribe")
    form_url = _setting(data, "form_url", "formUrl")
    if not form_url:
        raise ConfigError("subscribe.form_url", "Subscribe form requires 'form_url'")
    return Subscribe(
        form_url=str(form_url),
        title=str(data.get("title") or ""),
        text=str(data.get("text") or ""),
    )
