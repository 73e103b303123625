"""Loading of Markdown content collections.

A collection is a directory of Markdown files (e.g. content/posts). Each file
may start with YAML front matter between --- markers; the body after it is
kept verbatim.

Key items:
- extract_frontmatter: Split a file into front matter and body.
- ItemBuilder: Builds a ContentItem from one source file.
- load_collection: Loads every item of a collection directory.
- load_site: Loads the posts and projects collections.
- ContentError: Raised for a source file with invalid metadata.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from .collections import ContentCollection
from .config import SiteConfig
from .models import ContentItem
from .utils import coerce_date, extract_date_from_name, is_markdown, slugify, titleize

logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r"^---\s*\n(?:(.*?)\n)?---\s*\n?", re.DOTALL)


class ContentError(Exception):
    """Invalid content source file.

    Attributes:
        source_path: Path to the source file that caused the error.
        message: Human-readable error message.
        original_error: The original exception, if any.
    """

    def __init__(
        self,
        source_path: Path,
        message: str,
        original_error: Exception | None = None,
    ):
        self.source_path = source_path
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_path}: {message}")


def extract_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Extract YAML front matter from content.

    Args:
        text: Raw file content.

    Returns:
        Tuple of (front matter dict, remaining content).

    Raises:
        yaml.YAMLError: If the front matter block is not valid YAML.
        ValueError: If the front matter is not a mapping.
    """
    match = FRONTMATTER_RE.match(text)
    if not match:
        return {}, text
    data = yaml.safe_load(match.group(1) or "") or {}
    if not isinstance(data, dict):
        raise ValueError("Front matter must be a mapping")
    return data, text[match.end() :]


def _first(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


class ItemBuilder:
    """Builds ContentItem objects from Markdown source files.

    Attributes:
        collection: Name stored on every built item.
    """

    def __init__(self, collection: str):
        self.collection = collection

    def build(self, path: Path) -> ContentItem:
        """Build a ContentItem from a source file.

        Args:
            path: Path to the Markdown file.

        Returns:
            ContentItem for the file.

        Raises:
            ContentError: If the front matter is unreadable or invalid.
        """
        raw = path.read_text(encoding="utf-8")
        try:
            data, body = extract_frontmatter(raw)
        except yaml.YAMLError as exc:
            raise ContentError(path, f"Invalid front matter: {exc}", exc) from exc
        except ValueError as exc:
            raise ContentError(path, str(exc), exc) from exc

        return ContentItem(
            slug=str(data.get("slug") or slugify(path.stem)),
            title=str(data.get("title") or titleize(path.name)),
            publish_date=self._publish_date(path, data),
            is_featured=self._is_featured(path, data),
            excerpt=str(data.get("excerpt") or ""),
            tags=self._tags(path, data),
            updated_date=self._updated_date(path, data),
            collection=self.collection,
            body=body,
            path=path,
            data=data,
        )

    def _publish_date(self, path: Path, data: dict[str, Any]) -> date:
        value = _first(data, "publishDate", "publish_date")
        if value is None:
            from_name = extract_date_from_name(path.stem)
            if from_name is None:
                raise ContentError(
                    path, "Missing publishDate in front matter or YYYY-MM-DD- file prefix"
                )
            return from_name
        try:
            return coerce_date(value)
        except ValueError as exc:
            raise ContentError(path, f"publishDate: {exc}", exc) from exc

    def _updated_date(self, path: Path, data: dict[str, Any]) -> date | None:
        value = _first(data, "updatedDate", "updated_date")
        if value is None:
            return None
        try:
            return coerce_date(value)
        except ValueError as exc:
            raise ContentError(path, f"updatedDate: {exc}", exc) from exc

    def _is_featured(self, path: Path, data: dict[str, Any]) -> bool:
        value = _first(data, "isFeatured", "is_featured")
        if value is None:
            return False
        if not isinstance(value, bool):
            raise ContentError(path, f"isFeatured must be true or false, got {value!r}")
        return value

    def _tags(self, path: Path, data: dict[str, Any]) -> tuple[str, ...]:
        value = data.get("tags")
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            raise ContentError(path, f"tags must be a list, got {type(value).__name__}")
        return tuple(str(tag) for tag in value)


def iter_source_files(directory: Path, include_drafts: bool = False) -> list[Path]:
    """List the Markdown files of a collection in file-name order.

    Files starting with _ are drafts and skipped unless requested.
    """
    files: list[Path] = []
    for path in sorted(directory.iterdir()):
        if path.is_dir() or not is_markdown(path):
            continue
        if path.name.startswith("_") and not include_drafts:
            logger.debug("Skipping draft %s", path)
            continue
        files.append(path)
    return files


def load_collection(
    directory: Path, include_drafts: bool = False, name: str | None = None
) -> ContentCollection:
    """Load every item of a collection directory.

    Args:
        directory: Directory holding the Markdown files.
        include_drafts: Whether to include files starting with _.
        name: Collection name, defaults to the directory name.

    Returns:
        ContentCollection in file-name order; empty if the directory is missing.
    """
    if not directory.is_dir():
        logger.debug("No collection directory at %s", directory)
        return ContentCollection([])
    builder = ItemBuilder(name or directory.name)
    items = [builder.build(path) for path in iter_source_files(directory, include_drafts)]
    logger.debug("Loaded %d items from %s", len(items), directory)
    return ContentCollection(items)


@dataclass
class SiteContent:
    """Content collections of a site.

    Attributes:
        posts: Blog posts.
        projects: Portfolio projects.
    """

    posts: ContentCollection
    projects: ContentCollection

    def get(self, name: str) -> ContentCollection:
        if name == "posts":
            return self.posts
        if name == "projects":
            return self.projects
        raise KeyError(name)


def load_site(
    project_root: Path, config: SiteConfig, include_drafts: bool = False
) -> SiteContent:
    """Load the posts and projects collections of a project.

    Args:
        project_root: Root directory of the project.
        config: Site configuration (for the content directory).
        include_drafts: Whether to include draft files.

    Returns:
        SiteContent with both collections loaded.
    """
    content_dir = project_root / config.content_dir
    return SiteContent(
        posts=load_collection(content_dir / "posts", include_drafts),
        projects=load_collection(content_dir / "projects", include_drafts),
    )
