"""Folio content listing toolkit.

This package orders, filters and paginates the dated content items of a
personal blog and portfolio site (blog posts and projects).

The core operations live in small modules:
- ordering: newest-first sorting and the featured filter.
- pagination: page slicing, page counts and page URLs.
- collections: a Sequence wrapper exposing those operations to calling code.

Supporting modules load site configuration (config), read Markdown collections
with YAML front matter (loader), assemble home and index views (listing) and
expose a command-line interface (cli).
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
