from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Mapping

from django.utils.safestring import SafeString

from .constants import DEFAULT_INDENT, PATH_PARAMETER_MARKERS
from .exceptions import DuplicatePath, InvalidPath
from .html import render
from .page import PageMeta, PageMetaBuilder

logger = logging.getLogger(__name__)


def validate_path(path: Any) -> str:
    if not isinstance(path, str):
        raise InvalidPath(path, "path must be a string")
    if not path.startswith("/"):
        raise InvalidPath(path, "path must start with '/'")
    for marker in PATH_PARAMETER_MARKERS:
        if marker in path:
            raise InvalidPath(path, f"parameterised paths are not supported (found {marker!r})")
    return path


class SeoRegistry:
    """
    Exact-match mapping of request paths to ``PageMeta`` records.

    Build it once at start-up and treat it as read-only afterwards; lookups
    and rendering hold no locks and never mutate state. Registering the same
    path twice raises ``DuplicatePath``.

    Usage::

        registry = SeoRegistry(indent=2)

        with registry.page("/") as page:
            page.set("title", "Some page")
            page.set("og_type", "website")

        registry.register("/contact/", {"title": "Contact us"})
    """

    def __init__(self, indent: int = DEFAULT_INDENT):
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise ValueError(f"indent must be a non-negative integer, got {indent!r}")
        self.indent = indent
        self._pages: dict[str, PageMeta] = {}

    @classmethod
    def from_config(
        cls,
        entries: Mapping[str, Any] | Iterable[tuple[str, Any]],
        indent: int = DEFAULT_INDENT,
    ) -> "SeoRegistry":
        """Build a registry from ``{path: fields}`` or ``[(path, fields), ...]``."""
        registry = cls(indent=indent)
        items = entries.items() if isinstance(entries, Mapping) else entries
        for path, values in items:
            registry.register(path, values)
        return registry

    def register(self, path: str, page: PageMeta | Mapping[str, Any]) -> PageMeta:
        validate_path(path)
        if path in self._pages:
            raise DuplicatePath(path)
        if not isinstance(page, PageMeta):
            page = PageMeta.create(page)
        self._pages[path] = page
        logger.debug("Registered metadata for %s (%d tags)", path, len(page.as_dict()))
        return page

    @contextmanager
    def page(self, path: str) -> Iterator[PageMetaBuilder]:
        """Declare a path's metadata field by field; registered when the block exits cleanly."""
        validate_path(path)
        if path in self._pages:
            raise DuplicatePath(path)
        builder = PageMeta.builder()
        yield builder
        self.register(path, builder.build())

    def lookup(self, path: str) -> PageMeta | None:
        """Return the record for ``path`` or ``None`` when nothing is registered."""
        if not isinstance(path, str):
            return None
        return self._pages.get(path)

    def render_for(self, path: str, indent: int | None = None) -> SafeString | None:
        """
        Render the tags for ``path``.

        Returns ``None`` when the path is unregistered, so callers can drop
        the whole block; a registered path without fields renders to ``""``.
        """
        page = self.lookup(path)
        if page is None:
            return None
        return render(page, self.indent if indent is None else indent)

    def paths(self) -> list[str]:
        return sorted(self._pages)

    def __contains__(self, path: object) -> bool:
        return path in self._pages

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self) -> str:
        return f"<SeoRegistry paths={self.paths()!r} indent={self.indent}>"
