from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from django.core.checks import Error, Tags, Warning, register

from . import conf
from .exceptions import SeoMetaError
from .routes import static_get_paths

logger = logging.getLogger(__name__)


@dataclass
class RouteReport:
    missing: list[str] = field(default_factory=list)
    orphaned: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing and not self.orphaned


def _ignored(path: str, prefixes: tuple[str, ...]) -> bool:
    return any(path.startswith(prefix) for prefix in prefixes)


def compare_routes(
    routes: Iterable[str], registered: Iterable[str], ignore: Iterable[str] = ()
) -> RouteReport:
    """Paths served without metadata (missing) and metadata without a route (orphaned)."""
    prefixes = tuple(ignore)
    routes = {path for path in routes if not _ignored(path, prefixes)}
    registered = set(registered)
    return RouteReport(
        missing=sorted(routes - registered),
        orphaned=sorted(path for path in registered - routes if not _ignored(path, prefixes)),
    )


@register(Tags.urls)
def check_seo_routes(app_configs=None, **kwargs):
    try:
        registry = conf.get_registry()
    except SeoMetaError as exc:
        return [
            Error(
                f"Page metadata could not be registered: {exc}",
                hint="Fix the SEO_META_PAGES / SEO_META_REGISTRY declaration.",
                id="seo_meta.E001",
            )
        ]
    if not conf.warnings_enabled():
        return []

    report = compare_routes(static_get_paths(), registry.paths(), conf.ignored_paths())
    messages = []
    for path in report.missing:
        logger.warning("Missing page metadata for path %s", path)
        messages.append(
            Warning(
                f"Missing page metadata for path {path!r}.",
                hint="Register the path in the SEO registry or add it to SEO_META_IGNORE_PATHS.",
                obj=registry,
                id="seo_meta.W001",
            )
        )
    for path in report.orphaned:
        messages.append(
            Warning(
                f"Page metadata is registered for {path!r} but no URL pattern serves it.",
                obj=registry,
                id="seo_meta.W002",
            )
        )
    return messages
