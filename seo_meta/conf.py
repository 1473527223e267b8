"""
Settings for the seo_meta app.

    SEO_META_REGISTRY      dotted path to a SeoRegistry (or a callable returning one)
    SEO_META_PAGES         {path: {field: value}} used when no registry is configured
    SEO_META_INDENT        leading spaces per tag line (default 4)
    SEO_META_WARN          warn about routes without metadata (default True)
    SEO_META_IGNORE_PATHS  path prefixes skipped by the route check
"""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.module_loading import import_string

from .constants import DEFAULT_INDENT
from .registry import SeoRegistry


def get_indent() -> int:
    return getattr(settings, "SEO_META_INDENT", DEFAULT_INDENT)


def warnings_enabled() -> bool:
    return bool(getattr(settings, "SEO_META_WARN", True))


def ignored_paths() -> tuple[str, ...]:
    return tuple(getattr(settings, "SEO_META_IGNORE_PATHS", ()))


@lru_cache(maxsize=None)
def get_registry() -> SeoRegistry:
    """Resolve the process-wide registry from settings (cached)."""
    dotted = getattr(settings, "SEO_META_REGISTRY", None)
    if dotted:
        registry = import_string(dotted)
        if callable(registry) and not isinstance(registry, SeoRegistry):
            registry = registry()
        if not isinstance(registry, SeoRegistry):
            raise ImproperlyConfigured(
                f"SEO_META_REGISTRY {dotted!r} must point to a SeoRegistry, got {type(registry).__name__}."
            )
        return registry
    return SeoRegistry.from_config(getattr(settings, "SEO_META_PAGES", {}), indent=get_indent())


@receiver(setting_changed)
def _reset_registry(sender, setting, **kwargs):
    if setting.startswith("SEO_META_"):
        get_registry.cache_clear()
