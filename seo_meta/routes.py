from __future__ import annotations

import re

from django.urls import URLPattern, URLResolver, get_resolver
from django.urls.resolvers import LocalePrefixPattern, RegexPattern, RoutePattern

# Anything left in a regex after stripping anchors that makes it match more than one literal path
_REGEX_SPECIAL_RE = re.compile(r"[.^$*+?{}\[\]\\|()]")


def _literal(pattern) -> str | None:
    """Return the literal text a pattern matches, or None if it is parameterised."""
    if isinstance(pattern, RoutePattern):
        route = str(pattern)
        if pattern.converters or "<" in route:
            return None
        return route
    if isinstance(pattern, RegexPattern):
        regex = pattern._regex
        if regex.startswith("^"):
            regex = regex[1:]
        for anchor in (r"\Z", "$"):
            if regex.endswith(anchor):
                regex = regex[: -len(anchor)]
                break
        if _REGEX_SPECIAL_RE.search(regex):
            return None
        return regex
    return None


def _walk(patterns, prefix: str):
    for entry in patterns:
        if isinstance(entry.pattern, LocalePrefixPattern):
            continue
        literal = _literal(entry.pattern)
        if literal is None:
            continue
        if isinstance(entry, URLResolver):
            yield from _walk(entry.url_patterns, prefix + literal)
        elif isinstance(entry, URLPattern):
            yield prefix + literal


def static_get_paths(urlconf: str | None = None) -> list[str]:
    """
    List the literal request paths served by the URLconf.

    Parameterised routes (path converters, regex groups) and locale-prefixed
    includes are skipped. Django does not bind HTTP methods to URL patterns,
    so every static route is treated as reachable with GET.
    """
    resolver = get_resolver(urlconf)
    return sorted(set(_walk(resolver.url_patterns, "/")))
