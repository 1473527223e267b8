"""
Render ``PageMeta`` records into HTML head markup.

Lines come out in ascending order of field name (not tag family), one per
present field, each prefixed with ``indent`` spaces::

    <link rel="canonical" href="..." />
    <meta name="description" content="..." />
    <meta property="og:title" content="..." />
    <title>...</title>
    <meta property="twitter:card" content="..." />

Values are whitespace-normalised but NOT HTML-escaped. Only pass static,
developer-authored strings.
"""
from __future__ import annotations

import re

from django.utils.safestring import SafeString, mark_safe

from .constants import DEFAULT_INDENT, FIELD_NAMES
from .page import PageMeta

_WHITESPACE_RE = re.compile(r"\s+")


def cleanup(value: str) -> str:
    """Trim the value and collapse every whitespace run (newlines included) to one space."""
    return _WHITESPACE_RE.sub(" ", value.strip())


def markup(field: str, value: str | None, indent: int = DEFAULT_INDENT) -> str | None:
    if value is None:
        return None
    pad = " " * indent
    content = cleanup(value)
    if field == "title":
        return f"{pad}<title>{content}</title>"
    if field == "description":
        return f'{pad}<meta name="description" content="{content}" />'
    if field == "canonical":
        return f'{pad}<link rel="canonical" href="{content}" />'
    if field.startswith("og_"):
        return f'{pad}<meta property="og:{field[3:]}" content="{content}" />'
    if field.startswith("twitter_"):
        return f'{pad}<meta property="twitter:{field[8:]}" content="{content}" />'
    return None


def render(page: PageMeta, indent: int = DEFAULT_INDENT) -> SafeString:
    """Render every present field of ``page``; an empty record gives ``""``."""
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ValueError(f"indent must be a non-negative integer, got {indent!r}")
    lines = []
    for field in sorted(FIELD_NAMES):
        line = markup(field, getattr(page, field), indent)
        if line is not None:
            lines.append(line)
    return mark_safe("\n".join(lines))
