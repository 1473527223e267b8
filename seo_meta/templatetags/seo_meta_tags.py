from __future__ import annotations

from django import template

from seo_meta.conf import get_registry
from seo_meta.html import render
from seo_meta.page import PageMeta

register = template.Library()


def _request_path(context) -> str | None:
    request = context.get("request")
    if request is None:
        return None
    # URLconf paths exclude the script prefix
    return request.path_info


@register.simple_tag(takes_context=True)
def seo_meta_tags(context, indent=None):
    """Head tags for the current request path, or an empty string when none are registered."""
    path = _request_path(context)
    if path is None:
        return ""
    if indent is not None:
        indent = int(indent)
    html = get_registry().render_for(path, indent)
    return html if html is not None else ""


@register.simple_tag(takes_context=True)
def get_seo_meta(context):
    path = _request_path(context)
    if path is None:
        return None
    return get_registry().lookup(path)


@register.filter
def seo_meta_html(page, indent=None):
    if not isinstance(page, PageMeta):
        return ""
    return render(page, get_registry().indent if indent is None else int(indent))
