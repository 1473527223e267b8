from .conf import get_registry


def seo_meta(request):
    """``seo_meta_tags`` is None for unregistered paths so templates can skip the block."""
    return {'seo_meta_tags': get_registry().render_for(request.path_info)}
