from django.contrib.sitemaps import Sitemap

from .conf import get_registry


class SeoMetaSitemap(Sitemap):
    """Sitemap of every path with registered metadata."""

    changefreq = 'weekly'

    def items(self):
        return get_registry().paths()

    def location(self, item):
        return item
