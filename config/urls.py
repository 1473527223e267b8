"""
URL configuration for the demo site.

Every static page under ``pages`` has metadata declared in ``pages/seo.py``;
``python manage.py check`` warns when one is missing.
"""
from django.contrib.sitemaps.views import sitemap
from django.urls import path, include

from seo_meta.sitemaps import SeoMetaSitemap
from seo_meta.views import SeoMetaDetailView

sitemaps = {
    'pages': SeoMetaSitemap,
}

urlpatterns = [
    path('sitemap.xml', sitemap, {'sitemaps': sitemaps}, name='sitemap'),
    path('api/seo-meta/', SeoMetaDetailView.as_view(), name='seo-meta-detail'),
    path('', include('pages.urls')),
]
