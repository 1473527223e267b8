"""
Django settings for the demo site.

Only what the pages app and seo_meta need: no database, no auth, no sessions.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-seo-meta-demo')
DEBUG = os.environ.get('DJANGO_DEBUG', '1') == '1'
ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'django.contrib.sitemaps',
    'seo_meta',
    'pages',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'seo_meta.context_processors.seo_meta',
            ],
        },
    },
]

DATABASES = {}

STATIC_URL = 'static/'

USE_TZ = True

# Page metadata
SEO_META_REGISTRY = 'pages.seo.registry'
SEO_META_WARN = True
SEO_META_IGNORE_PATHS = ('/api/', '/sitemap.xml')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {'format': '{levelname} {name}: {message}', 'style': '{'},
    },
    'handlers': {
        'console': {'class': 'logging.StreamHandler', 'formatter': 'simple'},
    },
    'loggers': {
        'seo_meta': {
            'handlers': ['console'],
            'level': os.environ.get('SEO_META_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
