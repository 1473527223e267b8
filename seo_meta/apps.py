from django.apps import AppConfig


class SeoMetaConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'seo_meta'
    verbose_name = 'Page metadata'

    def ready(self):
        # Connects the setting_changed receiver and the URL system check
        from . import checks, conf  # noqa: F401

        # A bad declaration raises here and aborts start-up
        conf.get_registry()
