from django.apps import AppConfig


class CatalogAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog_app"
    verbose_name = "Movie catalog"
