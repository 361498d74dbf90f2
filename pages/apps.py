# FILE: pages/apps.py
from django.apps import AppConfig


class PagesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pages"

    def ready(self):
        from counts.registry import post_types
        from .models import Page

        if "page" not in post_types:
            post_types.register("page", Page)
