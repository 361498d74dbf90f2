# FILE: counts/apps.py
from django.apps import AppConfig


class CountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "counts"
    verbose_name = "Site counts"
