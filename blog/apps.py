# FILE: blog/apps.py
from django.apps import AppConfig


class BlogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "blog"

    def ready(self):
        from counts.registry import post_types
        from .models import Post

        if "post" not in post_types:
            post_types.register("post", Post)
