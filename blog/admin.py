# blog/admin.py
from django.contrib import admin
from .models import Category, Post, Tag


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = (
        "title", "is_published", "published_at", "created_at",
    )
    list_filter = ("is_published", "published_at", "categories", "tags")
    search_fields = ("title", "excerpt", "body")
    prepopulated_fields = {"slug": ("title",)}
    filter_horizontal = ("tags", "categories")
    readonly_fields = ("created_at", "updated_at")
    fieldsets = (
        ("Content", {
            "fields": ("title", "slug", "cover", "excerpt", "body"),
        }),
        ("Taxonomy", {
            "fields": ("categories", "tags"),
        }),
        ("Publishing", {
            "fields": ("is_published", "published_at", "created_at", "updated_at"),
        }),
    )


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ("name", "slug")
    search_fields = ("name",)


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "order")
    list_editable = ("order",)
    search_fields = ("name",)
