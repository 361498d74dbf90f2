from django.contrib import admin
from .models import Page


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ['title', 'is_published', 'published_at', 'updated_at']
    list_filter = ['is_published']
    search_fields = ['title', 'body']
    prepopulated_fields = {'slug': ('title',)}

    fieldsets = (
        ('Content', {
            'fields': ('title', 'slug', 'body'),
        }),
        ('Publishing', {
            'fields': ('is_published', 'published_at', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    readonly_fields = ['created_at', 'updated_at']
