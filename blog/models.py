# blog/models.py
from __future__ import annotations

from django.db import models
from django.urls import reverse
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .utils import unique_slug


# ──────────────────────────────────────────────────────────────────────────────
# Published content
# ──────────────────────────────────────────────────────────────────────────────
class PublishedQuerySet(models.QuerySet):
    def published(self) -> "PublishedQuerySet":
        return self.filter(is_published=True, published_at__lte=timezone.now())


# ──────────────────────────────────────────────────────────────────────────────
# Tag
# ──────────────────────────────────────────────────────────────────────────────
class Tag(models.Model):
    name = models.CharField(_("Name"), max_length=48, unique=True)
    slug = models.SlugField(_("Slug"), max_length=64, unique=True, db_index=True)

    class Meta:
        ordering = ["name"]
        verbose_name = _("Tag")
        verbose_name_plural = _("Tags")

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(self, self.name, fallback="tag", max_length=64)
        return super().save(*args, **kwargs)


# ──────────────────────────────────────────────────────────────────────────────
# Category
# ──────────────────────────────────────────────────────────────────────────────
class Category(models.Model):
    name = models.CharField(_("Name"), max_length=80, unique=True)
    slug = models.SlugField(_("Slug"), max_length=80, unique=True, db_index=True)
    order = models.PositiveIntegerField(default=0, db_index=True)

    class Meta:
        ordering = ("order", "name")
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs) -> None:
        if not self.slug:
            self.slug = unique_slug(self, self.name, fallback="category", max_length=80)
        super().save(*args, **kwargs)


# ──────────────────────────────────────────────────────────────────────────────
# Post
# ──────────────────────────────────────────────────────────────────────────────
class Post(models.Model):
    title = models.CharField(_("Title"), max_length=180)
    slug = models.SlugField(_("Slug"), max_length=200, unique=True, blank=True)
    cover = models.ImageField(_("Cover"), upload_to="blog/covers/", blank=True)
    excerpt = models.TextField(_("Excerpt"), max_length=300, blank=True)
    body = models.TextField(_("Body"), blank=True)

    tags = models.ManyToManyField(
        "Tag",
        blank=True,
        related_name="posts",
        verbose_name=_("Tags"),
    )
    categories = models.ManyToManyField(
        "Category",
        blank=True,
        related_name="posts",
        verbose_name=_("Categories"),
    )

    # publishing
    is_published = models.BooleanField(_("Published"), default=False, db_index=True)
    published_at = models.DateTimeField(_("Publish date"), default=timezone.now, db_index=True)

    created_at = models.DateTimeField(_("Created"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Updated"), auto_now=True)

    objects = PublishedQuerySet.as_manager()

    class Meta:
        ordering = ["-published_at", "-id"]
        verbose_name = _("Post")
        verbose_name_plural = _("Posts")
        indexes = [
            models.Index(fields=["is_published", "published_at"], name="blog_post_published_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    def get_absolute_url(self) -> str:
        return reverse("blog:detail", kwargs={"slug": self.slug})

    def save(self, *args, **kwargs) -> None:
        if not self.slug:
            self.slug = unique_slug(self, self.title, fallback="post", max_length=200)
        super().save(*args, **kwargs)
