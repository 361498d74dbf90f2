from django.db import models
from django.urls import reverse
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from blog.models import PublishedQuerySet
from blog.utils import unique_slug


class Page(models.Model):
    """
    Static page of the site (about, contacts, ...).
    """
    title = models.CharField(_("Title"), max_length=180)
    slug = models.SlugField(_("Slug"), max_length=200, unique=True, blank=True)
    body = models.TextField(_("Body"), blank=True)

    is_published = models.BooleanField(_("Published"), default=False, db_index=True)
    published_at = models.DateTimeField(_("Publish date"), default=timezone.now, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PublishedQuerySet.as_manager()

    class Meta:
        ordering = ["title"]
        verbose_name = _("Page")
        verbose_name_plural = _("Pages")

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse("pages:detail", kwargs={"slug": self.slug})

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(self, self.title, fallback="page", max_length=200)
        super().save(*args, **kwargs)
