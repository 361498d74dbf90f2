# counts/block.py
"""
The Site Counts block.

Renders published counts per content type followed by a short list of
posts with a fixed tag and category that were published inside a
time-of-day window. The markup is cached for a few minutes; when the
current item could show up in that list the cache entry is scoped to it,
otherwise pages rendering it with the same CSS class share one entry.
"""
from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from django.conf import settings
from django.core.cache import caches
from django.core.exceptions import ImproperlyConfigured
from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.formats import number_format
from django.utils.translation import gettext as _, ngettext

from .registry import PostTypeRegistry, post_types

logger = logging.getLogger(__name__)

CACHE_GROUP = "site-counts"
SHARED_CACHE_KEY = "site_counts_block"


# ── config ────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class BlockConfig:
    tag: str = "foo"
    category: str = "baz"
    hour_from: int = 9
    hour_to: int = 17
    post_type: str = "post"
    per_page: int = 5
    max_listed: int = 5
    cache_timeout: int = 5 * 60
    cache_alias: str = "default"

    def __post_init__(self) -> None:
        if self.hour_from > self.hour_to:
            raise ImproperlyConfigured(
                f"SITE_COUNTS_HOUR_FROM ({self.hour_from}) is after SITE_COUNTS_HOUR_TO ({self.hour_to})"
            )
        if self.max_listed > self.per_page:
            raise ImproperlyConfigured(
                f"SITE_COUNTS_MAX_LISTED ({self.max_listed}) exceeds SITE_COUNTS_PER_PAGE ({self.per_page})"
            )

    @classmethod
    def from_settings(cls) -> "BlockConfig":
        return cls(
            tag=getattr(settings, "SITE_COUNTS_TAG", cls.tag),
            category=getattr(settings, "SITE_COUNTS_CATEGORY", cls.category),
            hour_from=getattr(settings, "SITE_COUNTS_HOUR_FROM", cls.hour_from),
            hour_to=getattr(settings, "SITE_COUNTS_HOUR_TO", cls.hour_to),
            post_type=getattr(settings, "SITE_COUNTS_POST_TYPE", cls.post_type),
            per_page=getattr(settings, "SITE_COUNTS_PER_PAGE", cls.per_page),
            max_listed=getattr(settings, "SITE_COUNTS_MAX_LISTED", cls.max_listed),
            cache_timeout=getattr(settings, "SITE_COUNTS_CACHE_TIMEOUT", cls.cache_timeout),
            cache_alias=getattr(settings, "SITE_COUNTS_CACHE_ALIAS", cls.cache_alias),
        )


# ── current item ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class CurrentItem:
    id: Optional[int] = None
    post_type: Optional[str] = None
    category_slugs: frozenset = field(default_factory=frozenset)
    tag_slugs: frozenset = field(default_factory=frozenset)
    hour: Optional[int] = None


def _slugs(item, relation: str) -> frozenset:
    # m2m managers refuse unsaved instances
    if item.pk is None:
        return frozenset()
    manager = getattr(item, relation, None)
    if manager is None:
        return frozenset()
    return frozenset(manager.values_list("slug", flat=True))


def describe_item(item, registry: Optional[PostTypeRegistry] = None) -> CurrentItem:
    """What the block needs to know about the item being viewed."""
    if item is None:
        return CurrentItem()
    registry = registry or post_types

    hour = None
    published_at = getattr(item, "published_at", None)
    if published_at is not None:
        if timezone.is_aware(published_at):
            published_at = timezone.localtime(published_at)
        hour = published_at.hour

    return CurrentItem(
        id=item.pk,
        post_type=registry.type_of(item),
        category_slugs=_slugs(item, "categories"),
        tag_slugs=_slugs(item, "tags"),
        hour=hour,
    )


def cache_key_for(name: str, class_name: str = "") -> str:
    """Namespaced key; markup rendered with a CSS class gets its own entry."""
    key = f"{CACHE_GROUP}:{name}"
    if class_name:
        key += ":" + hashlib.md5(class_name.encode("utf-8"), usedforsecurity=False).hexdigest()[:12]
    return key


def item_cache_key(item_id, class_name: str = "") -> str:
    return cache_key_for(f"{SHARED_CACHE_KEY}_post{item_id}", class_name)


# ── block ─────────────────────────────────────────────────────────────────────
class SiteCountsBlock:
    template_name = "counts/block.html"

    def __init__(self, config: Optional[BlockConfig] = None, registry: Optional[PostTypeRegistry] = None):
        self.config = config or BlockConfig.from_settings()
        self.registry = registry or post_types

    @property
    def cache(self):
        return caches[self.config.cache_alias]

    def may_include(self, current: CurrentItem) -> bool:
        """Could `current` be returned by the filtered query?"""
        cfg = self.config
        has_category = cfg.category in current.category_slugs
        has_tag = cfg.tag in current.tag_slugs
        not_too_early = current.hour is not None and current.hour >= cfg.hour_from
        not_too_late = current.hour is not None and current.hour <= cfg.hour_to
        is_base_type = current.post_type == cfg.post_type
        return has_category and has_tag and not_too_early and not_too_late and is_base_type

    def cache_key(self, current: CurrentItem, may_include: bool, class_name: str = "") -> str:
        if may_include:
            return item_cache_key(current.id, class_name)
        return cache_key_for(SHARED_CACHE_KEY, class_name)

    def count_lines(self) -> list[str]:
        lines = []
        for post_type in self.registry.public():
            published = post_type.published_count()
            if published <= 0:
                continue
            lines.append(
                ngettext(
                    "There is %(count)s %(singular)s.",
                    "There are %(count)s %(plural)s.",
                    published,
                ) % {
                    "count": number_format(published, force_grouping=True),
                    "singular": post_type.singular_name,
                    "plural": post_type.plural_name,
                }
            )
        return lines

    def query(self, per_page: int):
        cfg = self.config
        post_type = self.registry.get(cfg.post_type)
        if post_type is None:
            raise ImproperlyConfigured(f"Post type {cfg.post_type!r} is not registered")
        return (
            post_type.model._default_manager.published()
            .filter(
                tags__slug=cfg.tag,
                categories__slug=cfg.category,
                published_at__hour__gte=cfg.hour_from,
                published_at__hour__lte=cfg.hour_to,
            )
            .only("id", "title")[:per_page]
        )

    def listed(self, posts: Iterable, exclude_id=None) -> list:
        result = []
        for post in posts:
            if len(result) >= self.config.max_listed:
                break
            if exclude_id is not None and post.pk == exclude_id:
                continue
            result.append(post)
        return result

    def heading(self, count: int) -> str:
        return ngettext(
            "%(count)s post with the tag of %(tag)s and the category of %(category)s",
            "%(count)s posts with the tag of %(tag)s and the category of %(category)s",
            count,
        ) % {
            "count": number_format(count, force_grouping=True),
            "tag": self.config.tag,
            "category": self.config.category,
        }

    def render(self, attributes: Optional[Mapping[str, Any]] = None, item=None) -> str:
        attributes = attributes or {}
        class_name = attributes.get("class_name") or ""
        current = describe_item(item, self.registry)
        may_include = self.may_include(current)
        key = self.cache_key(current, may_include, class_name)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("site counts cache hit: %s", key)
            return cached

        logger.debug("site counts cache miss: %s", key)

        count_lines = self.count_lines()

        # one extra row makes up for the current item being skipped
        per_page = self.config.per_page + 1 if may_include else self.config.per_page
        posts = self.listed(self.query(per_page), exclude_id=current.id)

        markup = render_to_string(
            self.template_name,
            {
                "class_name": class_name,
                "title": _("Post Counts"),
                "count_lines": count_lines,
                "heading": self.heading(len(posts)),
                "posts": posts,
            },
        )
        self.cache.set(key, markup, self.config.cache_timeout)
        logger.debug("site counts stored %s with %d listed post(s)", key, len(posts))
        return markup


def render_block(attributes: Optional[Mapping[str, Any]] = None, item=None) -> str:
    return SiteCountsBlock().render(attributes, item=item)
