"""
Shared helpers for the counts tests.
"""

from datetime import datetime, timezone as dt_timezone

from blog.models import Category, Post, Tag
from pages.models import Page


def at_hour(hour, minute=0, day=1):
    """A fixed past moment at the given UTC hour."""
    return datetime(2024, 5, day, hour, minute, tzinfo=dt_timezone.utc)


def make_terms():
    tag, _ = Tag.objects.get_or_create(name="foo", slug="foo")
    category, _ = Category.objects.get_or_create(name="baz", slug="baz")
    return tag, category


def make_post(title, hour=10, minute=0, tagged=True, categorized=True, published=True):
    tag, category = make_terms()
    post = Post.objects.create(
        title=title,
        is_published=published,
        published_at=at_hour(hour, minute),
    )
    if tagged:
        post.tags.add(tag)
    if categorized:
        post.categories.add(category)
    return post


def make_matching_posts(count, hour=10):
    """Posts that satisfy the block filter, newest last."""
    return [make_post(f"Matching {i}", hour=hour, minute=i) for i in range(count)]


def make_page(title, published=True):
    return Page.objects.create(title=title, is_published=published, published_at=at_hour(12))
