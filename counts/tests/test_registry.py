"""
Unit tests for the post type registry.
"""

from django.core.exceptions import ImproperlyConfigured
from django.test import TestCase

from blog.models import Post, Tag
from counts.registry import PostTypeRegistry, post_types
from pages.models import Page

from .utils import make_page, make_post


class PostTypeRegistryTests(TestCase):
    """Tests for PostTypeRegistry."""

    def setUp(self):
        self.registry = PostTypeRegistry()
        self.registry.register("post", Post)
        self.registry.register("page", Page, public=False)

    def test_duplicate_registration_is_rejected(self):
        with self.assertRaises(ImproperlyConfigured):
            self.registry.register("post", Post)

    def test_get(self):
        self.assertIs(self.registry.get("post").model, Post)
        self.assertIsNone(self.registry.get("event"))

    def test_public_keeps_registration_order_and_skips_private(self):
        self.assertEqual([t.name for t in self.registry.public()], ["post"])

    def test_type_of(self):
        self.assertEqual(self.registry.type_of(Post(title="x")), "post")
        self.assertEqual(self.registry.type_of(Page(title="x")), "page")
        self.assertIsNone(self.registry.type_of(Tag(name="x")))

    def test_labels_come_from_model_meta(self):
        post_type = self.registry.get("post")
        self.assertEqual(post_type.singular_name, "Post")
        self.assertEqual(post_type.plural_name, "Posts")

    def test_published_count(self):
        make_post("Published")
        make_post("Draft", published=False)
        self.assertEqual(self.registry.get("post").published_count(), 1)


class SiteRegistryTests(TestCase):
    """The apps register their own types on startup."""

    def test_blog_and_pages_are_registered(self):
        self.assertEqual([t.name for t in post_types.public()], ["post", "page"])

    def test_page_counts(self):
        make_page("About")
        make_page("Hidden", published=False)
        self.assertEqual(post_types.get("page").published_count(), 1)
