"""
Tests for static pages.
"""

from django.core.cache import cache
from django.test import TestCase
from django.urls import reverse

from counts.block import SHARED_CACHE_KEY, cache_key_for
from pages.models import Page


class PageTests(TestCase):
    def setUp(self):
        cache.clear()

    def tearDown(self):
        cache.clear()

    def test_slug_is_generated(self):
        page = Page.objects.create(title="About us")
        self.assertEqual(page.slug, "about-us")

    def test_detail_renders_block_with_shared_cache_entry(self):
        page = Page.objects.create(title="About", is_published=True)

        response = self.client.get(page.get_absolute_url())

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "There is 1 Page.")
        self.assertIsNotNone(cache.get(cache_key_for(SHARED_CACHE_KEY, "site-counts")))

    def test_unpublished_page(self):
        page = Page.objects.create(title="Hidden")
        self.assertEqual(self.client.get(page.get_absolute_url()).status_code, 404)

    def test_unknown_page(self):
        response = self.client.get(reverse("pages:detail", kwargs={"slug": "nope"}))
        self.assertEqual(response.status_code, 404)
