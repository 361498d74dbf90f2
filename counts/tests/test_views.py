"""
Tests for the block fragment endpoint, the template tag and the
cache clearing command.
"""

from io import StringIO

from django.core.cache import cache
from django.core.management import call_command
from django.template import Context, Template
from django.test import TestCase
from django.urls import reverse

from counts.block import SHARED_CACHE_KEY, cache_key_for, item_cache_key

from .utils import make_matching_posts, make_page, make_post


class BlockEndpointTests(TestCase):
    """Tests for GET /counts/block/."""

    def setUp(self):
        cache.clear()
        self.url = reverse("counts:block")

    def tearDown(self):
        cache.clear()

    def test_returns_fragment(self):
        make_post("Listed")

        response = self.client.get(self.url, {"class_name": "preview"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/html; charset=utf-8")
        content = response.content.decode()
        self.assertTrue(content.startswith('<div class="preview">'))
        self.assertIn("<li>Listed</li>", content)

    def test_current_post_is_excluded(self):
        posts = make_matching_posts(2)

        response = self.client.get(self.url, {"post": posts[0].pk})

        content = response.content.decode()
        self.assertNotIn(f"<li>{posts[0].title}</li>", content)
        self.assertIn(f"<li>{posts[1].title}</li>", content)
        self.assertIsNotNone(cache.get(item_cache_key(posts[0].pk)))

    def test_unknown_post(self):
        self.assertEqual(self.client.get(self.url, {"post": "999"}).status_code, 404)
        self.assertEqual(self.client.get(self.url, {"post": "abc"}).status_code, 404)

    def test_post_method_not_allowed(self):
        self.assertEqual(self.client.post(self.url).status_code, 405)

    def test_preview_class_does_not_leak_into_page_block(self):
        make_post("Listed")

        self.client.get(self.url, {"class_name": "someone-elses-class"})
        html = Template('{% load site_counts %}{% site_counts_block class_name="site-counts" %}').render(Context({}))

        self.assertTrue(html.startswith('<div class="site-counts">'))
        self.assertNotIn("someone-elses-class", html)

    def test_each_class_name_gets_its_own_entry(self):
        self.client.get(self.url, {"class_name": "preview"})
        self.client.get(self.url)

        self.assertIn('class="preview"', cache.get(cache_key_for(SHARED_CACHE_KEY, "preview")))
        self.assertIn('class=""', cache.get(cache_key_for(SHARED_CACHE_KEY)))


class TemplateTagTests(TestCase):
    """Tests for {% site_counts_block %}."""

    def setUp(self):
        cache.clear()

    def tearDown(self):
        cache.clear()

    def render(self, source, **context):
        return Template("{% load site_counts %}" + source).render(Context(context))

    def test_explicit_item(self):
        posts = make_matching_posts(2)

        html = self.render('{% site_counts_block item=post class_name="side" %}', post=posts[0])

        self.assertTrue(html.startswith('<div class="side">'))
        self.assertNotIn(f"<li>{posts[0].title}</li>", html)
        self.assertIn(f"<li>{posts[1].title}</li>", html)

    def test_object_fallback(self):
        posts = make_matching_posts(2)

        html = self.render("{% site_counts_block %}", object=posts[1])

        self.assertNotIn(f"<li>{posts[1].title}</li>", html)
        self.assertIn(f"<li>{posts[0].title}</li>", html)

    def test_output_is_not_double_escaped(self):
        make_page("About")

        html = self.render("{% site_counts_block %}")

        self.assertIn("<li>There is 1 Page.</li>", html)
        self.assertNotIn("&lt;div", html)


class ClearCacheCommandTests(TestCase):
    """Tests for the clear_site_counts_cache management command."""

    def setUp(self):
        cache.clear()

    def tearDown(self):
        cache.clear()

    def test_clears_shared_and_item_entries(self):
        cache.set(cache_key_for(SHARED_CACHE_KEY), "shared", 60)
        cache.set(item_cache_key(5), "scoped", 60)
        cache.set(item_cache_key(6), "other", 60)
        out = StringIO()

        call_command("clear_site_counts_cache", "--post", "5", "--post", "7", stdout=out)

        self.assertIsNone(cache.get(cache_key_for(SHARED_CACHE_KEY)))
        self.assertIsNone(cache.get(item_cache_key(5)))
        self.assertEqual(cache.get(item_cache_key(6)), "other")
        self.assertIn("Cleared 2 of 3 entries", out.getvalue())

    def test_nothing_cached(self):
        out = StringIO()

        call_command("clear_site_counts_cache", stdout=out)

        self.assertIn("not cached site-counts:site_counts_block", out.getvalue())
        self.assertIn("Cleared 0 of 1 entries", out.getvalue())

    def test_clears_entries_for_class_names(self):
        cache.set(cache_key_for(SHARED_CACHE_KEY, "site-counts"), "shared", 60)
        cache.set(item_cache_key(5, "site-counts"), "scoped", 60)
        cache.set(cache_key_for(SHARED_CACHE_KEY, "sidebar"), "kept", 60)
        out = StringIO()

        call_command("clear_site_counts_cache", "--post", "5", "--class-name", "site-counts", stdout=out)

        self.assertIsNone(cache.get(cache_key_for(SHARED_CACHE_KEY, "site-counts")))
        self.assertIsNone(cache.get(item_cache_key(5, "site-counts")))
        self.assertEqual(cache.get(cache_key_for(SHARED_CACHE_KEY, "sidebar")), "kept")
        self.assertIn("Cleared 2 of 4 entries", out.getvalue())
