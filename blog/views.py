# blog/views.py
from __future__ import annotations

from django.core.paginator import Paginator
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import render

from .models import Category, Post, Tag


# ───────────────────────── Public pages ─────────────────────────

def index(request: HttpRequest) -> HttpResponse:
    tag_slug = (request.GET.get("tag") or "").strip()
    category_slug = (request.GET.get("category") or "").strip()
    page = request.GET.get("page") or 1
    per_page = 12

    qs = Post.objects.published()

    active_tag = None
    if tag_slug:
        active_tag = Tag.objects.filter(slug=tag_slug).first()
        if active_tag:
            qs = qs.filter(tags=active_tag)

    active_category = None
    if category_slug:
        active_category = Category.objects.filter(slug=category_slug).first()
        if active_category:
            qs = qs.filter(categories=active_category)

    paginator = Paginator(
        qs.only("id", "slug", "title", "excerpt", "published_at"),
        per_page
    )
    page_obj = paginator.get_page(page)

    # query string without page, for pagination links
    params = request.GET.copy()
    params.pop("page", None)
    keep_query = params.urlencode()

    ctx = {
        "active_tag": active_tag,
        "active_category": active_category,
        "posts": page_obj.object_list,
        "paginator": paginator,
        "page_obj": page_obj,
        "keep_query": keep_query,
        "result_count": paginator.count,
    }
    return render(request, "blog/index.html", ctx)


def detail(request: HttpRequest, slug: str) -> HttpResponse:
    """
    The public sees published posts only; staff can open drafts too.
    """
    post = Post.objects.published().filter(slug=slug).first()

    if post is None and request.user.is_authenticated and (request.user.is_staff or request.user.is_superuser):
        post = Post.objects.filter(slug=slug).first()

    if post is None:
        raise Http404("Post not found")

    return render(request, "blog/detail.html", {"post": post, "object": post})
