from django.http import Http404
from django.shortcuts import render

from .models import Page


def detail(request, slug):
    page = Page.objects.published().filter(slug=slug).first()
    if page is None:
        raise Http404("Page not found")
    return render(request, "pages/detail.html", {"page": page, "object": page})
