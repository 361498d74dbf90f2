# counts/views.py
from __future__ import annotations

from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET

from .block import SiteCountsBlock
from .registry import post_types


@require_GET
def block(request: HttpRequest) -> HttpResponse:
    """
    Bare HTML fragment of the block, for editor previews.
    ?class_name=<css class>  ?post=<id of the item being edited>
    """
    renderer = SiteCountsBlock()
    class_name = (request.GET.get("class_name") or "").strip()

    item = None
    raw_id = (request.GET.get("post") or "").strip()
    if raw_id:
        if not raw_id.isdigit():
            raise Http404("Unknown post")
        post_type = post_types.get(renderer.config.post_type)
        if post_type is None:
            raise Http404("Unknown post")
        item = get_object_or_404(post_type.model, pk=int(raw_id))

    html = renderer.render({"class_name": class_name}, item=item)
    return HttpResponse(html, content_type="text/html; charset=utf-8")
