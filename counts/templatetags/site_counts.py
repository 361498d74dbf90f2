from __future__ import annotations

from django import template
from django.utils.safestring import mark_safe

from ..block import SiteCountsBlock

register = template.Library()


@register.simple_tag(takes_context=True)
def site_counts_block(context, item=None, class_name: str = ""):
    """
    Published counts plus the tagged post list:
      {% site_counts_block item=post class_name="widget" %}
    Without `item` the `object` context variable is used as the current item.
    """
    if item is None:
        item = context.get("object")
    html = SiteCountsBlock().render({"class_name": class_name}, item=item)
    return mark_safe(html)
