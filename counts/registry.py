# counts/registry.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.core.exceptions import ImproperlyConfigured
from django.db import models


@dataclass(frozen=True)
class PostType:
    """A registered kind of content, e.g. posts or pages."""

    name: str
    model: type[models.Model]
    public: bool = True

    @property
    def singular_name(self) -> str:
        return str(self.model._meta.verbose_name)

    @property
    def plural_name(self) -> str:
        return str(self.model._meta.verbose_name_plural)

    def published_count(self) -> int:
        return self.model._default_manager.published().count()


class PostTypeRegistry:
    """
    Content types known to the site, in registration order.
    Apps register theirs from AppConfig.ready().
    """

    def __init__(self) -> None:
        self._types: dict[str, PostType] = {}

    def register(self, name: str, model: type[models.Model], public: bool = True) -> PostType:
        if name in self._types:
            raise ImproperlyConfigured(f"Post type {name!r} is already registered")
        post_type = PostType(name=name, model=model, public=public)
        self._types[name] = post_type
        return post_type

    def get(self, name: str) -> Optional[PostType]:
        return self._types.get(name)

    def public(self) -> list[PostType]:
        return [t for t in self._types.values() if t.public]

    def type_of(self, obj) -> Optional[str]:
        for post_type in self._types.values():
            if isinstance(obj, post_type.model):
                return post_type.name
        return None

    def __contains__(self, name: str) -> bool:
        return name in self._types


post_types = PostTypeRegistry()
