"""Repository protocol for blog posts."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .models import BlogPost


class BlogPostRepository(Protocol):
    async def list_posts(self) -> Sequence[BlogPost]:
        ...

    async def get_by_id(self, post_id: int) -> BlogPost | None:
        ...

    async def get_by_slug(self, slug: str) -> BlogPost | None:
        ...

    async def create_post(self, values: Mapping[str, Any]) -> BlogPost:
        ...

    async def update_post(self, post_id: int, values: Mapping[str, Any]) -> BlogPost:
        ...

    async def delete_post(self, post_id: int) -> bool:
        ...

    async def increment_counter(self, post_id: int, column: str) -> int:
        ...
