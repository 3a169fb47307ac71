"""Blog post use cases over the hosted ``allblogposts`` table."""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import BlogPostNotFoundError, BlogPostSlugConflictError
from .models import BlogPost, BlogPostCreateInput
from .repository import BlogPostRepository

logger = logging.getLogger(__name__)

_SLUG_STRIP = re.compile(r"[^\w\s-]", re.ASCII)
_SLUG_SEPARATORS = re.compile(r"[\s_-]+", re.ASCII)

UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "slug",
        "content",
        "excerpt",
        "author",
        "author_avatar",
        "author_bio",
        "category",
        "image",
        "tags",
        "featured",
        "publish_date",
        "read_time",
        "views",
        "likes",
        "shares",
        "comments",
        "seo",
    }
)


def generate_slug(title: str) -> str:
    slug = _SLUG_STRIP.sub("", title.lower())
    slug = _SLUG_SEPARATORS.sub("-", slug)
    return slug.strip("-")


class BlogPostService:
    """Encapsulates blog post use cases."""

    def __init__(self, repository: BlogPostRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "BlogPostService":
        # Deferred: the repository module imports this package.
        from msc_admin.infrastructure.database.repositories.blog_post_repository import SqlBlogPostRepository

        return cls(SqlBlogPostRepository(session))

    async def list_posts(self) -> Sequence[BlogPost]:
        return await self._repository.list_posts()

    async def get_post(self, post_id: int) -> BlogPost:
        post = await self._repository.get_by_id(post_id)
        if post is None:
            raise BlogPostNotFoundError(post_id)
        return post

    async def create_post(self, payload: BlogPostCreateInput) -> BlogPost:
        values = payload.as_values()
        values["slug"] = payload.slug or generate_slug(payload.title)
        if await self._repository.get_by_slug(values["slug"]) is not None:
            raise BlogPostSlugConflictError(values["slug"])
        post = await self._repository.create_post(values)
        logger.info("Created blog post %s (%s)", post.id, post.slug)
        return post

    async def update_post(self, post_id: int, changes: Mapping[str, Any]) -> BlogPost:
        values = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        if "slug" in values:
            existing = await self._repository.get_by_slug(values["slug"])
            if existing is not None and existing.id != post_id:
                raise BlogPostSlugConflictError(values["slug"])
        return await self._repository.update_post(post_id, values)

    async def delete_post(self, post_id: int) -> None:
        if not await self._repository.delete_post(post_id):
            raise BlogPostNotFoundError(post_id)

    async def increment_views(self, post_id: int) -> int:
        return await self._repository.increment_counter(post_id, "views")

    async def increment_likes(self, post_id: int) -> int:
        return await self._repository.increment_counter(post_id, "likes")
