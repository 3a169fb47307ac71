"""SQLAlchemy implementation of the blog post repository."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from msc_admin.db.models import BlogPost as BlogPostModel
from msc_admin.modules.posts.exceptions import BlogPostNotFoundError
from msc_admin.modules.posts.models import BlogPost
from msc_admin.modules.posts.repository import BlogPostRepository

COUNTER_COLUMNS = {"views", "likes", "comments", "shares"}


class SqlBlogPostRepository(BlogPostRepository):
    """Blog post repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_posts(self) -> Sequence[BlogPost]:
        stmt = select(BlogPostModel).order_by(BlogPostModel.created_at.desc(), BlogPostModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_by_id(self, post_id: int) -> BlogPost | None:
        model = await self._session.get(BlogPostModel, post_id)
        return self._to_domain(model) if model else None

    async def get_by_slug(self, slug: str) -> BlogPost | None:
        stmt = select(BlogPostModel).where(BlogPostModel.slug == slug)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def create_post(self, values: Mapping[str, Any]) -> BlogPost:
        model = BlogPostModel(**values)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def update_post(self, post_id: int, values: Mapping[str, Any]) -> BlogPost:
        model = await self._session.get(BlogPostModel, post_id)
        if model is None:
            raise BlogPostNotFoundError(post_id)
        for key, value in values.items():
            setattr(model, key, value)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def delete_post(self, post_id: int) -> bool:
        stmt = delete(BlogPostModel).where(BlogPostModel.id == post_id)
        result = await self._session.execute(stmt)
        return bool(result.rowcount)

    async def increment_counter(self, post_id: int, column: str) -> int:
        if column not in COUNTER_COLUMNS:
            raise ValueError(f"unknown counter column: {column}")
        attribute = getattr(BlogPostModel, column)
        stmt = (
            update(BlogPostModel)
            .where(BlogPostModel.id == post_id)
            .values({attribute: func.coalesce(attribute, 0) + 1})
            .returning(attribute)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        value = result.scalar_one_or_none()
        if value is None:
            raise BlogPostNotFoundError(post_id)
        return value

    @staticmethod
    def _to_domain(model: BlogPostModel) -> BlogPost:
        return BlogPost(
            id=model.id,
            slug=model.slug,
            title=model.title,
            excerpt=model.excerpt,
            image=model.image,
            author=model.author,
            author_avatar=model.author_avatar,
            author_bio=model.author_bio,
            publish_date=model.publish_date,
            category=model.category,
            content=model.content,
            read_time=model.read_time,
            views=model.views or 0,
            likes=model.likes or 0,
            comments=model.comments or 0,
            shares=model.shares or 0,
            featured=bool(model.featured),
            tags=list(model.tags or []),
            seo=model.seo,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
