"""SQLAlchemy-backed repository implementations."""

from .blog_post_repository import SqlBlogPostRepository
from .profile_repository import SqlProfileRepository

__all__ = [
    "SqlBlogPostRepository",
    "SqlProfileRepository",
]
