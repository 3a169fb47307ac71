"""Blog post domain exports."""

from .exceptions import BlogPostError, BlogPostNotFoundError, BlogPostSlugConflictError
from .models import BlogPost, BlogPostCreateInput
from .service import BlogPostService, generate_slug

__all__ = [
    "BlogPost",
    "BlogPostCreateInput",
    "BlogPostError",
    "BlogPostNotFoundError",
    "BlogPostService",
    "BlogPostSlugConflictError",
    "generate_slug",
]
