"""Blog post domain specific exceptions."""


class BlogPostError(Exception):
    """Base class for blog post errors."""


class BlogPostNotFoundError(BlogPostError):
    """Raised when the requested post does not exist."""


class BlogPostSlugConflictError(BlogPostError):
    """Raised when another post already uses the slug."""
