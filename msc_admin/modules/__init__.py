"""Feature modules and their shared exports."""

from . import access, media, posts, users

__all__ = [
    "access",
    "media",
    "posts",
    "users",
]
