"""Domain models for blog posts."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Optional


@dataclass(slots=True)
class BlogPost:
    id: int
    slug: str
    title: str
    excerpt: Optional[str] = None
    image: Optional[str] = None
    author: Optional[str] = None
    author_avatar: Optional[str] = None
    author_bio: Optional[str] = None
    publish_date: Optional[str] = None
    category: Optional[str] = None
    content: Optional[str] = None
    read_time: Optional[str] = None
    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0
    featured: bool = False
    tags: list[str] = field(default_factory=list)
    seo: Optional[dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class BlogPostCreateInput:
    title: str
    content: str
    author: str
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    image: Optional[str] = None
    author_avatar: Optional[str] = None
    author_bio: Optional[str] = None
    publish_date: Optional[str] = None
    category: Optional[str] = None
    read_time: Optional[str] = None
    featured: bool = False
    tags: list[str] = field(default_factory=list)
    seo: Optional[dict[str, Any]] = None
    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0

    def as_values(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}
