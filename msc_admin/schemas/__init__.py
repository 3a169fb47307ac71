"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """Uniform envelope returned by every JSON endpoint."""

    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    message: Optional[str] = None
    details: Optional[Any] = None


class ImageUpdateRequest(BaseModel):
    tags: Optional[Union[list[str], str]] = None
    context: Optional[dict[str, str]] = None


class FolderCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    folder_path: Optional[str] = Field(default=None, alias="folderPath")


class FolderRenameRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_path: Optional[str] = Field(default=None, alias="oldPath")
    new_path: Optional[str] = Field(default=None, alias="newPath")


class SeoMetadata(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    keywords: list[str] = Field(default_factory=list)


class BlogPostBase(BaseModel):
    excerpt: Optional[str] = None
    image: Optional[str] = None
    author_avatar: Optional[str] = None
    author_bio: Optional[str] = None
    category: Optional[str] = None
    publish_date: Optional[str] = None
    read_time: Optional[str] = None
    featured: bool = False
    tags: list[str] = Field(default_factory=list)
    seo: Optional[SeoMetadata] = None


class BlogPostCreate(BlogPostBase):
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(default=None, max_length=255)


class BlogPostUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    author: Optional[str] = None
    author_avatar: Optional[str] = None
    author_bio: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[list[str]] = None
    featured: Optional[bool] = None
    publish_date: Optional[str] = None
    read_time: Optional[str] = None
    views: Optional[int] = Field(default=None, ge=0)
    likes: Optional[int] = Field(default=None, ge=0)
    shares: Optional[int] = Field(default=None, ge=0)
    comments: Optional[int] = Field(default=None, ge=0)
    seo: Optional[SeoMetadata] = None


class BlogPostResponse(BlogPostBase):
    id: int
    slug: str
    title: str
    author: Optional[str] = None
    content: Optional[str] = None
    views: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CounterResponse(BaseModel):
    id: int
    value: int


class UserCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    full_name: str = Field(..., min_length=1, max_length=255)
    role: str = "user"
    password: Optional[str] = Field(default=None, min_length=6)
    avatar_url: Optional[str] = None
    phone: Optional[str] = None


class UserUpdate(BaseModel):
    full_name: Optional[str] = None
    role: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: Optional[str] = None


class UserStatusUpdate(BaseModel):
    suspended: bool


class UserResponse(BaseModel):
    id: str
    email: str
    full_name: str
    role: str
    status: str
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None
    courses_count: int = 0
    projects_count: int = 0

    model_config = ConfigDict(from_attributes=True)


class ProfileResponse(BaseModel):
    id: str
    full_name: Optional[str] = None
    role: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: Optional[str] = None
    role: str
    redirect_to: str
