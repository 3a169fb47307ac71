"""SQLAlchemy ORM models for the content tables mirrored from the hosted database."""
import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from msc_admin.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class BlogPost(Base):
    __tablename__ = "allblogposts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    excerpt = Column(Text)
    image = Column(String(1024))
    author = Column(String(100))
    author_avatar = Column(String(1024))
    author_bio = Column(Text)
    publish_date = Column(String(50))
    category = Column(String(100))
    content = Column(Text)
    read_time = Column(String(50))
    views = Column(Integer, default=0)
    likes = Column(Integer, default=0)
    comments = Column(Integer, default=0)
    shares = Column(Integer, default=0)
    featured = Column(Boolean, default=False)
    tags = Column(JSON)
    seo = Column(JSON)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class Profile(Base):
    __tablename__ = "profiles"

    # Same id as the auth user the profile belongs to.
    id = Column(String(36), primary_key=True, default=generate_uuid)
    full_name = Column(String(255))
    avatar_url = Column(String(1024))
    role = Column(String(20), default="user")
    phone = Column(String(30))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
