"""Database infrastructure helpers (engine, sessions, migrations)."""

from .base import Base
from .session import dispose_engine, engine_options, get_engine, get_session, init_db

__all__ = ["Base", "dispose_engine", "engine_options", "get_engine", "get_session", "init_db"]
