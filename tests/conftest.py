"""Shared fixtures: in-memory database, fake vendor gateways and an HTTP client."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ["SUPABASE__JWT_SECRET"] = "test-jwt-secret"
os.environ["DATABASE__URL"] = "sqlite+aiosqlite://"
for _name in ("CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET"):
    os.environ.pop(_name, None)

import uuid
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Sequence

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from msc_admin.api.deps import get_auth_gateway, get_db_session, get_media_gateway
from msc_admin.core.config import DatabaseSettings, get_settings
from msc_admin.core.security import create_session_token
from msc_admin.db import models
from msc_admin.infrastructure.database import Base, engine_options
from msc_admin.main import create_app
from msc_admin.modules.media import AssetNotFoundError, MediaVendorError
from msc_admin.modules.users import AuthSession, AuthUser, AuthVendorError, InvalidCredentialsError


class FakeMediaGateway:
    """In-memory stand-in for the Cloudinary gateway that records every call."""

    def __init__(self, resources: Sequence[Mapping[str, Any]] = ()) -> None:
        self.resources: dict[str, dict[str, Any]] = {item["public_id"]: dict(item) for item in resources}
        self.folders: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, Any]] = []
        self.renamed: list[tuple[str, str]] = []
        self.deleted_folders: list[str] = []
        self.fail_rename_after: Optional[int] = None
        self.fail_subfolders: set[str] = set()
        self.vanished: set[str] = set()
        self.destroy_result = "ok"

    def add_folder(self, path: str, subfolders: Sequence[str] = ()) -> None:
        self.folders[path] = [{"name": name, "path": f"{path}/{name}"} for name in subfolders]

    async def search(self, expression, *, max_results=None, next_cursor=None, sort_by=None):
        self.calls.append(("search", expression))
        resources = list(self.resources.values())
        if expression.startswith("folder:"):
            prefix = expression[len("folder:"):].rstrip("*")
            resources = [item for item in resources if item["public_id"].startswith(prefix)]
        if max_results:
            resources = resources[:max_results]
        return {"resources": resources, "total_count": len(resources), "next_cursor": None}

    async def resource(self, public_id):
        self.calls.append(("resource", public_id))
        if public_id not in self.resources:
            raise AssetNotFoundError(f"Resource not found - {public_id}")
        return self.resources[public_id]

    async def upload(self, content, *, folder, tags):
        self.calls.append(("upload", folder))
        if content == b"broken":
            raise MediaVendorError("Invalid image file")
        public_id = f"{folder}/{uuid.uuid4().hex[:8]}"
        resource = {"public_id": public_id, "folder": folder, "format": "jpg", "bytes": len(content), "tags": list(tags)}
        self.resources[public_id] = resource
        return resource

    async def destroy(self, public_id):
        self.calls.append(("destroy", public_id))
        if public_id not in self.resources:
            return {"result": "not found"}
        if self.destroy_result != "ok":
            return {"result": self.destroy_result}
        del self.resources[public_id]
        return {"result": "ok"}

    async def update(self, public_id, *, tags=None, context=None):
        self.calls.append(("update", public_id))
        resource = await self.resource(public_id)
        if tags:
            resource["tags"] = tags.split(",")
        if context:
            resource["context"] = dict(context)
        return resource

    async def rename(self, from_public_id, to_public_id):
        self.calls.append(("rename", from_public_id))
        if self.fail_rename_after is not None and len(self.renamed) >= self.fail_rename_after:
            raise MediaVendorError("Rate limit exceeded")
        if from_public_id in self.vanished:
            raise AssetNotFoundError(f"Resource not found - {from_public_id}")
        resource = self.resources.pop(from_public_id)
        resource["public_id"] = to_public_id
        self.resources[to_public_id] = resource
        self.renamed.append((from_public_id, to_public_id))
        return resource

    async def delete_resources(self, public_ids):
        self.calls.append(("delete_resources", list(public_ids)))
        for public_id in public_ids:
            self.resources.pop(public_id, None)
        return {"deleted": {public_id: "deleted" for public_id in public_ids}}

    async def root_folders(self):
        self.calls.append(("root_folders", None))
        return {"folders": [{"name": path, "path": path} for path in self.folders]}

    async def sub_folders(self, path):
        self.calls.append(("sub_folders", path))
        if path in self.fail_subfolders:
            raise AssetNotFoundError("Can't find folder with path " + path)
        return {"folders": self.folders.get(path, [])}

    async def create_folder(self, path):
        self.calls.append(("create_folder", path))
        self.folders.setdefault(path, [])
        return {"success": True, "path": path, "name": path.rsplit("/", 1)[-1]}

    async def delete_folder(self, path):
        self.calls.append(("delete_folder", path))
        self.folders.pop(path, None)
        self.deleted_folders.append(path)
        return {"deleted": [path]}

    async def usage(self):
        self.calls.append(("usage", None))
        return {
            "plan": "Free",
            "credits": {"usage": 1.5},
            "storage": {"used": 2048},
            "bandwidth": {"used": 4096},
        }

    async def ping(self):
        self.calls.append(("ping", None))
        return {"status": "ok"}


class FakeAuthGateway:
    """In-memory stand-in for the Supabase admin and sign-in APIs."""

    def __init__(self) -> None:
        self.users: dict[str, AuthUser] = {}
        self.passwords: dict[str, str] = {}
        self.updates: list[tuple[str, dict[str, Any]]] = []
        self.deleted: list[str] = []
        self.fail_create = False

    def add_user(self, email: str, password: str = "secret123", *, user_id: Optional[str] = None, **metadata) -> AuthUser:
        user = AuthUser(
            id=user_id or str(uuid.uuid4()),
            email=email,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            user_metadata=dict(metadata),
        )
        self.users[user.id] = user
        self.passwords[email] = password
        return user

    async def list_users(self):
        return list(self.users.values())

    async def create_user(self, *, email, password, user_metadata, app_metadata):
        if self.fail_create:
            raise AuthVendorError("A user with this email address has already been registered")
        user = self.add_user(email, password, **user_metadata)
        user.app_metadata = dict(app_metadata)
        return user

    async def update_user(self, user_id, attributes):
        self.updates.append((user_id, dict(attributes)))
        user = self.users[user_id]
        user.user_metadata.update(attributes.get("user_metadata", {}))
        return user

    async def delete_user(self, user_id):
        self.deleted.append(user_id)
        self.users.pop(user_id, None)

    async def sign_in(self, email, password):
        if self.passwords.get(email) != password:
            raise InvalidCredentialsError("Invalid login credentials")
        user = next(item for item in self.users.values() if item.email == email)
        return AuthSession(access_token=create_session_token(user.id, email=email), refresh_token="refresh", user=user)


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
async def session_factory():
    url = "sqlite+aiosqlite://"
    engine = create_async_engine(url, **engine_options(DatabaseSettings(url=url)))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def media_gateway():
    return FakeMediaGateway(
        [
            {"public_id": "uploads/sample", "folder": "uploads", "format": "jpg", "bytes": 1024},
            {"public_id": "team/alice", "asset_folder": "team", "format": "png", "bytes": 2048},
            {"public_id": "team/bob", "format": "png", "bytes": 4096},
        ]
    )


@pytest.fixture
def auth_gateway():
    return FakeAuthGateway()


@pytest.fixture
def app(session_factory, media_gateway, auth_gateway):
    application = create_app()

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_db_session
    application.dependency_overrides[get_media_gateway] = lambda: media_gateway
    application.dependency_overrides[get_auth_gateway] = lambda: auth_gateway
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def make_profile(session_factory):
    """Insert a profile row and return a session token for it."""

    async def _make(role: Optional[str] = "admin", *, user_id: Optional[str] = None, email: str = "staff@example.com"):
        user_id = user_id or str(uuid.uuid4())
        if role is not None:
            async with session_factory() as session:
                session.add(models.Profile(id=user_id, full_name=f"{role} user", role=role))
                await session.commit()
        return user_id, create_session_token(user_id, email=email)

    return _make


@pytest.fixture
def auth_headers(make_profile):
    async def _headers(role: str = "admin"):
        _, token = await make_profile(role)
        return {"Authorization": f"Bearer {token}"}

    return _headers
