"""Tests for user management: merge rules, creation rollback and the users API."""

from msc_admin.api.deps import get_auth_gateway
from msc_admin.db import models
from msc_admin.modules.users import UserService
from msc_admin.modules.users.models import PLACEHOLDER_EMAIL


class TestListing:
    async def test_profiles_joined_with_auth_users(self, db_session, auth_gateway):
        user = auth_gateway.add_user("mai@example.com", full_name="Mai")
        db_session.add(models.Profile(id=user.id, full_name="Mai Tran", role="editor"))
        db_session.add(models.Profile(id="orphan", full_name=None, role="bogus"))
        await db_session.flush()

        users = {item.id: item for item in await UserService.with_session(db_session, auth_gateway).list_users()}
        assert users[user.id].email == "mai@example.com"
        assert users[user.id].role == "editor"
        assert users["orphan"].email == PLACEHOLDER_EMAIL
        assert users["orphan"].role == "user"

    async def test_auth_users_only(self, db_session, auth_gateway):
        auth_gateway.add_user("lan@example.com", role="collab")
        auth_gateway.add_user("noname@example.com", status="suspended")
        users = sorted(await UserService.with_session(db_session, auth_gateway).list_users(), key=lambda item: item.email)
        assert [(item.full_name, item.role, item.status) for item in users] == [
            ("lan", "collab", "active"),
            ("noname", "user", "suspended"),
        ]

    async def test_nothing_to_list(self, db_session):
        assert await UserService.with_session(db_session, None).list_users() == []


class TestUsersApi:
    async def test_admin_only(self, client, auth_headers):
        response = await client.get("/api/users", headers=await auth_headers("collab"))
        assert response.status_code == 403

    async def test_create_user_writes_auth_user_and_profile(self, client, auth_headers, auth_gateway, db_session):
        response = await client.post(
            "/api/users",
            json={"email": "new@example.com", "full_name": "New Person", "role": "collab", "password": "hunter22"},
            headers=await auth_headers(),
        )
        body = response.json()
        assert response.status_code == 201
        assert body["data"]["email"] == "new@example.com"
        assert body["data"]["role"] == "collab"
        created = auth_gateway.users[body["data"]["id"]]
        assert created.app_metadata == {"role": "collab"}
        assert await db_session.get(models.Profile, created.id) is not None

    async def test_profile_failure_removes_auth_user(self, client, auth_headers, auth_gateway, make_profile):
        await make_profile("collab", user_id="taken-id")
        real_create = auth_gateway.create_user

        async def create_with_taken_id(**kwargs):
            user = await real_create(**kwargs)
            auth_gateway.users.pop(user.id)
            user.id = "taken-id"
            auth_gateway.users[user.id] = user
            return user

        auth_gateway.create_user = create_with_taken_id
        response = await client.post(
            "/api/users",
            json={"email": "dup@example.com", "full_name": "Dup"},
            headers=await auth_headers(),
        )
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert auth_gateway.deleted == ["taken-id"]

    async def test_vendor_rejection_is_reported(self, client, auth_headers, auth_gateway):
        auth_gateway.fail_create = True
        response = await client.post(
            "/api/users",
            json={"email": "dup@example.com", "full_name": "Dup"},
            headers=await auth_headers(),
        )
        assert response.status_code == 400
        assert "already been registered" in response.json()["error"]

    async def test_update_user(self, client, auth_headers, auth_gateway, make_profile):
        user = auth_gateway.add_user("edit@example.com")
        await make_profile("collab", user_id=user.id)
        response = await client.put(
            f"/api/users/{user.id}",
            json={"full_name": "Edited", "role": "editor", "phone": "0900"},
            headers=await auth_headers(),
        )
        data = response.json()["data"]
        assert response.status_code == 200
        assert (data["full_name"], data["role"], data["phone"]) == ("Edited", "editor", "0900")
        assert auth_gateway.users[user.id].user_metadata["full_name"] == "Edited"

    async def test_update_unknown_user(self, client, auth_headers):
        response = await client.put("/api/users/missing", json={"role": "admin"}, headers=await auth_headers())
        assert response.status_code == 404

    async def test_suspend_and_reactivate(self, client, auth_headers, auth_gateway):
        user = auth_gateway.add_user("ban@example.com")
        headers = await auth_headers()
        response = await client.put(f"/api/users/{user.id}/status", json={"suspended": True}, headers=headers)
        assert response.json()["data"]["status"] == "suspended"
        await client.put(f"/api/users/{user.id}/status", json={"suspended": False}, headers=headers)
        assert [attributes["ban_duration"] for _, attributes in auth_gateway.updates] == ["876000h", "none"]

    async def test_delete_user(self, client, auth_headers, auth_gateway, make_profile, db_session):
        user = auth_gateway.add_user("bye@example.com")
        await make_profile("collab", user_id=user.id)
        response = await client.delete(f"/api/users/{user.id}", headers=await auth_headers())
        assert response.status_code == 200
        assert auth_gateway.deleted == [user.id]
        assert await db_session.get(models.Profile, user.id) is None

    async def test_writes_need_auth_service(self, app, client, auth_headers):
        app.dependency_overrides[get_auth_gateway] = lambda: None
        response = await client.post(
            "/api/users",
            json={"email": "x@example.com", "full_name": "X"},
            headers=await auth_headers(),
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Supabase not configured"
