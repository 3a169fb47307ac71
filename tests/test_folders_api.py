"""HTTP tests for the folder endpoints."""

from msc_admin.api.deps import get_media_gateway


async def test_list_folders_with_subfolders(client, auth_headers, media_gateway):
    media_gateway.add_folder("blog", ["2023", "2024"])
    media_gateway.add_folder("team")
    response = await client.get("/api/images/folders", headers=await auth_headers())
    folders = response.json()["data"]["folders"]
    assert response.status_code == 200
    assert [item["path"] for item in folders] == ["blog", "team"]
    assert [item["path"] for item in folders[0]["subfolders"]] == ["blog/2023", "blog/2024"]
    assert folders[1]["subfolders"] == []


async def test_unconfigured_folder_list_is_mocked(app, client, auth_headers):
    app.dependency_overrides[get_media_gateway] = lambda: None
    response = await client.get("/api/images/folders", headers=await auth_headers())
    body = response.json()
    assert [item["name"] for item in body["data"]["folders"]] == ["uploads", "blog", "products"]
    assert body["message"] == "Using mock data - Cloudinary not configured"


async def test_create_folder(client, auth_headers, media_gateway):
    response = await client.post("/api/images/folders", json={"folderPath": "blog/2025"}, headers=await auth_headers())
    assert response.status_code == 200
    assert response.json()["data"] == {"folder_path": "blog/2025", "status": "created"}
    assert "blog/2025" in media_gateway.folders


async def test_create_folder_requires_path(client, auth_headers, media_gateway):
    response = await client.post("/api/images/folders", json={}, headers=await auth_headers())
    assert response.status_code == 400
    assert response.json()["error"] == "Folder path is required"
    assert media_gateway.calls == []


async def test_delete_folder_removes_its_assets(client, auth_headers, media_gateway):
    media_gateway.add_folder("team")
    response = await client.delete("/api/images/folders", params={"path": "team"}, headers=await auth_headers())
    assert response.status_code == 200
    assert sorted(media_gateway.resources) == ["uploads/sample"]
    assert media_gateway.deleted_folders == ["team"]


async def test_rename_folder(client, auth_headers, media_gateway):
    response = await client.put(
        "/api/images/folders",
        json={"oldPath": "team", "newPath": "staff"},
        headers=await auth_headers(),
    )
    assert response.status_code == 200
    assert sorted(media_gateway.resources) == ["staff/alice", "staff/bob", "uploads/sample"]


async def test_partial_rename_surfaces_generic_error(client, auth_headers, media_gateway):
    media_gateway.fail_rename_after = 1
    response = await client.put(
        "/api/images/folders",
        json={"oldPath": "team", "newPath": "staff"},
        headers=await auth_headers(),
    )
    body = response.json()
    assert response.status_code == 500
    assert body["success"] is False
    assert body["error"] == "Failed to rename folder"
    assert len(media_gateway.renamed) == 1
    assert sum(public_id.startswith("team/") for public_id in media_gateway.resources) == 1


async def test_missing_subfolder_listing_is_empty(client, auth_headers, media_gateway):
    media_gateway.add_folder("blog", ["2024"])
    media_gateway.add_folder("gone")
    media_gateway.fail_subfolders.add("gone")
    response = await client.get("/api/images/folders", headers=await auth_headers())
    folders = {item["path"]: item["subfolders"] for item in response.json()["data"]["folders"]}
    assert response.status_code == 200
    assert folders["gone"] == []
    assert [item["path"] for item in folders["blog"]] == ["blog/2024"]


async def test_rename_with_vanished_asset_is_generic_failure(client, auth_headers, media_gateway):
    media_gateway.vanished.add("team/bob")
    response = await client.put(
        "/api/images/folders",
        json={"oldPath": "team", "newPath": "crew"},
        headers=await auth_headers(),
    )
    body = response.json()
    assert response.status_code == 500
    assert body["error"] == "Failed to rename folder"
    assert media_gateway.renamed == [("team/alice", "crew/alice")]
