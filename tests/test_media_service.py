"""Tests for the media service against an in-memory gateway."""

import pytest

from msc_admin.modules.media import (
    AssetDeleteRejectedError,
    MediaNotConfiguredError,
    MediaService,
    MediaValidationError,
    MediaVendorError,
    UploadedFile,
    build_search_expression,
    split_tags,
)
from msc_admin.modules.media.mock_data import MOCK_MESSAGE

from conftest import FakeMediaGateway


def _gallery(count, folder="events"):
    return FakeMediaGateway([{"public_id": f"{folder}/photo{index}", "format": "jpg"} for index in range(count)])


class TestSearchExpression:
    def test_plain(self):
        assert build_search_expression() == "resource_type:image"

    def test_folder_and_tags(self):
        expression = build_search_expression("blog", ["hero", "", "2024"])
        assert expression == "resource_type:image AND folder:blog* AND (tags:hero AND tags:2024)"

    def test_split_tags(self):
        assert split_tags(" a, b ,,c ") == ["a", "b", "c"]
        assert split_tags(None) == []


class TestUnconfigured:
    async def test_list_serves_mock_data(self):
        result = await MediaService(None).list_images(folder="blog")
        assert result.message == MOCK_MESSAGE
        assert [item["public_id"] for item in result.data["resources"]] == ["blog/cover"]

    async def test_folders_and_stats_serve_mock_data(self):
        service = MediaService(None)
        assert (await service.list_folders()).message == MOCK_MESSAGE
        assert (await service.get_stats()).data["totalImages"] == 2

    async def test_other_operations_are_refused(self):
        service = MediaService(None)
        with pytest.raises(MediaNotConfiguredError):
            await service.get_image("blog/cover")
        with pytest.raises(MediaNotConfiguredError):
            await service.rename_folder("a", "b")


class TestUpload:
    async def test_empty_file_list_does_not_contact_vendor(self):
        gateway = FakeMediaGateway()
        with pytest.raises(MediaValidationError) as excinfo:
            await MediaService(gateway).upload_images([])
        assert excinfo.value.error == "No files provided"
        assert gateway.calls == []

    async def test_partial_failure_is_reported_per_file(self):
        gateway = FakeMediaGateway()
        files = [UploadedFile("ok.jpg", b"pixels"), UploadedFile("bad.jpg", b"broken")]
        result = await MediaService(gateway).upload_images(files, tags=["news"])
        assert result.success
        assert result.data["successCount"] == 1
        assert result.data["failureCount"] == 1
        assert result.data["failed"][0]["filename"] == "bad.jpg"
        assert gateway.calls == [("upload", "uploads"), ("upload", "uploads")]

    async def test_all_failed_is_not_a_success(self):
        result = await MediaService(FakeMediaGateway()).upload_images([UploadedFile("bad.jpg", b"broken")], folder="blog")
        assert not result.success
        assert result.data["total"] == 1


class TestDelete:
    async def test_rejected_destroy_carries_vendor_result(self):
        gateway = _gallery(1)
        gateway.destroy_result = "error"
        with pytest.raises(AssetDeleteRejectedError) as excinfo:
            await MediaService(gateway).delete_image("events/photo0")
        assert excinfo.value.details == {"result": "error"}

    async def test_missing_public_id(self):
        with pytest.raises(MediaValidationError):
            await MediaService(FakeMediaGateway()).delete_image("")


class TestFolders:
    async def test_rename_moves_every_asset_then_drops_old_folder(self):
        gateway = _gallery(3)
        result = await MediaService(gateway).rename_folder("events", "archive/events")
        assert result.data["status"] == "renamed"
        assert sorted(gateway.resources) == ["archive/events/photo0", "archive/events/photo1", "archive/events/photo2"]
        assert gateway.deleted_folders == ["events"]

    async def test_rename_failure_leaves_first_k_assets_renamed(self):
        gateway = _gallery(5)
        gateway.fail_rename_after = 2
        with pytest.raises(MediaVendorError) as excinfo:
            await MediaService(gateway).rename_folder("events", "past")
        assert excinfo.value.error == "Failed to rename folder"
        moved = [public_id for public_id in gateway.resources if public_id.startswith("past/")]
        untouched = [public_id for public_id in gateway.resources if public_id.startswith("events/")]
        assert len(moved) == 2
        assert len(untouched) == 3
        assert gateway.deleted_folders == []

    async def test_rename_stops_when_an_asset_vanished(self):
        gateway = _gallery(3)
        gateway.vanished.add("events/photo1")
        with pytest.raises(MediaVendorError) as excinfo:
            await MediaService(gateway).rename_folder("events", "past")
        assert excinfo.value.status_code == 500
        assert excinfo.value.error == "Failed to rename folder"
        assert gateway.renamed == [("events/photo0", "past/photo0")]
        assert gateway.deleted_folders == []

    async def test_update_of_missing_image_is_a_vendor_failure(self):
        with pytest.raises(MediaVendorError) as excinfo:
            await MediaService(_gallery(1)).update_image("events/gone", tags=["x"])
        assert excinfo.value.error == "Failed to update image"

    async def test_rename_requires_both_paths(self):
        with pytest.raises(MediaValidationError):
            await MediaService(FakeMediaGateway()).rename_folder("events", "")

    async def test_delete_folder_removes_assets_first(self):
        gateway = _gallery(2)
        await MediaService(gateway).delete_folder("events")
        assert gateway.resources == {}
        assert [name for name, _ in gateway.calls] == ["search", "delete_resources", "delete_folder"]

    async def test_subfolder_failure_yields_empty_list(self):
        gateway = FakeMediaGateway()
        gateway.add_folder("blog", ["2024"])
        gateway.add_folder("broken")
        gateway.fail_subfolders.add("broken")
        result = await MediaService(gateway).list_folders()
        folders = {item["path"]: item["subfolders"] for item in result.data["folders"]}
        assert folders == {"blog": [{"name": "2024", "path": "blog/2024"}], "broken": []}


class TestStatsAndCatalog:
    async def test_stats_count_formats(self):
        gateway = FakeMediaGateway(
            [
                {"public_id": "a", "format": "jpg"},
                {"public_id": "b", "format": "jpg"},
                {"public_id": "c", "format": "png"},
            ]
        )
        result = await MediaService(gateway).get_stats()
        assert {item["format"]: item["count"] for item in result.data["formats"]} == {"jpg": 2, "png": 1}
        assert result.data["totalImages"] == 3
        assert result.data["storage"]["used"] == 2048

    async def test_catalog_scopes_assets_to_folder(self, media_gateway):
        media_gateway.add_folder("team")
        view = await MediaService(media_gateway).catalog(folder="team")
        assert sorted(asset.public_id for asset in view.assets) == ["team/alice", "team/bob"]
        assert [folder.path for folder in view.folders] == ["team"]
        assert view.message is None
