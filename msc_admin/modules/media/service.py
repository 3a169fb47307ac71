"""Media use cases proxied to the hosted media vendor."""

from __future__ import annotations

import copy
import logging
from collections import Counter
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional, Sequence

from .catalog import filter_assets
from .exceptions import (
    AssetDeleteRejectedError,
    AssetNotFoundError,
    MediaError,
    MediaNotConfiguredError,
    MediaValidationError,
    MediaVendorError,
)
from .gateway import MediaGateway
from .mock_data import MOCK_FOLDERS, MOCK_MESSAGE, MOCK_RESOURCES, MOCK_STATS
from .models import Asset, Folder, UploadedFile

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_FOLDER = "uploads"
DEFAULT_PAGE_SIZE = 50
STATS_SAMPLE_SIZE = 500


@dataclass(slots=True)
class MediaResult:
    data: Any
    success: bool = True
    message: Optional[str] = None


@dataclass(slots=True)
class CatalogView:
    assets: list[Asset]
    folders: list[Folder]
    selected_folder: str
    query: str
    message: Optional[str] = None


@contextmanager
def _vendor_operation(error: str, *, keep_not_found: bool = False) -> Iterator[None]:
    """Re-label gateway failures with the operation that failed.

    A vendor not-found keeps its 404 only when ``keep_not_found`` is set.
    """
    try:
        yield
    except (AssetNotFoundError, MediaVendorError) as exc:
        if keep_not_found and isinstance(exc, AssetNotFoundError):
            raise
        logger.error("%s: %s", error, exc)
        raise MediaVendorError(exc.message or str(exc), error=error) from exc


def build_search_expression(folder: str = "", tags: Sequence[str] = ()) -> str:
    expression = "resource_type:image"
    if folder:
        expression += f" AND folder:{folder}*"
    tags = [tag for tag in tags if tag]
    if tags:
        expression += " AND (" + " AND ".join(f"tags:{tag}" for tag in tags) + ")"
    return expression


def split_tags(raw: Optional[str]) -> list[str]:
    if not raw:
        return []
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


class MediaService:
    """Stateless proxy over the media vendor.

    ``gateway`` is ``None`` when the vendor credentials are missing; reads then
    fall back to mock payloads and every other operation is refused.
    """

    def __init__(self, gateway: MediaGateway | None) -> None:
        self._gateway = gateway

    @property
    def configured(self) -> bool:
        return self._gateway is not None

    def _require_gateway(self) -> MediaGateway:
        if self._gateway is None:
            raise MediaNotConfiguredError()
        return self._gateway

    async def list_images(
        self,
        *,
        folder: str = "",
        tags: Sequence[str] = (),
        limit: int = DEFAULT_PAGE_SIZE,
        next_cursor: Optional[str] = None,
    ) -> MediaResult:
        if self._gateway is None:
            resources = [
                copy.deepcopy(resource)
                for resource in MOCK_RESOURCES
                if not folder or (resource.get("folder") or "").startswith(folder)
            ]
            return MediaResult(
                data={"resources": resources, "next_cursor": None, "total_count": len(resources)},
                message=MOCK_MESSAGE,
            )

        expression = build_search_expression(folder, tags)
        with _vendor_operation("Failed to fetch images"):
            result = await self._gateway.search(
                expression,
                max_results=limit,
                next_cursor=next_cursor or None,
                sort_by=("created_at", "desc"),
            )
        return MediaResult(
            data={
                "resources": result.get("resources", []),
                "next_cursor": result.get("next_cursor"),
                "total_count": result.get("total_count", 0),
            }
        )

    async def get_image(self, public_id: str) -> MediaResult:
        gateway = self._require_gateway()
        with _vendor_operation("Failed to fetch image details", keep_not_found=True):
            return MediaResult(data=await gateway.resource(public_id))

    async def update_image(
        self,
        public_id: str,
        *,
        tags: Sequence[str] | str | None = None,
        context: Optional[Mapping[str, str]] = None,
    ) -> MediaResult:
        gateway = self._require_gateway()
        joined_tags = None
        if tags:
            joined_tags = tags if isinstance(tags, str) else ",".join(tags)
        with _vendor_operation("Failed to update image"):
            result = await gateway.update(public_id, tags=joined_tags, context=context or None)
        return MediaResult(data=result)

    async def delete_image(self, public_id: str) -> MediaResult:
        gateway = self._require_gateway()
        if not public_id:
            raise MediaValidationError("Public ID is required")
        with _vendor_operation("Failed to delete image"):
            result = await gateway.destroy(public_id)
        if result.get("result") != "ok":
            raise AssetDeleteRejectedError(details=result)
        logger.info("Deleted image %s", public_id)
        return MediaResult(data={"public_id": public_id, "status": "deleted"})

    async def upload_images(
        self,
        files: Sequence[UploadedFile],
        *,
        folder: Optional[str] = None,
        tags: Sequence[str] = (),
    ) -> MediaResult:
        gateway = self._require_gateway()
        if not files:
            raise MediaValidationError("No files provided")

        target_folder = folder or DEFAULT_UPLOAD_FOLDER
        successful: list[dict[str, Any]] = []
        failed: list[dict[str, Any]] = []

        # One file at a time; a failed file does not stop the batch.
        for upload in files:
            try:
                result = await gateway.upload(upload.content, folder=target_folder, tags=list(tags))
            except MediaError as exc:
                logger.error("Error uploading %s: %s", upload.filename, exc)
                failed.append(
                    {"success": False, "error": exc.message or "Upload failed", "filename": upload.filename}
                )
                continue
            successful.append({"success": True, "data": result, "filename": upload.filename})

        return MediaResult(
            success=len(successful) > 0,
            data={
                "successful": successful,
                "failed": failed,
                "total": len(files),
                "successCount": len(successful),
                "failureCount": len(failed),
            },
        )

    async def list_folders(self) -> MediaResult:
        if self._gateway is None:
            return MediaResult(data={"folders": copy.deepcopy(MOCK_FOLDERS)}, message=MOCK_MESSAGE)

        with _vendor_operation("Failed to fetch folders"):
            result = await self._gateway.root_folders()

        folders: list[dict[str, Any]] = []
        for folder in result.get("folders", []):
            try:
                sub = await self._gateway.sub_folders(folder["path"])
                subfolders = sub.get("folders") or []
            except MediaError as exc:
                logger.warning("Could not list subfolders of %s: %s", folder.get("path"), exc)
                subfolders = []
            folders.append({**folder, "subfolders": subfolders})
        return MediaResult(data={"folders": folders})

    async def create_folder(self, folder_path: Optional[str]) -> MediaResult:
        gateway = self._require_gateway()
        if not folder_path:
            raise MediaValidationError("Folder path is required")
        with _vendor_operation("Failed to create folder"):
            await gateway.create_folder(folder_path)
        logger.info("Created folder %s", folder_path)
        return MediaResult(data={"folder_path": folder_path, "status": "created"})

    async def delete_folder(self, folder_path: Optional[str]) -> MediaResult:
        gateway = self._require_gateway()
        if not folder_path:
            raise MediaValidationError("Folder path is required")
        with _vendor_operation("Failed to delete folder"):
            found = await gateway.search(f"folder:{folder_path}/*")
            public_ids = [resource["public_id"] for resource in found.get("resources", [])]
            if public_ids:
                await gateway.delete_resources(public_ids)
            await gateway.delete_folder(folder_path)
        logger.info("Deleted folder %s with %d assets", folder_path, len(public_ids))
        return MediaResult(data={"folder_path": folder_path, "status": "deleted"})

    async def rename_folder(self, old_path: Optional[str], new_path: Optional[str]) -> MediaResult:
        """Move every asset under ``old_path`` to ``new_path``.

        Not atomic: assets are renamed one by one and a failure stops the
        loop, leaving the assets renamed so far under the new path.
        """
        gateway = self._require_gateway()
        if not old_path or not new_path:
            raise MediaValidationError("Both old path and new path are required")

        with _vendor_operation("Failed to rename folder"):
            found = await gateway.search(f"folder:{old_path}/*")
            resources = found.get("resources", [])
            for index, resource in enumerate(resources):
                public_id = resource["public_id"]
                try:
                    await gateway.rename(public_id, public_id.replace(old_path, new_path, 1))
                except MediaError:
                    logger.error(
                        "Folder rename %s -> %s stopped at %s (%d of %d moved)",
                        old_path,
                        new_path,
                        public_id,
                        index,
                        len(resources),
                    )
                    raise

        try:
            await gateway.delete_folder(old_path)
        except MediaError as exc:
            logger.warning("Could not delete old folder %s: %s", old_path, exc)

        return MediaResult(data={"old_path": old_path, "new_path": new_path, "status": "renamed"})

    async def get_stats(self) -> MediaResult:
        if self._gateway is None:
            return MediaResult(data=copy.deepcopy(MOCK_STATS), message=MOCK_MESSAGE)

        with _vendor_operation("Failed to fetch statistics"):
            usage = await self._gateway.usage()
            folders = await self._gateway.root_folders()
            images = await self._gateway.search("resource_type:image", max_results=STATS_SAMPLE_SIZE)

        resources = images.get("resources", [])
        format_counts = Counter(resource.get("format") or "unknown" for resource in resources)
        storage = usage.get("storage") or {}
        bandwidth = usage.get("bandwidth") or {}
        return MediaResult(
            data={
                "usage": {
                    "plan": usage.get("plan"),
                    "credits": usage.get("credits"),
                    "used_percent": usage.get("used_percent"),
                    "limit": usage.get("limit"),
                },
                "storage": {"used": storage.get("used", 0), "limit": storage.get("limit", 0)},
                "bandwidth": {"used": bandwidth.get("used", 0), "limit": bandwidth.get("limit", 0)},
                "folders": folders.get("folders", []),
                "formats": [{"format": fmt, "count": count} for fmt, count in format_counts.items()],
                "totalImages": images.get("total_count") or len(resources),
            }
        )

    async def ping(self) -> MediaResult:
        gateway = self._require_gateway()
        with _vendor_operation("Cloudinary connection failed"):
            result = await gateway.ping()
        return MediaResult(data={"status": result.get("status")}, message="Cloudinary connection successful")

    async def catalog(self, *, folder: str = "", query: str = "") -> CatalogView:
        """Fetch assets and folders, then scope the assets to ``folder``."""
        listing = await self.list_images()
        folders = await self.list_folders()
        assets = [Asset.from_resource(resource) for resource in listing.data["resources"]]
        return CatalogView(
            assets=filter_assets(assets, folder, query),
            folders=[Folder.from_vendor(item) for item in folders.data["folders"]],
            selected_folder=folder,
            query=query,
            message=listing.message,
        )


__all__ = [
    "CatalogView",
    "MediaResult",
    "MediaService",
    "build_search_expression",
    "split_tags",
]
