"""Cloudinary implementation of the media gateway."""

from __future__ import annotations

import asyncio
import io
import logging
from functools import partial
from typing import Any, Callable, Mapping, Optional, Sequence

import cloudinary
import cloudinary.api
import cloudinary.exceptions
import cloudinary.uploader
from cloudinary.search import Search

from msc_admin.modules.media.exceptions import AssetNotFoundError, MediaVendorError
from msc_admin.modules.media.gateway import MediaGateway

logger = logging.getLogger(__name__)

# Analysis flags requested for the image details view.
RESOURCE_DETAIL_OPTIONS = {
    "colors": True,
    "faces": True,
    "quality_analysis": True,
    "accessibility_analysis": True,
    "cinemagraph_analysis": True,
}

UPLOAD_TRANSFORMATION = [{"quality": "auto", "fetch_format": "auto"}]


class CloudinaryGateway(MediaGateway):
    """Runs the synchronous Cloudinary SDK in worker threads."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str) -> None:
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )
        self.cloud_name = cloud_name

    async def _call(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            return await asyncio.to_thread(partial(func, *args, **kwargs))
        except cloudinary.exceptions.NotFound as exc:
            raise AssetNotFoundError(str(exc)) from exc
        except cloudinary.exceptions.Error as exc:
            raise MediaVendorError(str(exc)) from exc

    async def search(
        self,
        expression: str,
        *,
        max_results: Optional[int] = None,
        next_cursor: Optional[str] = None,
        sort_by: Optional[tuple[str, str]] = None,
    ) -> dict[str, Any]:
        query = Search().expression(expression)
        if sort_by is not None:
            query = query.sort_by(*sort_by)
        if max_results is not None:
            query = query.max_results(max_results)
        if next_cursor:
            query = query.next_cursor(next_cursor)
        logger.debug("Cloudinary search: %s", expression)
        return await self._call(query.execute)

    async def resource(self, public_id: str) -> dict[str, Any]:
        return await self._call(cloudinary.api.resource, public_id, **RESOURCE_DETAIL_OPTIONS)

    async def upload(self, content: bytes, *, folder: str, tags: Sequence[str]) -> dict[str, Any]:
        return await self._call(
            cloudinary.uploader.upload,
            io.BytesIO(content),
            folder=folder,
            tags=list(tags),
            resource_type="auto",
            transformation=UPLOAD_TRANSFORMATION,
        )

    async def destroy(self, public_id: str) -> dict[str, Any]:
        return await self._call(cloudinary.uploader.destroy, public_id)

    async def update(
        self,
        public_id: str,
        *,
        tags: Optional[str] = None,
        context: Optional[Mapping[str, str]] = None,
    ) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if tags:
            options["tags"] = tags
        if context:
            options["context"] = dict(context)
        return await self._call(cloudinary.api.update, public_id, **options)

    async def rename(self, from_public_id: str, to_public_id: str) -> dict[str, Any]:
        return await self._call(cloudinary.uploader.rename, from_public_id, to_public_id)

    async def delete_resources(self, public_ids: Sequence[str]) -> dict[str, Any]:
        return await self._call(cloudinary.api.delete_resources, list(public_ids))

    async def root_folders(self) -> dict[str, Any]:
        return await self._call(cloudinary.api.root_folders)

    async def sub_folders(self, path: str) -> dict[str, Any]:
        return await self._call(cloudinary.api.subfolders, path)

    async def create_folder(self, path: str) -> dict[str, Any]:
        return await self._call(cloudinary.api.create_folder, path)

    async def delete_folder(self, path: str) -> dict[str, Any]:
        return await self._call(cloudinary.api.delete_folder, path)

    async def usage(self) -> dict[str, Any]:
        return await self._call(cloudinary.api.usage)

    async def ping(self) -> dict[str, Any]:
        return await self._call(cloudinary.api.ping)


__all__ = ["CloudinaryGateway"]
