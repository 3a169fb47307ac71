"""Gateway protocol for the hosted media vendor."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class MediaGateway(Protocol):
    """Abstract interface over the media vendor's admin, search and upload APIs.

    Implementations return the vendor payloads unchanged and raise
    ``MediaVendorError`` (or ``AssetNotFoundError``) on failure.
    """

    async def search(
        self,
        expression: str,
        *,
        max_results: Optional[int] = None,
        next_cursor: Optional[str] = None,
        sort_by: Optional[tuple[str, str]] = None,
    ) -> dict[str, Any]:
        ...

    async def resource(self, public_id: str) -> dict[str, Any]:
        ...

    async def upload(self, content: bytes, *, folder: str, tags: Sequence[str]) -> dict[str, Any]:
        ...

    async def destroy(self, public_id: str) -> dict[str, Any]:
        ...

    async def update(
        self,
        public_id: str,
        *,
        tags: Optional[str] = None,
        context: Optional[Mapping[str, str]] = None,
    ) -> dict[str, Any]:
        ...

    async def rename(self, from_public_id: str, to_public_id: str) -> dict[str, Any]:
        ...

    async def delete_resources(self, public_ids: Sequence[str]) -> dict[str, Any]:
        ...

    async def root_folders(self) -> dict[str, Any]:
        ...

    async def sub_folders(self, path: str) -> dict[str, Any]:
        ...

    async def create_folder(self, path: str) -> dict[str, Any]:
        ...

    async def delete_folder(self, path: str) -> dict[str, Any]:
        ...

    async def usage(self) -> dict[str, Any]:
        ...

    async def ping(self) -> dict[str, Any]:
        ...
