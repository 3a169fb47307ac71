"""Domain models for media assets and folders held by the media vendor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(slots=True)
class Asset:
    public_id: str
    folder: Optional[str] = None
    format: Optional[str] = None
    bytes: int = 0
    width: Optional[int] = None
    height: Optional[int] = None
    created_at: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    secure_url: Optional[str] = None
    resource_type: Optional[str] = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_resource(cls, resource: Mapping[str, Any]) -> "Asset":
        # Older accounts report "folder", dynamic-folder accounts "asset_folder".
        folder = resource.get("folder") or resource.get("asset_folder") or None
        return cls(
            public_id=resource.get("public_id", ""),
            folder=folder,
            format=resource.get("format"),
            bytes=resource.get("bytes") or 0,
            width=resource.get("width"),
            height=resource.get("height"),
            created_at=resource.get("created_at"),
            tags=list(resource.get("tags") or []),
            secure_url=resource.get("secure_url") or resource.get("url"),
            resource_type=resource.get("resource_type"),
            raw=dict(resource),
        )

    @property
    def display_name(self) -> str:
        return self.public_id.rsplit("/", 1)[-1]


@dataclass(slots=True)
class Folder:
    name: str
    path: str
    subfolders: list["Folder"] = field(default_factory=list)

    @classmethod
    def from_vendor(cls, payload: Mapping[str, Any]) -> "Folder":
        return cls(
            name=payload.get("name", ""),
            path=payload.get("path", ""),
            subfolders=[cls.from_vendor(item) for item in payload.get("subfolders") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "subfolders": [sub.to_dict() for sub in self.subfolders],
        }


@dataclass(slots=True)
class UploadedFile:
    filename: str
    content: bytes
    content_type: Optional[str] = None
