"""Placeholder payloads served while the media vendor is not configured."""

from __future__ import annotations

from typing import Any

MOCK_MESSAGE = "Using mock data - Cloudinary not configured"

MOCK_FOLDERS: list[dict[str, Any]] = [
    {"name": "uploads", "path": "uploads", "subfolders": []},
    {"name": "blog", "path": "blog", "subfolders": []},
    {"name": "products", "path": "products", "subfolders": []},
]

MOCK_RESOURCES: list[dict[str, Any]] = [
    {
        "public_id": "uploads/sample",
        "folder": "uploads",
        "format": "jpg",
        "resource_type": "image",
        "type": "upload",
        "bytes": 120_453,
        "width": 1280,
        "height": 853,
        "created_at": "2024-01-01T00:00:00Z",
        "tags": ["sample"],
        "url": "https://res.cloudinary.com/demo/image/upload/sample.jpg",
        "secure_url": "https://res.cloudinary.com/demo/image/upload/sample.jpg",
    },
    {
        "public_id": "blog/cover",
        "folder": "blog",
        "format": "png",
        "resource_type": "image",
        "type": "upload",
        "bytes": 58_112,
        "width": 800,
        "height": 450,
        "created_at": "2024-01-02T00:00:00Z",
        "tags": [],
        "url": "https://res.cloudinary.com/demo/image/upload/cover.png",
        "secure_url": "https://res.cloudinary.com/demo/image/upload/cover.png",
    },
]

MOCK_STATS: dict[str, Any] = {
    "usage": {"plan": "Free", "credits": 0, "used_percent": 0, "limit": 25000},
    "storage": {"used": 0, "limit": 1_000_000_000},
    "bandwidth": {"used": 0, "limit": 25_000_000_000},
    "folders": [],
    "formats": [{"format": "jpg", "count": 1}, {"format": "png", "count": 1}],
    "totalImages": 2,
}
