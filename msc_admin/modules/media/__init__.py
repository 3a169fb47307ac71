"""Media catalog domain exports."""

from .catalog import asset_in_folder, filter_assets, format_bytes
from .exceptions import (
    AssetDeleteRejectedError,
    AssetNotFoundError,
    MediaError,
    MediaNotConfiguredError,
    MediaValidationError,
    MediaVendorError,
)
from .gateway import MediaGateway
from .models import Asset, Folder, UploadedFile
from .service import CatalogView, MediaResult, MediaService, build_search_expression, split_tags

__all__ = [
    "Asset",
    "AssetDeleteRejectedError",
    "AssetNotFoundError",
    "CatalogView",
    "Folder",
    "MediaError",
    "MediaGateway",
    "MediaNotConfiguredError",
    "MediaResult",
    "MediaService",
    "MediaValidationError",
    "MediaVendorError",
    "UploadedFile",
    "asset_in_folder",
    "build_search_expression",
    "filter_assets",
    "format_bytes",
    "split_tags",
]
