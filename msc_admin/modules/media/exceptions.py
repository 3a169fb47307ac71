"""Media domain specific exceptions."""

from __future__ import annotations

from typing import Any


class MediaError(Exception):
    """Base class for media domain errors."""

    status_code = 500
    error = "Media operation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        error: str | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message or error or self.error)
        self.message = message
        self.details = details
        if error is not None:
            self.error = error


class MediaNotConfiguredError(MediaError):
    """Raised when a vendor operation is attempted without credentials."""

    status_code = 400
    error = "Cloudinary not configured"

    def __init__(self) -> None:
        super().__init__("Please configure Cloudinary environment variables")


class MediaValidationError(MediaError):
    """Raised when a request is missing a required field."""

    status_code = 400

    def __init__(self, error: str) -> None:
        super().__init__(None, error=error)


class AssetNotFoundError(MediaError):
    """Raised when the vendor reports that a resource does not exist."""

    status_code = 404
    error = "Image not found"


class AssetDeleteRejectedError(MediaError):
    """Raised when the vendor answers a destroy call with anything but ``ok``."""

    status_code = 400
    error = "Failed to delete image"


class MediaVendorError(MediaError):
    """Raised by gateways when the vendor call fails."""

    status_code = 500
