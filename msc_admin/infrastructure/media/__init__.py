"""Media vendor adapters."""

from .cloudinary_gateway import CloudinaryGateway

__all__ = ["CloudinaryGateway"]
