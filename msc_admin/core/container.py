"""Simple dependency container for wiring vendor clients and core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache

from msc_admin.core.config import Settings, get_settings
from msc_admin.infrastructure.database.session import get_engine
from msc_admin.modules.media.gateway import MediaGateway
from msc_admin.modules.users.repository import AuthGateway

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    _media_gateway: MediaGateway | None = field(default=None, init=False)
    _auth_gateway: AuthGateway | None = field(default=None, init=False)

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        get_engine()

    @property
    def media_gateway(self) -> MediaGateway | None:
        """Cloudinary client, or ``None`` while any of its credentials is missing."""
        if self._media_gateway is None and self.settings.cloudinary_configured:
            from msc_admin.infrastructure.media import CloudinaryGateway

            self._media_gateway = CloudinaryGateway(
                cloud_name=self.settings.cloudinary_cloud_name,
                api_key=self.settings.cloudinary_api_key,
                api_secret=self.settings.cloudinary_api_secret,
            )
        return self._media_gateway

    @property
    def auth_gateway(self) -> AuthGateway | None:
        supabase = self.settings.supabase
        if self._auth_gateway is None and supabase.configured:
            from msc_admin.infrastructure.auth import SupabaseAuthGateway

            self._auth_gateway = SupabaseAuthGateway(
                url=supabase.url,
                service_role_key=supabase.service_role_key,
                anon_key=supabase.anon_key,
            )
        return self._auth_gateway

    def log_vendor_status(self) -> None:
        if not self.settings.cloudinary_configured:
            logger.warning("Cloudinary credentials missing; media endpoints serve mock data")
        if not self.settings.supabase.configured:
            logger.warning("Supabase credentials missing; user management and sign-in are disabled")


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "get_container"]
