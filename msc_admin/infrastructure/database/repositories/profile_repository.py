"""SQLAlchemy implementation of the profile repository."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from msc_admin.db.models import Profile as ProfileModel
from msc_admin.modules.users.exceptions import UserNotFoundError
from msc_admin.modules.users.models import Profile
from msc_admin.modules.users.repository import ProfileRepository


class SqlProfileRepository(ProfileRepository):
    """Profile repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: str) -> Profile | None:
        model = await self._session.get(ProfileModel, user_id)
        return self._to_domain(model)

    async def list_profiles(self) -> Sequence[Profile]:
        stmt = select(ProfileModel).order_by(ProfileModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create_profile(
        self,
        *,
        user_id: str,
        full_name: str,
        role: str,
        avatar_url: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Profile:
        model = ProfileModel(
            id=user_id,
            full_name=full_name,
            role=role,
            avatar_url=avatar_url,
            phone=phone,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def update_profile(self, user_id: str, values: Mapping[str, Any]) -> Profile:
        model = await self._session.get(ProfileModel, user_id)
        if model is None:
            raise UserNotFoundError(user_id)
        for key, value in values.items():
            setattr(model, key, value)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def delete_profile(self, user_id: str) -> None:
        stmt = delete(ProfileModel).where(ProfileModel.id == user_id)
        await self._session.execute(stmt)

    @staticmethod
    def _to_domain(model: ProfileModel | None) -> Profile | None:
        if model is None:
            return None
        return Profile(
            id=str(model.id),
            full_name=model.full_name,
            avatar_url=model.avatar_url,
            role=model.role,
            phone=model.phone,
            created_at=model.created_at,
        )
