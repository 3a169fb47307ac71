"""
Create the first admin account.
Registers the user with the auth service and writes an ``admin`` profile row.
"""
import asyncio
import os

from sqlalchemy import select

from msc_admin.core.config import get_settings
from msc_admin.core.container import get_container
from msc_admin.core.logging import configure_logging
from msc_admin.db.models import Profile
from msc_admin.infrastructure.database import get_session, init_db
from msc_admin.modules.users import UserCreateInput, UserCreationError, UserService


async def create_default_admin():
    settings = get_settings()
    configure_logging(settings)

    auth = get_container().auth_gateway
    if auth is None:
        print("Supabase is not configured; set SUPABASE__URL and SUPABASE__SERVICE_ROLE_KEY first")
        return

    if settings.environment == "development":
        await init_db()

    async for db in get_session():
        result = await db.execute(select(Profile).where(Profile.role == "admin").limit(1))
        if result.scalar_one_or_none() is not None:
            print("An admin profile already exists, nothing to do")
            return

        email = os.environ.get("ADMIN_EMAIL", "admin@example.com")
        password = os.environ.get("ADMIN_PASSWORD") or None

        service = UserService.with_session(db, auth)
        try:
            user = await service.create_user(
                UserCreateInput(email=email, full_name="Administrator", role="admin", password=password)
            )
        except UserCreationError as exc:
            print(f"Could not create the admin account: {exc}")
            return

        print("=" * 50)
        print("Admin account created")
        print("=" * 50)
        print(f"Id:    {user.id}")
        print(f"Email: {user.email}")
        if password is None:
            print("No ADMIN_PASSWORD given; use the password reset flow to sign in")
        print("=" * 50)


if __name__ == "__main__":
    asyncio.run(create_default_admin())
