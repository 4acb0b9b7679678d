"""Test configuration and helpers."""

import os
from uuid import uuid4

from dishka import AsyncContainer

# Test defaults; explicit environment variables still win
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__DEV_LOGIN_ENABLED", "true")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-with-enough-length-for-hs256")

from cradle.domain.model import Profile, User  # noqa: E402
from cradle.domain.model.common import utcnow  # noqa: E402
from cradle.domain.service import ProfileService  # noqa: E402
from cradle.domain.repository import UserRepository  # noqa: E402
from cradle.domain.value import Email, UserId  # noqa: E402


async def make_user(
    env: AsyncContainer, email: str, full_name: str | None = None
) -> User:
    """Insert a user into the directory."""
    user_repository = await env.get(UserRepository)
    return await user_repository.add(
        User(
            id=UserId(uuid4()),
            email=Email(root=email),
            full_name=full_name,
            created_at=utcnow(),
        )
    )


async def make_profile(env: AsyncContainer, owner: User, name: str = "Baby") -> Profile:
    """Create a profile owned by ``owner`` (with its owner grant)."""
    profile_service = await env.get(ProfileService)
    profile, _ = await profile_service.create_profile(owner.id, name)
    return profile
