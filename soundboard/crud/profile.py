from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional

from soundboard.models.profile import Profile
from soundboard.schemas.profile import ProfileCreate


async def create_profile(db: AsyncSession, profile_data: ProfileCreate) -> Profile:
    db_profile = Profile(**profile_data.model_dump())
    db.add(db_profile)
    await db.flush()
    await db.refresh(db_profile)
    return db_profile


async def get_profile_by_email(db: AsyncSession, email: str) -> Optional[Profile]:
    result = await db.execute(select(Profile).where(Profile.email == email))
    return result.scalar_one_or_none()


async def update_profile(
    db: AsyncSession,
    profile: Profile,
    *,
    name: str,
    profile_picture_url: Optional[str] = None,
) -> Profile:
    """Rename the profile; the picture URL is only replaced when a new one is given."""
    profile.name = name
    if profile_picture_url is not None:
        profile.profile_picture_url = profile_picture_url
    await db.flush()
    await db.refresh(profile)
    return profile
