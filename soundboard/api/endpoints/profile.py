import time
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from soundboard.api.deps import get_storage
from soundboard.core.config import settings
from soundboard.core.exceptions import NotFoundError, ValidationError
from soundboard.crud import profile as profile_crud
from soundboard.db.session import get_db
from soundboard.schemas.profile import (
    ProfileCreate,
    ProfileCreatedEnvelope,
    ProfileEnvelope,
    ProfileResponse,
)
from soundboard.services.storage_service import StorageService

router = APIRouter()

ALLOWED_PICTURE_TYPES = {"image/jpeg", "image/png", "image/jpg"}


@router.post("", response_model=ProfileCreatedEnvelope, status_code=201)
async def create_profile(
    payload: ProfileCreate,
    db: AsyncSession = Depends(get_db),
):
    if not payload.name or not payload.email:
        raise ValidationError("Name and email are required")
    if await profile_crud.get_profile_by_email(db, payload.email) is not None:
        raise ValidationError("Email already exists")

    await profile_crud.create_profile(db, payload)
    return ProfileCreatedEnvelope(message="Profile created successfully", data=payload)


@router.get("/{email}", response_model=ProfileEnvelope)
async def get_profile(email: str, db: AsyncSession = Depends(get_db)):
    profile = await profile_crud.get_profile_by_email(db, email)
    if profile is None:
        raise NotFoundError("Profile not found")
    return ProfileEnvelope(data=ProfileResponse.model_validate(profile))


@router.put("/{email}")
async def update_profile(
    email: str,
    name: Optional[str] = Form(None),
    profile_picture: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db),
    storage: StorageService = Depends(get_storage),
):
    """
    Rename a profile and optionally replace its picture.

    - **name**: new display name (required)
    - **profile_picture**: JPEG or PNG, at most 5MB
    """
    if not name:
        raise ValidationError("Name is required")

    profile = await profile_crud.get_profile_by_email(db, email)
    if profile is None:
        raise NotFoundError("Profile not found")

    picture_url = None
    if profile_picture is not None and profile_picture.filename:
        if profile_picture.content_type not in ALLOWED_PICTURE_TYPES:
            raise ValidationError("File harus berupa gambar.")
        content = await profile_picture.read(settings.PROFILE_PICTURE_MAX_BYTES + 1)
        if len(content) > settings.PROFILE_PICTURE_MAX_BYTES:
            raise ValidationError("Ukuran file maksimal 5MB.")
        key = f"profiles/{int(time.time() * 1000)}-{profile_picture.filename}"
        picture_url = await run_in_threadpool(
            storage.upload_bytes, key, content, profile_picture.content_type
        )

    await profile_crud.update_profile(db, profile, name=name, profile_picture_url=picture_url)
    return {"success": True, "message": "Profile updated successfully"}
