from fastapi import Request

from soundboard.services.soundboard_service import SoundboardService
from soundboard.services.storage_service import StorageService


def get_storage(request: Request) -> StorageService:
    """Process-wide storage handle built in the application lifespan."""
    return request.app.state.storage


def get_soundboard_service(request: Request) -> SoundboardService:
    return request.app.state.soundboard_service
