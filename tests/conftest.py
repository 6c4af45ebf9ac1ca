from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import Session
from sqlalchemy.pool import NullPool

from soundboard import models  # noqa: F401
from soundboard.api.deps import get_soundboard_service, get_storage
from soundboard.core.exceptions import StorageError, SynthesisError
from soundboard.db.base import Base
from soundboard.db.session import build_engine, get_db
from soundboard.services.soundboard_service import SoundboardService
from soundboard.services.storage_service import StorageService

BUCKET = "test-bucket"


class FakeStorage(StorageService):
    """In-memory bucket with switchable failures."""

    def __init__(self):
        super().__init__(None, BUCKET, "https://storage.googleapis.com")
        self.objects: dict[str, dict] = {}
        self.fail_upload = False
        self.fail_delete = False
        self.fail_exists_for: set[str] = set()

    def upload_bytes(self, key, data, content_type, cache_control="public, max-age=31536000"):
        if self.fail_upload:
            raise StorageError("Error uploading to Google Cloud Storage: boom")
        self.objects[key] = {"data": data, "content_type": content_type, "cache_control": cache_control}
        return self.public_url(key)

    def object_exists(self, key):
        if key in self.fail_exists_for:
            raise StorageError(f"Error checking {key}: boom")
        return key in self.objects

    def delete_object(self, key):
        if self.fail_delete:
            raise StorageError(f"Failed to delete {key}: boom")
        self.objects.pop(key, None)

    def close(self):
        pass


class FakeSynthesizer:
    def __init__(self):
        self.fail = False
        self.calls: list[str] = []

    def synthesize(self, text: str) -> bytes:
        self.calls.append(text)
        if self.fail:
            raise SynthesisError("Error generating speech: backend down")
        return b"ID3" + text.encode("utf-8")

    def close(self):
        pass


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    path = tmp_path / "soundboard.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def session_factory(db_path: Path):
    engine = build_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def count_rows(db_path: Path):
    engine = create_engine(f"sqlite:///{db_path}")

    def _count(model) -> int:
        with Session(engine) as session:
            return session.scalar(select(func.count()).select_from(model))

    yield _count
    engine.dispose()


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def synthesizer() -> FakeSynthesizer:
    return FakeSynthesizer()


@pytest.fixture
def service(storage, synthesizer) -> SoundboardService:
    return SoundboardService(storage, synthesizer)


@pytest.fixture
def client(session_factory, storage, service):
    testclient_mod = pytest.importorskip("fastapi.testclient")
    from soundboard.main import app

    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_soundboard_service] = lambda: service
    # No context manager: the lifespan would connect to the real backends.
    yield testclient_mod.TestClient(app)
    app.dependency_overrides.clear()
