from __future__ import annotations

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from soundboard.core.exceptions import NotFoundError, PersistenceError, SynthesisError, ValidationError
from soundboard.models.soundboard import Soundboard


class BrokenSession:
    """Stands in for AsyncSession when the database rejects writes."""

    def add(self, instance):
        self.added = instance

    async def flush(self):
        raise OperationalError("INSERT INTO soundboards", {}, Exception("database is locked"))


def _run(session_factory, operation):
    async def _inner():
        async with session_factory() as session:
            result = await operation(session)
            await session.commit()
            return result

    return asyncio.run(_inner())


def test_create_returns_record(service, session_factory, storage, synthesizer):
    created = _run(session_factory, lambda db: service.create(db, "Hello", "Halo dunia", "a@x.com"))
    assert created.id
    assert created.file_name.endswith(".mp3")
    assert created.audio_url == storage.public_url(created.file_name)
    assert created.created_at is not None
    assert synthesizer.calls == ["Halo dunia"]


@pytest.mark.parametrize("title,text,email", [("", "t", "e"), ("t", "", "e"), ("t", "t", "")])
def test_create_rejects_empty_fields(service, session_factory, synthesizer, title, text, email):
    with pytest.raises(ValidationError):
        _run(session_factory, lambda db: service.create(db, title, text, email))
    assert synthesizer.calls == []


def test_create_synthesis_error_propagates(service, session_factory, synthesizer, count_rows):
    synthesizer.fail = True
    with pytest.raises(SynthesisError):
        _run(session_factory, lambda db: service.create(db, "Hello", "Halo", "a@x.com"))
    assert count_rows(Soundboard) == 0


def test_failed_insert_removes_uploaded_object(service, storage):
    with pytest.raises(PersistenceError):
        asyncio.run(service.create(BrokenSession(), "Hello", "Halo", "a@x.com"))
    assert storage.objects == {}


def test_failed_insert_with_failed_cleanup_still_raises(service, storage):
    storage.fail_delete = True
    with pytest.raises(PersistenceError):
        asyncio.run(service.create(BrokenSession(), "Hello", "Halo", "a@x.com"))
    assert len(storage.objects) == 1


def test_list_by_owner_not_found(service, session_factory):
    with pytest.raises(NotFoundError):
        _run(session_factory, lambda db: service.list_by_owner(db, "nobody@x.com"))


def test_list_by_owner_enriches_each_row(service, session_factory, storage):
    kept = _run(session_factory, lambda db: service.create(db, "kept", "a", "a@x.com"))
    gone = _run(session_factory, lambda db: service.create(db, "gone", "b", "a@x.com"))
    storage.objects.pop(gone.file_name)

    listed = _run(session_factory, lambda db: service.list_by_owner(db, "a@x.com"))
    assert [item.id for item in listed] == [gone.id, kept.id]
    assert [item.file_exists for item in listed] == [False, True]


def test_delete_not_found_leaves_rows(service, session_factory, count_rows):
    _run(session_factory, lambda db: service.create(db, "Hello", "Halo", "a@x.com"))
    with pytest.raises(NotFoundError):
        _run(session_factory, lambda db: service.delete(db, "missing"))
    assert count_rows(Soundboard) == 1


def test_delete_falls_back_to_url_key(service, session_factory, storage, count_rows):
    created = _run(session_factory, lambda db: service.create(db, "Hello", "Halo", "a@x.com"))

    async def _blank_file_name(db):
        row = await db.get(Soundboard, created.id)
        row.file_name = ""

    _run(session_factory, _blank_file_name)
    _run(session_factory, lambda db: service.delete(db, created.id))
    assert count_rows(Soundboard) == 0
    assert created.file_name not in storage.objects


class TimedOutSession(BrokenSession):
    async def flush(self):
        raise asyncio.TimeoutError()


def test_insert_timeout_is_persistence_error(service, storage):
    with pytest.raises(PersistenceError) as excinfo:
        asyncio.run(service.create(TimedOutSession(), "Hello", "Halo", "a@x.com"))
    assert excinfo.value.message == "Failed to create soundboard"
    assert storage.objects == {}


def test_insert_error_message_hides_statement(service):
    with pytest.raises(PersistenceError) as excinfo:
        asyncio.run(service.create(BrokenSession(), "Hello", "Halo", "secret@x.com"))
    assert excinfo.value.message == "Failed to create soundboard"
