import pytest
from sqlalchemy.exc import SQLAlchemyError

from itemchain.core.db import Base
from itemchain.core.exceptions import AlreadyExistsError, StorageUnavailableError
from itemchain.db.repositories.state_repository import WorldStateRepository


async def test_get_missing_key_returns_none(store: WorldStateRepository) -> None:
    assert await store.get("ART-1") is None


async def test_put_then_get(store: WorldStateRepository) -> None:
    await store.put("ART-1", b'{"a":1}')
    assert await store.get("ART-1") == b'{"a":1}'


async def test_put_overwrites_existing_value(store: WorldStateRepository) -> None:
    await store.put("ART-1", b"first")
    await store.put("ART-1", b"second")

    assert await store.get("ART-1") == b"second"
    assert len(await store.scan_all()) == 1


async def test_insert_refuses_taken_key(store: WorldStateRepository) -> None:
    await store.insert("ART-1", b"first")

    with pytest.raises(AlreadyExistsError):
        await store.insert("ART-1", b"second")

    assert await store.get("ART-1") == b"first"


async def test_delete_removes_key(store: WorldStateRepository) -> None:
    await store.put("CP-1", b"copy")
    await store.delete("CP-1")

    assert await store.get("CP-1") is None


async def test_delete_missing_key_is_noop(store: WorldStateRepository) -> None:
    await store.delete("nothing-here")
    assert await store.scan_all() == []


async def test_scan_all_returns_every_pair(store: WorldStateRepository) -> None:
    await store.put("b", b"2")
    await store.put("a", b"1")
    await store.put("c", b"3")

    assert sorted(await store.scan_all()) == [("a", b"1"), ("b", b"2"), ("c", b"3")]


async def test_writes_are_visible_to_other_sessions(session_factory) -> None:
    async with session_factory() as writer_session:
        await WorldStateRepository(writer_session).put("ART-1", b"value")

    async with session_factory() as reader_session:
        assert await WorldStateRepository(reader_session).get("ART-1") == b"value"


async def test_store_failure_surfaces_as_storage_unavailable(engine, session_factory) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    async with session_factory() as session:
        store = WorldStateRepository(session)

        with pytest.raises(StorageUnavailableError) as exc_info:
            await store.get("ART-1")
        assert isinstance(exc_info.value.__cause__, SQLAlchemyError)

        with pytest.raises(StorageUnavailableError):
            await store.put("ART-1", b"value")

        with pytest.raises(StorageUnavailableError):
            await store.scan_all()
