"""Конфигурация pytest и фикстуры."""

from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from itemchain.core.db import Base
from itemchain.db.models import WorldState  # noqa: F401
from itemchain.db.repositories.state_repository import WorldStateRepository
from itemchain.domains.catalog.queries import CatalogQueryService
from itemchain.domains.catalog.services import CatalogService
from itemchain.domains.ledger.services import LedgerService


@pytest.fixture
async def engine(tmp_path: Path):
    """Async engine on a temp-file sqlite database with tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'world_state.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(session) -> WorldStateRepository:
    return WorldStateRepository(session)


@pytest.fixture
def catalog(store) -> CatalogService:
    return CatalogService(store, rating_min=0, rating_max=5)


@pytest.fixture
def queries(store) -> CatalogQueryService:
    return CatalogQueryService(store)


@pytest.fixture
def ledger(store) -> LedgerService:
    return LedgerService(store)
