import logging
from typing import List, Optional, Protocol, Tuple

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from itemchain.core.exceptions import AlreadyExistsError, StorageUnavailableError
from itemchain.db.models.state import WorldState

logger = logging.getLogger(__name__)


class StateStore(Protocol):
    """
    Контракт хранилища состояния.

    Предусловие: хранилище само сериализует конкурентные записи по одному
    ключу, и каждая запись сразу видна последующим чтениям.
    """

    async def get(self, key: str) -> Optional[bytes]: ...

    async def put(self, key: str, value: bytes) -> None: ...

    async def insert(self, key: str, value: bytes) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def scan_all(self) -> List[Tuple[str, bytes]]: ...


class WorldStateRepository:
    """Репозиторий ключ-значение поверх таблицы world_state"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: str) -> Optional[bytes]:
        """Получение значения по ключу (None, если ключа нет)"""
        try:
            result = await self.session.execute(
                select(WorldState.value).where(WorldState.key == key)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self._fail("read", key, e)

    async def put(self, key: str, value: bytes) -> None:
        """Запись значения с перезаписью существующего"""
        try:
            result = await self.session.execute(
                update(WorldState).where(WorldState.key == key).values(value=value)
            )
            if result.rowcount == 0:
                await self.session.execute(insert(WorldState).values(key=key, value=value))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail("write", key, e)

    async def insert(self, key: str, value: bytes) -> None:
        """Условная запись: только если ключ ещё не занят"""
        try:
            await self.session.execute(insert(WorldState).values(key=key, value=value))
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise AlreadyExistsError(f"the key {key} already exists")
        except SQLAlchemyError as e:
            await self._fail("write", key, e)

    async def delete(self, key: str) -> None:
        """Физическое удаление ключа"""
        try:
            await self.session.execute(delete(WorldState).where(WorldState.key == key))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self._fail("delete", key, e)

    async def scan_all(self) -> List[Tuple[str, bytes]]:
        """Полный просмотр всех ключей; порядок не гарантируется"""
        try:
            result = await self.session.execute(select(WorldState.key, WorldState.value))
            return [(row.key, row.value) for row in result]
        except SQLAlchemyError as e:
            await self._fail("scan", None, e)

    async def _fail(self, action: str, key: Optional[str], error: SQLAlchemyError):
        await self.session.rollback()
        target = f"key {key}" if key is not None else "world state"
        logger.error(f"Failed to {action} {target}: {error}")
        raise StorageUnavailableError(f"failed to {action} {target}: {error}") from error
