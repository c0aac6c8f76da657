import logging
from typing import Optional, Type

from itemchain.core.exceptions import ItemchainError, NotFoundError, WrongKindError
from itemchain.db.repositories.state_repository import StateStore
from itemchain.domains.catalog import codec
from itemchain.domains.catalog.entities import Item, ItemCopy, Record, RecordKind, kind_of_record

logger = logging.getLogger(__name__)


def _reject(key: str, error: ItemchainError):
    logger.warning(f"Rejected operation on {key}: {error}")
    raise error


class IdentityGuard:
    """Проверки существования и вида записи по ключу"""

    def __init__(self, store: StateStore):
        self.store = store

    async def exists(self, key: str) -> bool:
        """Есть ли значение по ключу (без декодирования)"""
        return await self.store.get(key) is not None

    async def load(self, key: str) -> Optional[Record]:
        """Чтение и декодирование записи; None, если ключа нет"""
        data = await self.store.get(key)
        if data is None:
            return None
        return codec.decode(data, key=key)

    async def kind_of(self, key: str) -> RecordKind:
        """Вид записи по ключу; ошибка декодирования не выдаётся за отсутствие"""
        record = await self.load(key)
        if record is None:
            return RecordKind.ABSENT
        return kind_of_record(record)

    async def require_original(
        self,
        key: str,
        missing: Type[NotFoundError] = NotFoundError
    ) -> Item:
        """Чтение записи, которая обязана быть оригиналом"""
        record = await self.load(key)
        if record is None:
            _reject(key, missing(f"the item {key} does not exist"))
        if not isinstance(record, Item):
            _reject(key, WrongKindError(f"the item {key} is a copy, the requested must be original"))
        return record

    async def require_copy(self, key: str) -> ItemCopy:
        """Чтение записи, которая обязана быть копией"""
        record = await self.load(key)
        if record is None:
            _reject(key, NotFoundError(f"the copy {key} does not exist"))
        if not isinstance(record, ItemCopy):
            _reject(key, WrongKindError(f"the item {key} is original, the requested must be a copy"))
        return record
