from typing import List, Optional

from itemchain.db.repositories.state_repository import StateStore
from itemchain.domains.catalog import codec
from itemchain.domains.catalog.entities import Item, ItemCopy, Record


class CatalogQueryService:
    """
    Перечисление записей полным просмотром хранилища.

    Первая повреждённая запись прерывает весь список с DecodeError.
    Порядок результатов не определён.
    """

    def __init__(self, store: StateStore):
        self.store = store

    async def _scan(self) -> List[Record]:
        return [codec.decode(value, key=key) for key, value in await self.store.scan_all()]

    async def list_items(self) -> List[Item]:
        """Все оригиналы"""
        return [record for record in await self._scan() if isinstance(record, Item)]

    async def list_copies(
        self,
        owner: Optional[str] = None,
        original_id: Optional[str] = None
    ) -> List[ItemCopy]:
        """Все копии, с необязательным фильтром по владельцу и оригиналу"""
        copies = [record for record in await self._scan() if isinstance(record, ItemCopy)]

        if owner is not None:
            copies = [c for c in copies if c.owner == owner]
        if original_id is not None:
            copies = [c for c in copies if c.original_id == original_id]

        return copies
