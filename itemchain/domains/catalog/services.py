import logging

from itemchain.core.config import settings
from itemchain.core.exceptions import (
    AlreadyExistsError, CopyAlreadyExistsError, OriginalNotFoundError
)
from itemchain.core.policy import check_motive, check_price, check_rating
from itemchain.db.repositories.state_repository import StateStore
from itemchain.domains.catalog import codec
from itemchain.domains.catalog.entities import Item, ItemCopy, RecordKind
from itemchain.domains.catalog.guard import IdentityGuard

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Жизненный цикл оригиналов и копий.

    Каждая операция - последовательность чтение/запись в хранилище, не более
    одной записи на операцию. Все предусловия проверяются до записи, поэтому
    при ошибке состояние не меняется.
    """

    def __init__(
        self,
        store: StateStore,
        rating_min: int = settings.rating_min,
        rating_max: int = settings.rating_max
    ):
        self.store = store
        self.guard = IdentityGuard(store)
        self.rating_min = rating_min
        self.rating_max = rating_max

    async def exists(self, key: str) -> bool:
        """Проверка существования ключа"""
        return await self.guard.exists(key)

    async def kind_of(self, key: str) -> RecordKind:
        """Вид записи по ключу"""
        return await self.guard.kind_of(key)

    async def read_item(self, item_id: str) -> Item:
        """Чтение оригинала"""
        return await self.guard.require_original(item_id)

    async def read_copy(self, copy_id: str) -> ItemCopy:
        """Чтение копии"""
        return await self.guard.require_copy(copy_id)

    async def create_item(
        self,
        item_id: str,
        category: str,
        title: str,
        creation_date: str,
        price: int
    ) -> Item:
        """Создание оригинала; повторный вызов с тем же ключом - ошибка"""
        check_price(item_id, price)

        if await self.guard.exists(item_id):
            logger.warning(f"Rejected creation of item {item_id}: key already exists")
            raise AlreadyExistsError(f"the item {item_id} already exists")

        item = Item.create_item(
            id=item_id,
            category=category,
            title=title,
            creation_date=creation_date,
            price=price
        )
        await self.store.insert(item.key, codec.encode(item))

        logger.info(f"Item {item_id} created with price {price}")
        return item

    async def purchase_copy(
        self,
        copy_id: str,
        original_id: str,
        owner: str,
        purchase_date: str
    ) -> ItemCopy:
        """Покупка: выпуск копии из существующего оригинала"""
        original = await self.guard.require_original(original_id, missing=OriginalNotFoundError)

        if await self.guard.exists(copy_id):
            logger.warning(f"Rejected purchase of copy {copy_id}: key already exists")
            raise CopyAlreadyExistsError(f"the copy {copy_id} already exists")

        item_copy = ItemCopy.purchase(
            copy_id=copy_id,
            original=original,
            owner=owner,
            purchase_date=purchase_date
        )
        try:
            await self.store.insert(item_copy.key, codec.encode(item_copy))
        except AlreadyExistsError as e:
            # Ключ занят между проверкой и записью
            raise CopyAlreadyExistsError(f"the copy {copy_id} already exists") from e

        logger.info(f"Copy {copy_id} of item {original_id} purchased by {owner}")
        return item_copy

    async def rate_copy(self, copy_id: str, rating: int) -> ItemCopy:
        """Оценка копии; оригиналы оценивать нельзя"""
        check_rating(copy_id, rating, self.rating_min, self.rating_max)

        item_copy = await self.guard.require_copy(copy_id)
        item_copy.rate(rating)
        await self.store.put(item_copy.key, codec.encode(item_copy))

        logger.info(f"Copy {copy_id} rated {rating}")
        return item_copy

    async def return_copy(self, copy_id: str, motive: int) -> None:
        """Возврат копии: физическое удаление ключа, необратимо"""
        await self.guard.require_copy(copy_id)
        check_motive(copy_id, motive)

        await self.store.delete(copy_id)
        logger.info(f"Copy {copy_id} has been returned (motive {motive})")

    async def change_price(self, item_id: str, new_price: int) -> Item:
        """Изменение цены оригинала"""
        check_price(item_id, new_price)

        item = await self.guard.require_original(item_id)
        item.change_price(new_price)
        await self.store.put(item.key, codec.encode(item))

        logger.info(f"Item {item_id} price changed to {new_price}")
        return item
