import logging
from typing import List

from itemchain.core.exceptions import AlreadyExistsError, NotFoundError
from itemchain.core.policy import check_motive, check_price
from itemchain.db.repositories.state_repository import StateStore
from itemchain.domains.ledger import codec
from itemchain.domains.ledger.entities import Asset

logger = logging.getLogger(__name__)


class LedgerService:
    """
    Вариант B: единая запись актива без выпуска копий.

    Владелец меняется на месте, удаление заменено флагом validated.
    Несовместим с вариантом A в одном хранилище.
    """

    def __init__(self, store: StateStore):
        self.store = store

    async def _load(self, asset_id: str) -> Asset:
        data = await self.store.get(asset_id)
        if data is None:
            logger.warning(f"Rejected operation on {asset_id}: asset does not exist")
            raise NotFoundError(f"the asset {asset_id} does not exist")
        return codec.decode(data, key=asset_id)

    async def _load_live(self, asset_id: str) -> Asset:
        asset = await self._load(asset_id)
        if asset.is_voided:
            logger.warning(f"Rejected operation on {asset_id}: asset has been voided")
            raise NotFoundError(f"the asset {asset_id} has been voided")
        return asset

    async def create_asset(
        self,
        asset_id: str,
        category: str,
        title: str,
        date: str,
        price: int,
        owner: str
    ) -> Asset:
        """Создание актива"""
        check_price(asset_id, price)

        if await self.store.get(asset_id) is not None:
            logger.warning(f"Rejected creation of asset {asset_id}: key already exists")
            raise AlreadyExistsError(f"the asset {asset_id} already exists")

        asset = Asset(
            id=asset_id,
            category=category,
            title=title,
            date=date,
            price=price,
            owner=owner
        )
        await self.store.insert(asset_id, codec.encode(asset))

        logger.info(f"Asset {asset_id} created for {owner}")
        return asset

    async def read_asset(self, asset_id: str, include_voided: bool = False) -> Asset:
        """Чтение актива; аннулированные скрыты, если не запрошены явно"""
        if include_voided:
            return await self._load(asset_id)
        return await self._load_live(asset_id)

    async def change_owner(self, asset_id: str, new_owner: str) -> Asset:
        """Передача актива"""
        asset = await self._load_live(asset_id)
        previous_owner = asset.owner
        asset.change_owner(new_owner)
        await self.store.put(asset_id, codec.encode(asset))

        logger.info(f"Asset {asset_id} owner changed from {previous_owner} to {new_owner}")
        return asset

    async def change_price(self, asset_id: str, new_price: int) -> Asset:
        """Изменение цены актива"""
        check_price(asset_id, new_price)

        asset = await self._load_live(asset_id)
        asset.change_price(new_price)
        await self.store.put(asset_id, codec.encode(asset))

        logger.info(f"Asset {asset_id} price changed to {new_price}")
        return asset

    async def void_asset(self, asset_id: str, motive: int) -> Asset:
        """Аннулирование актива (мягкое удаление)"""
        asset = await self._load_live(asset_id)
        check_motive(asset_id, motive)

        asset.void()
        await self.store.put(asset_id, codec.encode(asset))

        logger.info(f"Asset {asset_id} voided (motive {motive})")
        return asset

    async def list_assets(self, include_voided: bool = False) -> List[Asset]:
        """Все активы полным просмотром; первая повреждённая запись прерывает список"""
        assets = [codec.decode(value, key=key) for key, value in await self.store.scan_all()]
        if include_voided:
            return assets
        return [asset for asset in assets if not asset.is_voided]
