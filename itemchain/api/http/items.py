from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from itemchain.api.http.errors import http_error
from itemchain.core.db import get_db
from itemchain.core.exceptions import ItemchainError
from itemchain.db.repositories.state_repository import WorldStateRepository
from itemchain.domains.catalog.queries import CatalogQueryService
from itemchain.domains.catalog.schemas import (
    ItemCreate, ItemResponse, ItemListResponse, PriceUpdate, CopyPurchase, CopyResponse
)
from itemchain.domains.catalog.services import CatalogService

router = APIRouter(prefix="/items", tags=["items"])


@router.post("/", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_data: ItemCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание оригинала"""
    catalog_service = CatalogService(WorldStateRepository(db))

    try:
        item = await catalog_service.create_item(
            item_id=item_data.id,
            category=item_data.category,
            title=item_data.title,
            creation_date=item_data.creation_date,
            price=item_data.price
        )
    except ItemchainError as e:
        raise http_error(e)

    return ItemResponse.model_validate(item)


@router.get("/", response_model=ItemListResponse)
async def list_items(db: AsyncSession = Depends(get_db)):
    """Получение списка оригиналов"""
    query_service = CatalogQueryService(WorldStateRepository(db))

    try:
        items = await query_service.list_items()
    except ItemchainError as e:
        raise http_error(e)

    return ItemListResponse(
        items=[ItemResponse.model_validate(item) for item in items],
        total=len(items)
    )


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(
    item_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение оригинала"""
    catalog_service = CatalogService(WorldStateRepository(db))

    try:
        item = await catalog_service.read_item(item_id)
    except ItemchainError as e:
        raise http_error(e)

    return ItemResponse.model_validate(item)


@router.patch("/{item_id}/price", response_model=ItemResponse)
async def change_price(
    item_id: str,
    price_data: PriceUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Изменение цены оригинала"""
    catalog_service = CatalogService(WorldStateRepository(db))

    try:
        item = await catalog_service.change_price(item_id, price_data.price)
    except ItemchainError as e:
        raise http_error(e)

    return ItemResponse.model_validate(item)


@router.post("/{item_id}/copies", response_model=CopyResponse, status_code=status.HTTP_201_CREATED)
async def purchase_copy(
    item_id: str,
    purchase_data: CopyPurchase,
    db: AsyncSession = Depends(get_db)
):
    """Покупка копии оригинала"""
    catalog_service = CatalogService(WorldStateRepository(db))

    try:
        item_copy = await catalog_service.purchase_copy(
            copy_id=purchase_data.copy_id,
            original_id=item_id,
            owner=purchase_data.owner,
            purchase_date=purchase_data.purchase_date
        )
    except ItemchainError as e:
        raise http_error(e)

    return CopyResponse.model_validate(item_copy)
