from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from itemchain.api.http.errors import http_error
from itemchain.core.db import get_db
from itemchain.core.exceptions import ItemchainError
from itemchain.db.repositories.state_repository import WorldStateRepository
from itemchain.domains.catalog.schemas import PriceUpdate
from itemchain.domains.ledger.schemas import (
    AssetCreate, AssetResponse, AssetListResponse, OwnerUpdate, VoidRequest
)
from itemchain.domains.ledger.services import LedgerService

router = APIRouter(prefix="/assets", tags=["assets"])


@router.post("/", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
async def create_asset(
    asset_data: AssetCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание актива"""
    ledger_service = LedgerService(WorldStateRepository(db))

    try:
        asset = await ledger_service.create_asset(
            asset_id=asset_data.id,
            category=asset_data.category,
            title=asset_data.title,
            date=asset_data.date,
            price=asset_data.price,
            owner=asset_data.owner
        )
    except ItemchainError as e:
        raise http_error(e)

    return AssetResponse.model_validate(asset)


@router.get("/", response_model=AssetListResponse)
async def list_assets(
    include_voided: bool = Query(False),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка активов"""
    ledger_service = LedgerService(WorldStateRepository(db))

    try:
        assets = await ledger_service.list_assets(include_voided=include_voided)
    except ItemchainError as e:
        raise http_error(e)

    return AssetListResponse(
        assets=[AssetResponse.model_validate(asset) for asset in assets],
        total=len(assets)
    )


@router.get("/{asset_id}", response_model=AssetResponse)
async def get_asset(
    asset_id: str,
    include_voided: bool = Query(False),
    db: AsyncSession = Depends(get_db)
):
    """Получение актива"""
    ledger_service = LedgerService(WorldStateRepository(db))

    try:
        asset = await ledger_service.read_asset(asset_id, include_voided=include_voided)
    except ItemchainError as e:
        raise http_error(e)

    return AssetResponse.model_validate(asset)


@router.patch("/{asset_id}/owner", response_model=AssetResponse)
async def change_owner(
    asset_id: str,
    owner_data: OwnerUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Передача актива новому владельцу"""
    ledger_service = LedgerService(WorldStateRepository(db))

    try:
        asset = await ledger_service.change_owner(asset_id, owner_data.owner)
    except ItemchainError as e:
        raise http_error(e)

    return AssetResponse.model_validate(asset)


@router.patch("/{asset_id}/price", response_model=AssetResponse)
async def change_price(
    asset_id: str,
    price_data: PriceUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Изменение цены актива"""
    ledger_service = LedgerService(WorldStateRepository(db))

    try:
        asset = await ledger_service.change_price(asset_id, price_data.price)
    except ItemchainError as e:
        raise http_error(e)

    return AssetResponse.model_validate(asset)


@router.post("/{asset_id}/void", response_model=AssetResponse)
async def void_asset(
    asset_id: str,
    void_data: VoidRequest,
    db: AsyncSession = Depends(get_db)
):
    """Аннулирование актива"""
    ledger_service = LedgerService(WorldStateRepository(db))

    try:
        asset = await ledger_service.void_asset(asset_id, void_data.motive)
    except ItemchainError as e:
        raise http_error(e)

    return AssetResponse.model_validate(asset)
