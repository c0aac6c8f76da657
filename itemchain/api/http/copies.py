from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from itemchain.api.http.errors import http_error
from itemchain.core.db import get_db
from itemchain.core.exceptions import ItemchainError
from itemchain.db.repositories.state_repository import WorldStateRepository
from itemchain.domains.catalog.queries import CatalogQueryService
from itemchain.domains.catalog.schemas import (
    CopyResponse, CopyListResponse, RatingUpdate, ReturnRequest
)
from itemchain.domains.catalog.services import CatalogService

router = APIRouter(prefix="/copies", tags=["copies"])


@router.get("/", response_model=CopyListResponse)
async def list_copies(
    owner: Optional[str] = Query(None),
    original_id: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка копий"""
    query_service = CatalogQueryService(WorldStateRepository(db))

    try:
        copies = await query_service.list_copies(owner=owner, original_id=original_id)
    except ItemchainError as e:
        raise http_error(e)

    return CopyListResponse(
        copies=[CopyResponse.model_validate(c) for c in copies],
        total=len(copies)
    )


@router.get("/{copy_id}", response_model=CopyResponse)
async def get_copy(
    copy_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение копии"""
    catalog_service = CatalogService(WorldStateRepository(db))

    try:
        item_copy = await catalog_service.read_copy(copy_id)
    except ItemchainError as e:
        raise http_error(e)

    return CopyResponse.model_validate(item_copy)


@router.put("/{copy_id}/rating", response_model=CopyResponse)
async def rate_copy(
    copy_id: str,
    rating_data: RatingUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Оценка копии"""
    catalog_service = CatalogService(WorldStateRepository(db))

    try:
        item_copy = await catalog_service.rate_copy(copy_id, rating_data.rating)
    except ItemchainError as e:
        raise http_error(e)

    return CopyResponse.model_validate(item_copy)


@router.post("/{copy_id}/return", status_code=status.HTTP_204_NO_CONTENT)
async def return_copy(
    copy_id: str,
    return_data: ReturnRequest,
    db: AsyncSession = Depends(get_db)
):
    """Возврат копии"""
    catalog_service = CatalogService(WorldStateRepository(db))

    try:
        await catalog_service.return_copy(copy_id, return_data.motive)
    except ItemchainError as e:
        raise http_error(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
