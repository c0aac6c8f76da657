from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from itemchain.api.http.errors import http_error
from itemchain.core.db import get_db
from itemchain.core.exceptions import ItemchainError
from itemchain.db.repositories.state_repository import WorldStateRepository
from itemchain.domains.catalog.entities import RecordKind
from itemchain.domains.catalog.schemas import RecordKindResponse
from itemchain.domains.catalog.services import CatalogService

router = APIRouter(prefix="/records", tags=["records"])


@router.get("/{key}", response_model=RecordKindResponse)
async def get_record_kind(
    key: str,
    db: AsyncSession = Depends(get_db)
):
    """Вид записи по ключу: оригинал, копия или отсутствует"""
    catalog_service = CatalogService(WorldStateRepository(db))

    try:
        kind = await catalog_service.kind_of(key)
    except ItemchainError as e:
        raise http_error(e)

    return RecordKindResponse(
        key=key,
        exists=kind is not RecordKind.ABSENT,
        kind=kind.value
    )
