from itemchain.domains.catalog.entities import Item, ItemCopy, Record, RecordKind
from itemchain.domains.catalog.schemas import (
    ItemBase, ItemCreate, ItemResponse, ItemListResponse, PriceUpdate,
    CopyPurchase, CopyResponse, CopyListResponse, RatingUpdate, ReturnRequest,
    RecordKindResponse
)
from itemchain.domains.catalog.guard import IdentityGuard
from itemchain.domains.catalog.services import CatalogService
from itemchain.domains.catalog.queries import CatalogQueryService

__all__ = [
    "Item", "ItemCopy", "Record", "RecordKind",
    "ItemBase", "ItemCreate", "ItemResponse", "ItemListResponse", "PriceUpdate",
    "CopyPurchase", "CopyResponse", "CopyListResponse", "RatingUpdate", "ReturnRequest",
    "RecordKindResponse",
    "IdentityGuard", "CatalogService", "CatalogQueryService"
]
