from itemchain.domains.ledger.entities import Asset
from itemchain.domains.ledger.schemas import (
    AssetBase, AssetCreate, AssetResponse, AssetListResponse, OwnerUpdate, VoidRequest
)
from itemchain.domains.ledger.services import LedgerService

__all__ = [
    "Asset",
    "AssetBase", "AssetCreate", "AssetResponse", "AssetListResponse", "OwnerUpdate",
    "VoidRequest",
    "LedgerService"
]
