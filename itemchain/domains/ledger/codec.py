"""
Кодек активов варианта B: {"ID", "tipo", "title", "date", "price", "owner", "validate"}.
"""

import json
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from itemchain.core.exceptions import DecodeError
from itemchain.domains.ledger.entities import Asset


class AssetRecord(BaseModel):
    """Схема хранения актива"""
    model_config = ConfigDict(strict=True, extra="forbid", populate_by_name=True)

    id: str = Field(alias="ID")
    category: str = Field(alias="tipo")
    title: str
    date: str
    price: int
    owner: str
    validated: bool = Field(alias="validate")


def encode(asset: Asset) -> bytes:
    """Сериализация актива в байты"""
    wire = AssetRecord(
        id=asset.id,
        category=asset.category,
        title=asset.title,
        date=asset.date,
        price=asset.price,
        owner=asset.owner,
        validated=asset.validated
    )
    return wire.model_dump_json(by_alias=True).encode("utf-8")


def decode(data: bytes, key: Optional[str] = None) -> Asset:
    """Десериализация байтов в актив"""
    where = f" at key {key}" if key is not None else ""

    try:
        payload = json.loads(data)
    except ValueError as e:
        raise DecodeError(f"malformed asset{where}: {e}", key=key) from e

    try:
        wire = AssetRecord.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"malformed asset{where}: {e}", key=key) from e

    return Asset(**wire.model_dump())
