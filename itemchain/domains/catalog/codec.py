"""
Кодек записей каталога (вариант A).

Формат хранения - JSON-объект с полями исходного контракта:

    оригинал: {"ID", "tipo", "title", "creationdate", "price", "original": true}
    копия:    {"IDcopy", "Item", "owner", "purchasedate", "puntuation", "original": false}

Поле "original" - дискриминант. Оно проверяется явно до разбора остальных
полей; угадывание вида по набору полей не выполняется.
"""

import json
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from itemchain.core.exceptions import DecodeError
from itemchain.domains.catalog.entities import Item, ItemCopy, Record

DISCRIMINANT = "original"


class _WireModel(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", populate_by_name=True)


class ItemRecord(_WireModel):
    """Схема хранения оригинала"""
    id: str = Field(alias="ID")
    category: str = Field(alias="tipo")
    title: str
    creation_date: str = Field(alias="creationdate")
    price: int
    is_original: Literal[True] = Field(default=True, alias=DISCRIMINANT)

    def to_domain(self) -> Item:
        return Item(
            id=self.id,
            category=self.category,
            title=self.title,
            creation_date=self.creation_date,
            price=self.price
        )

    @classmethod
    def from_domain(cls, item: Item) -> "ItemRecord":
        return cls(
            id=item.id,
            category=item.category,
            title=item.title,
            creation_date=item.creation_date,
            price=item.price
        )


class ItemCopyRecord(_WireModel):
    """Схема хранения копии"""
    copy_id: str = Field(alias="IDcopy")
    original_id: str = Field(alias="Item")
    owner: str
    purchase_date: str = Field(alias="purchasedate")
    rating: int = Field(alias="puntuation")
    is_original: Literal[False] = Field(default=False, alias=DISCRIMINANT)

    def to_domain(self) -> ItemCopy:
        return ItemCopy(
            copy_id=self.copy_id,
            original_id=self.original_id,
            owner=self.owner,
            purchase_date=self.purchase_date,
            rating=self.rating
        )

    @classmethod
    def from_domain(cls, copy: ItemCopy) -> "ItemCopyRecord":
        return cls(
            copy_id=copy.copy_id,
            original_id=copy.original_id,
            owner=copy.owner,
            purchase_date=copy.purchase_date,
            rating=copy.rating
        )


def encode(record: Record) -> bytes:
    """Сериализация записи в байты"""
    if isinstance(record, Item):
        wire = ItemRecord.from_domain(record)
    elif isinstance(record, ItemCopy):
        wire = ItemCopyRecord.from_domain(record)
    else:
        raise TypeError(f"Unsupported record type: {type(record).__name__}")
    return wire.model_dump_json(by_alias=True).encode("utf-8")


def decode(data: bytes, key: Optional[str] = None) -> Record:
    """Десериализация байтов в оригинал или копию"""
    where = f" at key {key}" if key is not None else ""

    try:
        payload = json.loads(data)
    except ValueError as e:
        raise DecodeError(f"malformed record{where}: {e}", key=key) from e

    if not isinstance(payload, dict):
        raise DecodeError(f"malformed record{where}: expected a JSON object", key=key)

    flag = payload.get(DISCRIMINANT)
    if not isinstance(flag, bool):
        raise DecodeError(
            f"malformed record{where}: missing or non-boolean '{DISCRIMINANT}' field",
            key=key
        )

    wire_model = ItemRecord if flag else ItemCopyRecord
    try:
        return wire_model.model_validate(payload).to_domain()
    except ValidationError as e:
        kind = "original" if flag else "copy"
        raise DecodeError(f"malformed {kind} record{where}: {e}", key=key) from e
