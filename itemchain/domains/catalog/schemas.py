from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import List


class ItemBase(BaseModel):
    """Базовая схема оригинала"""
    category: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    creation_date: str = Field(..., min_length=1, max_length=64)
    price: int = Field(..., ge=0, strict=True)


class ItemCreate(ItemBase):
    """Схема для создания оригинала"""
    id: str = Field(..., min_length=1, max_length=255)

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if not v.strip():
            raise ValueError('Item id cannot be empty')
        return v.strip()


class ItemResponse(ItemBase):
    """Схема для ответа с данными оригинала"""
    id: str
    is_original: bool = True

    model_config = ConfigDict(from_attributes=True)


class PriceUpdate(BaseModel):
    """Схема для изменения цены"""
    price: int = Field(..., ge=0, strict=True)


class CopyPurchase(BaseModel):
    """Схема для покупки копии"""
    copy_id: str = Field(..., min_length=1, max_length=255)
    owner: str = Field(..., min_length=1, max_length=255)
    purchase_date: str = Field(..., min_length=1, max_length=64)

    @field_validator('copy_id', 'owner')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be empty')
        return v.strip()


class CopyResponse(BaseModel):
    """Схема для ответа с данными копии"""
    copy_id: str
    original_id: str
    owner: str
    purchase_date: str
    rating: int
    is_original: bool = False

    model_config = ConfigDict(from_attributes=True)


class CopyListResponse(BaseModel):
    """Схема для списка копий"""
    copies: List[CopyResponse]
    total: int


class ItemListResponse(BaseModel):
    """Схема для списка оригиналов"""
    items: List[ItemResponse]
    total: int


class RatingUpdate(BaseModel):
    """Схема для оценки копии (границы проверяет сервис)"""
    rating: int = Field(..., strict=True)


class ReturnRequest(BaseModel):
    """Схема для возврата копии"""
    motive: int = Field(..., strict=True)


class RecordKindResponse(BaseModel):
    """Схема для ответа о виде записи по ключу"""
    key: str
    exists: bool
    kind: str
