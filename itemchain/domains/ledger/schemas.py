from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import List


class AssetBase(BaseModel):
    """Базовая схема актива"""
    category: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    date: str = Field(..., min_length=1, max_length=64)
    price: int = Field(..., ge=0, strict=True)
    owner: str = Field(..., min_length=1, max_length=255)


class AssetCreate(AssetBase):
    """Схема для создания актива"""
    id: str = Field(..., min_length=1, max_length=255)

    @field_validator('id', 'owner')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Value cannot be empty')
        return v.strip()


class AssetResponse(AssetBase):
    """Схема для ответа с данными актива"""
    id: str
    validated: bool

    model_config = ConfigDict(from_attributes=True)


class AssetListResponse(BaseModel):
    """Схема для списка активов"""
    assets: List[AssetResponse]
    total: int


class OwnerUpdate(BaseModel):
    """Схема для передачи актива"""
    owner: str = Field(..., min_length=1, max_length=255)


class VoidRequest(BaseModel):
    """Схема для аннулирования актива"""
    motive: int = Field(..., strict=True)
