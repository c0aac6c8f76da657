from dataclasses import dataclass
from enum import Enum
from typing import Union


class RecordKind(Enum):
    """Вид записи по ключу"""
    ORIGINAL = "original"
    COPY = "copy"
    ABSENT = "absent"


@dataclass
class Item:
    """Оригинал: уникальный авторитетный актив"""
    id: str
    category: str
    title: str
    creation_date: str
    price: int

    @property
    def is_original(self) -> bool:
        return True

    @property
    def key(self) -> str:
        return self.id

    def change_price(self, new_price: int) -> None:
        """Изменение цены оригинала"""
        self.price = new_price

    @classmethod
    def create_item(
        cls,
        id: str,
        category: str,
        title: str,
        creation_date: str,
        price: int
    ) -> "Item":
        """Создание нового оригинала"""
        return cls(
            id=id,
            category=category,
            title=title,
            creation_date=creation_date,
            price=price
        )


@dataclass
class ItemCopy:
    """Копия: купленный экземпляр оригинала"""
    copy_id: str
    # Ссылка только для поиска, не управляет временем жизни оригинала
    original_id: str
    owner: str
    purchase_date: str
    rating: int = 0

    @property
    def is_original(self) -> bool:
        return False

    @property
    def key(self) -> str:
        return self.copy_id

    def rate(self, rating: int) -> None:
        """Перезапись оценки копии"""
        self.rating = rating

    @classmethod
    def purchase(
        cls,
        copy_id: str,
        original: Item,
        owner: str,
        purchase_date: str
    ) -> "ItemCopy":
        """Создание копии из оригинала при покупке"""
        return cls(
            copy_id=copy_id,
            original_id=original.id,
            owner=owner,
            purchase_date=purchase_date
        )


Record = Union[Item, ItemCopy]


def kind_of_record(record: Record) -> RecordKind:
    """Вид уже декодированной записи"""
    return RecordKind.ORIGINAL if record.is_original else RecordKind.COPY
