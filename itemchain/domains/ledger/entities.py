from dataclasses import dataclass


@dataclass
class Asset:
    """Актив варианта B: единая изменяемая запись с владельцем"""
    id: str
    category: str
    title: str
    date: str
    price: int
    owner: str
    # Мягкое удаление: False после аннулирования
    validated: bool = True

    def change_owner(self, new_owner: str) -> None:
        """Передача актива новому владельцу"""
        self.owner = new_owner

    def change_price(self, new_price: int) -> None:
        """Изменение цены актива"""
        self.price = new_price

    def void(self) -> None:
        """Аннулирование без физического удаления"""
        self.validated = False

    @property
    def is_voided(self) -> bool:
        return not self.validated
