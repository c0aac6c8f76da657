from sqlalchemy import Column, LargeBinary, String

from itemchain.core.db import Base


class WorldState(Base):
    __tablename__ = "world_state"

    # Первичный ключ сериализует запись по одному ключу
    key = Column(String(255), primary_key=True)
    value = Column(LargeBinary, nullable=False)
