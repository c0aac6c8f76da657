from itemchain.db.repositories.state_repository import StateStore, WorldStateRepository

__all__ = [
    "StateStore",
    "WorldStateRepository"
]
