from itemchain.db.models.state import WorldState

__all__ = [
    "WorldState"
]
