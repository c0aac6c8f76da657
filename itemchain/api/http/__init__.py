from itemchain.api.http.health import router as health_router
from itemchain.api.http.items import router as items_router
from itemchain.api.http.copies import router as copies_router
from itemchain.api.http.records import router as records_router
from itemchain.api.http.assets import router as assets_router

__all__ = [
    "health_router",
    "items_router",
    "copies_router",
    "records_router",
    "assets_router"
]
