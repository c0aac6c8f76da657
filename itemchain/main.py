import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from itemchain.api.http import (
    health_router, items_router, copies_router, records_router, assets_router
)
from itemchain.core.config import settings
from itemchain.core.db import init_db

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info(f"World state ready, schema variant: {app.state.schema_variant}")
    yield


def create_app(schema_variant: Optional[str] = None) -> FastAPI:
    """Сборка приложения для выбранного варианта схемы"""
    variant = schema_variant or settings.schema_variant

    app = FastAPI(
        title="itemchain",
        description="Учёт оригиналов, копий и их жизненного цикла в хранилище состояния",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.schema_variant = variant

    # Варианты несовместимы в одном хранилище, подключаем только один
    app.include_router(health_router)
    if variant == "catalog":
        app.include_router(items_router)
        app.include_router(copies_router)
        app.include_router(records_router)
    elif variant == "ledger":
        app.include_router(assets_router)
    else:
        raise ValueError(f"Unsupported schema variant: {variant}")

    return app


app = create_app()
