from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    """Проверка состояния сервиса"""
    return {"status": "ok", "schema_variant": request.app.state.schema_variant}
