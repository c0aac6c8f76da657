from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./world_state.db"
    sql_echo: bool = False

    # catalog - оригиналы и копии (вариант A), ledger - единая запись с владельцем (вариант B)
    schema_variant: Literal["catalog", "ledger"] = "catalog"

    # Допустимый диапазон оценки копии (включительно)
    rating_min: int = 0
    rating_max: int = 5

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
