import logging

from itemchain.core.exceptions import InvalidValueError, MotiveRejectedError

logger = logging.getLogger(__name__)

# Закрытый набор: расширение требует изменения дизайна, не конфигурации
ACCEPTED_RETURN_MOTIVES = frozenset({0, 1})


def _reject(key: str, error: InvalidValueError | MotiveRejectedError):
    logger.warning(f"Rejected operation on {key}: {error}")
    raise error


def check_price(key: str, price: int) -> None:
    """Проверка цены: целое неотрицательное число"""
    if isinstance(price, bool) or not isinstance(price, int):
        _reject(key, InvalidValueError(f"price must be an integer, got {price!r}"))
    if price < 0:
        _reject(key, InvalidValueError(f"price must not be negative, got {price}"))


def check_rating(key: str, rating: int, rating_min: int, rating_max: int) -> None:
    """Проверка оценки: целое число в диапазоне [rating_min, rating_max]"""
    if isinstance(rating, bool) or not isinstance(rating, int):
        _reject(key, InvalidValueError(f"rating must be an integer, got {rating!r}"))
    if not rating_min <= rating <= rating_max:
        _reject(key, InvalidValueError(
            f"rating must be between {rating_min} and {rating_max}, got {rating}"
        ))


def check_motive(key: str, motive: int) -> None:
    """Проверка кода причины возврата"""
    if isinstance(motive, bool) or motive not in ACCEPTED_RETURN_MOTIVES:
        _reject(key, MotiveRejectedError(
            f"it is not possible to return the item {key} for motive {motive}"
        ))
