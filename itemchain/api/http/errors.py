from fastapi import HTTPException, status

from itemchain.core.exceptions import (
    ItemchainError, NotFoundError, AlreadyExistsError, WrongKindError,
    MotiveRejectedError, InvalidValueError, DecodeError, StorageUnavailableError
)

# Порядок важен: подклассы проверяются раньше базовых классов
_STATUS_BY_ERROR = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (WrongKindError, status.HTTP_409_CONFLICT),
    (MotiveRejectedError, 422),
    (InvalidValueError, 422),
    (DecodeError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def http_error(error: ItemchainError) -> HTTPException:
    """Преобразование доменной ошибки в HTTP-ответ"""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
