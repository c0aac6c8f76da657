"""
Иерархия доменных ошибок.

Каждая ошибка различима по классу; ни одна не обрабатывается повтором
внутри сервисов - решение о повторе принимает вызывающая сторона.
"""


class ItemchainError(Exception):
    """Базовая ошибка домена"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NotFoundError(ItemchainError):
    """Запись с указанным ключом отсутствует"""
    pass


class OriginalNotFoundError(NotFoundError):
    """Оригинал, из которого покупается копия, отсутствует"""
    pass


class AlreadyExistsError(ItemchainError):
    """Ключ уже занят"""
    pass


class CopyAlreadyExistsError(AlreadyExistsError):
    """Ключ копии уже занят"""
    pass


class WrongKindError(ItemchainError):
    """Запись найдена, но другого вида (оригинал вместо копии или наоборот)"""
    pass


class MotiveRejectedError(ItemchainError):
    """Код причины возврата не входит в допустимый набор"""
    pass


class InvalidValueError(ItemchainError):
    """Значение цены или оценки вне допустимых границ"""
    pass


class DecodeError(ItemchainError):
    """Сохранённые байты не являются корректной записью"""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)


class StorageUnavailableError(ItemchainError):
    """Сбой хранилища состояния"""
    pass
