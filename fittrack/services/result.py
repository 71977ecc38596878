"""Результат вызова сервиса: Ok(значение) или Err(вид ошибки, сообщение)."""
import enum
import logging
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal Server Error"
MISSING_FIELDS = "Missing required fields"


class ErrorKind(str, enum.Enum):
    """Вид ошибки сервиса."""
    VALIDATION = "validation"   # Поле отсутствует или некорректно
    REFERENCE = "reference"     # Ссылка на несуществующую запись
    CONFLICT = "conflict"       # Нарушение уникальности
    NOT_FOUND = "not_found"     # Нет записи с таким id
    STORAGE = "storage"         # Сбой при работе с БД


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str


Result = Union[Ok, Err]


def not_found(resource: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, f"{resource} not found")


def storage_guard(action: str) -> Callable:
    """
    Перехватить ошибки SQLAlchemy на границе сервиса.

    Сессия откатывается, ошибка логируется, а наружу уходит только
    Err(STORAGE) без деталей.

    Args:
        action: описание операции для лога, например "fetching users"
    """
    def decorator(func: Callable[..., Result]) -> Callable[..., Result]:
        @wraps(func)
        def wrapper(db: Session, *args, **kwargs) -> Result:
            try:
                return func(db, *args, **kwargs)
            except SQLAlchemyError as e:
                db.rollback()
                logger.error(f"Error {action}: {e}")
                return Err(ErrorKind.STORAGE, INTERNAL_ERROR)
        return wrapper
    return decorator
