"""Проверки входных данных для сервисов."""
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from fittrack.models.base import BaseModel as Record
from fittrack.services.result import Err, ErrorKind, MISSING_FIELDS

_datetime_adapter = TypeAdapter(datetime)

TWO_PLACES = Decimal("0.01")

# Диапазон знакового 64-битного INTEGER в SQL
MAX_DB_INTEGER = 2 ** 63 - 1
MIN_DB_INTEGER = -(2 ** 63)


def is_missing(value) -> bool:
    """Поле не передано: None или пустая строка. Ноль считается значением."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def check_required(payload: BaseModel, *fields: str) -> Optional[Err]:
    """Проверить наличие всех обязательных полей."""
    if any(is_missing(getattr(payload, field)) for field in fields):
        return Err(ErrorKind.VALIDATION, MISSING_FIELDS)
    return None


def check_max_length(field: str, value: str, limit: int) -> Optional[Err]:
    if len(value) > limit:
        return Err(ErrorKind.VALIDATION, f"{field} must be at most {limit} characters")
    return None


def normalize_email(email: str) -> Union[str, Err]:
    """
    Проверить синтаксис email (без DNS-запросов).

    Returns:
        Нормализованный адрес (домен в нижнем регистре) или Err
    """
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return Err(ErrorKind.VALIDATION, "Please provide a valid email address")


def fits_integer_column(value: int) -> bool:
    """Число помещается в INTEGER-колонку БД."""
    return MIN_DB_INTEGER <= value <= MAX_DB_INTEGER


def find_by_id(db: Session, model: type[Record], record_id: int) -> Optional[Record]:
    """
    Найти запись по первичному ключу.

    Id за пределами INTEGER не может существовать в таблице,
    такой запрос даже не отправляем в БД.
    """
    if not fits_integer_column(record_id):
        return None
    return db.query(model).filter(model.id == record_id).first()


def parse_timestamp(raw: str) -> Optional[datetime]:
    """
    Разобрать дату/время из строки.

    Принимает ISO 8601, например "2025-01-16T14:30:00Z".
    Время со смещением переводится в UTC: колонка хранит момент без зоны.
    Возвращает None, если строку нельзя разобрать как дату.
    """
    try:
        parsed = _datetime_adapter.validate_python(raw.strip())
    except ValidationError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed


def quantize_weight(weight: Decimal) -> Decimal:
    """Округлить вес до двух знаков после запятой."""
    return weight.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
