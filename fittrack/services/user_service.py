"""Сервис для работы с пользователями."""
import logging
from typing import Optional, Union
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from fittrack.models import User
from fittrack.schemas import UserPayload
from fittrack.services.result import Err, ErrorKind, Ok, Result, not_found, storage_guard
from fittrack.services.validation import check_max_length, check_required, find_by_id, fits_integer_column, normalize_email

logger = logging.getLogger(__name__)

RESOURCE = "User"
REQUIRED_FIELDS = ("name", "email", "username", "password")
MAX_LENGTHS = {"name": 30, "email": 50, "username": 30, "password": 30}
USER_EXISTS = "User already exists"


def _validate(payload: UserPayload) -> Union[str, Err]:
    """Проверить обязательные поля и длины, вернуть нормализованный email."""
    error = check_required(payload, *REQUIRED_FIELDS)
    if error:
        return error
    for field, limit in MAX_LENGTHS.items():
        error = check_max_length(field, getattr(payload, field), limit)
        if error:
            return error
    return normalize_email(payload.email)


def _find_duplicate(db: Session, email: str, username: str, exclude_id: Optional[int] = None) -> Optional[User]:
    """Найти другого пользователя с тем же email (без учёта регистра) или username."""
    query = db.query(User).filter(
        or_(func.lower(User.email) == email.lower(), User.username == username)
    )
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first()


@storage_guard("fetching users")
def list_users(db: Session) -> Result:
    """Получить всех пользователей."""
    return Ok(db.query(User).all())


@storage_guard("fetching user")
def get_user(db: Session, user_id: int) -> Result:
    """Получить пользователя по ID."""
    user = find_by_id(db, User, user_id)
    if not user:
        return not_found(RESOURCE)
    return Ok(user)


@storage_guard("creating user")
def create_user(db: Session, payload: UserPayload) -> Result:
    """
    Создать пользователя.

    Args:
        db: сессия БД
        payload: name, email, username, password

    Returns:
        Ok(User) или Err с причиной отказа
    """
    email = _validate(payload)
    if isinstance(email, Err):
        return email

    if _find_duplicate(db, email, payload.username):
        return Err(ErrorKind.CONFLICT, USER_EXISTS)

    user = User(
        name=payload.name,
        email=email,
        username=payload.username,
        password=payload.password,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Параллельная вставка успела раньше — сработал уникальный индекс
        db.rollback()
        logger.warning(f"User insert rejected by database: {e}")
        return Err(ErrorKind.CONFLICT, USER_EXISTS)
    db.refresh(user)
    logger.info(f"User created: {user.id}")
    return Ok(user)


@storage_guard("updating user")
def update_user(db: Session, user_id: int, payload: UserPayload) -> Result:
    """Перезаписать поля пользователя."""
    email = _validate(payload)
    if isinstance(email, Err):
        return email

    user = find_by_id(db, User, user_id)
    if not user:
        return not_found(RESOURCE)

    if _find_duplicate(db, email, payload.username, exclude_id=user_id):
        return Err(ErrorKind.CONFLICT, USER_EXISTS)

    user.name = payload.name
    user.email = email
    user.username = payload.username
    user.password = payload.password
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"User update rejected by database: {e}")
        return Err(ErrorKind.CONFLICT, USER_EXISTS)
    db.refresh(user)
    return Ok(user)


@storage_guard("deleting user")
def delete_user(db: Session, user_id: int) -> Result:
    """Удалить пользователя. Ссылки в записях веса и питания обнуляются."""
    if not fits_integer_column(user_id):
        return not_found(RESOURCE)
    deleted = db.query(User).filter(User.id == user_id).delete()
    db.commit()
    if not deleted:
        return not_found(RESOURCE)
    logger.info(f"User deleted: {user_id}")
    return Ok(f"{RESOURCE} deleted successfully")
