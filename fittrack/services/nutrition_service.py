"""Сервис для записей о питании."""
import logging
from datetime import datetime
from typing import Union
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from fittrack.models import Intensity, Nutrition, User
from fittrack.schemas import NutritionPayload
from fittrack.services.result import Err, ErrorKind, Ok, Result, not_found, storage_guard
from fittrack.services.validation import check_required, find_by_id, fits_integer_column, parse_timestamp

logger = logging.getLogger(__name__)

RESOURCE = "Nutrition"
REQUIRED_FIELDS = ("date", "user_id", "intensity_id")


def _resolve(db: Session, payload: NutritionPayload) -> Union[datetime, Err]:
    """
    Проверить ссылки и дату.

    Порядок проверок фиксирован: пользователь, интенсивность, формат даты.

    Returns:
        Разобранная дата или Err с первой найденной ошибкой
    """
    if not find_by_id(db, User, payload.user_id):
        return Err(ErrorKind.REFERENCE, "Invalid User Id")
    if not find_by_id(db, Intensity, payload.intensity_id):
        return Err(ErrorKind.REFERENCE, "Invalid Intensity Id")
    parsed = parse_timestamp(payload.date)
    if parsed is None:
        return Err(ErrorKind.VALIDATION, "Invalid date format")
    return parsed


def _integrity_error(action: str, e: IntegrityError) -> Err:
    logger.warning(f"Nutrition {action} rejected by database: {e}")
    return Err(ErrorKind.REFERENCE, "Invalid User Id or Intensity Id")


@storage_guard("fetching nutritions")
def list_nutrition(db: Session) -> Result:
    return Ok(db.query(Nutrition).all())


@storage_guard("fetching nutrition")
def get_nutrition(db: Session, nutrition_id: int) -> Result:
    nutrition = find_by_id(db, Nutrition, nutrition_id)
    if not nutrition:
        return not_found(RESOURCE)
    return Ok(nutrition)


@storage_guard("creating nutrition")
def create_nutrition(db: Session, payload: NutritionPayload) -> Result:
    """
    Создать запись о питании.

    Args:
        db: сессия БД
        payload: date, userId, intensityId

    Returns:
        Ok(Nutrition) или Err с причиной отказа
    """
    error = check_required(payload, *REQUIRED_FIELDS)
    if error:
        return error

    resolved = _resolve(db, payload)
    if isinstance(resolved, Err):
        return resolved

    nutrition = Nutrition(date=resolved, user_id=payload.user_id, intensity_id=payload.intensity_id)
    db.add(nutrition)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        return _integrity_error("insert", e)
    db.refresh(nutrition)
    logger.info(f"Nutrition created: {nutrition.id} for user {nutrition.user_id}")
    return Ok(nutrition)


@storage_guard("updating nutrition")
def update_nutrition(db: Session, nutrition_id: int, payload: NutritionPayload) -> Result:
    error = check_required(payload, *REQUIRED_FIELDS)
    if error:
        return error

    nutrition = find_by_id(db, Nutrition, nutrition_id)
    if not nutrition:
        return not_found(RESOURCE)

    resolved = _resolve(db, payload)
    if isinstance(resolved, Err):
        return resolved

    nutrition.date = resolved
    nutrition.user_id = payload.user_id
    nutrition.intensity_id = payload.intensity_id
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        return _integrity_error("update", e)
    db.refresh(nutrition)
    return Ok(nutrition)


@storage_guard("deleting nutrition")
def delete_nutrition(db: Session, nutrition_id: int) -> Result:
    if not fits_integer_column(nutrition_id):
        return not_found(RESOURCE)
    deleted = db.query(Nutrition).filter(Nutrition.id == nutrition_id).delete()
    db.commit()
    if not deleted:
        return not_found(RESOURCE)
    logger.info(f"Nutrition deleted: {nutrition_id}")
    return Ok(f"{RESOURCE} deleted successfully")
