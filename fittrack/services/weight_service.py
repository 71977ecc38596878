"""Сервис для записей веса."""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from fittrack.models import User, Weight
from fittrack.schemas import WeightPayload
from fittrack.services.result import Err, ErrorKind, Ok, Result, not_found, storage_guard
from fittrack.services.validation import check_required, find_by_id, fits_integer_column, quantize_weight

logger = logging.getLogger(__name__)

RESOURCE = "Weight"
REQUIRED_FIELDS = ("weight", "user_id")
INVALID_USER = "Invalid User Id"

# Numeric(10, 2): не больше 8 знаков до запятой
MAX_WEIGHT = 10 ** 8


def _check_references(db: Session, payload: WeightPayload) -> Optional[Err]:
    if not find_by_id(db, User, payload.user_id):
        return Err(ErrorKind.REFERENCE, INVALID_USER)
    return None


def _validate(payload: WeightPayload) -> Optional[Err]:
    error = check_required(payload, *REQUIRED_FIELDS)
    if error:
        return error
    if abs(payload.weight) >= MAX_WEIGHT:
        return Err(ErrorKind.VALIDATION, "weight is out of range")
    # Проверяем и округлённое значение: 99999999.999 превращается в 100000000.00
    weight = quantize_weight(payload.weight)
    if weight < 0:
        return Err(ErrorKind.VALIDATION, "weight must not be negative")
    if weight >= MAX_WEIGHT:
        return Err(ErrorKind.VALIDATION, "weight is out of range")
    return None


@storage_guard("fetching weights")
def list_weights(db: Session) -> Result:
    return Ok(db.query(Weight).all())


@storage_guard("fetching weight")
def get_weight(db: Session, weight_id: int) -> Result:
    weight = find_by_id(db, Weight, weight_id)
    if not weight:
        return not_found(RESOURCE)
    return Ok(weight)


@storage_guard("creating weight")
def create_weight(db: Session, payload: WeightPayload) -> Result:
    """
    Добавить замер веса.

    Args:
        db: сессия БД
        payload: weight и userId существующего пользователя

    Returns:
        Ok(Weight) или Err с причиной отказа
    """
    error = _validate(payload) or _check_references(db, payload)
    if error:
        return error

    weight = Weight(weight=quantize_weight(payload.weight), user_id=payload.user_id)
    db.add(weight)
    try:
        db.commit()
    except IntegrityError as e:
        # Пользователя удалили между проверкой и вставкой
        db.rollback()
        logger.warning(f"Weight insert rejected by database: {e}")
        return Err(ErrorKind.REFERENCE, INVALID_USER)
    db.refresh(weight)
    logger.info(f"Weight created: {weight.id} for user {weight.user_id}")
    return Ok(weight)


@storage_guard("updating weight")
def update_weight(db: Session, weight_id: int, payload: WeightPayload) -> Result:
    error = _validate(payload)
    if error:
        return error

    weight = find_by_id(db, Weight, weight_id)
    if not weight:
        return not_found(RESOURCE)

    error = _check_references(db, payload)
    if error:
        return error

    weight.weight = quantize_weight(payload.weight)
    weight.user_id = payload.user_id
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Weight update rejected by database: {e}")
        return Err(ErrorKind.REFERENCE, INVALID_USER)
    db.refresh(weight)
    return Ok(weight)


@storage_guard("deleting weight")
def delete_weight(db: Session, weight_id: int) -> Result:
    if not fits_integer_column(weight_id):
        return not_found(RESOURCE)
    deleted = db.query(Weight).filter(Weight.id == weight_id).delete()
    db.commit()
    if not deleted:
        return not_found(RESOURCE)
    logger.info(f"Weight deleted: {weight_id}")
    return Ok(f"{RESOURCE} deleted successfully")
