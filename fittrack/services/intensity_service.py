"""Сервис для справочника интенсивности."""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from fittrack.models import Intensity
from fittrack.schemas import IntensityPayload
from fittrack.services.result import Err, ErrorKind, Ok, Result, not_found, storage_guard
from fittrack.services.validation import check_max_length, check_required, find_by_id, fits_integer_column

logger = logging.getLogger(__name__)

RESOURCE = "Intensity"
REQUIRED_FIELDS = ("type", "value")
TYPE_MAX_LENGTH = 10
INTENSITY_EXISTS = "Intensity already exists"


def _validate(payload: IntensityPayload) -> Optional[Err]:
    return check_required(payload, *REQUIRED_FIELDS) or check_max_length(
        "type", payload.type, TYPE_MAX_LENGTH
    )


def _find_duplicate(db: Session, type_: str, exclude_id: Optional[int] = None) -> Optional[Intensity]:
    query = db.query(Intensity).filter(Intensity.type == type_)
    if exclude_id is not None:
        query = query.filter(Intensity.id != exclude_id)
    return query.first()


@storage_guard("fetching intensities")
def list_intensities(db: Session) -> Result:
    return Ok(db.query(Intensity).all())


@storage_guard("fetching intensity")
def get_intensity(db: Session, intensity_id: int) -> Result:
    intensity = find_by_id(db, Intensity, intensity_id)
    if not intensity:
        return not_found(RESOURCE)
    return Ok(intensity)


@storage_guard("creating intensity")
def create_intensity(db: Session, payload: IntensityPayload) -> Result:
    """Создать уровень интенсивности с уникальным type."""
    error = _validate(payload)
    if error:
        return error

    if _find_duplicate(db, payload.type):
        return Err(ErrorKind.CONFLICT, INTENSITY_EXISTS)

    intensity = Intensity(type=payload.type, value=payload.value)
    db.add(intensity)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Intensity insert rejected by database: {e}")
        return Err(ErrorKind.CONFLICT, INTENSITY_EXISTS)
    db.refresh(intensity)
    logger.info(f"Intensity created: {intensity.id} ({intensity.type})")
    return Ok(intensity)


@storage_guard("updating intensity")
def update_intensity(db: Session, intensity_id: int, payload: IntensityPayload) -> Result:
    error = _validate(payload)
    if error:
        return error

    intensity = find_by_id(db, Intensity, intensity_id)
    if not intensity:
        return not_found(RESOURCE)

    if _find_duplicate(db, payload.type, exclude_id=intensity_id):
        return Err(ErrorKind.CONFLICT, INTENSITY_EXISTS)

    intensity.type = payload.type
    intensity.value = payload.value
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Intensity update rejected by database: {e}")
        return Err(ErrorKind.CONFLICT, INTENSITY_EXISTS)
    db.refresh(intensity)
    return Ok(intensity)


@storage_guard("deleting intensity")
def delete_intensity(db: Session, intensity_id: int) -> Result:
    """Удалить уровень. У записей питания intensityId станет пустым."""
    if not fits_integer_column(intensity_id):
        return not_found(RESOURCE)
    deleted = db.query(Intensity).filter(Intensity.id == intensity_id).delete()
    db.commit()
    if not deleted:
        return not_found(RESOURCE)
    logger.info(f"Intensity deleted: {intensity_id}")
    return Ok(f"{RESOURCE} deleted successfully")
