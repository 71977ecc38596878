"""HTTP-обработчики для справочника интенсивности."""
from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy.orm import Session
from fittrack.handlers.common import get_session, to_response
from fittrack.schemas import IntensityOut, IntensityPayload, MessageOut
from fittrack.services import intensity_service

router = APIRouter(prefix="/intensity", tags=["Intensity"])


@router.get("", response_model=list[IntensityOut], summary="List intensities")
def list_intensities(db: Session = Depends(get_session)):
    return to_response(intensity_service.list_intensities(db), IntensityOut)


@router.get("/{intensity_id}", response_model=IntensityOut, summary="Get intensity by id")
def get_intensity(intensity_id: int, db: Session = Depends(get_session)):
    return to_response(intensity_service.get_intensity(db, intensity_id), IntensityOut)


@router.post("/create-intensity", response_model=IntensityOut, status_code=201, summary="Create intensity")
def create_intensity(payload: IntensityPayload, db: Session = Depends(get_session)):
    return to_response(intensity_service.create_intensity(db, payload), IntensityOut, status_code=201)


@router.put("/update-intensity/{intensity_id}", response_model=IntensityOut, summary="Update intensity")
def update_intensity(intensity_id: int, payload: IntensityPayload, db: Session = Depends(get_session)):
    return to_response(intensity_service.update_intensity(db, intensity_id, payload), IntensityOut)


@router.delete("/delete-intensity/{intensity_id}", response_model=MessageOut, summary="Delete intensity")
def delete_intensity(intensity_id: int, db: Session = Depends(get_session)):
    return to_response(intensity_service.delete_intensity(db, intensity_id))


def register_handlers(app: FastAPI, prefix: str = "") -> None:
    """Регистрация обработчиков интенсивности."""
    app.include_router(router, prefix=prefix)
