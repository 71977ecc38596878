"""HTTP-обработчики для записей веса."""
from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy.orm import Session
from fittrack.handlers.common import get_session, to_response
from fittrack.schemas import MessageOut, WeightOut, WeightPayload
from fittrack.services import weight_service

router = APIRouter(prefix="/weight", tags=["Weight"])


@router.get("", response_model=list[WeightOut], summary="List weight entries")
def list_weights(db: Session = Depends(get_session)):
    return to_response(weight_service.list_weights(db), WeightOut)


@router.get("/{weight_id}", response_model=WeightOut, summary="Get weight entry by id")
def get_weight(weight_id: int, db: Session = Depends(get_session)):
    return to_response(weight_service.get_weight(db, weight_id), WeightOut)


@router.post("/create-weight", response_model=WeightOut, status_code=201, summary="Create weight entry")
def create_weight(payload: WeightPayload, db: Session = Depends(get_session)):
    return to_response(weight_service.create_weight(db, payload), WeightOut, status_code=201)


@router.put("/update-weight/{weight_id}", response_model=WeightOut, summary="Update weight entry")
def update_weight(weight_id: int, payload: WeightPayload, db: Session = Depends(get_session)):
    return to_response(weight_service.update_weight(db, weight_id, payload), WeightOut)


@router.delete("/delete-weight/{weight_id}", response_model=MessageOut, summary="Delete weight entry")
def delete_weight(weight_id: int, db: Session = Depends(get_session)):
    return to_response(weight_service.delete_weight(db, weight_id))


def register_handlers(app: FastAPI, prefix: str = "") -> None:
    """Регистрация обработчиков веса."""
    app.include_router(router, prefix=prefix)
