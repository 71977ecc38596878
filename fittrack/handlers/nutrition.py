"""HTTP-обработчики для записей о питании."""
from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy.orm import Session
from fittrack.handlers.common import get_session, to_response
from fittrack.schemas import MessageOut, NutritionOut, NutritionPayload
from fittrack.services import nutrition_service

router = APIRouter(prefix="/nutrition", tags=["Nutrition"])


@router.get("", response_model=list[NutritionOut], summary="List nutrition entries")
def list_nutrition(db: Session = Depends(get_session)):
    return to_response(nutrition_service.list_nutrition(db), NutritionOut)


@router.get("/{nutrition_id}", response_model=NutritionOut, summary="Get nutrition entry by id")
def get_nutrition(nutrition_id: int, db: Session = Depends(get_session)):
    return to_response(nutrition_service.get_nutrition(db, nutrition_id), NutritionOut)


@router.post("/create-nutrition", response_model=NutritionOut, status_code=201, summary="Create nutrition entry")
def create_nutrition(payload: NutritionPayload, db: Session = Depends(get_session)):
    return to_response(nutrition_service.create_nutrition(db, payload), NutritionOut, status_code=201)


@router.put("/update-nutrition/{nutrition_id}", response_model=NutritionOut, summary="Update nutrition entry")
def update_nutrition(nutrition_id: int, payload: NutritionPayload, db: Session = Depends(get_session)):
    return to_response(nutrition_service.update_nutrition(db, nutrition_id, payload), NutritionOut)


@router.delete("/delete-nutrition/{nutrition_id}", response_model=MessageOut, summary="Delete nutrition entry")
def delete_nutrition(nutrition_id: int, db: Session = Depends(get_session)):
    return to_response(nutrition_service.delete_nutrition(db, nutrition_id))


def register_handlers(app: FastAPI, prefix: str = "") -> None:
    """Регистрация обработчиков питания."""
    app.include_router(router, prefix=prefix)
