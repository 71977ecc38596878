"""HTTP-обработчики для пользователей."""
from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy.orm import Session
from fittrack.handlers.common import get_session, to_response
from fittrack.schemas import MessageOut, UserOut, UserPayload
from fittrack.services import user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserOut], summary="List users")
def list_users(db: Session = Depends(get_session)):
    return to_response(user_service.list_users(db), UserOut)


@router.get("/{user_id}", response_model=UserOut, summary="Get user by id")
def get_user(user_id: int, db: Session = Depends(get_session)):
    return to_response(user_service.get_user(db, user_id), UserOut)


@router.post("/create-user", response_model=UserOut, status_code=201, summary="Create user")
def create_user(payload: UserPayload, db: Session = Depends(get_session)):
    return to_response(user_service.create_user(db, payload), UserOut, status_code=201)


@router.put("/update-user/{user_id}", response_model=UserOut, summary="Update user")
def update_user(user_id: int, payload: UserPayload, db: Session = Depends(get_session)):
    return to_response(user_service.update_user(db, user_id, payload), UserOut)


@router.delete("/delete-user/{user_id}", response_model=MessageOut, summary="Delete user")
def delete_user(user_id: int, db: Session = Depends(get_session)):
    return to_response(user_service.delete_user(db, user_id))


def register_handlers(app: FastAPI, prefix: str = "") -> None:
    """Регистрация обработчиков пользователей."""
    app.include_router(router, prefix=prefix)
