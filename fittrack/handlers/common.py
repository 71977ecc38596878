"""Общие части HTTP-обработчиков: сессия БД и перевод Result в ответ."""
from typing import Iterator, Optional, Type
from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session
from fittrack.database import get_db
from fittrack.services.result import Err, ErrorKind, Result

# Вид ошибки -> HTTP-статус
STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.REFERENCE: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE: 500,
}


def get_session(request: Request) -> Iterator[Session]:
    """Зависимость FastAPI: отдельная сессия на каждый запрос."""
    with get_db(request.app.state.session_factory) as db:
        yield db


def message(status_code: int, text: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": text})


def to_response(
    result: Result,
    schema: Optional[Type[BaseModel]] = None,
    status_code: int = 200,
) -> JSONResponse:
    """
    Перевести результат сервиса в JSON-ответ.

    Err -> {"message": ...} со статусом по виду ошибки.
    Ok со схемой -> запись или список записей в camelCase.
    Ok без схемы -> {"message": value} (удаление).
    """
    if isinstance(result, Err):
        return message(STATUS_BY_KIND[result.kind], result.message)

    if schema is None:
        return message(status_code, result.value)

    def dump(obj) -> dict:
        return schema.model_validate(obj).model_dump(mode="json", by_alias=True)

    if isinstance(result.value, list):
        content = [dump(item) for item in result.value]
    else:
        content = dump(result.value)
    return JSONResponse(status_code=status_code, content=content)
