"""Сборка FastAPI-приложения: CORS, обработчики ошибок, роутеры."""
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException
from fittrack.config import Config, config as default_config
from fittrack.database import init_db, make_engine, make_session_factory
from fittrack.handlers import (
    register_user_handlers,
    register_weight_handlers,
    register_nutrition_handlers,
    register_intensity_handlers,
)
from fittrack.handlers.common import message
from fittrack.services.result import INTERNAL_ERROR, MISSING_FIELDS

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    """Ошибки формы запроса FastAPI (422) отдаём как 400 с {"message": ...}."""
    errors = exc.errors()
    if errors and all(err.get("type") == "missing" and err.get("loc", ())[:1] == ("body",) for err in errors):
        return message(400, MISSING_FIELDS)
    logger.info(f"Rejected request to {request.url.path}: {errors}")
    return message(400, "Invalid request")


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return message(exc.status_code, str(exc.detail))


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return message(500, INTERNAL_ERROR)


def create_app(
    app_config: Optional[Config] = None,
    session_factory: Optional[sessionmaker] = None,
) -> FastAPI:
    """
    Создать приложение.

    Args:
        app_config: настройки (по умолчанию из окружения)
        session_factory: готовая фабрика сессий; если не передана,
            создаётся движок по DATABASE_URL и таблицы

    Returns:
        Настроенный FastAPI
    """
    app_config = app_config or default_config

    if session_factory is None:
        engine = make_engine(app_config.DATABASE_URL, echo=app_config.SQL_ECHO)
        init_db(engine)
        session_factory = make_session_factory(engine)

    app = FastAPI(title="FitTrack API", version="1.0.0")
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_config.CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    # Регистрация обработчиков
    register_user_handlers(app, app_config.API_PREFIX)
    register_weight_handlers(app, app_config.API_PREFIX)
    register_nutrition_handlers(app, app_config.API_PREFIX)
    register_intensity_handlers(app, app_config.API_PREFIX)

    return app
