"""Сервисы бизнес-логики: CRUD по ресурсам."""
from fittrack.services.result import Ok, Err, ErrorKind, Result
from fittrack.services import user_service, weight_service, nutrition_service, intensity_service

__all__ = [
    "Ok",
    "Err",
    "ErrorKind",
    "Result",
    "user_service",
    "weight_service",
    "nutrition_service",
    "intensity_service",
]
