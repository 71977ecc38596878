"""
Pydantic-схемы запросов и ответов API.

Входные схемы (*Payload) держат все поля необязательными: наличие
обязательных полей проверяют сервисы, чтобы вернуть единое сообщение
"Missing required fields", а не ошибку валидации FastAPI. Типы строгие:
строка вместо числа отклоняется ещё до сервиса.

Выходные схемы (*Out) читают ORM-объекты и отдают поля в camelCase.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class UserPayload(_Payload):
    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    username: Optional[StrictStr] = None
    password: Optional[StrictStr] = None


class WeightPayload(_Payload):
    weight: Optional[Decimal] = None
    user_id: Optional[StrictInt] = Field(None, alias="userId")


class NutritionPayload(_Payload):
    # Дата приходит строкой и разбирается в сервисе после проверки ссылок
    date: Optional[StrictStr] = None
    user_id: Optional[StrictInt] = Field(None, alias="userId")
    intensity_id: Optional[StrictInt] = Field(None, alias="intensityId")


class IntensityPayload(_Payload):
    type: Optional[StrictStr] = None
    # Значение хранится в INTEGER-колонке
    value: Optional[StrictInt] = Field(None, ge=-(2 ** 63), le=2 ** 63 - 1)


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int


class UserOut(_Record):
    """Пользователь без пароля."""

    name: str
    email: str
    username: str
    created_at: datetime = Field(serialization_alias="creationDate")
    updated_at: datetime = Field(serialization_alias="lastModifiedDate")


class WeightOut(_Record):
    weight: float
    user_id: Optional[int] = Field(None, serialization_alias="userId")
    created_at: datetime = Field(serialization_alias="creationDate")


class NutritionOut(_Record):
    date: datetime
    user_id: Optional[int] = Field(None, serialization_alias="userId")
    intensity_id: Optional[int] = Field(None, serialization_alias="intensityId")
    created_at: datetime = Field(serialization_alias="creationDate")
    updated_at: datetime = Field(serialization_alias="lastModifiedDate")


class IntensityOut(_Record):
    type: str
    value: int


class MessageOut(BaseModel):
    message: str
