"""Модели базы данных."""
from fittrack.models.base import BaseModel, CreatedAtMixin, TimestampMixin
from fittrack.models.user import User
from fittrack.models.weight import Weight
from fittrack.models.intensity import Intensity
from fittrack.models.nutrition import Nutrition

__all__ = [
    "BaseModel",
    "CreatedAtMixin",
    "TimestampMixin",
    "User",
    "Weight",
    "Intensity",
    "Nutrition",
]
