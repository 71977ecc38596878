"""Модель уровня интенсивности."""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from fittrack.models.base import BaseModel


class Intensity(BaseModel):
    """Справочник уровней интенсивности (тип и числовое значение)."""

    __tablename__ = "intensity"

    type = Column(String(10), unique=True, nullable=False)
    value = Column(Integer, nullable=False)

    nutrition = relationship("Nutrition", back_populates="intensity", passive_deletes=True)
