"""Модель записи о питании."""
from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from fittrack.models.base import BaseModel, TimestampMixin


class Nutrition(BaseModel, TimestampMixin):
    """Запись о питании с уровнем интенсивности."""

    __tablename__ = "nutrition"

    date = Column(DateTime(timezone=True), nullable=False)

    user_id = Column("userId", Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)
    intensity_id = Column("intensityId", Integer, ForeignKey("intensity.id", ondelete="SET NULL"), index=True)

    # Relationships
    user = relationship("User", back_populates="nutrition")
    intensity = relationship("Intensity", back_populates="nutrition")
