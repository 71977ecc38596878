"""Модель записи веса пользователя."""
from sqlalchemy import Column, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from fittrack.models.base import BaseModel, CreatedAtMixin


class Weight(BaseModel, CreatedAtMixin):
    """Замер веса."""

    __tablename__ = "weight"

    weight = Column(Numeric(10, 2), nullable=False)

    # Ссылка обнуляется при удалении пользователя
    user_id = Column("userId", Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)

    # Relationship
    user = relationship("User", back_populates="weights")
