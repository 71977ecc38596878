"""Модель пользователя."""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from fittrack.models.base import BaseModel, TimestampMixin


class User(BaseModel, TimestampMixin):
    """Пользователь сервиса."""

    __tablename__ = "users"

    name = Column(String(30), nullable=False)
    email = Column(String(50), unique=True, nullable=False)
    username = Column(String(30), unique=True, nullable=False)
    password = Column(String(30), nullable=False)

    # Relationships
    weights = relationship("Weight", back_populates="user", passive_deletes=True)
    nutrition = relationship("Nutrition", back_populates="user", passive_deletes=True)

    def __repr__(self):
        return f"<User {self.id} {self.username}>"
