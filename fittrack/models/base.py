"""Базовые классы для моделей SQLAlchemy."""
from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func
from fittrack.database import Base


class CreatedAtMixin:
    """Миксин с датой создания записи."""

    created_at = Column("creationDate", DateTime(timezone=True), server_default=func.now(), nullable=False)


class TimestampMixin(CreatedAtMixin):
    """Миксин для автоматического создания временных меток."""

    updated_at = Column(
        "lastModifiedDate",
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class BaseModel(Base):
    """Базовая модель для всех таблиц."""

    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
