"""Подключение к базе данных SQLAlchemy."""
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

# Базовый класс для моделей
Base = declarative_base()


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """Создание движка БД.

    Для SQLite включаем проверку внешних ключей на каждом соединении,
    иначе ON DELETE SET NULL и ссылочная целостность не работают.
    """
    is_sqlite = database_url.startswith("sqlite")
    engine = create_engine(
        database_url,
        echo=echo,  # True для отладки SQL
        connect_args={"check_same_thread": False} if is_sqlite else {},
    )

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    """Фабрика сессий."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Создание всех таблиц в БД."""
    # Регистрируем модели в метаданных до create_all
    import fittrack.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


@contextmanager
def get_db(session_factory: sessionmaker) -> Iterator[Session]:
    """Контекстный менеджер для сессий БД.

    Использование:
        with get_db(session_factory) as db:
            user = db.query(User).first()
    """
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
