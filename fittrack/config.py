"""Конфигурация сервиса из переменных окружения."""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:4200,http://example.com"


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Config:
    """Настройки API."""

    DATABASE_URL: str
    CORS_ORIGINS: tuple[str, ...] = _split_origins(DEFAULT_CORS_ORIGINS)
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Загрузка конфигурации из окружения."""
        return cls(
            DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///fittrack.db"),
            CORS_ORIGINS=_split_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
            API_PREFIX=os.getenv("API_PREFIX", "/api"),
            HOST=os.getenv("HOST", "0.0.0.0"),
            PORT=int(os.getenv("PORT", "3000")),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
            SQL_ECHO=os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes"),
        )

    def validate(self) -> None:
        """Проверка обязательных настроек."""
        if not self.DATABASE_URL:
            raise ValueError("DATABASE_URL не установлен в .env")
        if not 0 < self.PORT < 65536:
            raise ValueError(f"PORT вне допустимого диапазона: {self.PORT}")
        if self.API_PREFIX and not self.API_PREFIX.startswith("/"):
            raise ValueError("API_PREFIX должен начинаться с '/'")


# Глобальный экземпляр конфигурации
config = Config.from_env()
