"""Точка входа для FitTrack API."""
import logging
import uvicorn
from fittrack.config import config
from fittrack.app import create_app

# Настройка логирования
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=config.LOG_LEVEL
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Запуск сервера."""
    # Проверка конфигурации
    try:
        config.validate()
    except ValueError as e:
        logger.error(f"Ошибка конфигурации: {e}")
        return

    # Инициализация БД и приложения
    logger.info("Инициализация базы данных...")
    app = create_app(config)

    logger.info(f"Server is running on http://{config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
