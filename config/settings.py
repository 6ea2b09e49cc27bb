"""
Settings for the GrubDash API service
"""
import os
from typing import Optional
from dotenv import load_dotenv

# Загружаем переменные окружения из .env файла
load_dotenv()

class Settings:
    """Конфигурация сервиса блюд и заказов"""

    SERVICE_NAME: str = "GrubDash API"
    VERSION: str = "1.0.0"

    # ===== APPLICATION SETTINGS =====
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "5000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # ===== LOGGING SETTINGS =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    DETAILED_LOGGING: bool = os.getenv("DETAILED_LOGGING", "true").lower() == "true"

    # ===== SEED DATA =====
    # JSON-массив записей или {"data": [...]}; пусто - старт с пустыми коллекциями
    DISHES_DATA_PATH: Optional[str] = os.getenv("DISHES_DATA_PATH") or None
    ORDERS_DATA_PATH: Optional[str] = os.getenv("ORDERS_DATA_PATH") or None

    # ===== VALIDATION METHODS =====

    @classmethod
    def validate_app_config(cls) -> bool:
        """Проверка конфигурации приложения"""
        return all([
            0 < cls.APP_PORT < 65536,
            cls.LOG_LEVEL.upper() in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        ])

    @classmethod
    def to_dict(cls) -> dict:
        """Конвертация настроек в словарь для логирования"""
        return {
            "service": cls.SERVICE_NAME,
            "version": cls.VERSION,
            "environment": cls.ENVIRONMENT,
            "debug": cls.DEBUG,
            "log_level": cls.LOG_LEVEL,
            "dishes_seed": cls.DISHES_DATA_PATH,
            "orders_seed": cls.ORDERS_DATA_PATH,
            "app_config_valid": cls.validate_app_config()
        }

# Глобальный экземпляр настроек
settings = Settings()

# Валидация настроек при импорте
if not settings.validate_app_config():
    raise ValueError("Invalid application configuration. Check APP_PORT and LOG_LEVEL.")
