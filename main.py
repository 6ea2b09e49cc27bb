import uvicorn
from config.settings import settings
from src.utils.logger import logger

def main():
    """Запуск API сервера"""
    logger.info("Starting application...", host=settings.APP_HOST, port=settings.APP_PORT)
    uvicorn.run(
        "src.api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Server stopped by user.")
