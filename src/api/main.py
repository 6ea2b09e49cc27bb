"""
GrubDash API - dishes and orders service
Main FastAPI application
"""
from datetime import datetime
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from config.settings import settings
from src.utils.logger import logger
from src.business import ServiceError
from src.api.routes import dishes, orders
from src.services.dish_service import DishService
from src.services.order_service import OrderService
from src.services.seed import load_records
from src.services.store import ResourceStore

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""

    logger.info("🚀 GrubDash API starting up", **settings.to_dict())

    try:
        if app.state.load_seed:
            app.state.dish_service.seed(load_records(settings.DISHES_DATA_PATH))
            app.state.order_service.seed(load_records(settings.ORDERS_DATA_PATH))

        logger.info("🎉 Collections ready",
                    dishes=len(app.state.dish_service.store),
                    orders=len(app.state.order_service.store))

        yield

    except Exception as e:
        logger.error("❌ Failed to load initial data", error=str(e))
        raise

    finally:
        logger.info("🔄 GrubDash API shutting down")

def create_app(dish_store: Optional[ResourceStore] = None,
               order_store: Optional[ResourceStore] = None,
               load_seed: bool = True) -> FastAPI:
    """Создание и настройка FastAPI приложения"""

    app = FastAPI(
        title=settings.SERVICE_NAME,
        description="Dishes and delivery orders with field validation and order lifecycle rules",
        version=settings.VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan
    )

    # Коллекции живут столько же, сколько приложение
    app.state.dish_service = DishService(dish_store or ResourceStore("Dish"))
    app.state.order_service = OrderService(order_store or ResourceStore("Order"))
    app.state.load_seed = load_seed

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(dishes.router)
    app.include_router(orders.router)

    @app.get("/")
    async def root():
        """Корневой endpoint с информацией о сервисе"""
        return {
            "service": settings.SERVICE_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "status": "running",
            "timestamp": datetime.now().isoformat(),
            "collections": {
                "dishes": len(app.state.dish_service.store),
                "orders": len(app.state.order_service.store)
            }
        }

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        """Ошибки проверки и политики заказа -> {"error": message}"""
        logger.validation_failed(
            request.url.path.strip("/").split("/")[0] or "root",
            exc.kind,
            exc.message,
            method=request.method,
            field=exc.field,
            index=exc.index
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Тело запроса не разобрано (не JSON или data не объект)"""
        errors = exc.errors()
        detail = errors[0].get("msg", "invalid body") if errors else "invalid body"
        message = f"Request body must be a JSON object with a data object: {detail}"
        logger.warning("Malformed request body", path=request.url.path, detail=detail)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            message = f"Path not found: {request.url.path}"
        elif exc.status_code == 405:
            message = f"{request.method} not allowed for {request.url.path}"
        else:
            message = str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message},
                            headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Глобальный обработчик исключений"""
        logger.error("💥 Unhandled exception",
                     path=request.url.path,
                     method=request.method,
                     error=str(exc))

        return JSONResponse(
            status_code=500,
            content={
                "error": str(exc) if settings.DEBUG else "An unexpected error occurred"
            }
        )

    return app

# Create the application
app = create_app()

if __name__ == "__main__":
    logger.info(f"📍 Server will start on http://{settings.APP_HOST}:{settings.APP_PORT}")
    logger.info(f"🔧 Debug mode: {settings.DEBUG}")

    uvicorn.run(
        "src.api.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_level="info"
    )
