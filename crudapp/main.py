"""
Главный модуль FastAPI приложения Catalog CRUD API.

Содержит конфигурацию приложения, middleware, обработчики ошибок и роутеры.
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from crudapp.api.v1.routers import api_router
from crudapp.core.config import settings
from crudapp.core.exceptions import AppError
from crudapp.db.database import create_tables, engine

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Создание экземпляра FastAPI приложения
app = FastAPI(
    title="Catalog CRUD API",
    description="API для управления категориями и товарами",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)


# Настройка CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Преобразует исключения приложения в JSON ответ с соответствующим статусом."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/healthz")
def healthz():
    """
    Health check endpoint для мониторинга состояния приложения.

    Returns:
        dict: Статус приложения
    """
    return {"status": "ok", "service": "Catalog CRUD API", "version": "1.0.0"}


# Подключение API роутеров
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup_event():
    """
    Событие запуска приложения.

    Создает недостающие таблицы, если это разрешено настройками.
    """
    logger.info("Starting Catalog CRUD API")
    if settings.CREATE_TABLES_ON_STARTUP:
        create_tables()
        logger.info("Database tables ensured")


@app.on_event("shutdown")
def shutdown_event():
    """
    Событие завершения приложения.

    Освобождает соединения с базой данных.
    """
    engine.dispose()
    logger.info("Database engine disposed")


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
