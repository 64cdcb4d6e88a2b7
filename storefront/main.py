from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging

from .config import Settings, settings as default_settings
from .database import Store
from .api import api_router

# Настройка логирования
logging.basicConfig(
    level=default_settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    store: Store = app.state.store
    app_settings: Settings = app.state.settings

    # Startup
    logger.info(f"🚀 Starting {app_settings.app_name}...")

    try:
        await store.connect()

        if app_settings.create_tables:
            await store.create_tables()

        logger.info(f"🎉 {app_settings.app_name} started successfully!")

    except Exception as e:
        logger.error(f"❌ Failed to start {app_settings.app_name}: {e}")
        raise

    yield  # Приложение работает

    # Shutdown
    logger.info(f"🛑 Shutting down {app_settings.app_name}...")

    try:
        await store.close()
        logger.info("👋 Shut down complete")
    except Exception as e:
        logger.error(f"❌ Error during shutdown: {e}")


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request."


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """Собирает приложение. Хранилище создается здесь и передается в lifespan через app.state"""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        description="Catalog and order service",
        version=VERSION,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = store or Store.from_settings(settings)

    # Настройка CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Подключаем API routes
    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        """Проверка состояния сервиса"""
        store: Store = app.state.store
        database = "connected" if store.is_connected and await store.ping() else "disconnected"

        if database != "connected":
            raise HTTPException(status_code=503, detail="Service unhealthy")

        return {
            "status": "healthy",
            "service": settings.app_name,
            "database": database,
            "version": VERSION
        }

    @app.get("/")
    async def root():
        """Корневой endpoint"""
        return {
            "message": f"{settings.app_name} API",
            "version": VERSION,
            "docs": "/docs",
            "health": "/health"
        }

    # Все ошибки отдаются в формате {"message": ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _format_validation_errors(exc)
        logger.warning(f"⚠️ Invalid request to {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Глобальный обработчик исключений"""
        logger.error(f"❌ Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred."}
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug
    )
