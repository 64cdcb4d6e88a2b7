import logging
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from .config import Settings

logger = logging.getLogger(__name__)

# Базовый класс для моделей
Base = declarative_base()


class Store:
    """
    Хранилище: пул соединений и фабрика сессий.

    Создается один раз при старте процесса (connect) и закрывается при
    остановке (close). Передается в сервисы явно, через app.state.
    """

    def __init__(self, database_url: str, echo: bool = False, **engine_options: Any):
        self.database_url = database_url
        self.echo = echo
        self.engine_options: Dict[str, Any] = engine_options
        self.engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        return cls(
            settings.database_dsn,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
        )

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self):
        """Создает пул и проверяет соединение с БД"""
        if self.engine is not None:
            return

        engine = create_async_engine(self.database_url, echo=self.echo, **self.engine_options)
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            await engine.dispose()
            raise

        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("✅ Database connection pool ready")

    async def create_tables(self):
        """Создает таблицы, если их еще нет"""
        # Регистрируем модели в metadata
        from . import models  # noqa: F401

        async with self._require_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Database tables created")

    def session(self) -> AsyncSession:
        """Новая сессия. Соединение берется из пула при первом запросе и возвращается при close()"""
        if self._session_factory is None:
            raise RuntimeError("Store is not connected")
        return self._session_factory()

    async def ping(self) -> bool:
        try:
            async with self._require_engine().connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"❌ Database ping failed: {e}")
            return False

    async def close(self):
        """Закрывает пул соединений"""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("✅ Database connection pool closed")

    def _require_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise RuntimeError("Store is not connected")
        return self.engine
