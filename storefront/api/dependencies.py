from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Store
from ..services.order_coordinator import OrderTransactionCoordinator
from ..services.order_service import OrderService
from ..services.product_service import ProductService


def get_store(request: Request) -> Store:
    """Хранилище, созданное при старте приложения"""
    return request.app.state.store


async def get_db(store: Store = Depends(get_store)) -> AsyncGenerator[AsyncSession, None]:
    """Dependency для получения сессии базы данных"""
    async with store.session() as session:
        yield session


def get_order_coordinator(store: Store = Depends(get_store)) -> OrderTransactionCoordinator:
    """Координатор владеет своей сессией, поэтому получает хранилище, а не сессию"""
    return OrderTransactionCoordinator(store)


async def get_order_service(
    db: AsyncSession = Depends(get_db)
) -> OrderService:
    """Dependency для получения OrderService"""
    return OrderService(db)


async def get_product_service(
    db: AsyncSession = Depends(get_db)
) -> ProductService:
    """Dependency для получения ProductService"""
    return ProductService(db)
