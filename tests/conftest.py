"""
Pytest configuration and fixtures.
"""
from decimal import Decimal
from typing import Any, AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.pool import StaticPool

from storefront.config import Settings
from storefront.database import Store
from storefront.main import create_app
from storefront.models import Product


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        app_name="storefront-test",
        database_url="sqlite+aiosqlite://",
        create_tables=True,
        debug=False,
    )


@pytest_asyncio.fixture
async def store(test_settings: Settings) -> AsyncGenerator[Store, Any]:
    """In-memory database shared by every session of one test."""
    test_store = Store(
        test_settings.database_dsn,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await test_store.connect()
    await test_store.create_tables()

    yield test_store

    await test_store.close()


@pytest_asyncio.fixture
async def products(store: Store) -> dict[str, Product]:
    """Seed the catalog."""
    seeded = {
        "widget": Product(name="Widget", price=Decimal("5.00"), category="tools"),
        "gadget": Product(name="Gadget", price=Decimal("12.50"), image_url="http://img/gadget.png"),
        "gizmo": Product(name="Gizmo", price=Decimal("10.00")),
    }
    async with store.session() as session:
        session.add_all(seeded.values())
        await session.commit()
    return seeded


@pytest_asyncio.fixture
async def client(test_settings: Settings, store: Store) -> AsyncGenerator[AsyncClient, Any]:
    """Create test HTTP client."""
    app = create_app(settings=test_settings, store=store)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def row_count(store: Store) -> Callable[[Any], Awaitable[int]]:
    """Count rows of a table through a fresh session."""

    async def _count(model: Any) -> int:
        async with store.session() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count


@pytest.fixture
def sample_order_data(products: dict[str, Product]) -> dict[str, Any]:
    """Sample order request."""
    return {
        "customerIdentifier": "c1",
        "customerName": "Alice",
        "items": [
            {
                "product_id": products["widget"].id,
                "quantity": 2,
                "name": "Widget",
                "price_at_order": 5,
                "image_url": None,
            }
        ],
    }
