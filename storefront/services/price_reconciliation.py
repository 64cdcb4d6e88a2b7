import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.product import Product
from ..schemas.order_item import LineItemRequest
from .exceptions import ProductNotFoundError, StoreError
from .results import StepResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconciledLineItem:
    product_id: int
    quantity: int
    price_at_order: Decimal  # Цена из БД, а не от клиента
    product_name: str
    image_url: Optional[str]
    line_total: Decimal


@dataclass
class ReconciledOrder:
    items: List[ReconciledLineItem] = field(default_factory=list)
    total_price: Decimal = Decimal("0")


class PriceReconciler:
    """Пересчитывает позиции заказа по актуальным ценам из каталога"""

    async def lookup_price(self, session: AsyncSession, product_id: int) -> Optional[Decimal]:
        query = select(Product.price).where(Product.id == product_id)
        result = await session.execute(query)
        return result.scalar_one_or_none()

    async def reconcile(
            self,
            session: AsyncSession,
            items: Sequence[LineItemRequest]
    ) -> StepResult[ReconciledOrder]:
        """
        Позиции обрабатываются в порядке запроса, по одному SELECT на позицию
        в уже открытой транзакции. Первый отсутствующий товар прерывает весь заказ.
        """
        reconciled = ReconciledOrder()

        for item in items:
            try:
                price = await self.lookup_price(session, item.product_id)
            except SQLAlchemyError as e:
                logger.error(f"❌ Price lookup failed for product {item.product_id}: {e}")
                return StepResult.failure(StoreError(f"Price lookup failed for product {item.product_id}."))

            if price is None:
                logger.warning(f"⚠️ Product {item.product_id} not found during price reconciliation")
                return StepResult.failure(ProductNotFoundError(item.product_id))

            price = Decimal(price)
            if item.price_at_order is not None and Decimal(item.price_at_order) != price:
                logger.info(
                    f"Client price {item.price_at_order} for product {item.product_id} "
                    f"replaced with catalog price {price}"
                )

            line_total = price * item.quantity
            reconciled.items.append(
                ReconciledLineItem(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price_at_order=price,
                    product_name=item.name,
                    image_url=item.image_url or None,
                    line_total=line_total,
                )
            )
            reconciled.total_price += line_total

        return StepResult.success(reconciled)
