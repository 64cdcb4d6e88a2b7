from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from sqlalchemy.orm import selectinload

from ..models.order import Order, OrderStatus
import logging

logger = logging.getLogger(__name__)


class OrderService:
    """Сервис для чтения заказов и смены их статуса"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_orders(self) -> List[Order]:
        """Все заказы с позициями, новые первыми"""
        try:
            query = select(Order).options(
                selectinload(Order.items)
            ).order_by(Order.created_at.desc(), Order.id.desc())

            result = await self.db.execute(query)
            return list(result.scalars().all())

        except Exception as e:
            logger.error(f"❌ Error getting orders list: {e}")
            raise

    async def get_customer_history(self, customer_identifier: str) -> List[Order]:
        """Оплаченные заказы покупателя, новые первыми"""
        try:
            query = select(Order).options(
                selectinload(Order.items)
            ).where(
                Order.customer_identifier == customer_identifier,
                Order.status == OrderStatus.COMPLETED
            ).order_by(Order.created_at.desc(), Order.id.desc())

            result = await self.db.execute(query)
            return list(result.scalars().all())

        except Exception as e:
            logger.error(f"❌ Error getting order history for customer {customer_identifier}: {e}")
            raise

    async def complete_order(self, order_id: int) -> bool:
        """Переводит заказ из pending в completed. False, если заказа нет или он уже обработан"""
        try:
            query = update(Order).where(
                Order.id == order_id,
                Order.status == OrderStatus.PENDING
            ).values(status=OrderStatus.COMPLETED)

            result = await self.db.execute(query)
            await self.db.commit()

            if result.rowcount > 0:
                logger.info(f"✅ Order {order_id} completed")
                return True
            else:
                logger.warning(f"⚠️ Order {order_id} not found or already processed")
                return False

        except Exception as e:
            await self.db.rollback()
            logger.error(f"❌ Error completing order {order_id}: {e}")
            raise
