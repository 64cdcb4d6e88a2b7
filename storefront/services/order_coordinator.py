import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import Store
from ..models.order import Order, OrderStatus
from ..models.order_item import OrderItem
from ..schemas.order import OrderCreateRequest
from .exceptions import StoreError
from .order_validator import validate_order_request
from .price_reconciliation import PriceReconciler, ReconciledOrder
from .results import StepResult

logger = logging.getLogger(__name__)


class OrderCreationState(Enum):
    INIT = "init"
    VALIDATED = "validated"
    TRANSACTION_OPEN = "transaction_open"
    ITEMS_RECONCILED = "items_reconciled"
    ORDER_ROW_INSERTED = "order_row_inserted"
    ITEMS_INSERTED = "items_inserted"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class OrderReceipt:
    order_id: int
    customer_identifier: str
    customer_name: str
    total_price: Decimal
    status: OrderStatus


class OrderTransactionCoordinator:
    """
    Атомарное создание заказа.

    Валидация -> транзакция -> пересчет цен -> заголовок заказа -> позиции -> commit.
    Любая ошибка после открытия транзакции приводит к явному rollback,
    соединение возвращается в пул на любом пути выхода.

    Экземпляр создается на один запрос.
    """

    def __init__(self, store: Store, reconciler: Optional[PriceReconciler] = None):
        self.store = store
        self.reconciler = reconciler or PriceReconciler()
        self.state = OrderCreationState.INIT

    async def create_order(self, request: OrderCreateRequest) -> StepResult[OrderReceipt]:
        validation = validate_order_request(request)
        if not validation.ok:
            logger.warning(f"⚠️ Order request rejected: {validation.error}")
            return StepResult.failure(validation.error)
        self._advance(OrderCreationState.VALIDATED)

        async with self.store.session() as session:
            try:
                result = await self._run_transaction(session, request)
            except Exception:
                try:
                    await self._abort(session)
                except Exception as rollback_error:
                    logger.error(f"❌ Rollback failed after unexpected error: {rollback_error}")
                raise

            if not result.ok:
                await self._abort(session)
                logger.error(f"❌ Order for customer {request.customer_identifier} aborted: {result.error}")
                return result

        logger.info(
            f"✅ Order {result.value.order_id} created for customer {result.value.customer_identifier} "
            f"(total {result.value.total_price})"
        )
        return result

    async def _run_transaction(
            self,
            session: AsyncSession,
            request: OrderCreateRequest
    ) -> StepResult[OrderReceipt]:
        opened = await self._open_transaction(session)
        if not opened.ok:
            return opened
        self._advance(OrderCreationState.TRANSACTION_OPEN)

        reconciled = await self.reconciler.reconcile(session, request.items)
        if not reconciled.ok:
            return StepResult.failure(reconciled.error)
        self._advance(OrderCreationState.ITEMS_RECONCILED)

        header = await self._insert_order(session, request, reconciled.value)
        if not header.ok:
            return StepResult.failure(header.error)
        order = header.value
        self._advance(OrderCreationState.ORDER_ROW_INSERTED)

        inserted = await self._insert_items(session, order.id, reconciled.value)
        if not inserted.ok:
            return StepResult.failure(inserted.error)
        self._advance(OrderCreationState.ITEMS_INSERTED)

        committed = await self._commit(session)
        if not committed.ok:
            return StepResult.failure(committed.error)
        self._advance(OrderCreationState.COMMITTED)

        return StepResult.success(
            OrderReceipt(
                order_id=order.id,
                customer_identifier=order.customer_identifier,
                customer_name=order.customer_name,
                total_price=reconciled.value.total_price,
                status=OrderStatus.COMPLETED,
            )
        )

    async def _open_transaction(self, session: AsyncSession) -> StepResult[None]:
        # Берем соединение из пула сразу, транзакция начинается автоматически
        try:
            await session.connection()
        except SQLAlchemyError as e:
            logger.error(f"❌ Could not acquire database connection: {e}")
            return StepResult.failure(StoreError("Could not acquire database connection."))
        return StepResult.success(None)

    async def _insert_order(
            self,
            session: AsyncSession,
            request: OrderCreateRequest,
            reconciled: ReconciledOrder
    ) -> StepResult[Order]:
        order = Order(
            customer_identifier=request.customer_identifier,
            customer_name=request.customer_name,
            total_price=reconciled.total_price,
            status=OrderStatus.COMPLETED,  # Заказ оплачивается сразу
        )
        try:
            session.add(order)
            await session.flush()  # Получаем ID заказа
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to insert order header: {e}")
            return StepResult.failure(StoreError("Failed to insert order."))
        return StepResult.success(order)

    async def _insert_items(
            self,
            session: AsyncSession,
            order_id: int,
            reconciled: ReconciledOrder
    ) -> StepResult[None]:
        try:
            # Порядок вставки совпадает с порядком позиций в запросе
            for item in reconciled.items:
                session.add(
                    OrderItem(
                        order_id=order_id,
                        product_id=item.product_id,
                        quantity=item.quantity,
                        price_at_order=item.price_at_order,
                        product_name=item.product_name,
                        image_url=item.image_url,
                    )
                )
                await session.flush()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to insert items for order {order_id}: {e}")
            return StepResult.failure(StoreError("Failed to insert order items."))
        return StepResult.success(None)

    async def _commit(self, session: AsyncSession) -> StepResult[None]:
        try:
            await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Commit failed: {e}")
            return StepResult.failure(StoreError("Failed to commit order transaction."))
        return StepResult.success(None)

    async def _abort(self, session: AsyncSession):
        """rollback обязателен на любом пути, который не дошел до commit"""
        if self.state not in (OrderCreationState.INIT, OrderCreationState.VALIDATED):
            self._advance(OrderCreationState.ABORTED)
        await session.rollback()
        logger.info("↩️ Order transaction rolled back")

    def _advance(self, state: OrderCreationState):
        logger.debug(f"Order creation state: {self.state.value} -> {state.value}")
        self.state = state
