from fastapi import APIRouter, Depends, HTTPException
from typing import List

from ...schemas.order import OrderCreateRequest, OrderCreatedResponse, OrderResponse, MessageResponse
from ...services.order_coordinator import OrderTransactionCoordinator
from ...services.order_service import OrderService
from ..dependencies import get_order_coordinator, get_order_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderCreatedResponse, status_code=201)
async def create_order(
        payload: OrderCreateRequest,
        coordinator: OrderTransactionCoordinator = Depends(get_order_coordinator)
):
    """Создать заказ. Цены позиций пересчитываются по каталогу"""
    result = await coordinator.create_order(payload)

    if not result.ok:
        error = result.error
        detail = error.message if error.status_code < 500 else f"Failed to create order: {error.message}"
        raise HTTPException(status_code=error.status_code, detail=detail)

    receipt = result.value
    return OrderCreatedResponse(
        order_id=receipt.order_id,
        customer_identifier=receipt.customer_identifier,
        customer_name=receipt.customer_name,
        total_price=float(receipt.total_price),
        status=receipt.status,
        message="Order created successfully."
    )


@router.get("", response_model=List[OrderResponse])
async def get_orders(
        order_service: OrderService = Depends(get_order_service)
):
    """Получить все заказы с позициями"""
    try:
        return await order_service.get_all_orders()
    except Exception as e:
        logger.error(f"❌ Error getting orders: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch orders.")


@router.put("/{order_id}/complete", response_model=MessageResponse)
async def complete_order(
        order_id: int,
        order_service: OrderService = Depends(get_order_service)
):
    """Перевести заказ из pending в completed"""
    try:
        success = await order_service.complete_order(order_id)

        if not success:
            raise HTTPException(status_code=404, detail="Order not found or already processed.")

        return {"message": f"Order {order_id} status updated to 'completed'."}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error completing order {order_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update order status.")


@router.get("/history/{customer_identifier}", response_model=List[OrderResponse])
async def get_customer_history(
        customer_identifier: str,
        order_service: OrderService = Depends(get_order_service)
):
    """История оплаченных заказов покупателя"""
    if not customer_identifier.strip():
        raise HTTPException(status_code=400, detail="Customer identifier (customerIdentifier) must be provided.")

    try:
        return await order_service.get_customer_history(customer_identifier)
    except Exception as e:
        logger.error(f"❌ Error fetching history for customer {customer_identifier}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch transaction history.")
