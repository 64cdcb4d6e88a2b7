from typing import Optional

from ..schemas.order import OrderCreateRequest
from ..schemas.order_item import LineItemRequest
from .exceptions import ValidationError
from .results import StepResult


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _validate_item(position: int, item: LineItemRequest) -> Optional[ValidationError]:
    if (
        item.product_id is None
        or item.quantity is None
        or item.price_at_order is None
        or _is_blank(item.name)
    ):
        return ValidationError(
            f"Invalid order item #{position}: product_id, quantity, name and price_at_order are required."
        )
    if item.quantity <= 0:
        return ValidationError(f"Invalid order item #{position}: quantity must be greater than zero.")
    return None


def validate_order_request(request: OrderCreateRequest) -> StepResult[OrderCreateRequest]:
    """
    Проверяет форму запроса на создание заказа.

    Работает только в памяти и к БД не обращается. Возвращает первую
    найденную ошибку, остальные позиции не проверяются.
    """
    if not request.items:
        return StepResult.failure(ValidationError("Order must contain at least one item."))
    if _is_blank(request.customer_identifier):
        return StepResult.failure(ValidationError("Customer identifier (customerIdentifier) is required."))
    if _is_blank(request.customer_name):
        return StepResult.failure(ValidationError("Customer name (customerName) is required."))

    for position, item in enumerate(request.items, start=1):
        error = _validate_item(position, item)
        if error is not None:
            return StepResult.failure(error)

    return StepResult.success(request)
