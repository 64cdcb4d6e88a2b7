from .exceptions import StorefrontError, ValidationError, ProductNotFoundError, StoreError
from .results import StepResult
from .order_validator import validate_order_request
from .price_reconciliation import PriceReconciler, ReconciledLineItem, ReconciledOrder
from .order_coordinator import OrderTransactionCoordinator, OrderCreationState, OrderReceipt
from .order_service import OrderService
from .product_service import ProductService

__all__ = [
    "StorefrontError",
    "ValidationError",
    "ProductNotFoundError",
    "StoreError",
    "StepResult",
    "validate_order_request",
    "PriceReconciler",
    "ReconciledLineItem",
    "ReconciledOrder",
    "OrderTransactionCoordinator",
    "OrderCreationState",
    "OrderReceipt",
    "OrderService",
    "ProductService"
]
