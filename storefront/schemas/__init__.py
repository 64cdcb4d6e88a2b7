from .order import OrderCreateRequest, OrderCreatedResponse, OrderResponse, MessageResponse
from .order_item import LineItemRequest, OrderItemResponse
from .product import ProductCreate, ProductUpdate, ProductResponse, ProductUpdatedResponse

__all__ = [
    "OrderCreateRequest",
    "OrderCreatedResponse",
    "OrderResponse",
    "MessageResponse",
    "LineItemRequest",
    "OrderItemResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductUpdatedResponse"
]
