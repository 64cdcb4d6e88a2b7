from pydantic import BaseModel, Field, field_serializer
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from ..models.order import OrderStatus
from .order_item import LineItemRequest, OrderItemResponse


class OrderCreateRequest(BaseModel):
    customer_identifier: Optional[str] = Field(None, alias="customerIdentifier")
    customer_name: Optional[str] = Field(None, alias="customerName")
    items: Optional[List[LineItemRequest]] = None

    class Config:
        populate_by_name = True


class OrderCreatedResponse(BaseModel):
    order_id: int
    customer_identifier: str = Field(..., alias="customerIdentifier")
    customer_name: str = Field(..., alias="customerName")
    total_price: float
    status: OrderStatus
    message: str

    class Config:
        populate_by_name = True


class OrderResponse(BaseModel):
    id: int
    customer_identifier: str
    customer_name: str
    total_price: Decimal
    status: OrderStatus
    created_at: Optional[datetime] = None

    items: List[OrderItemResponse] = []

    class Config:
        from_attributes = True

    @field_serializer("total_price")
    def serialize_total_price(self, total_price: Decimal) -> float:
        return float(total_price)


class MessageResponse(BaseModel):
    message: str
