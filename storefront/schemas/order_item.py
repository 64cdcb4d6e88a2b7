from pydantic import BaseModel, Field, field_serializer
from decimal import Decimal
from typing import Optional

# Верхняя граница INTEGER в БД
MAX_DB_INTEGER = 2 ** 31 - 1


class LineItemRequest(BaseModel):
    """
    Позиция заказа от клиента.

    Все поля необязательные: полноту проверяет валидатор заказа.
    price_at_order носит справочный характер и в расчетах не используется.
    """
    product_id: Optional[int] = Field(None, le=MAX_DB_INTEGER)
    quantity: Optional[int] = Field(None, le=MAX_DB_INTEGER)
    name: Optional[str] = None
    price_at_order: Optional[Decimal] = None
    image_url: Optional[str] = None


class OrderItemResponse(BaseModel):
    product_id: int
    quantity: int
    price_at_order: Decimal
    product_name: str
    image_url: Optional[str] = None

    class Config:
        from_attributes = True

    @field_serializer("price_at_order")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
