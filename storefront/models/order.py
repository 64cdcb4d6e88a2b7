from sqlalchemy import Column, String, DateTime, Enum, Numeric, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from enum import Enum as PyEnum
from ..database import Base


class OrderStatus(PyEnum):
    PENDING = "pending"  # Ожидает оплаты
    COMPLETED = "completed"  # Оплачен


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    # Покупатель
    customer_identifier = Column(String(255), nullable=False, index=True)
    customer_name = Column(String(255), nullable=False)

    total_price = Column(Numeric(12, 2), nullable=False)
    status = Column(Enum(OrderStatus), default=OrderStatus.PENDING, nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)

    # Связи
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )
