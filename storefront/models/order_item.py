from sqlalchemy import Column, String, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)

    # Ссылка на товар без FK: история заказа не зависит от каталога
    product_id = Column(Integer, nullable=False)

    quantity = Column(Integer, nullable=False)
    price_at_order = Column(Numeric(10, 2), nullable=False)  # Цена из БД на момент заказа

    # Снимок данных товара
    product_name = Column(String(255), nullable=False)
    image_url = Column(String(1024), nullable=True)

    # Связи
    order = relationship("Order", back_populates="items")
