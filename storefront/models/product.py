from sqlalchemy import Column, String, DateTime, Numeric, Text, Integer
from sqlalchemy.sql import func
from ..database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)  # Актуальная цена, всегда > 0
    image_url = Column(String(1024), nullable=True)
    category = Column(String(100), nullable=True)

    created_at = Column(DateTime, default=func.now(), nullable=False)
