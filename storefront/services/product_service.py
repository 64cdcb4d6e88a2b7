from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from ..models.product import Product
from ..schemas.product import ProductCreate, ProductUpdate
import logging

logger = logging.getLogger(__name__)


class ProductService:
    """Сервис каталога товаров"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_products(self) -> List[Product]:
        """Все товары, новые первыми"""
        try:
            query = select(Product).order_by(Product.created_at.desc(), Product.id.desc())
            result = await self.db.execute(query)
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"❌ Error fetching products: {e}")
            raise

    async def get_product(self, product_id: int) -> Optional[Product]:
        try:
            return await self.db.get(Product, product_id)
        except Exception as e:
            logger.error(f"❌ Error fetching product {product_id}: {e}")
            raise

    async def create_product(self, data: ProductCreate) -> Product:
        try:
            product = Product(**data.model_dump())
            self.db.add(product)
            await self.db.commit()
            await self.db.refresh(product)

            logger.info(f"✅ Product {product.id} created")
            return product

        except Exception as e:
            await self.db.rollback()
            logger.error(f"❌ Error creating product: {e}")
            raise

    async def update_product(self, product_id: int, data: ProductUpdate) -> Optional[Product]:
        """Заменяет поля товара. None, если товара нет"""
        try:
            product = await self.db.get(Product, product_id)
            if product is None:
                logger.warning(f"⚠️ Product {product_id} not found for update")
                return None

            for field, value in data.model_dump().items():
                setattr(product, field, value)

            await self.db.commit()
            await self.db.refresh(product)

            logger.info(f"✅ Product {product_id} updated")
            return product

        except Exception as e:
            await self.db.rollback()
            logger.error(f"❌ Error updating product {product_id}: {e}")
            raise

    async def delete_product(self, product_id: int) -> bool:
        try:
            product = await self.db.get(Product, product_id)
            if product is None:
                logger.warning(f"⚠️ Product {product_id} not found for deletion")
                return False

            await self.db.delete(product)
            await self.db.commit()

            logger.info(f"✅ Product {product_id} deleted")
            return True

        except Exception as e:
            await self.db.rollback()
            logger.error(f"❌ Error deleting product {product_id}: {e}")
            raise
