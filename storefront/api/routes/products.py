from fastapi import APIRouter, Depends, HTTPException
from typing import List

from ...schemas.order import MessageResponse
from ...schemas.product import ProductCreate, ProductUpdate, ProductResponse, ProductUpdatedResponse
from ...services.product_service import ProductService
from ..dependencies import get_product_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductResponse])
async def get_products(
        product_service: ProductService = Depends(get_product_service)
):
    """Получить все товары"""
    try:
        return await product_service.get_all_products()
    except Exception as e:
        logger.error(f"❌ Error fetching products: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch products.")


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
        product_id: int,
        product_service: ProductService = Depends(get_product_service)
):
    """Получить товар по ID"""
    try:
        product = await product_service.get_product(product_id)

        if not product:
            raise HTTPException(status_code=404, detail="Product not found.")

        return product
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error fetching product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch product.")


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
        payload: ProductCreate,
        product_service: ProductService = Depends(get_product_service)
):
    """Добавить товар"""
    try:
        return await product_service.create_product(payload)
    except Exception as e:
        logger.error(f"❌ Error creating product: {e}")
        raise HTTPException(status_code=500, detail="Failed to create product.")


@router.put("/{product_id}", response_model=ProductUpdatedResponse)
async def update_product(
        product_id: int,
        payload: ProductUpdate,
        product_service: ProductService = Depends(get_product_service)
):
    """Обновить товар"""
    try:
        product = await product_service.update_product(product_id, payload)

        if not product:
            raise HTTPException(status_code=404, detail="Product not found.")

        response = ProductResponse.model_validate(product)
        return ProductUpdatedResponse(**response.model_dump(), message="Product updated successfully.")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error updating product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update product.")


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
        product_id: int,
        product_service: ProductService = Depends(get_product_service)
):
    """Удалить товар"""
    try:
        success = await product_service.delete_product(product_id)

        if not success:
            raise HTTPException(status_code=404, detail="Product not found.")

        return {"message": "Product deleted successfully."}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"❌ Error deleting product {product_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete product.")
