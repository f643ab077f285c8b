from typing import List
from bson.errors import InvalidId
from fastapi import HTTPException, status
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import OperationFailure
from app.dao.product_dao import product_dao
from app.models.product import Product, ProductCreate, ProductUpdate
import structlog

logger = structlog.get_logger()

PRODUCT_NOT_FOUND = "Product not found"


class ProductService:
    def __init__(self):
        self.product_dao = product_dao

    async def create_product(self, collection: AsyncIOMotorCollection, product_create: ProductCreate) -> Product:
        try:
            product = await self.product_dao.create(collection, obj_in=product_create.model_dump())
            logger.info("Product created successfully", product_id=product.id)
            return product

        except OperationFailure as e:
            logger.warning("Product rejected by store", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )
        except Exception as e:
            logger.error("Error creating product", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Product creation failed"
            )

    async def get_product(self, collection: AsyncIOMotorCollection, product_id: str) -> Product:
        try:
            product = await self.product_dao.get_by_id(collection, product_id)
            if not product:
                logger.warning("Product not found", product_id=product_id)
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=PRODUCT_NOT_FOUND
                )
            return product
        except HTTPException:
            raise
        except Exception as e:
            logger.error("Error getting product", product_id=product_id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Could not retrieve product"
            )

    async def get_products(self, collection: AsyncIOMotorCollection) -> List[Product]:
        try:
            products = await self.product_dao.get_multi(collection)
            logger.info("Retrieved products", count=len(products))
            return products
        except Exception as e:
            logger.error("Error getting products", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Could not retrieve products"
            )

    async def update_product(self, collection: AsyncIOMotorCollection, product_id: str, product_update: ProductUpdate) -> Product:
        try:
            product = await self.product_dao.update(collection, id=product_id, obj_in=product_update.model_dump())
            if not product:
                logger.warning("Product not found", product_id=product_id)
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=PRODUCT_NOT_FOUND
                )
            logger.info("Product updated successfully", product_id=product_id)
            return product

        except HTTPException:
            raise
        except (InvalidId, OperationFailure) as e:
            logger.warning("Product update rejected", product_id=product_id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )
        except Exception as e:
            logger.error("Error updating product", product_id=product_id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Product update failed"
            )

    async def delete_product(self, collection: AsyncIOMotorCollection, product_id: str) -> Product:
        try:
            deleted_product = await self.product_dao.delete(collection, id=product_id)
            if not deleted_product:
                logger.warning("Product not found", product_id=product_id)
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=PRODUCT_NOT_FOUND
                )
            logger.info("Product deleted successfully", product_id=product_id)
            return deleted_product

        except HTTPException:
            raise
        except Exception as e:
            logger.error("Error deleting product", product_id=product_id, error=str(e))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Product deletion failed"
            )


product_service = ProductService()
