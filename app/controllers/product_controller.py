from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorCollection
from app.core.database import get_product_collection
from app.services.product_service import product_service
from app.models.product import ProductCreate, ProductUpdate
from app.schemas.product_schemas import (
    ErrorResponse,
    ProductDeleteResponse,
    ProductResponse,
    ValidationErrorResponse,
)
from typing import List
import structlog

logger = structlog.get_logger()

router = APIRouter(prefix="/products", tags=["Products"])

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
INVALID_BODY_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}


@router.get("", response_model=List[ProductResponse])
@router.get("/", response_model=List[ProductResponse], include_in_schema=False)
async def get_products(collection: AsyncIOMotorCollection = Depends(get_product_collection)):
    """List every product in storage order"""
    return await product_service.get_products(collection)


@router.get("/{product_id}", response_model=ProductResponse, responses=NOT_FOUND_RESPONSE)
async def get_product(
    product_id: str,
    collection: AsyncIOMotorCollection = Depends(get_product_collection)
):
    return await product_service.get_product(collection, product_id)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=INVALID_BODY_RESPONSE,
)
@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_product(
    product: ProductCreate,
    collection: AsyncIOMotorCollection = Depends(get_product_collection)
):
    """Create a product; the store assigns its id"""
    return await product_service.create_product(collection, product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**NOT_FOUND_RESPONSE, **INVALID_BODY_RESPONSE},
)
async def update_product(
    product_id: str,
    product: ProductUpdate,
    collection: AsyncIOMotorCollection = Depends(get_product_collection)
):
    """Replace all fields of an existing product"""
    return await product_service.update_product(collection, product_id, product)


@router.delete("/{product_id}", response_model=ProductDeleteResponse, responses=NOT_FOUND_RESPONSE)
async def delete_product(
    product_id: str,
    collection: AsyncIOMotorCollection = Depends(get_product_collection)
):
    await product_service.delete_product(collection, product_id)
    return ProductDeleteResponse(message="Product deleted")
