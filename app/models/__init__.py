# Import all models for easy access
from .product import Product, ProductBase, ProductCreate, ProductUpdate

__all__ = [
    "Product",
    "ProductBase",
    "ProductCreate",
    "ProductUpdate",
]
