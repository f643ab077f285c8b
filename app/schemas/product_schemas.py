from pydantic import BaseModel
from typing import Any, Dict, List


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float
    imageUrl: str


class ProductDeleteResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(BaseModel):
    error: str
    details: List[Dict[str, Any]]
