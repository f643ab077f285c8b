from pydantic import BaseModel, Field
from typing import Any, Dict


class ProductBase(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float = Field(allow_inf_nan=False)
    imageUrl: str = Field(min_length=1)


class Product(ProductBase):
    """A stored product; `id` is the string form of the document's ObjectId."""

    id: str

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Product":
        fields = {key: value for key, value in document.items() if key != "_id"}
        return cls(id=str(document["_id"]), **fields)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    """Replacement body for PUT; every field is required."""
