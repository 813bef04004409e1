from pydantic import BaseModel, Field
from typing import Optional, Union


class ProductCreateRequest(BaseModel):
    # Presence and truthiness are checked by product_validator so the
    # client gets a single "Missing required fields" answer
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[int, float]] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = Field(default=None, alias="inStock")

    class Config:
        populate_by_name = True


class ProductUpdateRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[int, float]] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = Field(default=None, alias="inStock")

    class Config:
        populate_by_name = True
