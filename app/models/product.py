from pydantic import BaseModel, Field
from typing import Union


class ProductBase(BaseModel):
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(default=False, alias="inStock")

    class Config:
        populate_by_name = True


class Product(ProductBase):
    id: str
