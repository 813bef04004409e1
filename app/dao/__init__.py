# Export all DAO classes
from .base_dao import BaseDAO
from .product_dao import ProductDAO, SEED_PRODUCTS

__all__ = [
    "BaseDAO",
    "ProductDAO",
    "SEED_PRODUCTS",
]
