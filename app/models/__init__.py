# Import all models for easy access
from .product import Product, ProductBase

__all__ = ["Product", "ProductBase"]
