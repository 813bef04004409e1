from app.dao.base_dao import BaseDAO
from app.models.product import Product
import structlog

logger = structlog.get_logger()


SEED_PRODUCTS = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "in_stock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "in_stock": False,
    },
]


class ProductDAO(BaseDAO[Product]):
    def __init__(self, seed: bool = False):
        records = [Product(**data) for data in SEED_PRODUCTS] if seed else None
        super().__init__(Product, records)

    async def seed(self) -> None:
        """Replace the collection with the fixed sample products."""
        await self.replace_all([Product(**data) for data in SEED_PRODUCTS])
        logger.info("Seeded products", count=len(SEED_PRODUCTS))

    async def reset(self) -> None:
        """Drop every product."""
        await self.replace_all([])
        logger.info("Cleared products")
