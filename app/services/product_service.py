from typing import Any, Dict, List, Union
from app.core.exceptions import ProductNotFoundError, ProductValidationError
from app.dao.product_dao import ProductDAO
from app.models.product import Product
from app.schemas.product_schemas import ProductCreateRequest, ProductUpdateRequest
from app.services.product_validator import validate_create, merge_update, parse_update
import structlog

logger = structlog.get_logger()


class ProductService:
    def __init__(self, product_dao: ProductDAO):
        self.product_dao = product_dao

    async def list_products(self) -> List[Product]:
        products = await self.product_dao.get_multi()
        logger.info("Retrieved products", count=len(products))
        return products

    async def get_product(self, product_id: str) -> Product:
        product = await self.product_dao.get_by_id(product_id)
        if not product:
            logger.warning("Product not found", product_id=product_id)
            raise ProductNotFoundError()
        return product

    async def create_product(self, product_create: ProductCreateRequest) -> Product:
        try:
            product_data = validate_create(product_create)
        except ProductValidationError:
            logger.warning("Rejected product payload", fields=sorted(product_create.model_fields_set))
            raise

        product = await self.product_dao.create(obj_in=product_data)
        logger.info("Product created successfully", product_id=product.id)
        return product

    async def update_product(
        self, product_id: str, product_update: Union[ProductUpdateRequest, Dict[str, Any], None]
    ) -> Product:
        # the body is only checked once the id is known to exist
        product = await self.product_dao.update(
            id=product_id,
            obj_in=lambda current: merge_update(current, parse_update(product_update)),
        )
        if product is None:
            logger.warning("Product not found", product_id=product_id)
            raise ProductNotFoundError()

        logger.info("Product updated successfully", product_id=product_id)
        return product

    async def delete_product(self, product_id: str) -> None:
        deleted_product = await self.product_dao.delete(id=product_id)
        if deleted_product is None:
            logger.warning("Product not found", product_id=product_id)
            raise ProductNotFoundError()
        logger.info("Product deleted successfully", product_id=product_id)
