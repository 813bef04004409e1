import asyncio

import pytest

from app.core.exceptions import ProductNotFoundError, ProductValidationError
from app.dao.product_dao import ProductDAO
from app.services.product_service import ProductService


@pytest.fixture
def service() -> ProductService:
    return ProductService(ProductDAO(seed=True))


def test_concurrent_updates_keep_every_change(service):
    async def update_concurrently():
        await asyncio.gather(
            service.update_product("1", {"name": "Ultrabook"}),
            service.update_product("1", {"price": 1500}),
            service.update_product("1", {"inStock": False}),
            service.update_product("1", {"category": "computers"}),
            service.update_product("1", {"description": "Thin and light"}),
        )
        return await service.get_product("1")

    product = asyncio.run(update_concurrently())
    assert product.name == "Ultrabook"
    assert product.price == 1500
    assert product.in_stock is False
    assert product.category == "computers"
    assert product.description == "Thin and light"


def test_update_without_body_leaves_product_unchanged(service):
    before = asyncio.run(service.get_product("2"))
    assert asyncio.run(service.update_product("2", None)) == before


def test_update_unknown_id_is_not_found_before_body_check(service):
    with pytest.raises(ProductNotFoundError):
        asyncio.run(service.update_product("nope", {"price": "abc"}))


def test_update_ill_typed_body_on_known_id(service):
    with pytest.raises(ProductValidationError):
        asyncio.run(service.update_product("1", {"price": "abc"}))
    assert asyncio.run(service.get_product("1")).price == 1200
