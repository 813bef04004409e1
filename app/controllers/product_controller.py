from fastapi import APIRouter, Body, Depends, Response, status
from typing import Any, Dict, List, Optional
from app.core.dependencies import get_product_service
from app.models.product import Product
from app.schemas.product_schemas import ProductCreateRequest
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=List[Product])
@router.get("/", response_model=List[Product], include_in_schema=False)
async def get_products(service: ProductService = Depends(get_product_service)):
    """Get all products in insertion order"""
    return await service.list_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Get a specific product by ID"""
    return await service.get_product(product_id)


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_product(
    product: ProductCreateRequest,
    service: ProductService = Depends(get_product_service)
):
    """Create a new product with a generated ID"""
    return await service.create_product(product)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    product_update: Optional[Dict[str, Any]] = Body(None),
    service: ProductService = Depends(get_product_service)
):
    """Update the supplied fields of a product; a missing body changes nothing"""
    return await service.update_product(product_id, product_update)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product by ID"""
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
