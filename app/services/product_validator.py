"""
Boundary checks for product write requests.

Create requests need ``name``, ``description``, ``price`` and ``category``
to be present and truthy, so a price of ``0`` or an empty string is
rejected the same way as a missing field. Updates are a merge: truthy
values overwrite, anything else keeps the stored value. ``inStock`` is the
exception on update and is applied whenever the client sends a boolean,
``false`` included.
"""
from typing import Dict, Any, Optional

from pydantic import ValidationError

from app.core.exceptions import ProductValidationError
from app.models.product import Product
from app.schemas.product_schemas import ProductCreateRequest, ProductUpdateRequest

REQUIRED_FIELDS = ("name", "description", "price", "category")
MERGED_FIELDS = ("name", "description", "price", "category")


def validate_create(payload: ProductCreateRequest) -> Dict[str, Any]:
    if not all(getattr(payload, field) for field in REQUIRED_FIELDS):
        raise ProductValidationError()

    return {
        "name": payload.name,
        "description": payload.description,
        "price": payload.price,
        "category": payload.category,
        "in_stock": payload.in_stock or False,
    }


def merge_update(product: Product, payload: ProductUpdateRequest) -> Dict[str, Any]:
    """Return the full field set of ``product`` with ``payload`` applied."""
    merged = {field: getattr(payload, field) or getattr(product, field) for field in MERGED_FIELDS}

    # explicit null keeps the stored flag
    if "in_stock" in payload.model_fields_set and payload.in_stock is not None:
        merged["in_stock"] = payload.in_stock
    else:
        merged["in_stock"] = product.in_stock

    return merged


def parse_update(payload: Optional[Dict[str, Any]]) -> ProductUpdateRequest:
    """Build an update request from a raw body; a missing body means no changes."""
    if isinstance(payload, ProductUpdateRequest):
        return payload
    try:
        return ProductUpdateRequest.model_validate(payload or {})
    except ValidationError:
        raise ProductValidationError()
