from fastapi import Request
from app.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """FastAPI dependency returning the service bound to this application"""
    return request.app.state.product_service
