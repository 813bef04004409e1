from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import uvicorn

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import (
    ProductAPIError,
    ProductValidationError,
    ENDPOINT_NOT_FOUND_MESSAGE,
)
from app.core.logging import setup_logging
from app.controllers import product_controller, root_controller
from app.dao.product_dao import ProductDAO
from app.middleware import AuthMiddleware, LoggingMiddleware
from app.services.product_service import ProductService

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Application startup",
        environment=app.state.settings.environment,
        products=await app.state.product_dao.count(),
    )
    yield
    logger.info("Application shutdown")


async def product_api_error_handler(request: Request, exc: ProductAPIError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        "Request body rejected",
        path=request.url.path,
        method=request.method,
        errors=len(exc.errors()),
    )
    return JSONResponse(
        status_code=ProductValidationError.status_code,
        content={"message": ProductValidationError.message}
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # 405 means the path exists for other verbs only; report it as unmatched
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"message": ENDPOINT_NOT_FOUND_MESSAGE})
    logger.warning(
        "HTTP Exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled Exception",
        error=str(exc),
        path=request.url.path,
        method=request.method,
        exc_info=exc
    )
    return JSONResponse(status_code=500, content={"message": ProductAPIError.message})


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Product API",
        description="In-memory product catalogue with a shared-secret gate",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.environment == "local" else None,
        redoc_url="/redoc" if settings.environment == "local" else None,
    )

    product_dao = ProductDAO(seed=settings.seed_products)
    app.state.settings = settings
    app.state.product_dao = product_dao
    app.state.product_service = ProductService(product_dao)

    # Last added runs first: logging wraps authentication
    app.add_middleware(
        AuthMiddleware,
        protected_prefix=settings.products_path,
        token=settings.auth_token,
    )
    app.add_middleware(LoggingMiddleware)

    app.include_router(root_controller.router)
    app.include_router(product_controller.router, prefix=settings.api_prefix)

    app.add_exception_handler(ProductAPIError, product_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server is running", url=f"http://localhost:{default_settings.port}")
    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.environment == "local",
        log_config=None
    )
