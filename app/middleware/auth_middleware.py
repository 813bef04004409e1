from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import structlog

from app.core.exceptions import AuthMissingError, AuthInvalidError, ProductAPIError

logger = structlog.get_logger()


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Shared-secret gate for everything under ``protected_prefix``.

    The ``Authorization`` header must equal ``token`` exactly; there is no
    ``Bearer`` scheme. Paths outside the prefix pass through untouched.
    """

    def __init__(self, app: ASGIApp, protected_prefix: str, token: str):
        super().__init__(app)
        self.protected_prefix = protected_prefix.rstrip("/")
        self.token = token

    def is_protected(self, path: str) -> bool:
        return path == self.protected_prefix or path.startswith(self.protected_prefix + "/")

    def check(self, authorization: str) -> None:
        if not authorization:
            raise AuthMissingError()
        if authorization != self.token:
            raise AuthInvalidError()

    async def dispatch(self, request: Request, call_next):
        if not self.is_protected(request.url.path):
            return await call_next(request)

        try:
            self.check(request.headers.get("authorization"))
        except ProductAPIError as e:
            logger.warning(
                "Authentication rejected",
                path=request.url.path,
                method=request.method,
                status_code=e.status_code,
            )
            return JSONResponse(status_code=e.status_code, content={"message": e.message})

        return await call_next(request)
