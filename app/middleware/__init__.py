from .logging_middleware import LoggingMiddleware
from .auth_middleware import AuthMiddleware

__all__ = ["LoggingMiddleware", "AuthMiddleware"]
