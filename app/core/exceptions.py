"""
Error taxonomy for the product API.

Each error carries the HTTP status and the static client-facing message it
maps to. The handlers registered in ``app.main`` turn them into
``{"message": ...}`` JSON responses.
"""


class ProductAPIError(Exception):
    status_code: int = 500
    message: str = "Something went wrong!"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ProductNotFoundError(ProductAPIError):
    """No product with the requested id."""

    status_code = 404
    message = "Product not found"


class ProductValidationError(ProductAPIError):
    """A create payload is missing one of the required fields."""

    status_code = 400
    message = "Missing required fields"


class AuthMissingError(ProductAPIError):
    status_code = 401
    message = "Access denied. No token provided."


class AuthInvalidError(ProductAPIError):
    status_code = 403
    message = "Invalid token"

ENDPOINT_NOT_FOUND_MESSAGE = "API endpoint not found"
