# marketplace/core/exceptions.py
"""
Domain errors raised by the service layer.

Each error knows the HTTP status it maps to; the handlers registered in
``marketplace.main`` turn them into ``{"success": false, "message": ...}``.
"""

from fastapi import status


class MarketplaceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MarketplaceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(MarketplaceError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(MarketplaceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ConflictError(MarketplaceError):
    status_code = status.HTTP_400_BAD_REQUEST


class EmptyCartError(MarketplaceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message)


class ServerError(MarketplaceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
