"""Custom exception classes for the API."""

from typing import Any


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int = 400, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class NotFoundError(APIError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} not found",
            status_code=404,
            details={"resource": resource, "id": resource_id},
        )


class ValidationError(APIError):
    """Malformed or missing request input."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message=message, status_code=400, details=details)


class UnauthorizedError(APIError):
    """Missing or invalid credentials."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message=message, status_code=401)


class CalculationError(APIError):
    """A derived value came out unusable after all input checks passed."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message=message, status_code=500, details=details)
