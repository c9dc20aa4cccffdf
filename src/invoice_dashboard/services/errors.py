"""Exceptions raised by invoice services."""


class InvoiceServiceError(Exception):
    """Base error for invoice service failures."""


class ApiError(InvoiceServiceError):
    """The backend answered with a non-200 business code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"{code} - {message}")
        self.code = code
        self.message = message


class AuthenticationExpired(InvoiceServiceError):
    """The backend rejected the credentials (HTTP 401)."""


class UploadValidationError(InvoiceServiceError):
    """The selected file was rejected before any request was sent."""
