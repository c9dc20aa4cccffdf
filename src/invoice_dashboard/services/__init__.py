"""
Service factory for the Invoice Dashboard.

This module provides the get_invoice_service() factory function that returns
the appropriate InvoiceService implementation based on configuration.

Available Implementations:
- demo: In-memory service with static invoice data (no backend required)
- impl: REST client for the invoice backend

The service is cached at the module level, so the same instance is reused
across all requests. Configure via INVOICE_DASHBOARD_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from invoice_dashboard.lib import logs
from invoice_dashboard.services.errors import (
    ApiError,
    AuthenticationExpired,
    InvoiceServiceError,
    UploadValidationError,
)
from invoice_dashboard.services.invoice_service import DownloadedFile, InvoiceService
from invoice_dashboard.services.invoice_service_demo import DemoInvoiceService
from invoice_dashboard.services.invoice_service_impl import InvoiceServiceImpl

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], InvoiceService]] = {
    "demo": lambda: DemoInvoiceService(),
    "impl": lambda: InvoiceServiceImpl(),
}


@cache
def get_invoice_service(kind: str | None = None) -> InvoiceService:
    """Return the configured invoice service implementation."""
    resolved_kind = (kind or os.getenv("INVOICE_DASHBOARD_SERVICE", "demo")).lower()
    LOG.info("get_invoice_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown invoice service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "ApiError",
    "AuthenticationExpired",
    "DemoInvoiceService",
    "DownloadedFile",
    "InvoiceService",
    "InvoiceServiceError",
    "InvoiceServiceImpl",
    "UploadValidationError",
    "get_invoice_service",
]
