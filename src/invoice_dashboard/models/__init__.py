"""
Data models and serialization helpers for the Invoice Dashboard.

This package provides:
- The invoice record model and its wire format mapping
- Filter, pagination and statistics value objects
- The backend response envelope and stored login token

All models use Python dataclasses. Reflex-specific models live in
reflex_models and are imported directly by the UI layer.
"""

from invoice_dashboard.models.common import (
    AmountRange,
    ApiEnvelope,
    AuthToken,
    DateRange,
    InvoiceStats,
    PaginationState,
    PredicateSet,
)
from invoice_dashboard.models.invoice import (
    WIRE_FIELDS,
    InvoiceRecord,
    deserialize_record,
    deserialize_records,
    serialize_record,
    to_wire,
)

__all__ = [
    "AmountRange",
    "ApiEnvelope",
    "AuthToken",
    "DateRange",
    "InvoiceRecord",
    "InvoiceStats",
    "PaginationState",
    "PredicateSet",
    "WIRE_FIELDS",
    "deserialize_record",
    "deserialize_records",
    "serialize_record",
    "to_wire",
]
