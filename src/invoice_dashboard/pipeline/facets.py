"""Distinct value lists used for filter suggestions and the company list."""

from __future__ import annotations

from typing import Iterable, List

from invoice_dashboard.models.invoice import InvoiceRecord

FACET_FIELDS = ("issuing_company", "receiving_company", "product_name")


def facet_values(records: Iterable[InvoiceRecord], field: str) -> List[str]:
    """
    Return the sorted, de-duplicated non-empty values of a record field.

    Args:
        records: Usually the unfiltered record store.
        field: One of FACET_FIELDS.

    Raises:
        ValueError: If field is not a facet.
    """
    if field not in FACET_FIELDS:
        raise ValueError(f"Unknown facet field: {field}")
    return sorted({value for value in (getattr(record, field) for record in records) if value})


def filtered_companies(view: Iterable[InvoiceRecord]) -> List[str]:
    """Distinct issuing companies of the filtered view, sorted."""
    return facet_values(view, "issuing_company")
