"""Summary statistics over a filtered view of invoice records."""

from __future__ import annotations

from typing import Sequence

from invoice_dashboard.models.common import InvoiceStats
from invoice_dashboard.models.invoice import InvoiceRecord


def aggregate(view: Sequence[InvoiceRecord]) -> InvoiceStats:
    """
    Compute count, amount totals and distinct counts for a view.

    Only valid amounts (not None, not NaN) contribute to the amount figures,
    and the average is taken over those alone. When the view is empty or has
    no valid amount at all, every figure including the count is zero.
    Distinct company and product counts span the whole view.

    Args:
        view: The filtered records.

    Returns:
        InvoiceStats for the view.
    """
    if not view:
        return InvoiceStats()

    amounts = [record.amount for record in view if record.has_valid_amount]
    if not amounts:
        return InvoiceStats()

    total = sum(amounts)
    return InvoiceStats(
        count=len(view),
        total_amount=total,
        average_amount=total / len(amounts),
        max_amount=max(amounts),
        min_amount=min(amounts),
        company_count=len({record.issuing_company for record in view}),
        product_count=len({record.product_name for record in view}),
    )
