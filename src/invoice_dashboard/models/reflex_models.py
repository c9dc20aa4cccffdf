"""
Reflex-compatible models for the Invoice Dashboard.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components. Amounts are pre-formatted for display.
"""

import reflex as rx

from invoice_dashboard.models.common import InvoiceStats
from invoice_dashboard.models.invoice import InvoiceRecord
from invoice_dashboard.utils import format_currency


class InvoiceRowModel(rx.Base):
    """One row of the results table."""

    invoice_number: str = ""
    issuing_company: str = ""
    receiving_company: str = ""
    timestamp: str = ""
    product_name: str = ""
    specification: str = "-"
    quantity: int = 0
    amount: str = ""


class StatsModel(rx.Base):
    """Summary cards above the results table."""

    count: int = 0
    total_amount: str = "¥0.00"
    average_amount: str = "¥0.00"
    max_amount: str = "¥0.00"
    min_amount: str = "¥0.00"
    company_count: int = 0
    product_count: int = 0


def record_to_row_model(record: InvoiceRecord) -> InvoiceRowModel:
    """Convert an InvoiceRecord to a display row."""
    return InvoiceRowModel(
        invoice_number=record.invoice_number,
        issuing_company=record.issuing_company,
        receiving_company=record.receiving_company,
        timestamp=record.formatted_timestamp(),
        product_name=record.product_name,
        specification=record.specification or "-",
        quantity=record.quantity,
        amount=record.formatted_amount(),
    )


def stats_to_model(stats: InvoiceStats) -> StatsModel:
    """Convert InvoiceStats to the display model."""
    return StatsModel(
        count=stats.count,
        total_amount=format_currency(stats.total_amount),
        average_amount=format_currency(stats.average_amount),
        max_amount=format_currency(stats.max_amount),
        min_amount=format_currency(stats.min_amount),
        company_count=stats.company_count,
        product_count=stats.product_count,
    )
