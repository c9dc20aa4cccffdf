from __future__ import annotations

import math

import pytest

from invoice_dashboard.models.invoice import InvoiceRecord


def build_record(**overrides) -> InvoiceRecord:
    values = {
        "invoice_number": "24000001",
        "issuing_company": "Acme Supplies",
        "receiving_company": "Globex Retail",
        "timestamp": "2024-01-15T10:00:00",
        "product_name": "Widget",
        "specification": "10cm",
        "quantity": 1,
        "amount": 100.0,
    }
    values.update(overrides)
    return InvoiceRecord(**values)


@pytest.fixture
def make_record():
    """Factory for records with sensible defaults."""
    return build_record


@pytest.fixture
def records() -> list[InvoiceRecord]:
    """A small store covering companies, products, dates and a NaN amount."""
    return [
        build_record(invoice_number="INV-001", issuing_company="abcCorp", amount=100.0),
        build_record(
            invoice_number="INV-002",
            issuing_company="Initech",
            receiving_company="Umbrella",
            product_name="Widget Pro",
            timestamp="2024-01-31T23:00:00",
            amount=200.0,
        ),
        build_record(
            invoice_number="INV-003",
            issuing_company="Initech",
            product_name="Gadget",
            timestamp="2024-02-01T00:00:00",
            amount=math.nan,
        ),
        build_record(
            invoice_number="INV-004",
            issuing_company="Hooli",
            receiving_company="Umbrella",
            timestamp="2023-12-31T23:59:00",
            amount=300.0,
        ),
    ]


@pytest.fixture
def many_records() -> list[InvoiceRecord]:
    """Twenty-five records numbered INV-000 to INV-024."""
    return [build_record(invoice_number=f"INV-{index:03d}", amount=float(index)) for index in range(25)]
