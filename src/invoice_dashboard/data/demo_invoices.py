"""Demo invoice records served by DemoInvoiceService."""

import math

from invoice_dashboard.models.invoice import InvoiceRecord

_ISSUERS = (
    "Shanghai Bright Components Co., Ltd.",
    "Hangzhou Northwind Trading Co., Ltd.",
    "Shenzhen Apex Electronics Co., Ltd.",
    "Suzhou Lakeside Packaging Co., Ltd.",
)
_RECEIVERS = (
    "Beijing Horizon Retail Co., Ltd.",
    "Guangzhou Pearl Logistics Co., Ltd.",
    "Chengdu Panda Foods Co., Ltd.",
)
_PRODUCTS = (
    ("Corrugated carton", "60x40x40cm"),
    ("Thermal label roll", "100x150mm"),
    ("Power adapter", "12V 2A"),
    ("Stretch film", None),
    ("USB-C cable", "1m"),
)


def _build() -> list[InvoiceRecord]:
    records = []
    for index in range(27):
        product, specification = _PRODUCTS[index % len(_PRODUCTS)]
        quantity = 10 * ((index % 7) + 1)
        records.append(
            InvoiceRecord(
                invoice_number=f"2400{3100 + index:05d}",
                issuing_company=_ISSUERS[index % len(_ISSUERS)],
                receiving_company=_RECEIVERS[index % len(_RECEIVERS)],
                timestamp=f"2024-{(index % 6) + 1:02d}-{(index % 27) + 1:02d} {9 + index % 9:02d}:30:00",
                product_name=product,
                specification=specification,
                quantity=quantity,
                amount=round(quantity * (12.5 + 3.75 * (index % 5)) * 1.13, 2),
            )
        )
    # Rows as they arrive from a hand-edited spreadsheet
    records.append(
        InvoiceRecord(
            invoice_number="2400009998",
            issuing_company=_ISSUERS[0],
            receiving_company=_RECEIVERS[1],
            timestamp="2024-03-15 14:00:00",
            product_name="Corrugated carton",
            quantity=5,
            amount=math.nan,
        )
    )
    records.append(
        InvoiceRecord(
            invoice_number="2400009999",
            issuing_company=_ISSUERS[2],
            receiving_company=_RECEIVERS[0],
            timestamp="pending",
            product_name="Power adapter",
            specification="12V 2A",
            quantity=2,
            amount=45.2,
        )
    )
    return records


DEMO_INVOICES: list[InvoiceRecord] = _build()
