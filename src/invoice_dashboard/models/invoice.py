"""
Invoice record model and serialization helpers.

The backend returns a flat list of invoice rows keyed by the column names of
the source spreadsheet. This module maps those rows onto the InvoiceRecord
dataclass and back:

    发票号   -> invoice_number
    开票公司 -> issuing_company
    收票公司 -> receiving_company
    时间     -> timestamp
    产品名称 -> product_name
    默认规格 -> specification
    数量     -> quantity
    含税总价 -> amount

Deserialization never raises on malformed values: missing strings become
empty, a bad quantity becomes 0 and a bad amount becomes NaN so the record
is kept while being ignored by the statistics.
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, List, Mapping

from invoice_dashboard.utils import format_currency, format_timestamp, is_valid_amount

WIRE_FIELDS: dict[str, str] = {
    "invoice_number": "发票号",
    "issuing_company": "开票公司",
    "receiving_company": "收票公司",
    "timestamp": "时间",
    "product_name": "产品名称",
    "specification": "默认规格",
    "quantity": "数量",
    "amount": "含税总价",
}


@dataclass(slots=True)
class InvoiceRecord:
    """A single invoice row."""

    invoice_number: str
    issuing_company: str
    receiving_company: str
    timestamp: str
    product_name: str
    specification: str | None = None
    quantity: int = 0
    amount: float | None = None

    @property
    def has_valid_amount(self) -> bool:
        """Return True when the amount can take part in statistics."""
        return is_valid_amount(self.amount)

    def formatted_amount(self) -> str:
        """Return the amount formatted as currency."""
        return format_currency(self.amount)

    def formatted_timestamp(self) -> str:
        """Return the timestamp formatted for display."""
        return format_timestamp(self.timestamp)

    def searchable_terms(self) -> List[str]:
        """Return the lower-cased terms matched by the keyword search."""
        terms = [
            self.invoice_number,
            self.issuing_company,
            self.receiving_company,
            self.product_name,
        ]
        return [value.lower() for value in terms if value]


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)


def _quantity(value: Any) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _amount(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _lookup(payload: Mapping[str, Any], attribute: str) -> Any:
    wire_key = WIRE_FIELDS[attribute]
    if wire_key in payload:
        return payload[wire_key]
    return payload.get(attribute)


def deserialize_record(payload: Mapping[str, Any]) -> InvoiceRecord:
    """Convert a wire or attribute keyed dictionary into an InvoiceRecord."""
    specification = _lookup(payload, "specification")
    return InvoiceRecord(
        invoice_number=_text(_lookup(payload, "invoice_number")),
        issuing_company=_text(_lookup(payload, "issuing_company")),
        receiving_company=_text(_lookup(payload, "receiving_company")),
        timestamp=_text(_lookup(payload, "timestamp")),
        product_name=_text(_lookup(payload, "product_name")),
        specification=_text(specification) or None,
        quantity=_quantity(_lookup(payload, "quantity")),
        amount=_amount(_lookup(payload, "amount")),
    )


def deserialize_records(payloads: Any) -> list[InvoiceRecord]:
    """Deserialize a list of payloads, skipping entries that are not mappings."""
    if not payloads:
        return []
    return [deserialize_record(item) for item in payloads if isinstance(item, Mapping)]


def serialize_record(record: InvoiceRecord) -> dict:
    """Convert an InvoiceRecord into a JSON serializable dictionary."""
    data = asdict(record)
    if not record.has_valid_amount:
        data["amount"] = None
    return data


def to_wire(record: InvoiceRecord) -> dict:
    """Convert an InvoiceRecord into a dictionary keyed by the backend column names."""
    data = serialize_record(record)
    return {WIRE_FIELDS[key]: value for key, value in data.items()}
