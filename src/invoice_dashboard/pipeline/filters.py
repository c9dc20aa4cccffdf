"""
Filter engine for the invoice dashboard.

A record passes when every active predicate of the PredicateSet matches:

- keyword: case-insensitive substring of invoice number, issuing company,
  receiving company or product name
- product / issuing company / receiving company: exact match
- date range: inclusive, the end day counts through 23:59:59.999
- amount range: inclusive, unset bounds default to 0 and +infinity

Records with an unparseable timestamp are excluded while any date bound is
set, and records without a valid amount are excluded while any amount bound
is set. Nothing here raises on malformed records.
"""

from __future__ import annotations

from typing import Iterable, List

from invoice_dashboard.models.common import AmountRange, DateRange, PredicateSet
from invoice_dashboard.models.invoice import InvoiceRecord
from invoice_dashboard.utils import is_valid_amount, matches_keyword, parse_date


def filter_records(records: Iterable[InvoiceRecord], predicates: PredicateSet) -> List[InvoiceRecord]:
    """Return the records passing all active predicates, in their original order."""
    return [record for record in records if matches(record, predicates)]


def matches(record: InvoiceRecord, predicates: PredicateSet) -> bool:
    """Return True if the record satisfies every active predicate."""
    if not matches_keyword(record, predicates.keyword):
        return False
    if predicates.product and record.product_name != predicates.product:
        return False
    if predicates.receiving_company and record.receiving_company != predicates.receiving_company:
        return False
    if predicates.issuing_company and record.issuing_company != predicates.issuing_company:
        return False
    if predicates.date_range.is_active and not in_date_range(record, predicates.date_range):
        return False
    if predicates.amount_range.is_active and not in_amount_range(record, predicates.amount_range):
        return False
    return True


def in_date_range(record: InvoiceRecord, date_range: DateRange) -> bool:
    """Check the record timestamp against an active date range."""
    timestamp = parse_date(record.timestamp)
    if timestamp is None:
        return False
    lower = date_range.lower_bound()
    if lower is not None and timestamp < lower:
        return False
    upper = date_range.upper_bound()
    if upper is not None and timestamp > upper:
        return False
    return True


def in_amount_range(record: InvoiceRecord, amount_range: AmountRange) -> bool:
    """Check the record amount against an active amount range."""
    if not is_valid_amount(record.amount):
        return False
    low, high = amount_range.bounds()
    return low <= record.amount <= high
