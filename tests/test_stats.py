from __future__ import annotations

import math

from invoice_dashboard.models.common import InvoiceStats
from invoice_dashboard.models.invoice import deserialize_record, serialize_record
from invoice_dashboard.pipeline.stats import aggregate


def test_empty_view_is_all_zero() -> None:
    assert aggregate([]) == InvoiceStats()
    assert aggregate([]).to_dict() == {
        "count": 0,
        "totalAmount": 0,
        "averageAmount": 0,
        "maxAmount": 0,
        "minAmount": 0,
        "companyCount": 0,
        "productCount": 0,
    }


def test_nan_amounts_are_skipped_but_counted(make_record) -> None:
    view = [make_record(amount=amount) for amount in (100.0, 200.0, math.nan, 300.0)]
    stats = aggregate(view)
    assert stats.count == 4
    assert stats.total_amount == 600
    assert stats.average_amount == 200
    assert stats.max_amount == 300
    assert stats.min_amount == 100


def test_view_without_valid_amounts_is_all_zero(make_record) -> None:
    view = [make_record(amount=math.nan), make_record(amount=None)]
    assert aggregate(view) == InvoiceStats()


def test_distinct_counts_include_records_without_amount(make_record) -> None:
    view = [
        make_record(issuing_company="A", product_name="Widget", amount=10.0),
        make_record(issuing_company="A", product_name="Gadget", amount=20.0),
        make_record(issuing_company="B", product_name="Widget", amount=math.nan),
    ]
    stats = aggregate(view)
    assert stats.company_count == 2
    assert stats.product_count == 2
    assert stats.average_amount == 15


def test_infinite_amount_is_not_a_valid_amount(make_record) -> None:
    view = [make_record(amount=math.inf), make_record(amount=50.0)]
    stats = aggregate(view)
    assert stats.count == 2
    assert stats.total_amount == 50
    assert stats.max_amount == 50


def test_stats_survive_state_serialization(make_record) -> None:
    view = [make_record(amount=math.inf), make_record(amount=math.nan), make_record(amount=10.0)]
    restored = [deserialize_record(serialize_record(record)) for record in view]
    assert aggregate(restored) == aggregate(view)
