from __future__ import annotations

import math

import pytest

from invoice_dashboard.models.common import PredicateSet
from invoice_dashboard.pipeline.filters import filter_records, matches


def _numbers(view) -> list[str]:
    return [record.invoice_number for record in view]


def test_no_predicates_returns_every_record_in_order(records) -> None:
    assert _numbers(filter_records(records, PredicateSet())) == [
        "INV-001",
        "INV-002",
        "INV-003",
        "INV-004",
    ]


def test_keyword_is_case_insensitive(records) -> None:
    view = filter_records(records, PredicateSet(keyword="ABC"))
    assert _numbers(view) == ["INV-001"]


@pytest.mark.parametrize(
    ("keyword", "expected"),
    [
        ("inv-002", ["INV-002"]),
        ("umbrella", ["INV-002", "INV-004"]),
        ("gadget", ["INV-003"]),
        ("hoo", ["INV-004"]),
    ],
)
def test_keyword_matches_number_companies_and_product(records, keyword, expected) -> None:
    assert _numbers(filter_records(records, PredicateSet(keyword=keyword))) == expected


def test_keyword_does_not_match_specification(make_record) -> None:
    record = make_record(specification="stainless")
    assert not matches(record, PredicateSet(keyword="stainless"))


def test_whitespace_keyword_is_inactive(records) -> None:
    assert len(filter_records(records, PredicateSet(keyword="   "))) == len(records)


def test_keyword_is_not_trimmed(make_record) -> None:
    record = make_record(issuing_company="abcCorp")
    assert not matches(record, PredicateSet(keyword=" abc"))


def test_product_is_exact_match(records) -> None:
    view = filter_records(records, PredicateSet(product="Widget"))
    assert _numbers(view) == ["INV-001", "INV-004"]


def test_companies_are_exact_matches(records) -> None:
    assert _numbers(filter_records(records, PredicateSet(issuing_company="Initech"))) == [
        "INV-002",
        "INV-003",
    ]
    assert _numbers(filter_records(records, PredicateSet(receiving_company="Umbrella"))) == [
        "INV-002",
        "INV-004",
    ]
    assert filter_records(records, PredicateSet(issuing_company="Init")) == []


def test_predicates_are_conjunctive(records) -> None:
    predicates = PredicateSet(issuing_company="Initech", receiving_company="Umbrella")
    assert _numbers(filter_records(records, predicates)) == ["INV-002"]


def test_date_range_includes_whole_end_day(records) -> None:
    predicates = PredicateSet.from_inputs(start_date="2024-01-01", end_date="2024-01-31")
    assert _numbers(filter_records(records, predicates)) == ["INV-001", "INV-002"]


def test_date_range_start_is_start_of_day(make_record) -> None:
    predicates = PredicateSet.from_inputs(start_date="2024-01-01")
    assert matches(make_record(timestamp="2024-01-01T00:00:00"), predicates)
    assert not matches(make_record(timestamp="2023-12-31T23:59:00"), predicates)


def test_date_range_end_only(make_record) -> None:
    predicates = PredicateSet.from_inputs(end_date="2024-01-31")
    assert matches(make_record(timestamp="2024-01-31T23:59:59"), predicates)
    assert not matches(make_record(timestamp="2024-02-01T00:00:00"), predicates)


def test_unparseable_timestamp_excluded_only_with_date_bound(make_record) -> None:
    record = make_record(timestamp="pending")
    assert matches(record, PredicateSet())
    assert not matches(record, PredicateSet.from_inputs(start_date="2000-01-01"))


def test_slash_dates_are_supported(make_record) -> None:
    predicates = PredicateSet.from_inputs(start_date="2024-01-01", end_date="2024-01-31")
    assert matches(make_record(timestamp="1/31/2024"), predicates)
    assert matches(make_record(timestamp="2024/01/05 08:15"), predicates)


def test_amount_range_is_inclusive(records) -> None:
    predicates = PredicateSet.from_inputs(min_amount="100", max_amount="200")
    assert _numbers(filter_records(records, predicates)) == ["INV-001", "INV-002"]


def test_amount_min_only_has_no_upper_limit(records) -> None:
    predicates = PredicateSet.from_inputs(min_amount="150")
    assert _numbers(filter_records(records, predicates)) == ["INV-002", "INV-004"]


def test_amount_max_only_defaults_min_to_zero(make_record) -> None:
    predicates = PredicateSet.from_inputs(max_amount="50")
    assert matches(make_record(amount=0.0), predicates)
    assert not matches(make_record(amount=-5.0), predicates)


@pytest.mark.parametrize("amount", [math.nan, None])
def test_invalid_amount_excluded_only_with_amount_bound(make_record, amount) -> None:
    record = make_record(amount=amount)
    assert matches(record, PredicateSet())
    assert not matches(record, PredicateSet.from_inputs(max_amount="1000000"))


def test_unparseable_bounds_are_ignored(records) -> None:
    predicates = PredicateSet.from_inputs(start_date="yesterday", min_amount="lots")
    assert not predicates.is_active
    assert len(filter_records(records, predicates)) == len(records)
