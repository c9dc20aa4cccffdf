from __future__ import annotations

import pytest

from invoice_dashboard.pipeline.facets import facet_values, filtered_companies


def test_facet_values_are_sorted_unique_and_non_empty(make_record) -> None:
    store = [
        make_record(issuing_company="Initech"),
        make_record(issuing_company=""),
        make_record(issuing_company="Acme"),
        make_record(issuing_company="Initech"),
    ]
    assert facet_values(store, "issuing_company") == ["Acme", "Initech"]


def test_facet_values_for_receivers_and_products(records) -> None:
    assert facet_values(records, "receiving_company") == ["Globex Retail", "Umbrella"]
    assert facet_values(records, "product_name") == ["Gadget", "Widget", "Widget Pro"]


def test_unknown_facet_field_raises(records) -> None:
    with pytest.raises(ValueError):
        facet_values(records, "specification")


def test_filtered_companies(records) -> None:
    assert filtered_companies(records[1:3]) == ["Initech"]
    assert filtered_companies([]) == []
