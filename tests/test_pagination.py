from __future__ import annotations

from invoice_dashboard.models.common import PaginationState
from invoice_dashboard.pipeline.pagination import PAGE_SIZE, page_slice, paginate, total_pages


def test_total_pages() -> None:
    assert PAGE_SIZE == 10
    assert total_pages(0) == 0
    assert total_pages(1) == 1
    assert total_pages(10) == 1
    assert total_pages(25) == 3


def test_last_page_holds_remainder(many_records) -> None:
    pagination = PaginationState(page=3)
    page = paginate(many_records, pagination)
    assert pagination.total == 25
    assert pagination.total_pages == 3
    assert [record.invoice_number for record in page] == [f"INV-{index:03d}" for index in range(20, 25)]


def test_page_slice_past_end_is_empty(many_records) -> None:
    assert page_slice(many_records, 4) == []
    assert page_slice(many_records, 0) == []


def test_go_to_page_out_of_range_is_ignored() -> None:
    pagination = PaginationState(page=2, total=25)
    assert not pagination.go_to_page(0)
    assert pagination.page == 2
    assert not pagination.go_to_page(4)
    assert pagination.page == 2
    assert pagination.go_to_page(3)
    assert pagination.page == 3


def test_navigation_helpers_clamp() -> None:
    pagination = PaginationState(total=25)
    assert not pagination.previous_page()
    assert pagination.page == 1
    assert pagination.last_page()
    assert pagination.page == 3
    assert not pagination.next_page()
    assert pagination.page == 3
    assert pagination.first_page()
    assert pagination.page == 1


def test_empty_view_has_no_pages() -> None:
    pagination = PaginationState(total=0)
    assert pagination.total_pages == 0
    assert not pagination.go_to_page(1)
    assert pagination.page == 1
