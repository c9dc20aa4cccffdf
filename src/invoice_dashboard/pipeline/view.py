"""
Explicit application state for the dashboard pipeline.

DashboardView bundles the record store, the active predicates and the
pagination state. Every derived value is recomputed from those three on
access, so there is nothing to invalidate when one of them changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from invoice_dashboard.lib import logs
from invoice_dashboard.models.common import InvoiceStats, PaginationState, PredicateSet
from invoice_dashboard.models.invoice import InvoiceRecord
from invoice_dashboard.pipeline.facets import facet_values, filtered_companies
from invoice_dashboard.pipeline.filters import filter_records
from invoice_dashboard.pipeline.pagination import PAGE_SIZE, paginate
from invoice_dashboard.pipeline.stats import aggregate

LOG = logs.logger(__file__)


@dataclass
class DashboardView:
    """
    Record store, filter criteria and pagination for one dashboard session.

    Attributes:
        records: The unfiltered record store.
        predicates: The active filter criteria.
        pagination: Current page within the filtered view.
    """

    records: Sequence[InvoiceRecord] = field(default_factory=list)
    predicates: PredicateSet = field(default_factory=PredicateSet)
    pagination: PaginationState = field(default_factory=lambda: PaginationState(page_size=PAGE_SIZE))

    def with_records(self, records: Sequence[InvoiceRecord]) -> "DashboardView":
        """Replace the record store and go back to the first page."""
        self.records = list(records)
        self.pagination.reset()
        self.pagination.total = len(self.filtered)
        return self

    def apply_predicates(self, predicates: PredicateSet) -> "DashboardView":
        """Apply new filter criteria; the current page always returns to 1."""
        LOG.debug("Applying predicates %s", predicates.signature())
        self.predicates = predicates
        self.pagination.reset()
        self.pagination.total = len(self.filtered)
        return self

    def go_to_page(self, page: int) -> bool:
        """Navigate within the filtered view; out of range requests are ignored."""
        self.pagination.total = len(self.filtered)
        return self.pagination.go_to_page(page)

    @property
    def filtered(self) -> List[InvoiceRecord]:
        return filter_records(self.records, self.predicates)

    @property
    def stats(self) -> InvoiceStats:
        return aggregate(self.filtered)

    @property
    def page_items(self) -> List[InvoiceRecord]:
        return paginate(self.filtered, self.pagination)

    @property
    def total_pages(self) -> int:
        self.pagination.total = len(self.filtered)
        return self.pagination.total_pages

    @property
    def companies(self) -> List[str]:
        """Issuing company suggestions from the whole store."""
        return facet_values(self.records, "issuing_company")

    @property
    def receiving_companies(self) -> List[str]:
        """Receiving company suggestions from the whole store."""
        return facet_values(self.records, "receiving_company")

    @property
    def products(self) -> List[str]:
        """Product suggestions from the whole store."""
        return facet_values(self.records, "product_name")

    @property
    def filtered_companies(self) -> List[str]:
        """Issuing companies present in the filtered view."""
        return filtered_companies(self.filtered)
