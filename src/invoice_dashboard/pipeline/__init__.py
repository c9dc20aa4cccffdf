"""
Client-side invoice pipeline: filter, aggregate, paginate and facet.

All functions are pure over their inputs and do not depend on the UI layer.
"""

from invoice_dashboard.pipeline.facets import FACET_FIELDS, facet_values, filtered_companies
from invoice_dashboard.pipeline.filters import filter_records, matches
from invoice_dashboard.pipeline.pagination import PAGE_SIZE, page_slice, paginate, total_pages
from invoice_dashboard.pipeline.stats import aggregate
from invoice_dashboard.pipeline.view import DashboardView

__all__ = [
    "DashboardView",
    "FACET_FIELDS",
    "PAGE_SIZE",
    "aggregate",
    "facet_values",
    "filter_records",
    "filtered_companies",
    "matches",
    "page_slice",
    "paginate",
    "total_pages",
]
