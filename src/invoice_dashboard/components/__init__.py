"""
Reflex UI components for the Invoice Dashboard.

This package provides modular, composable components:
- login_form: Login page with inline validation
- header: Title bar with upload, download and logout actions
- stats_cards: Summary statistics of the filtered view
- search_panel: Keyword search and advanced filters
- results: Paginated results table
- company_list: Dialog of companies in the filtered view

All components are functions returning rx.Component bound to the
application state in invoice_dashboard.state.
"""

from invoice_dashboard.components.company_list import company_list_dialog
from invoice_dashboard.components.header import dashboard_header
from invoice_dashboard.components.login_form import login_page
from invoice_dashboard.components.results import invoice_results, loading_state
from invoice_dashboard.components.search_panel import search_panel
from invoice_dashboard.components.stats_cards import stats_cards

__all__ = [
    "company_list_dialog",
    "dashboard_header",
    "invoice_results",
    "loading_state",
    "login_page",
    "search_panel",
    "stats_cards",
]
