"""
Invoice results display component for Reflex.

Handles the results table, the pagination controls, and the loading and
empty states.
"""

import reflex as rx

from invoice_dashboard.models.reflex_models import InvoiceRowModel
from invoice_dashboard.state import DashboardState

_COLUMNS = (
    "Invoice number",
    "Issuing company",
    "Receiving company",
    "Date",
    "Product",
    "Specification",
    "Quantity",
    "Amount",
)


def invoice_results() -> rx.Component:
    """
    Build the invoice results container.

    Returns:
        The results container component.
    """
    return rx.box(
        rx.heading(f"Results ({DashboardState.filtered_count})", size="4", as_="h3"),
        rx.table.root(
            rx.table.header(
                rx.table.row(*[rx.table.column_header_cell(name) for name in _COLUMNS]),
            ),
            rx.table.body(
                rx.cond(
                    DashboardState.page_rows.length() > 0,
                    rx.foreach(DashboardState.page_rows, _row),
                    _empty_row(),
                ),
            ),
            variant="surface",
            width="100%",
        ),
        rx.cond(DashboardState.total_pages > 0, _pagination()),
        id="results-container",
        class_name="results",
    )


def loading_state() -> rx.Component:
    """Build the loading indicator for the initial record fetch."""
    return rx.center(
        rx.vstack(
            rx.spinner(size="3"),
            rx.text("Loading invoices...", class_name="muted"),
            align="center",
        ),
        class_name="card loading-state",
        min_height="60vh",
    )


def _row(row: InvoiceRowModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(row.invoice_number),
        rx.table.cell(row.issuing_company),
        rx.table.cell(row.receiving_company),
        rx.table.cell(row.timestamp),
        rx.table.cell(row.product_name),
        rx.table.cell(row.specification),
        rx.table.cell(row.quantity),
        rx.table.cell(row.amount, text_align="right"),
    )


def _empty_row() -> rx.Component:
    """Single full-width row shown when nothing matches."""
    return rx.table.row(
        rx.table.cell(
            rx.cond(
                DashboardState.has_active_filters,
                "No invoices match the current filters.",
                "No invoices available.",
            ),
            col_span=len(_COLUMNS),
            text_align="center",
            class_name="muted",
        ),
    )


def _pagination() -> rx.Component:
    """First / previous / page label / next / last controls."""
    return rx.hstack(
        rx.button(
            rx.icon("chevrons-left"),
            on_click=DashboardState.first_page,
            disabled=DashboardState.is_first_page,
            variant="soft",
        ),
        rx.button(
            rx.icon("chevron-left"),
            on_click=DashboardState.previous_page,
            disabled=DashboardState.is_first_page,
            variant="soft",
        ),
        rx.text(DashboardState.page_label, class_name="muted"),
        rx.button(
            rx.icon("chevron-right"),
            on_click=DashboardState.next_page,
            disabled=DashboardState.is_last_page,
            variant="soft",
        ),
        rx.button(
            rx.icon("chevrons-right"),
            on_click=DashboardState.last_page,
            disabled=DashboardState.is_last_page,
            variant="soft",
        ),
        justify="center",
        align="center",
        class_name="pagination",
    )
