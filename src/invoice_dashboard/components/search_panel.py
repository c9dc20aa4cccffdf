"""
Search and filter panel for the dashboard.

Provides the keyword search form, the filter toggle, the clear-filters
button and the collapsible panel of advanced filters. Company and product
inputs offer suggestions from the unfiltered record store through
HTML datalists.
"""

import reflex as rx

from invoice_dashboard.state import DashboardState


def search_panel() -> rx.Component:
    """
    Build the search panel with keyword input and advanced filters.

    Returns:
        The search panel component.
    """
    return rx.box(
        rx.hstack(
            rx.heading("Search and filter", size="5", as_="h2"),
            rx.cond(
                DashboardState.has_active_filters,
                rx.button(
                    rx.icon("x"),
                    "Clear filters",
                    on_click=DashboardState.clear_filters,
                    variant="soft",
                    color_scheme="gray",
                ),
            ),
            justify="between",
            align="center",
            width="100%",
        ),
        rx.form(
            rx.hstack(
                rx.input(
                    rx.input.slot(rx.icon("search")),
                    placeholder="Search by invoice number, company or product...",
                    value=DashboardState.keyword,
                    on_change=DashboardState.set_keyword,
                    class_name="search-input",
                    size="3",
                    flex="1",
                ),
                rx.button(
                    rx.icon("search"),
                    "Search",
                    type="submit",
                    disabled=DashboardState.keyword.strip() == "",
                    size="3",
                ),
                rx.button(
                    rx.icon("filter"),
                    "Filters",
                    type="button",
                    on_click=DashboardState.toggle_filters,
                    variant="outline",
                    size="3",
                ),
                width="100%",
            ),
            on_submit=DashboardState.search,
            reset_on_submit=False,
        ),
        rx.cond(DashboardState.show_filters, _filter_panel()),
        class_name="card search-card",
    )


def _filter_panel() -> rx.Component:
    """Build the grid of advanced filter inputs."""
    return rx.card(
        rx.grid(
            _suggest_input(
                "Receiving company",
                "receiving-companies",
                DashboardState.receiving_company,
                DashboardState.set_receiving_company,
                DashboardState.receiving_suggestions,
            ),
            _suggest_input(
                "Issuing company",
                "issuing-companies",
                DashboardState.issuing_company,
                DashboardState.set_issuing_company,
                DashboardState.company_suggestions,
            ),
            _labelled(
                "Product",
                rx.select(
                    DashboardState.product_suggestions,
                    value=DashboardState.product,
                    on_change=DashboardState.set_product,
                    placeholder="All products",
                    width="100%",
                ),
            ),
            _labelled(
                "Start date",
                rx.input(type="date", value=DashboardState.start_date, on_change=DashboardState.set_start_date),
            ),
            _labelled(
                "End date",
                rx.input(type="date", value=DashboardState.end_date, on_change=DashboardState.set_end_date),
            ),
            _labelled(
                "Minimum amount",
                rx.input(
                    type="number",
                    placeholder="0",
                    value=DashboardState.min_amount,
                    on_change=DashboardState.set_min_amount,
                ),
            ),
            _labelled(
                "Maximum amount",
                rx.input(
                    type="number",
                    placeholder="No limit",
                    value=DashboardState.max_amount,
                    on_change=DashboardState.set_max_amount,
                ),
            ),
            columns=rx.breakpoints(initial="1", md="2", lg="4"),
            spacing="4",
            width="100%",
        ),
        class_name="filter-card",
    )


def _labelled(label: str, control: rx.Component) -> rx.Component:
    return rx.box(
        rx.text(label, as_="label", size="2", weight="medium"),
        control,
    )


def _suggest_input(label: str, list_id: str, value, on_change, suggestions) -> rx.Component:
    """Free text input with a datalist of suggestions."""
    return _labelled(
        label,
        rx.box(
            rx.el.input(
                list=list_id,
                value=value,
                on_change=on_change,
                placeholder="Search or type a company...",
                class_name="suggest-input",
            ),
            rx.el.datalist(
                rx.foreach(suggestions, lambda option: rx.el.option(value=option)),
                id=list_id,
            ),
        ),
    )
