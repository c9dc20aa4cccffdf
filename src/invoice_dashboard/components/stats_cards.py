"""Summary statistic cards for the filtered view."""

import reflex as rx

from invoice_dashboard.state import DashboardState


def stats_cards() -> rx.Component:
    """Build the row of summary cards; the company card opens the company list."""
    stats = DashboardState.stats
    return rx.grid(
        _card("Invoices", stats.count, "file-text"),
        _card("Total amount", stats.total_amount, "japanese-yen"),
        _card("Average amount", stats.average_amount, "trending-up"),
        _card("Highest amount", stats.max_amount, "arrow-up-right"),
        _card("Lowest amount", stats.min_amount, "arrow-down-right"),
        _card("Products", stats.product_count, "package"),
        rx.box(
            _card("Companies", stats.company_count, "building-2"),
            on_click=DashboardState.set_show_company_list(True),
            cursor="pointer",
        ),
        columns=rx.breakpoints(initial="1", sm="2", lg="4"),
        spacing="4",
        width="100%",
    )


def _card(label: str, value, icon: str) -> rx.Component:
    return rx.card(
        rx.hstack(
            rx.box(
                rx.text(label, size="2", class_name="muted"),
                rx.heading(value, size="6"),
            ),
            rx.icon(icon, size=36, class_name="stat-icon"),
            justify="between",
            align="center",
        ),
        class_name="stat-card",
    )
