"""Dialog listing the issuing companies present in the filtered view."""

import reflex as rx

from invoice_dashboard.state import DashboardState


def company_list_dialog() -> rx.Component:
    """Build the company list dialog."""
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(f"Companies ({DashboardState.filtered_companies.length()})"),
            rx.cond(
                DashboardState.filtered_companies.length() == 0,
                rx.text("No companies match the current filters.", class_name="muted"),
                rx.scroll_area(
                    rx.vstack(
                        rx.foreach(
                            DashboardState.filtered_companies,
                            lambda company: rx.text(company, class_name="company-item"),
                        ),
                    ),
                    max_height="60vh",
                ),
            ),
            rx.dialog.close(rx.button("Close", variant="soft")),
        ),
        open=DashboardState.show_company_list,
        on_open_change=DashboardState.set_show_company_list,
    )
