"""
Reflex application entry point for the Invoice Dashboard.

This module initializes the Reflex app and registers the login page and
the dashboard page.
"""

import os

import reflex as rx

from invoice_dashboard.components import (
    company_list_dialog,
    dashboard_header,
    invoice_results,
    loading_state,
    login_page,
    search_panel,
    stats_cards,
)
from invoice_dashboard.lib import logs
from invoice_dashboard.state import (
    APP_TITLE,
    DASHBOARD_ROUTE,
    LOGIN_ROUTE,
    DashboardState,
)

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("APP_PORT", "3000"))
_SERVICE_KIND = os.getenv("INVOICE_DASHBOARD_SERVICE", "demo")
LOG.info("INVOICE_DASHBOARD_SERVICE: %s", _SERVICE_KIND)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&family=Fira+Code:wght@400;500&display=swap"


def dashboard() -> rx.Component:
    """
    Build the dashboard page layout.

    Returns:
        The complete page with header, statistics, search and results.
    """
    return rx.box(
        rx.box(
            dashboard_header(),
            rx.cond(
                DashboardState.is_loading,
                loading_state(),
                rx.fragment(
                    stats_cards(),
                    search_panel(),
                    invoice_results(),
                ),
            ),
            company_list_dialog(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(
    login_page,
    route=LOGIN_ROUTE,
    title=f"{APP_TITLE} - Login",
)
app.add_page(
    dashboard,
    route=DASHBOARD_ROUTE,
    title=APP_TITLE,
    on_load=DashboardState.on_load,
)


def main() -> None:
    """Entrypoint used by `invoice_dashboard` console script."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)])


if __name__ == "__main__":
    main()
