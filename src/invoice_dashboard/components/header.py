"""
Dashboard header with the upload, download and logout actions.
"""

import reflex as rx

from invoice_dashboard.state import APP_TITLE, UPLOAD_ID, DashboardState
from invoice_dashboard.utils import MAX_UPLOAD_BYTES

_ACCEPT = {
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": [".xlsx"],
    "application/vnd.ms-excel": [".xls"],
    "text/csv": [".csv"],
}


def dashboard_header() -> rx.Component:
    """Build the sticky header bar."""
    return rx.box(
        rx.hstack(
            rx.hstack(
                rx.icon("file-text", class_name="title-icon"),
                rx.heading(APP_TITLE, size="5", as_="h1"),
                align="center",
            ),
            rx.hstack(
                _upload_controls(),
                rx.button(
                    rx.cond(DashboardState.is_downloading, rx.spinner(size="1"), rx.icon("download")),
                    rx.cond(DashboardState.is_downloading, "Downloading...", "Download"),
                    on_click=DashboardState.download,
                    disabled=DashboardState.is_downloading | (DashboardState.page_rows.length() == 0),
                    variant="soft",
                ),
                rx.button(
                    rx.icon("log-out"),
                    "Log out",
                    on_click=DashboardState.logout,
                    color_scheme="red",
                    variant="soft",
                ),
                align="center",
            ),
            justify="between",
            align="center",
            width="100%",
        ),
        rx.cond(
            DashboardState.upload_error != "",
            rx.callout(DashboardState.upload_error, icon="triangle-alert", color_scheme="red", size="1"),
        ),
        class_name="dashboard-header",
    )


def _upload_controls() -> rx.Component:
    """File picker plus the button that sends the picked file."""
    selected = rx.selected_files(UPLOAD_ID)
    return rx.hstack(
        rx.upload(
            rx.button(
                rx.icon("paperclip"),
                rx.cond(selected.length() > 0, selected[0], "Choose file"),
                variant="outline",
                type="button",
            ),
            id=UPLOAD_ID,
            accept=_ACCEPT,
            max_files=1,
            max_size=MAX_UPLOAD_BYTES,
            multiple=False,
            border="none",
            padding="0",
        ),
        rx.button(
            rx.cond(DashboardState.is_uploading, rx.spinner(size="1"), rx.icon("upload")),
            rx.cond(DashboardState.is_uploading, "Uploading...", "Upload"),
            on_click=DashboardState.handle_upload(rx.upload_files(upload_id=UPLOAD_ID)),
            disabled=DashboardState.is_uploading,
            color_scheme="violet",
            variant="soft",
        ),
        align="center",
    )
