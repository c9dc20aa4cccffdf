"""
Reflex state management for the Invoice Dashboard.

This module contains the application state classes:

- AuthState: the login token kept in browser local storage
- LoginState: the login form
- DashboardState: the record store, filter inputs, pagination, and the
  upload/download actions

DashboardState keeps only canonical values (raw records, filter inputs and
the page number). Everything shown on screen is derived through a
DashboardView built from those values.
"""

import os

import reflex as rx

from invoice_dashboard.lib import logs, objects
from invoice_dashboard.models.common import AuthToken, PaginationState, PredicateSet
from invoice_dashboard.models.invoice import deserialize_record, serialize_record
from invoice_dashboard.models.reflex_models import (
    InvoiceRowModel,
    StatsModel,
    record_to_row_model,
    stats_to_model,
)
from invoice_dashboard.pipeline import PAGE_SIZE, DashboardView
from invoice_dashboard.services import (
    AuthenticationExpired,
    InvoiceServiceError,
    UploadValidationError,
    get_invoice_service,
)
from invoice_dashboard.utils import validate_login

LOG = logs.logger(__file__)

# Branding configuration
APP_TITLE = os.getenv("INVOICE_DASHBOARD_TITLE", "Invoice Dashboard")
APP_SUBTITLE = "Search, filter and summarize invoice records."

LOGIN_ROUTE = "/"
DASHBOARD_ROUTE = "/dashboard"
UPLOAD_ID = "invoice-upload"


def _get_service():
    """Get the configured invoice service (lazy loaded)."""
    return get_invoice_service()


class AuthState(rx.State):
    """Login token persisted in browser local storage."""

    token: str = rx.LocalStorage("", name="admin_access_token")
    token_expires_in: str = rx.LocalStorage("", name="token_expires_in")
    token_created_at: str = rx.LocalStorage("", name="token_create_time")

    def _auth_token(self) -> AuthToken:
        return AuthToken.from_storage(self.token, self.token_expires_in, self.token_created_at)

    def _store_token(self, token: AuthToken) -> None:
        stored = token.to_storage()
        self.token = stored["token"]
        self.token_expires_in = stored["expires_in"]
        self.token_created_at = stored["created_at"]

    def _clear_token(self) -> None:
        self.token = ""
        self.token_expires_in = ""
        self.token_created_at = ""

    def _expire_session(self) -> list:
        """Drop the stored token and send the user back to the login page."""
        LOG.warning("Session expired, clearing stored token")
        self._clear_token()
        return [
            rx.toast.error("Session expired, please log in again"),
            rx.redirect(LOGIN_ROUTE),
        ]

    @rx.event
    def logout(self):
        """Forget the token and return to the login page."""
        self._clear_token()
        return [rx.toast.success("Logged out"), rx.redirect(LOGIN_ROUTE)]


class LoginState(AuthState):
    """State behind the login form."""

    email: str = ""
    password: str = ""
    show_password: bool = False
    is_loading: bool = False
    email_error: str = ""
    password_error: str = ""

    @rx.event
    def set_email(self, value: str):
        self.email = value
        self.email_error = ""

    @rx.event
    def set_password(self, value: str):
        self.password = value
        self.password_error = ""

    @rx.event
    def toggle_password(self):
        self.show_password = not self.show_password

    @rx.event
    def submit(self, form_data: dict | None = None):
        """
        Validate the form and exchange the credentials for a token.

        Args:
            form_data: Submitted form values (the bound fields are used).
        """
        errors = validate_login(self.email, self.password)
        self.email_error = errors.get("email", "")
        self.password_error = errors.get("password", "")
        if errors:
            return

        self.is_loading = True
        yield

        try:
            token = _get_service().login(self.email.strip(), self.password)
        except InvoiceServiceError as e:
            LOG.error("Login failed: %s", e, exc_info=True)
            yield rx.toast.error(f"Login failed: {e}")
            return
        finally:
            self.is_loading = False

        self._store_token(token)
        self.email = ""
        self.password = ""
        yield rx.toast.success("Login successful! Redirecting...")
        yield rx.redirect(DASHBOARD_ROUTE)


class DashboardState(AuthState):
    """
    Main application state for the invoice dashboard.

    Handles loading the record store, filter inputs, pagination, and the
    upload/download actions.
    """

    # Record store, serialized InvoiceRecord dicts
    records: list[dict] = []
    is_loading: bool = True

    # Filter inputs exactly as typed
    keyword: str = ""
    product: str = ""
    issuing_company: str = ""
    receiving_company: str = ""
    start_date: str = ""
    end_date: str = ""
    min_amount: str = ""
    max_amount: str = ""

    page: int = 1

    show_filters: bool = False
    show_company_list: bool = False
    is_uploading: bool = False
    is_downloading: bool = False
    upload_error: str = ""

    def _predicates(self) -> PredicateSet:
        return PredicateSet.from_inputs(
            keyword=self.keyword,
            product=self.product,
            issuing_company=self.issuing_company,
            receiving_company=self.receiving_company,
            start_date=self.start_date,
            end_date=self.end_date,
            min_amount=self.min_amount,
            max_amount=self.max_amount,
        )

    def _view(self) -> DashboardView:
        """Rebuild the pipeline view from the canonical state."""
        view = DashboardView(
            records=[deserialize_record(record) for record in self.records],
            predicates=self._predicates(),
            pagination=PaginationState(page=self.page, page_size=PAGE_SIZE),
        )
        view.pagination.total = len(view.filtered)
        return view

    def _predicates_changed(self) -> None:
        """Apply the edited filter inputs; the view sends the table back to page 1."""
        view = self._view().apply_predicates(self._predicates())
        self.page = view.pagination.page

    @rx.var
    def page_rows(self) -> list[InvoiceRowModel]:
        return [record_to_row_model(record) for record in self._view().page_items]

    @rx.var
    def stats(self) -> StatsModel:
        return stats_to_model(self._view().stats)

    @rx.var
    def filtered_count(self) -> int:
        return len(self._view().filtered)

    @rx.var
    def total_pages(self) -> int:
        return self._view().total_pages

    @rx.var
    def page_label(self) -> str:
        return f"Page {self.page} of {self._view().total_pages}"

    @rx.var
    def is_first_page(self) -> bool:
        return self.page <= 1

    @rx.var
    def is_last_page(self) -> bool:
        return self.page >= self._view().total_pages

    @rx.var
    def company_suggestions(self) -> list[str]:
        return self._view().companies

    @rx.var
    def receiving_suggestions(self) -> list[str]:
        return self._view().receiving_companies

    @rx.var
    def product_suggestions(self) -> list[str]:
        return self._view().products

    @rx.var
    def filtered_companies(self) -> list[str]:
        return self._view().filtered_companies

    @rx.var
    def has_active_filters(self) -> bool:
        return self._predicates().is_active

    @rx.event
    def on_load(self):
        """
        Event handler for the dashboard page load.

        Redirects to the login page without a valid token, otherwise fetches
        the record store.
        """
        if not self._auth_token().is_valid():
            return rx.redirect(LOGIN_ROUTE)
        return DashboardState.load_records

    @rx.event
    def load_records(self):
        """Fetch every record from the backend into the record store."""
        self.is_loading = True
        yield

        records = []
        events = []
        try:
            records = _get_service().list_invoices(self.token)
        except AuthenticationExpired:
            events = self._expire_session()
        except InvoiceServiceError as e:
            LOG.error("Failed to load invoices: %s", e, exc_info=True)
            events = [rx.toast.error("Failed to load invoice data")]
        finally:
            view = DashboardView(predicates=self._predicates()).with_records(records)
            self.records = [serialize_record(record) for record in view.records]
            self.page = view.pagination.page
            self.is_loading = False
        LOG.info("Load Complete - records:%s stats:%s", len(self.records), objects.to_json(view.stats.to_dict()))
        for event in events:
            yield event

    @rx.event
    def set_keyword(self, value: str):
        self.keyword = value
        self._predicates_changed()

    @rx.event
    def set_product(self, value: str):
        self.product = value
        self._predicates_changed()

    @rx.event
    def set_issuing_company(self, value: str):
        self.issuing_company = value
        self._predicates_changed()

    @rx.event
    def set_receiving_company(self, value: str):
        self.receiving_company = value
        self._predicates_changed()

    @rx.event
    def set_start_date(self, value: str):
        self.start_date = value
        self._predicates_changed()

    @rx.event
    def set_end_date(self, value: str):
        self.end_date = value
        self._predicates_changed()

    @rx.event
    def set_min_amount(self, value: str):
        self.min_amount = value
        self._predicates_changed()

    @rx.event
    def set_max_amount(self, value: str):
        self.max_amount = value
        self._predicates_changed()

    @rx.event
    def clear_filters(self):
        """Reset every filter input."""
        self.keyword = ""
        self.product = ""
        self.issuing_company = ""
        self.receiving_company = ""
        self.start_date = ""
        self.end_date = ""
        self.min_amount = ""
        self.max_amount = ""
        self._predicates_changed()

    @rx.event
    def search(self, form_data: dict | None = None):
        """Report how many records match the submitted keyword."""
        if not self.keyword.strip():
            return rx.toast.error("Please enter a search keyword")
        count = len(self._view().filtered)
        if count == 0:
            return rx.toast.info("No invoices found for your search")
        return rx.toast.success(f"Found {count} invoice(s)")

    @rx.event
    def toggle_filters(self):
        self.show_filters = not self.show_filters

    @rx.event
    def set_show_company_list(self, show: bool):
        self.show_company_list = show

    @rx.event
    def go_to_page(self, page: int):
        """Navigate to a page; out of range requests are ignored."""
        view = self._view()
        if view.go_to_page(page):
            self.page = view.pagination.page

    @rx.event
    def first_page(self):
        return DashboardState.go_to_page(1)

    @rx.event
    def previous_page(self):
        return DashboardState.go_to_page(self.page - 1)

    @rx.event
    def next_page(self):
        return DashboardState.go_to_page(self.page + 1)

    @rx.event
    def last_page(self):
        return DashboardState.go_to_page(self._view().total_pages)

    @rx.event
    async def handle_upload(self, files: list[rx.UploadFile]):
        """
        Send the selected spreadsheet to the backend and reload the records.

        The file is validated locally first; an invalid file sets
        upload_error without any backend call.
        """
        if not files:
            self.upload_error = "Please choose a file to upload"
            return

        upload = files[0]
        content = await upload.read()
        self.upload_error = ""
        self.is_uploading = True
        yield

        events = []
        try:
            added = _get_service().upload_invoices(upload.name or "", content, self.token)
        except UploadValidationError as e:
            self.upload_error = str(e)
        except AuthenticationExpired:
            events = self._expire_session()
        except InvoiceServiceError as e:
            LOG.error("Upload failed: %s", e, exc_info=True)
            self.upload_error = f"Upload failed: {e}"
        else:
            events = [
                rx.toast.success(f"Upload complete, {added} record(s) imported"),
                DashboardState.load_records,
            ]
        finally:
            self.is_uploading = False

        yield rx.clear_selected_files(UPLOAD_ID)
        for event in events:
            yield event

    @rx.event
    def download(self):
        """Export the records matching the current filters as CSV."""
        self.is_downloading = True
        yield

        events = []
        try:
            exported = _get_service().download_invoices(self._predicates(), self.token)
        except AuthenticationExpired:
            events = self._expire_session()
        except InvoiceServiceError as e:
            LOG.error("Download failed: %s", e, exc_info=True)
            events = [rx.toast.error(f"Download failed: {e}")]
        else:
            events = [
                rx.download(data=exported.content, filename=exported.filename),
                rx.toast.success("CSV download complete"),
            ]
        finally:
            self.is_downloading = False

        for event in events:
            yield event
