"""
REST implementation of InvoiceService.

Talks to the invoice backend over HTTP with a shared requests.Session:

- POST {server}/api/login          -> envelope with {token, expires_in}
- GET  {server}/api/all_invoices   -> envelope with the record list
- POST {server}/upload-excel       -> envelope with {new_added}
- GET  {server}/download           -> CSV stream named by Content-Disposition

Every JSON endpoint wraps its payload in {code, message, data}. A code other
than 200 raises ApiError with the backend's message, and HTTP 401 raises
AuthenticationExpired so the UI can drop the stored token.

Environment Variables:
    INVOICE_DASHBOARD_SERVER_URL: Backend root (default http://localhost:5000)
    INVOICE_DASHBOARD_TIMEOUT: Seconds for API calls (default 5)
    INVOICE_DASHBOARD_UPLOAD_TIMEOUT: Seconds for uploads (default 30)
"""

import os
import time
from typing import Any, Mapping

import requests
from benedict import benedict
from requests import Response
from requests.exceptions import RequestException

from invoice_dashboard.lib import logs, objects
from invoice_dashboard.models.common import ApiEnvelope, AuthToken, PredicateSet
from invoice_dashboard.models.invoice import InvoiceRecord, deserialize_records
from invoice_dashboard.services.errors import (
    ApiError,
    AuthenticationExpired,
    InvoiceServiceError,
)
from invoice_dashboard.services.invoice_service import DownloadedFile, InvoiceService
from invoice_dashboard.utils import filename_from_content_disposition

LOG = logs.logger(__file__)

SERVER_URL = os.getenv("INVOICE_DASHBOARD_SERVER_URL", "http://localhost:5000")
API_TIMEOUT = float(os.getenv("INVOICE_DASHBOARD_TIMEOUT", "5"))
UPLOAD_TIMEOUT = float(os.getenv("INVOICE_DASHBOARD_UPLOAD_TIMEOUT", "30"))

# Multipart field name expected by the upload endpoint
UPLOAD_FIELD = "excelFile"
DEFAULT_TOKEN_LIFETIME = 2 * 60 * 60


class InvoiceServiceImpl(InvoiceService):
    """
    Invoice service backed by the REST API.

    Attributes:
        server_url: Backend root URL without a trailing slash.
        api_url: JSON API prefix ({server_url}/api).
    """

    def __init__(
        self,
        server_url: str | None = None,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
        upload_timeout: float | None = None,
    ) -> None:
        self.server_url = (server_url or SERVER_URL).rstrip("/")
        self.api_url = f"{self.server_url}/api"
        self._session = session or requests.Session()
        self._timeout = timeout if timeout is not None else API_TIMEOUT
        self._upload_timeout = upload_timeout if upload_timeout is not None else UPLOAD_TIMEOUT

    def login(self, email: str, password: str) -> AuthToken:
        """Authenticate and return the issued token."""
        LOG.info("login - email:%s", email)
        response = self._request(
            "POST",
            f"{self.api_url}/login",
            json={"email": email, "password": password},
        )
        data = self._data(self._envelope(response))
        token = str(data.get("token") or "")
        if not token:
            raise InvoiceServiceError("Login response did not contain a token")
        return AuthToken(
            token=token,
            expires_in=data.get_int("expires_in", DEFAULT_TOKEN_LIFETIME),
            created_at=time.time(),
        )

    def list_invoices(self, token: str | None = None) -> list[InvoiceRecord]:
        """Fetch the full record store."""
        response = self._request("GET", f"{self.api_url}/all_invoices", token=token)
        envelope = self._envelope(response)
        records = deserialize_records(envelope.data)
        LOG.info("list_invoices - records:%s", len(records))
        return records

    def download_invoices(self, predicates: PredicateSet, token: str | None = None) -> DownloadedFile:
        """Download the CSV export for the predicates' download criteria."""
        params = predicates.download_params()
        LOG.info("download_invoices - params:%s", objects.to_json(params))
        response = self._request(
            "GET",
            f"{self.server_url}/download",
            token=token,
            params=params,
        )
        content_type = response.headers.get("Content-Type", "")
        if response.status_code >= 400 or content_type.startswith("application/json"):
            # Errors come back as an envelope instead of a file
            self._envelope(response)
            if response.status_code >= 400:
                raise InvoiceServiceError(f"Download failed: HTTP {response.status_code}")
        filename = filename_from_content_disposition(response.headers.get("Content-Disposition"))
        return DownloadedFile(filename=filename, content=response.content)

    def _upload(self, filename: str, content: bytes, token: str | None) -> int:
        LOG.info("upload_invoices - filename:%s bytes:%s", filename, len(content))
        response = self._request(
            "POST",
            f"{self.server_url}/upload-excel",
            token=token,
            files={UPLOAD_FIELD: (filename, content)},
            timeout=self._upload_timeout,
        )
        data = self._data(self._envelope(response))
        new_added = data.get_int("new_added", 0)
        LOG.info("upload_invoices - new_added:%s", new_added)
        return new_added

    def _request(
        self,
        method: str,
        url: str,
        *,
        token: str | None = None,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> Response:
        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                timeout=timeout if timeout is not None else self._timeout,
                **kwargs,
            )
        except RequestException as exc:
            raise InvoiceServiceError(f"Unable to connect to the server: {exc}") from exc
        if response.status_code == 401:
            LOG.warning("%s %s rejected with HTTP 401", method, url)
            raise AuthenticationExpired("Session expired, please log in again")
        return response

    @staticmethod
    def _envelope(response: Response) -> ApiEnvelope:
        try:
            body = response.json()
        except ValueError as exc:
            raise InvoiceServiceError(
                f"{response.status_code} - Server returned an invalid response"
            ) from exc
        envelope = ApiEnvelope.from_dict(body if isinstance(body, Mapping) else None)
        if not envelope.ok:
            code = envelope.code or response.status_code
            raise ApiError(code, envelope.message or "Unknown error")
        return envelope

    @staticmethod
    def _data(envelope: ApiEnvelope) -> benedict:
        """Wrap the envelope data for safe typed key access."""
        data = envelope.data if isinstance(envelope.data, Mapping) else {}
        return benedict(dict(data))
