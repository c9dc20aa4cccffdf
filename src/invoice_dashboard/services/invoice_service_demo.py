"""
Demo implementation of InvoiceService using static in-memory data.

This service is useful for:
- Local development without a running backend
- Testing UI components with realistic data
- Demonstrating the application without network access

Uploaded CSV files are appended to the in-memory store, and downloads are
rendered from the same store using the dashboard's own filter engine.
"""

import csv
import io
import time
from typing import Sequence

from invoice_dashboard.data.demo_invoices import DEMO_INVOICES
from invoice_dashboard.lib import logs, objects
from invoice_dashboard.models.common import AuthToken, PredicateSet
from invoice_dashboard.models.invoice import (
    WIRE_FIELDS,
    InvoiceRecord,
    deserialize_record,
    to_wire,
)
from invoice_dashboard.pipeline.filters import filter_records
from invoice_dashboard.services.errors import InvoiceServiceError
from invoice_dashboard.services.invoice_service import DownloadedFile, InvoiceService
from invoice_dashboard.utils import DEFAULT_DOWNLOAD_FILENAME

LOG = logs.logger(__file__)


class DemoInvoiceService(InvoiceService):
    """
    In-memory invoice service backed by static demo data.

    Attributes:
        _TOKEN_LIFETIME: Seconds a demo login token stays valid.
    """

    _TOKEN_LIFETIME = 2 * 60 * 60

    def __init__(self, invoices: Sequence[InvoiceRecord] | None = None) -> None:
        """
        Initialize with invoice data.

        Args:
            invoices: Custom record list, or None to use DEMO_INVOICES.
        """
        self._invoices: list[InvoiceRecord] = list(DEMO_INVOICES if invoices is None else invoices)

    def login(self, email: str, password: str) -> AuthToken:
        """Accept any credentials and issue a short-lived demo token."""
        token = objects.hash([email, time.time()]).hexdigest()
        LOG.info("login - demo token issued for %s", email)
        return AuthToken(token=f"demo-{token[:32]}", expires_in=self._TOKEN_LIFETIME, created_at=time.time())

    def list_invoices(self, token: str | None = None) -> list[InvoiceRecord]:
        """Return a copy of the in-memory store."""
        return list(self._invoices)

    def download_invoices(self, predicates: PredicateSet, token: str | None = None) -> DownloadedFile:
        """
        Render matching records as CSV.

        Only the criteria the backend export understands are applied, so the
        keyword and amount range do not narrow the file.
        """
        params = predicates.download_params()
        criteria = PredicateSet.from_inputs(
            product=params.get("product_name", ""),
            issuing_company=params.get("issue_company", ""),
            receiving_company=params.get("receive_company", ""),
            start_date=params.get("start_date", ""),
            end_date=params.get("end_date", ""),
        )
        rows = filter_records(self._invoices, criteria)

        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=list(WIRE_FIELDS.values()))
        writer.writeheader()
        for record in rows:
            writer.writerow(to_wire(record))
        LOG.info("download_invoices - rows:%s", len(rows))
        return DownloadedFile(
            filename=DEFAULT_DOWNLOAD_FILENAME,
            content=buffer.getvalue().encode("utf-8-sig"),
        )

    def _upload(self, filename: str, content: bytes, token: str | None) -> int:
        if not filename.lower().endswith(".csv"):
            raise InvoiceServiceError("The demo service only imports .csv files")
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvoiceServiceError("The uploaded file is not UTF-8 encoded") from exc

        added = [deserialize_record(row) for row in csv.DictReader(io.StringIO(text))]
        added = [record for record in added if record.invoice_number]
        self._invoices.extend(added)
        LOG.info("upload_invoices - filename:%s new_added:%s", filename, len(added))
        return len(added)
