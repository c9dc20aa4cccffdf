"""
Abstract base class defining the invoice backend contract.

All invoice service implementations extend InvoiceService and provide
login, record listing, spreadsheet import and filtered export.

Implementations:
- DemoInvoiceService: Static in-memory data for development/testing
- InvoiceServiceImpl: REST client for the invoice backend
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from invoice_dashboard.models.common import AuthToken, PredicateSet
from invoice_dashboard.models.invoice import InvoiceRecord
from invoice_dashboard.services.errors import UploadValidationError
from invoice_dashboard.utils import validate_upload


@dataclass(slots=True)
class DownloadedFile:
    """An exported file ready to hand to the browser."""

    filename: str
    content: bytes
    media_type: str = "text/csv; charset=utf-8"


class InvoiceService(ABC):
    """
    Abstract base class for invoice data access.

    Subclasses implement the backend calls. upload_invoices validates the
    file locally first, so an invalid file never reaches _upload().
    """

    @abstractmethod
    def login(self, email: str, password: str) -> AuthToken:
        """
        Exchange credentials for a bearer token.

        Args:
            email: Account email address.
            password: Account password.
        """

    @abstractmethod
    def list_invoices(self, token: str | None = None) -> list[InvoiceRecord]:
        """
        Return every invoice record known to the backend.

        Args:
            token: Bearer token of the logged in user.
        """

    @abstractmethod
    def download_invoices(self, predicates: PredicateSet, token: str | None = None) -> DownloadedFile:
        """
        Export the records matching the predicates' download criteria.

        Only receiving company, issuing company, date range and product are
        forwarded to the backend.
        """

    def upload_invoices(self, filename: str, content: bytes, token: str | None = None) -> int:
        """
        Import a spreadsheet of invoice rows.

        Args:
            filename: Original file name, used for type validation.
            content: Raw file bytes.
            token: Bearer token of the logged in user.

        Returns:
            Number of newly added records.

        Raises:
            UploadValidationError: If the file type or size is not accepted.
        """
        error = validate_upload(filename, len(content))
        if error:
            raise UploadValidationError(error)
        return self._upload(filename, content, token)

    @abstractmethod
    def _upload(self, filename: str, content: bytes, token: str | None) -> int:
        """Send a validated spreadsheet to the backend."""
