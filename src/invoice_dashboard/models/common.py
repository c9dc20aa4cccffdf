"""
Common state models for the Invoice Dashboard.

This module defines the small value objects shared by the pipeline, the
services and the Reflex state:

- Filter criteria (PredicateSet with its DateRange and AmountRange)
- Pagination state for the results table
- Summary statistics over the filtered view
- The backend response envelope and the stored login token

Filter criteria and statistics expose to_dict() for hashing and logging;
the Reflex state keeps only raw inputs and rebuilds these on demand.
"""

import math
import time
from dataclasses import dataclass, field
from datetime import date, datetime
from datetime import time as dt_time
from typing import Any

from invoice_dashboard.lib import logs, objects
from invoice_dashboard.utils import end_of_day, parse_date

LOG = logs.logger(__file__)

# Seconds before expiry at which a token is no longer trusted
TOKEN_EXPIRY_MARGIN = 60


def _parse_bound_date(value: str | None, label: str) -> date | None:
    if not value or not value.strip():
        return None
    parsed = parse_date(value)
    if parsed is None:
        LOG.warning("Ignoring unparseable %s date: %s", label, value)
        return None
    return parsed.date()


def _parse_bound_amount(value: str | float | None, label: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            value = float(value.strip())
        except ValueError:
            LOG.warning("Ignoring non-numeric %s amount: %s", label, value)
            return None
    if math.isnan(value):
        return None
    return float(value)


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive calendar date range.

    Attributes:
        start: First included day, or None for no lower bound.
        end: Last included day (through 23:59:59.999), or None.
    """

    start: date | None = None
    end: date | None = None

    @property
    def is_active(self) -> bool:
        return self.start is not None or self.end is not None

    def lower_bound(self) -> datetime | None:
        """Start of the first included day."""
        if self.start is None:
            return None
        return datetime.combine(self.start, dt_time.min)

    def upper_bound(self) -> datetime | None:
        """Last millisecond of the last included day."""
        if self.end is None:
            return None
        return end_of_day(datetime.combine(self.end, dt_time.min))


@dataclass(frozen=True)
class AmountRange:
    """Inclusive amount range; an unset bound is open."""

    min: float | None = None
    max: float | None = None

    @property
    def is_active(self) -> bool:
        return self.min is not None or self.max is not None

    def bounds(self) -> tuple[float, float]:
        """Return (min, max) with 0 and +infinity standing in for unset bounds."""
        return (
            self.min if self.min is not None else 0.0,
            self.max if self.max is not None else math.inf,
        )


@dataclass(frozen=True)
class PredicateSet:
    """
    The complete set of filter criteria applied to the record store.

    Blank text slots and unset ranges are inactive and match every record.

    Attributes:
        keyword: Free text matched against number, companies and product.
        product: Exact product name.
        issuing_company: Exact issuing company.
        receiving_company: Exact receiving company.
        date_range: Inclusive timestamp range.
        amount_range: Inclusive amount range.
    """

    keyword: str = ""
    product: str = ""
    issuing_company: str = ""
    receiving_company: str = ""
    date_range: DateRange = field(default_factory=DateRange)
    amount_range: AmountRange = field(default_factory=AmountRange)

    @classmethod
    def from_inputs(
        cls,
        keyword: str = "",
        product: str = "",
        issuing_company: str = "",
        receiving_company: str = "",
        start_date: str = "",
        end_date: str = "",
        min_amount: str = "",
        max_amount: str = "",
    ) -> "PredicateSet":
        """Build a predicate set from raw form input values."""
        return cls(
            keyword=keyword or "",
            product=product or "",
            issuing_company=issuing_company or "",
            receiving_company=receiving_company or "",
            date_range=DateRange(
                start=_parse_bound_date(start_date, "start"),
                end=_parse_bound_date(end_date, "end"),
            ),
            amount_range=AmountRange(
                min=_parse_bound_amount(min_amount, "minimum"),
                max=_parse_bound_amount(max_amount, "maximum"),
            ),
        )

    @property
    def is_active(self) -> bool:
        """Whether any predicate would exclude records."""
        return bool(
            self.keyword.strip()
            or self.product
            or self.issuing_company
            or self.receiving_company
            or self.date_range.is_active
            or self.amount_range.is_active
        )

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return {
            "keyword": self.keyword,
            "product": self.product,
            "issuing_company": self.issuing_company,
            "receiving_company": self.receiving_company,
            "start_date": self.date_range.start.isoformat() if self.date_range.start else "",
            "end_date": self.date_range.end.isoformat() if self.date_range.end else "",
            "min_amount": self.amount_range.min,
            "max_amount": self.amount_range.max,
        }

    def signature(self) -> str:
        """Return a stable hash identifying this combination of criteria."""
        return objects.hash(self.to_dict()).hexdigest()

    def download_params(self) -> dict[str, str]:
        """
        Render the query parameters understood by the backend download endpoint.

        Only the exact-match and date criteria are forwarded; blank values
        are omitted and the rest are trimmed.
        """
        raw = {
            "receive_company": self.receiving_company,
            "issue_company": self.issuing_company,
            "start_date": self.date_range.start.isoformat() if self.date_range.start else "",
            "end_date": self.date_range.end.isoformat() if self.date_range.end else "",
            "product_name": self.product,
        }
        return {key: value.strip() for key, value in raw.items() if value and value.strip()}


@dataclass
class PaginationState:
    """
    Tracks pagination over the filtered view.

    Attributes:
        page: Current page number (1-indexed).
        page_size: Number of rows per page.
        total: Number of rows in the filtered view.
    """

    page: int = 1
    page_size: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        """Number of pages needed for total rows (0 when there are none)."""
        return math.ceil(self.total / self.page_size) if self.total > 0 else 0

    def go_to_page(self, page: int) -> bool:
        """
        Move to the requested page.

        Requests outside [1, total_pages] are ignored.

        Returns:
            True if the current page changed.
        """
        if page < 1 or page > self.total_pages:
            return False
        changed = page != self.page
        self.page = page
        return changed

    def first_page(self) -> bool:
        return self.go_to_page(1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.page - 1)

    def next_page(self) -> bool:
        return self.go_to_page(self.page + 1)

    def last_page(self) -> bool:
        return self.go_to_page(self.total_pages)

    def reset(self) -> None:
        """Return to the first page."""
        self.page = 1


@dataclass(frozen=True)
class InvoiceStats:
    """Summary statistics over a filtered view."""

    count: int = 0
    total_amount: float = 0.0
    average_amount: float = 0.0
    max_amount: float = 0.0
    min_amount: float = 0.0
    company_count: int = 0
    product_count: int = 0

    def to_dict(self) -> dict:
        """Serialize using the dashboard's camelCase keys."""
        return {
            "count": self.count,
            "totalAmount": self.total_amount,
            "averageAmount": self.average_amount,
            "maxAmount": self.max_amount,
            "minAmount": self.min_amount,
            "companyCount": self.company_count,
            "productCount": self.product_count,
        }


@dataclass
class ApiEnvelope:
    """
    Uniform backend response wrapper.

    Attributes:
        code: Business status code, 200 on success.
        message: Human readable message, shown to the user on failure.
        data: Endpoint specific payload.
    """

    code: int = 0
    message: str = ""
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.code == 200

    @classmethod
    def from_dict(cls, data: dict | None) -> "ApiEnvelope":
        """Deserialize from a response body; accepts either message or msg."""
        if not data:
            return cls()
        try:
            code = int(data.get("code", 0))
        except (TypeError, ValueError):
            code = 0
        message = data.get("message")
        if message is None:
            message = data.get("msg", "")
        return cls(code=code, message=str(message or ""), data=data.get("data"))


@dataclass
class AuthToken:
    """
    Login token as kept in browser storage.

    Attributes:
        token: Bearer token value.
        expires_in: Lifetime in seconds.
        created_at: Epoch seconds when the token was issued.
    """

    token: str = ""
    expires_in: int = 0
    created_at: float = 0.0

    def is_valid(self, now: float | None = None) -> bool:
        """Return True if the token exists and has more than a minute left."""
        if not self.token or self.expires_in <= 0 or self.created_at <= 0:
            return False
        now = time.time() if now is None else now
        return now - self.created_at < self.expires_in - TOKEN_EXPIRY_MARGIN

    def to_storage(self) -> dict[str, str]:
        """Serialize to the string values held in local storage."""
        return {
            "token": self.token,
            "expires_in": str(self.expires_in),
            "created_at": str(self.created_at),
        }

    @classmethod
    def from_storage(cls, token: str, expires_in: str, created_at: str) -> "AuthToken":
        """Rebuild a token from local storage strings; bad numbers read as 0."""
        try:
            expires = int(float(expires_in or 0))
        except ValueError:
            expires = 0
        try:
            created = float(created_at or 0)
        except ValueError:
            created = 0.0
        return cls(token=token or "", expires_in=expires, created_at=created)
