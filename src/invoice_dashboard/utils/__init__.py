"""Utility functions shared across the invoice dashboard package."""

from invoice_dashboard.utils.files import (
    ALLOWED_UPLOAD_EXTENSIONS,
    DEFAULT_DOWNLOAD_FILENAME,
    MAX_UPLOAD_BYTES,
    filename_from_content_disposition,
    validate_upload,
)
from invoice_dashboard.utils.forms import validate_login
from invoice_dashboard.utils.invoice_helpers import (
    end_of_day,
    format_currency,
    format_timestamp,
    is_valid_amount,
    matches_keyword,
    parse_date,
)

__all__ = [
    "ALLOWED_UPLOAD_EXTENSIONS",
    "DEFAULT_DOWNLOAD_FILENAME",
    "MAX_UPLOAD_BYTES",
    "end_of_day",
    "filename_from_content_disposition",
    "format_currency",
    "format_timestamp",
    "is_valid_amount",
    "matches_keyword",
    "parse_date",
    "validate_login",
    "validate_upload",
]
