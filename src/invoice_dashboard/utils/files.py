"""Helpers for spreadsheet upload validation and download filenames."""

from __future__ import annotations

import re
from urllib.parse import unquote

ALLOWED_UPLOAD_EXTENSIONS = ("xlsx", "xls", "csv")
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_DOWNLOAD_FILENAME = "invoice_data.csv"

_FILENAME_STAR = re.compile(r"filename\*=utf-8''(.*)", re.IGNORECASE)


def validate_upload(filename: str | None, size: int) -> str | None:
    """
    Validate a spreadsheet before it is sent to the backend.

    Args:
        filename: Name of the selected file.
        size: Size of the file in bytes.

    Returns:
        An error message for display, or None when the file is acceptable.
    """
    if not filename:
        return "Please choose a file to upload"
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if extension not in ALLOWED_UPLOAD_EXTENSIONS:
        return "Unsupported file type (only .xlsx, .xls and .csv are accepted)"
    if size > MAX_UPLOAD_BYTES:
        return f"File size must not exceed {MAX_UPLOAD_BYTES // 1024 // 1024}MB"
    return None


def filename_from_content_disposition(header: str | None) -> str:
    """Extract the RFC 5987 encoded filename from a Content-Disposition header."""
    if header:
        match = _FILENAME_STAR.search(header)
        if match and match.group(1):
            return unquote(match.group(1).strip().strip('"'))
    return DEFAULT_DOWNLOAD_FILENAME
