"""Validation for the login form."""

from __future__ import annotations

import re

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def validate_login(email: str, password: str) -> dict[str, str]:
    """
    Check login credentials before they are sent.

    Returns:
        Field name to error message; empty when both fields are valid.
    """
    errors: dict[str, str] = {}
    if not email:
        errors["email"] = "Email is required"
    elif not _EMAIL_PATTERN.match(email):
        errors["email"] = "Please enter a valid email"

    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return errors
