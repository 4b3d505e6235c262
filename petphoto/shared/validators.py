"""Shared validation utilities"""

import re
from typing import Optional


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate a phone number while keeping the caller's formatting.

    Accepts digits with optional spaces, dashes, dots, parentheses and a
    leading +, e.g. "416-555-0123" or "+1 (416) 555 0123".

    Raises:
        ValueError: If the number contains other characters or has too few/many digits
    """
    if not phone:
        return phone

    phone = phone.strip()

    if not re.match(r"^\+?[\d\s().-]+$", phone):
        raise ValueError("Phone number may only contain digits, spaces and - . ( ) +")

    digits = re.sub(r"\D", "", phone)
    if not 7 <= len(digits) <= 15:
        raise ValueError("Phone number must have between 7 and 15 digits")

    return phone


def validate_required_text(value: Optional[str], field_name: str) -> str:
    """Strip a required text field and reject blank values"""
    if value is None or not value.strip():
        raise ValueError(f"{field_name} is required")
    return value.strip()
