"""Shared validation utilities"""

import re
from datetime import date, datetime
from typing import Optional, Union


def only_digits(value: Optional[str]) -> str:
    """Strip every non-digit character (masks like 123.456.789-09 or (11) 98765-4321)"""
    if not value:
        return ""
    return re.sub(r"\D", "", str(value))


def validate_patient_name(name: Optional[str]) -> str:
    """
    Validate a patient name.

    Returns:
        The stripped name

    Raises:
        ValueError: If the name is empty or shorter than 2 characters
    """
    name = (name or "").strip()
    if not name:
        raise ValueError("Name is required")
    if len(name) < 2:
        raise ValueError("Name must have at least 2 characters")
    return name


def _cpf_check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def validate_cpf(cpf: Optional[str]) -> str:
    """
    Validate a Brazilian CPF (individual taxpayer ID).

    The CPF has 9 base digits followed by two check digits, each computed
    as a mod-11 weighted sum over the digits before it. Sequences of a single
    repeated digit satisfy the checksum but are not issued, so they are rejected.

    Args:
        cpf: CPF string, masked or not

    Returns:
        The 11 digits of the CPF

    Raises:
        ValueError: If the CPF is malformed or its check digits do not match
    """
    digits = only_digits(cpf)

    if len(digits) != 11:
        raise ValueError("CPF must have 11 digits")

    if digits == digits[0] * 11:
        raise ValueError("Invalid CPF")

    if _cpf_check_digit(digits[:9]) != int(digits[9]):
        raise ValueError("Invalid CPF")
    if _cpf_check_digit(digits[:10]) != int(digits[10]):
        raise ValueError("Invalid CPF")

    return digits


def validate_br_phone(phone: Optional[str]) -> str:
    """
    Validate a Brazilian phone number (area code + 8 or 9 digit number).

    Args:
        phone: Phone number string in various formats

    Returns:
        The phone digits (10 or 11 of them)

    Raises:
        ValueError: If phone number is invalid
    """
    digits = only_digits(phone)

    if len(digits) < 10 or len(digits) > 11:
        raise ValueError("Phone must have 10 or 11 digits")

    return digits


def parse_iso_date(value: Union[str, date, None]) -> date:
    """Parse a YYYY-MM-DD string (datetimes are truncated to their day)"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise ValueError("Date is required")

    value = str(value).strip()
    if not re.match(r"^\d{4}-\d{2}-\d{2}$", value):
        raise ValueError("Invalid date format. Use YYYY-MM-DD")

    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"{value} is not a valid calendar date") from None
