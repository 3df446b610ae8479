"""Validation helpers turning raw console text into domain values."""

from __future__ import annotations

import math
from typing import Optional

from .exceptions import EmptyFieldError, NotANumberError, OutOfRangeError

__all__ = [
    "first_token",
    "parse_amount",
    "parse_choice",
    "validate_required_str",
]

# Whole numbers beyond a 32-bit signed int are not read as numbers at all.
INT_MIN, INT_MAX = -(2**31), 2**31 - 1


def first_token(line: str) -> Optional[str]:
    """Return the first whitespace-separated token of ``line`` or None if blank."""
    parts = line.split()
    return parts[0] if parts else None


def _plain_number(raw: str) -> str:
    # int()/float() accept "1_000"; console input must not.
    token = raw.strip()
    if "_" in token:
        raise NotANumberError(f"{raw!r} is not a number")
    return token


def parse_choice(raw: str, minimum: int, maximum: int) -> int:
    """Convert a token to an integer within ``[minimum, maximum]``."""
    token = _plain_number(raw)
    try:
        choice = int(token)
    except ValueError as exc:
        raise NotANumberError(f"{raw!r} is not a whole number") from exc

    if not INT_MIN <= choice <= INT_MAX:
        raise NotANumberError(f"{raw!r} is not a whole number")
    if not minimum <= choice <= maximum:
        raise OutOfRangeError(f"choice must be between {minimum} and {maximum}")
    return choice


def parse_amount(raw: str, field: str = "amount") -> float:
    """Convert a token to a strictly positive, finite float."""
    token = _plain_number(raw)
    try:
        amount = float(token)
    except ValueError as exc:
        raise NotANumberError(f"{field} must be a numeric value") from exc

    # float() accepts "nan" and "inf"; neither is a usable amount.
    if not math.isfinite(amount):
        raise NotANumberError(f"{field} must be a numeric value")
    if amount <= 0:
        raise OutOfRangeError(f"{field} must be greater than zero")
    return amount


def validate_required_str(value: str, field: str) -> str:
    trimmed = value.strip()
    if not trimmed:
        raise EmptyFieldError(f"{field} cannot be empty")
    return trimmed
