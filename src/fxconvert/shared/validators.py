# src/fxconvert/shared/validators.py
"""
Input Validation Utilities - Amount and Currency Code Validation

This module validates the inputs handed to the converter by its host:
amount strings and currency codes. Invalid input is rejected before
any rate resolution is attempted.

Files that USE this module:
- fxconvert.application.converter (parse_amount, validate_currency_code)

Files that this module USES:
- fxconvert.domain.currencies (VALID_CODES)
- fxconvert.domain.errors (InvalidAmountError)
"""
import math
import re
from typing import Optional

from fxconvert.domain.currencies import VALID_CODES
from fxconvert.domain.errors import InvalidAmountError

# Digits with at most one decimal point, e.g. "12", "12.5", ".5", "12."
_AMOUNT_RE = re.compile(r"^\d*\.?\d*$")


def normalize_currency_code(code: Optional[str]) -> str:
    """Strip whitespace and uppercase a currency code."""
    if not code:
        return ""
    return code.strip().upper()


def validate_currency_code(code: Optional[str]) -> bool:
    """
    Validate that a code belongs to the known currency set.

    Args:
        code: Currency code to validate (already normalized)

    Returns:
        True if valid, False otherwise
    """
    return bool(code) and code in VALID_CODES


def parse_amount(value: Optional[str]) -> float:
    """
    Parse an amount string into a positive float.

    Args:
        value: Decimal string such as "1", "12.50" or ".5"

    Returns:
        Parsed amount

    Raises:
        InvalidAmountError: If the value is empty, non-numeric, zero or negative
    """
    if value is None:
        raise InvalidAmountError("Amount is required")

    text = str(value).strip()
    if not text or not _AMOUNT_RE.match(text) or text == ".":
        raise InvalidAmountError(f"Invalid amount: {value!r}")

    amount = float(text)
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError(f"Amount must be positive: {value!r}")
    return amount


def validate_amount(value: Optional[str]) -> bool:
    """Return True if parse_amount would accept the value."""
    try:
        parse_amount(value)
    except InvalidAmountError:
        return False
    return True
