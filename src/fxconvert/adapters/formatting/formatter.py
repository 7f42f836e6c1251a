# src/fxconvert/adapters/formatting/formatter.py
"""
Result Formatter - Text Presentation of Conversion Results

This module turns ConversionResult objects into the short text lines a
host shows under its conversion form: the converted amount, the rate
line, and where the rate came from (live or cached).

Files that USE this module:
- Host applications rendering results
- tests.test_formatter (unit tests)

Files that this module USES:
- fxconvert.domain.currencies (currency_name)
- fxconvert.domain.models (ConversionResult)
"""
from __future__ import annotations

from typing import List

from fxconvert.domain.currencies import currency_name
from fxconvert.domain.models import ConversionResult

LIVE_SOURCE = "Live rates · currency-api"


def _trim(text: str) -> str:
    """Drop trailing fractional zeros (and a dangling point)."""
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_amount(value: float, code: str) -> str:
    """
    Format a converted amount with thousands separators and 2 decimals.

    Example:
        format_amount(1630.5, "CZK") -> "1,630.50 CZK"
    """
    return f"{value:,.2f} {code}"


def format_rate_line(from_code: str, to_code: str, rate: float) -> str:
    """
    Format the per-unit rate with up to 6 decimals.

    Example:
        format_rate_line("JPY", "USD", 0.00665) -> "1 JPY = 0.00665 USD"
    """
    return f"1 {from_code} = {_trim(f'{rate:,.6f}')} {to_code}"


def format_currency_option(code: str) -> str:
    """Label for a currency picker entry, e.g. "CZK — Czech Koruna"."""
    return f"{code} — {currency_name(code)}"


def format_source_line(result: ConversionResult) -> str:
    if result.stale:
        return f"Offline — cached rates from {result.as_of_date}"
    return LIVE_SOURCE


def format_result(result: ConversionResult, amount: float, from_code: str, to_code: str) -> str:
    """
    Format a conversion result as plain text lines.

    Same-currency results echo the amount followed by the source line;
    errors return the message.

    Args:
        result: Result returned by CurrencyConverter.convert
        amount: The amount the user entered
        from_code: Source currency code
        to_code: Target currency code

    Returns:
        Multi-line string for display
    """
    if not result.ok:
        return result.message or ""

    if from_code == to_code:
        return "\n".join([f"{_trim(f'{amount:,.3f}')} {from_code}", format_source_line(result)])

    lines: List[str] = [
        format_amount(result.converted, to_code),
        format_rate_line(from_code, to_code, result.rate),
        format_source_line(result),
    ]
    return "\n".join(lines)
