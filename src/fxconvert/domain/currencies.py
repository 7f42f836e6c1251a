# src/fxconvert/domain/currencies.py
"""
Currency Catalog - Known Currency Codes and Bootstrap Rates

Fixed set of currency codes the converter knows about, their display
names, and the seed rates inserted into the cache on first run so that
common pairs convert even before any successful online fetch.

Files that USE this module:
- fxconvert.application.rate_store (SEED_RATES for cache bootstrap)
- fxconvert.shared.validators (VALID_CODES for code validation)
- fxconvert.adapters.formatting.formatter (currency_name)

Files that this module USES:
- None (pure constants)
"""
from __future__ import annotations

from typing import Dict, Tuple

CURRENCIES: Dict[str, str] = {
    "AUD": "Australian Dollar",
    "BGN": "Bulgarian Lev",
    "BRL": "Brazilian Real",
    "CAD": "Canadian Dollar",
    "CHF": "Swiss Franc",
    "CNY": "Chinese Renminbi Yuan",
    "CZK": "Czech Koruna",
    "DKK": "Danish Krone",
    "EUR": "Euro",
    "GBP": "British Pound",
    "HKD": "Hong Kong Dollar",
    "HUF": "Hungarian Forint",
    "IDR": "Indonesian Rupiah",
    "ILS": "Israeli New Sheqel",
    "INR": "Indian Rupee",
    "ISK": "Icelandic Krona",
    "JPY": "Japanese Yen",
    "KRW": "South Korean Won",
    "MXN": "Mexican Peso",
    "MYR": "Malaysian Ringgit",
    "NOK": "Norwegian Krone",
    "NZD": "New Zealand Dollar",
    "PHP": "Philippine Peso",
    "PLN": "Polish Zloty",
    "RON": "Romanian Leu",
    "SEK": "Swedish Krona",
    "SGD": "Singapore Dollar",
    "THB": "Thai Baht",
    "TRY": "Turkish Lira",
    "USD": "US Dollar",
    "ZAR": "South African Rand",
}

VALID_CODES = frozenset(CURRENCIES)

DEFAULT_FROM = "JPY"
DEFAULT_TO = "CZK"
DEFAULT_AMOUNT = "1"

# (from, to, rate, date); only used for pairs never fetched online
SEED_RATES: Tuple[Tuple[str, str, float, str], ...] = (
    ("JPY", "CZK", 0.163, "2026-02-01"),
    ("EUR", "CZK", 25.15, "2026-02-01"),
    ("USD", "CZK", 23.45, "2026-02-01"),
    ("EUR", "USD", 1.048, "2026-02-01"),
    ("EUR", "JPY", 157.5, "2026-02-01"),
    ("JPY", "USD", 0.00665, "2026-02-01"),
)


def currency_name(code: str) -> str:
    """Display name for a code, or the code itself when unknown."""
    return CURRENCIES.get(code, code)
