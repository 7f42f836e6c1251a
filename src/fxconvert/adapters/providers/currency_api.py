# src/fxconvert/adapters/providers/currency_api.py
"""
currency-api Provider for Daily Exchange Rate Tables

This module implements a client for the free currency-api daily tables.
Each request returns the full rate table for one base currency:

    GET <host>/v1/currencies/{base}.json
    {"date": "2026-02-01", "jpy": {"czk": 0.163, "usd": 0.00665, ...}}

The same client serves both the jsDelivr CDN mirror (primary) and the
pages.dev mirror (fallback); only the URL template differs.

Files that USE this module:
- fxconvert.app (default_providers builds primary and fallback instances)
- tests.test_providers (unit tests)

Files that this module USES:
- fxconvert.adapters.providers.base (RateProvider interface)
- fxconvert.config (settings for HTTP timeout)
- fxconvert.domain (RateEntry, ProviderUnreachableError)
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

import requests
from pydantic import BaseModel, ValidationError

from fxconvert.adapters.providers.base import RateProvider
from fxconvert.config import settings
from fxconvert.domain.errors import ProviderUnreachableError
from fxconvert.domain.models import RateEntry

log = logging.getLogger(__name__)

PRIMARY_URL = "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1/currencies/{base}.json"
FALLBACK_URL = "https://latest.currency-api.pages.dev/v1/currencies/{base}.json"


class RateTable(BaseModel):
    """Decoded provider response: one base currency, one effective date."""
    date: str
    rates: Dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Any, base: str) -> "RateTable":
        """
        Decode a raw JSON payload for ``base`` (lowercase).

        Raises:
            ProviderUnreachableError: If the payload does not have the expected shape
        """
        if not isinstance(payload, dict):
            raise ProviderUnreachableError(f"expected JSON object, got {type(payload).__name__}")
        try:
            return cls(date=payload.get("date"), rates=payload.get(base))
        except ValidationError as e:
            raise ProviderUnreachableError(f"unexpected rate table shape: {e.error_count()} error(s)") from e

    def rate_for(self, code: str) -> float:
        """
        Rate for a lowercase target code.

        A missing, non-numeric or zero value counts as absent; negative
        and non-finite values are rejected.

        Raises:
            ProviderUnreachableError: If the code has no usable rate
        """
        value = self.rates.get(code)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
            raise ProviderUnreachableError(f"no rate for {code!r}")
        if value < 0 or not math.isfinite(value):
            raise ProviderUnreachableError(f"invalid rate for {code!r}: {value}")
        return float(value)


class CurrencyApiProvider(RateProvider):
    def __init__(self, name: str, url_template: str, timeout: Optional[int] = None):
        """
        Initialize currency-api provider.

        Args:
            name: Short provider name used in logs
            url_template: URL with a ``{base}`` placeholder for the lowercase base code
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        if "{base}" not in url_template:
            raise ValueError("url_template must contain a {base} placeholder")
        self.name = name
        self.url_template = url_template
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds

    def url_for(self, base: str) -> str:
        return self.url_template.format(base=base.lower())

    def get_table(self, base: str) -> RateTable:
        """
        Fetch and decode the rate table for a base currency.

        Raises:
            ProviderUnreachableError: On network error, non-2xx status or bad payload
        """
        base = base.lower()
        url = self.url_for(base)
        try:
            log.debug("Fetching %s rate table from %s", base, self.name)
            resp = requests.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ProviderUnreachableError(f"{self.name} request failed: {e}") from e

        # Body is not parsed for error statuses
        if not resp.ok:
            raise ProviderUnreachableError(f"{self.name} returned HTTP {resp.status_code}")

        try:
            payload = resp.json()
        except ValueError as e:
            raise ProviderUnreachableError(f"{self.name} returned invalid JSON") from e

        return RateTable.from_payload(payload, base)

    def fetch_rate(self, from_code: str, to_code: str) -> RateEntry:
        table = self.get_table(from_code)
        rate = table.rate_for(to_code.lower())
        log.info("%s: 1 %s = %s %s (date=%s)", self.name, from_code, rate, to_code, table.date)
        return RateEntry(rate=rate, date=table.date)


def primary_provider(timeout: Optional[int] = None) -> CurrencyApiProvider:
    return CurrencyApiProvider("jsdelivr", PRIMARY_URL, timeout=timeout)


def fallback_provider(timeout: Optional[int] = None) -> CurrencyApiProvider:
    return CurrencyApiProvider("pages.dev", FALLBACK_URL, timeout=timeout)
