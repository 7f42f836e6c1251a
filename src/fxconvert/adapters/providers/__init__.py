# src/fxconvert/adapters/providers/__init__.py
"""
Provider Adapters - External API Clients

This package contains adapters for external exchange rate APIs.
All providers implement the RateProvider interface.
"""

from fxconvert.adapters.providers.base import RateProvider
from fxconvert.adapters.providers.currency_api import (
    CurrencyApiProvider,
    RateTable,
    fallback_provider,
    primary_provider,
)

__all__ = [
    "RateProvider",
    "CurrencyApiProvider",
    "RateTable",
    "primary_provider",
    "fallback_provider",
]
