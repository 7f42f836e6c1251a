# src/fxconvert/adapters/providers/base.py
"""
Base Provider Interface for Exchange Rate Providers

This module defines the abstract base class for all exchange rate providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- fxconvert.adapters.providers.currency_api (CurrencyApiProvider implements RateProvider)
- fxconvert.application.rate_source (RateSource walks a list of RateProvider)

Files that this module USES:
- fxconvert.domain.models (RateEntry)
"""
from abc import ABC, abstractmethod

from fxconvert.domain.models import RateEntry


class RateProvider(ABC):
    name: str = "provider"

    @abstractmethod
    def fetch_rate(self, from_code: str, to_code: str) -> RateEntry:
        """
        Return the rate for an ordered pair.

        Raises ProviderUnreachableError on any failure.
        """
        raise NotImplementedError
