# src/fxconvert/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models, the currency catalog and errors.
No dependencies on infrastructure or external systems.
"""

from fxconvert.domain.models import (
    ConversionResult,
    ConverterState,
    RateEntry,
    pair_key,
)
from fxconvert.domain.errors import (
    CacheMissError,
    DomainError,
    InvalidAmountError,
    ProviderUnreachableError,
    RateUnavailableError,
)
from fxconvert.domain.currencies import CURRENCIES, SEED_RATES, VALID_CODES, currency_name

__all__ = [
    "RateEntry",
    "ConversionResult",
    "ConverterState",
    "pair_key",
    "DomainError",
    "ProviderUnreachableError",
    "RateUnavailableError",
    "CacheMissError",
    "InvalidAmountError",
    "CURRENCIES",
    "VALID_CODES",
    "SEED_RATES",
    "currency_name",
]
