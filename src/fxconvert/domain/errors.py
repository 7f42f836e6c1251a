# src/fxconvert/domain/errors.py
"""
Domain Errors - Conversion Failure Taxonomy

This module defines domain-specific exceptions raised while resolving
exchange rates and converting amounts.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ProviderUnreachableError(DomainError):
    """Raised when a single rate provider cannot supply a usable rate."""
    pass


class RateUnavailableError(ProviderUnreachableError):
    """Raised when every provider in the chain failed."""
    pass


class CacheMissError(DomainError):
    """Raised when no cached rate exists for a pair."""
    pass


class InvalidAmountError(DomainError):
    """Raised when an amount is empty, non-numeric, or not positive."""
    pass
