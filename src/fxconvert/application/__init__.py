# src/fxconvert/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the rate-resolution engine and the conversion
orchestration built on top of it.
"""

from fxconvert.application.rate_source import RateSource
from fxconvert.application.rate_store import CACHE_KEY, RateStore
from fxconvert.application.converter import FAILURE_MESSAGE, CurrencyConverter

__all__ = [
    "RateSource",
    "RateStore",
    "CACHE_KEY",
    "CurrencyConverter",
    "FAILURE_MESSAGE",
]
