# src/fxconvert/app.py
"""
Application Entry Point - Converter Composition Root

This module wires the converter's dependencies: the two currency-api
providers, the rate store on top of a durable key-value store, and the
conversion orchestrator. Hosts either build their own converter with
build_converter() or call the module-level convert(), which lazily
builds a process-wide converter on first use.

Files that USE this module:
- Host applications (convert, build_converter, configure_logging)
- tests.test_app (unit tests)

Files that this module USES:
- fxconvert.config (settings for cache location, timeout, logging)
- fxconvert.shared.logging_conf (setup_logging)
- fxconvert.adapters.providers.currency_api (primary and fallback providers)
- fxconvert.adapters.persistence.key_value (JsonFileKeyValueStore)
- fxconvert.application (RateSource, RateStore, CurrencyConverter)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
from typing import List, Optional, Sequence  # Type hints

from fxconvert.config import settings  # Deployment settings
from fxconvert.shared.logging_conf import setup_logging  # Configure logging with file rotation
from fxconvert.adapters.providers.base import RateProvider  # Provider interface
from fxconvert.adapters.providers.currency_api import fallback_provider, primary_provider
from fxconvert.adapters.persistence.key_value import JsonFileKeyValueStore, KeyValueStore
from fxconvert.application.rate_source import RateSource
from fxconvert.application.rate_store import RateStore
from fxconvert.application.converter import CurrencyConverter
from fxconvert.domain.currencies import DEFAULT_AMOUNT, DEFAULT_FROM, DEFAULT_TO
from fxconvert.domain.models import ConversionResult

log = logging.getLogger(__name__)

_converter: Optional[CurrencyConverter] = None


def configure_logging(level=logging.INFO) -> None:
    """Configure logging from settings."""
    setup_logging(
        level=level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )


def default_providers() -> List[RateProvider]:
    """Primary jsDelivr mirror first, pages.dev mirror as the single fallback."""
    timeout = settings.http_timeout_seconds
    return [primary_provider(timeout=timeout), fallback_provider(timeout=timeout)]


def build_converter(
    kv: Optional[KeyValueStore] = None,
    providers: Optional[Sequence[RateProvider]] = None,
) -> CurrencyConverter:
    """
    Build a converter and seed its rate cache.

    Args:
        kv: Key-value store for the rate cache (defaults to the JSON file at settings.cache_file)
        providers: Providers in fallback order (defaults to default_providers())

    Returns:
        Ready-to-use CurrencyConverter
    """
    if kv is None:
        kv = JsonFileKeyValueStore(settings.cache_file)
        log.info("Using rate cache file %s", settings.cache_file)
    store = RateStore(kv)
    store.seed()
    source = RateSource(providers if providers is not None else default_providers())
    return CurrencyConverter(source, store)


def get_converter() -> CurrencyConverter:
    """Return the process-wide converter, building it on first access."""
    global _converter
    if _converter is None:
        _converter = build_converter()
    return _converter


async def convert(
    amount: str = DEFAULT_AMOUNT,
    from_code: str = DEFAULT_FROM,
    to_code: str = DEFAULT_TO,
) -> ConversionResult:
    """Convert using the process-wide converter; defaults to 1 JPY -> CZK."""
    return await get_converter().convert(amount, from_code, to_code)
