# tests/test_converter.py
"""
Converter Tests - Unit Tests for Conversion Orchestration

This module tests CurrencyConverter end to end with fake providers and an
in-memory cache: live success, fallback, stale results from the cache,
hard failure, same-currency short-circuit and input rejection.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxconvert.application (CurrencyConverter, RateSource, RateStore)
- fxconvert.adapters.persistence.key_value (InMemoryKeyValueStore)
"""
import asyncio

import pytest

from unittest.mock import Mock

from fxconvert.adapters.persistence.key_value import InMemoryKeyValueStore
from fxconvert.application.converter import FAILURE_MESSAGE, CurrencyConverter
from fxconvert.application.rate_source import RateSource
from fxconvert.application.rate_store import RateStore
from fxconvert.domain.errors import ProviderUnreachableError
from fxconvert.domain.models import ConverterState, RateEntry


def _provider(name, result=None, error=None):
    provider = Mock()
    provider.name = name
    if error is not None:
        provider.fetch_rate.side_effect = error
    else:
        provider.fetch_rate.return_value = result
    return provider


def _down(name):
    return _provider(name, error=ProviderUnreachableError("HTTP 503"))


def _converter(primary, fallback, kv=None):
    store = RateStore(kv if kv is not None else InMemoryKeyValueStore())
    return CurrencyConverter(RateSource([primary, fallback]), store)


class TestLiveConversion:
    def test_primary_rate_used_and_cached(self):
        primary = _provider("primary", RateEntry(0.163, "2026-02-01"))
        converter = _converter(primary, _down("fallback"))

        result = asyncio.run(converter.convert("1000", "JPY", "CZK"))

        assert result.status == "ok"
        assert result.converted == pytest.approx(163.0)
        assert result.rate == 0.163
        assert converter.state is ConverterState.SUCCEEDED_LIVE
        assert converter.store.get("JPY", "CZK") == RateEntry(0.163, "2026-02-01")

    def test_secondary_used_when_primary_fails(self):
        fallback = _provider("fallback", RateEntry(1.05, "2026-03-01"))
        converter = _converter(_down("primary"), fallback)

        result = asyncio.run(converter.convert("10", "EUR", "USD"))

        assert result.status == "ok"
        assert result.rate == 1.05
        assert result.converted == pytest.approx(10.5)
        assert not result.stale

    def test_codes_are_normalized(self):
        primary = _provider("primary", RateEntry(25.0, "2026-03-01"))
        converter = _converter(primary, _down("fallback"))

        result = asyncio.run(converter.convert("2", " eur", "czk "))

        assert result.converted == pytest.approx(50.0)
        primary.fetch_rate.assert_called_once_with("EUR", "CZK")


class TestOfflineConversion:
    def test_stale_result_from_previous_put(self):
        converter = _converter(_down("primary"), _down("fallback"))
        converter.store.put("GBP", "CZK", 0.163, "2026-02-01")

        result = asyncio.run(converter.convert("200", "GBP", "CZK"))

        assert result.status == "ok-stale"
        assert result.converted == pytest.approx(200 * 0.163)
        assert result.as_of_date == "2026-02-01"
        assert converter.state is ConverterState.SUCCEEDED_CACHED

    def test_stale_result_from_seed(self):
        converter = _converter(_down("primary"), _down("fallback"))
        converter.store.seed()

        result = asyncio.run(converter.convert("100", "EUR", "CZK"))

        assert result.to_dict() == {
            "status": "ok-stale",
            "converted": pytest.approx(2515.0),
            "rate": 25.15,
            "asOfDate": "2026-02-01",
        }

    def test_hard_failure_without_cache(self):
        kv = InMemoryKeyValueStore()
        kv.set = Mock(wraps=kv.set)
        converter = _converter(_down("primary"), _down("fallback"), kv)

        result = asyncio.run(converter.convert("5", "GBP", "CZK"))

        assert result.to_dict() == {"status": "error", "message": FAILURE_MESSAGE}
        assert converter.state is ConverterState.FAILED
        kv.set.assert_not_called()


class TestShortCircuits:
    def test_same_currency_needs_no_network(self):
        primary = _provider("primary")
        fallback = _provider("fallback")
        converter = _converter(primary, fallback)

        result = asyncio.run(converter.convert("42.5", "USD", "USD"))

        assert result.status == "ok"
        assert result.converted == 42.5
        assert result.rate == 1
        primary.fetch_rate.assert_not_called()
        fallback.fetch_rate.assert_not_called()

    @pytest.mark.parametrize("amount", ["0", "", "abc", "-5", "1.2.3", "1e5", None])
    def test_invalid_amount_is_rejected_without_side_effects(self, amount):
        kv = InMemoryKeyValueStore()
        kv.set = Mock(wraps=kv.set)
        primary = _provider("primary", RateEntry(0.163, "2026-02-01"))
        converter = _converter(primary, _down("fallback"), kv)

        result = asyncio.run(converter.convert(amount, "JPY", "CZK"))

        assert result.status == "error"
        assert converter.state is ConverterState.IDLE
        assert converter.last_result is None
        primary.fetch_rate.assert_not_called()
        kv.set.assert_not_called()

    def test_unknown_currency_is_rejected(self):
        primary = _provider("primary", RateEntry(1.0, "2026-02-01"))
        converter = _converter(primary, _down("fallback"))

        result = asyncio.run(converter.convert("1", "XAU", "USD"))

        assert result.status == "error"
        assert "XAU" in result.message
        primary.fetch_rate.assert_not_called()
