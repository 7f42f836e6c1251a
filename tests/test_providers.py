# tests/test_providers.py
"""
Provider Tests - Unit Tests for the currency-api Provider

This module contains unit tests for CurrencyApiProvider and the RateTable
decode step. It tests URL construction, HTTP error handling, payload
decoding and rate extraction.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxconvert.adapters.providers.currency_api (CurrencyApiProvider, RateTable)
- unittest.mock (Mock for API mocking)
- pytest (testing framework)
"""
import json  # Decode bodies carrying NaN/Infinity tokens

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking exceptions)

from fxconvert.adapters.providers.currency_api import (
    FALLBACK_URL,
    PRIMARY_URL,
    CurrencyApiProvider,
    RateTable,
    fallback_provider,
    primary_provider,
)
from fxconvert.domain.errors import ProviderUnreachableError
from fxconvert.domain.models import RateEntry


def _response(payload=None, status=200, json_error=None):
    resp = Mock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


JPY_TABLE = {"date": "2026-02-01", "jpy": {"czk": 0.163, "usd": 0.00665, "eur": 0.0}}


class TestCurrencyApiProviderInit:
    def test_primary_and_fallback_urls(self):
        assert primary_provider().url_for("JPY") == (
            "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1/currencies/jpy.json"
        )
        assert fallback_provider().url_for("JPY") == (
            "https://latest.currency-api.pages.dev/v1/currencies/jpy.json"
        )

    def test_default_timeout_is_transport_default(self):
        provider = CurrencyApiProvider("test", PRIMARY_URL)
        assert provider.timeout is None

    def test_custom_timeout(self):
        provider = CurrencyApiProvider("test", FALLBACK_URL, timeout=5)
        assert provider.timeout == 5

    def test_template_without_placeholder(self):
        with pytest.raises(ValueError, match="placeholder"):
            CurrencyApiProvider("bad", "https://example.com/rates.json")


class TestFetchRate:
    @patch('fxconvert.adapters.providers.currency_api.requests.get')
    def test_success(self, mock_get):
        mock_get.return_value = _response(JPY_TABLE)

        provider = CurrencyApiProvider("test", "https://example.com/{base}.json")
        entry = provider.fetch_rate("JPY", "CZK")

        assert entry == RateEntry(rate=0.163, date="2026-02-01")
        mock_get.assert_called_once_with("https://example.com/jpy.json", timeout=None)

    @patch('fxconvert.adapters.providers.currency_api.requests.get')
    def test_non_success_status_does_not_parse_body(self, mock_get):
        resp = _response(JPY_TABLE, status=503)
        mock_get.return_value = resp

        provider = CurrencyApiProvider("test", PRIMARY_URL)
        with pytest.raises(ProviderUnreachableError, match="HTTP 503"):
            provider.fetch_rate("JPY", "CZK")
        resp.json.assert_not_called()

    @patch('fxconvert.adapters.providers.currency_api.requests.get')
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("offline")

        provider = CurrencyApiProvider("test", PRIMARY_URL)
        with pytest.raises(ProviderUnreachableError, match="request failed"):
            provider.fetch_rate("JPY", "CZK")

    @patch('fxconvert.adapters.providers.currency_api.requests.get')
    def test_invalid_json(self, mock_get):
        mock_get.return_value = _response(json_error=ValueError("Expecting value"))

        provider = CurrencyApiProvider("test", PRIMARY_URL)
        with pytest.raises(ProviderUnreachableError, match="invalid JSON"):
            provider.fetch_rate("JPY", "CZK")

    @patch('fxconvert.adapters.providers.currency_api.requests.get')
    def test_missing_target_code(self, mock_get):
        mock_get.return_value = _response(JPY_TABLE)

        provider = CurrencyApiProvider("test", PRIMARY_URL)
        with pytest.raises(ProviderUnreachableError, match="no rate"):
            provider.fetch_rate("JPY", "GBP")

    @patch('fxconvert.adapters.providers.currency_api.requests.get')
    def test_zero_rate_counts_as_missing(self, mock_get):
        mock_get.return_value = _response(JPY_TABLE)

        provider = CurrencyApiProvider("test", PRIMARY_URL)
        with pytest.raises(ProviderUnreachableError, match="no rate"):
            provider.fetch_rate("JPY", "EUR")

    @patch('fxconvert.adapters.providers.currency_api.requests.get')
    def test_table_for_other_base(self, mock_get):
        mock_get.return_value = _response({"date": "2026-02-01", "usd": {"czk": 23.45}})

        provider = CurrencyApiProvider("test", PRIMARY_URL)
        with pytest.raises(ProviderUnreachableError):
            provider.fetch_rate("JPY", "CZK")


class TestRateTable:
    def test_decode(self):
        table = RateTable.from_payload(JPY_TABLE, "jpy")
        assert table.date == "2026-02-01"
        assert table.rate_for("usd") == 0.00665

    def test_non_object_payload(self):
        with pytest.raises(ProviderUnreachableError, match="expected JSON object"):
            RateTable.from_payload(["not", "a", "table"], "jpy")

    def test_missing_date(self):
        with pytest.raises(ProviderUnreachableError, match="unexpected rate table shape"):
            RateTable.from_payload({"jpy": {"czk": 0.163}}, "jpy")

    def test_base_not_a_mapping(self):
        with pytest.raises(ProviderUnreachableError):
            RateTable.from_payload({"date": "2026-02-01", "jpy": "0.163"}, "jpy")

    def test_non_numeric_rate(self):
        table = RateTable.from_payload({"date": "2026-02-01", "jpy": {"czk": "0.163"}}, "jpy")
        with pytest.raises(ProviderUnreachableError):
            table.rate_for("czk")

    def test_negative_rate(self):
        table = RateTable.from_payload({"date": "2026-02-01", "jpy": {"czk": -1}}, "jpy")
        with pytest.raises(ProviderUnreachableError, match="invalid rate"):
            table.rate_for("czk")

    def test_integer_rate_is_float(self):
        table = RateTable.from_payload({"date": "2026-02-01", "eur": {"eur": 1}}, "eur")
        assert table.rate_for("eur") == 1.0
        assert isinstance(table.rate_for("eur"), float)

    @pytest.mark.parametrize("code", ["czk", "usd", "eur"])
    def test_non_finite_rates_rejected(self, code):
        payload = json.loads('{"date": "2026-02-01", "jpy": {"czk": NaN, "usd": Infinity, "eur": -Infinity}}')
        table = RateTable.from_payload(payload, "jpy")
        with pytest.raises(ProviderUnreachableError, match="invalid rate"):
            table.rate_for(code)


class TestNonFiniteResponse:
    @patch('fxconvert.adapters.providers.currency_api.requests.get')
    def test_nan_body_fails_provider(self, mock_get):
        mock_get.return_value = _response(json.loads('{"date": "2026-02-01", "jpy": {"czk": NaN}}'))

        provider = CurrencyApiProvider("test", PRIMARY_URL)
        with pytest.raises(ProviderUnreachableError):
            provider.fetch_rate("JPY", "CZK")
