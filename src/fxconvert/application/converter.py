# src/fxconvert/application/converter.py
"""
Currency Converter - Conversion Orchestration

Drives one conversion request through its lifecycle:

    IDLE -> RESOLVING -> SUCCEEDED_LIVE | SUCCEEDED_CACHED | FAILED

Same-currency requests short-circuit with rate 1.0. Otherwise the live
rate is resolved and cached; if no provider answers, the last cached rate
is used and the result is flagged stale. Only when the cache has nothing
for the pair does the conversion fail.

The converter does not guard against overlapping calls; hosts are
expected to disable repeated submits while one is in flight.

Files that USE this module:
- fxconvert.app (build_converter, convert)
- tests.test_converter (unit tests)

Files that this module USES:
- fxconvert.application.rate_source (RateSource)
- fxconvert.application.rate_store (RateStore)
- fxconvert.shared.validators (amount and code validation)
- fxconvert.domain (ConversionResult, ConverterState, errors)
"""
from __future__ import annotations

import logging
from typing import Optional

from fxconvert.application.rate_source import RateSource
from fxconvert.application.rate_store import RateStore
from fxconvert.domain.errors import CacheMissError, InvalidAmountError, RateUnavailableError
from fxconvert.domain.models import ConversionResult, ConverterState
from fxconvert.shared.validators import (
    normalize_currency_code,
    parse_amount,
    validate_currency_code,
)

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Conversion failed and no cached data available."


class CurrencyConverter:
    """Converts amounts using live rates with a cached offline fallback."""

    def __init__(self, source: RateSource, store: RateStore):
        self.source = source
        self.store = store
        self.state = ConverterState.IDLE
        self.last_result: Optional[ConversionResult] = None

    def _finish(self, state: ConverterState, result: ConversionResult) -> ConversionResult:
        self.state = state
        self.last_result = result
        return result

    async def convert(self, amount: str, from_code: str, to_code: str) -> ConversionResult:
        """
        Convert ``amount`` from one currency to another.

        Args:
            amount: Positive decimal string, e.g. "1" or "12.50"
            from_code: Source currency code
            to_code: Target currency code

        Returns:
            ConversionResult with status "ok", "ok-stale" or "error".
            Invalid input yields an error result without touching the
            providers, the cache or the converter state.
        """
        try:
            value = parse_amount(amount)
        except InvalidAmountError as e:
            logger.debug("Rejected amount %r: %s", amount, e)
            return ConversionResult.error(str(e))

        from_code = normalize_currency_code(from_code)
        to_code = normalize_currency_code(to_code)
        for code in (from_code, to_code):
            if not validate_currency_code(code):
                logger.debug("Rejected unknown currency code %r", code)
                return ConversionResult.error(f"Unknown currency code: {code!r}")

        if from_code == to_code:
            return self._finish(ConverterState.SUCCEEDED_LIVE, ConversionResult.live(value, 1.0))

        self.state = ConverterState.RESOLVING
        try:
            entry = await self.source.resolve(from_code, to_code)
        except RateUnavailableError:
            return self._from_cache(value, from_code, to_code)

        self.store.put(from_code, to_code, entry.rate, entry.date)
        return self._finish(
            ConverterState.SUCCEEDED_LIVE,
            ConversionResult.live(value * entry.rate, entry.rate),
        )

    def _from_cache(self, value: float, from_code: str, to_code: str) -> ConversionResult:
        try:
            cached = self.store.require(from_code, to_code)
        except CacheMissError as e:
            logger.error("Conversion %s->%s failed: %s", from_code, to_code, e)
            return self._finish(ConverterState.FAILED, ConversionResult.error(FAILURE_MESSAGE))

        logger.info("Using cached %s->%s rate from %s", from_code, to_code, cached.date)
        return self._finish(
            ConverterState.SUCCEEDED_CACHED,
            ConversionResult.cached(value * cached.rate, cached.rate, cached.date),
        )
