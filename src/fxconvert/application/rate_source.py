# src/fxconvert/application/rate_source.py
"""
Rate Source - Live Rate Resolution with Provider Fallback

Resolves an ordered currency pair to a fresh RateEntry by asking each
configured provider in turn. With the default wiring that is the primary
currency-api mirror followed by exactly one fallback mirror. The first
provider that answers wins; if none does, a single opaque
RateUnavailableError is raised.

Providers use blocking HTTP, so each attempt runs in the event loop's
default executor and the coroutine suspends until it completes.

Files that USE this module:
- fxconvert.application.converter (CurrencyConverter calls resolve)
- fxconvert.app (wires providers into a RateSource)
- tests.test_rate_source (unit tests)

Files that this module USES:
- fxconvert.adapters.providers.base (RateProvider interface)
- fxconvert.domain (RateEntry, ProviderUnreachableError, RateUnavailableError)
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from fxconvert.adapters.providers.base import RateProvider
from fxconvert.domain.errors import ProviderUnreachableError, RateUnavailableError
from fxconvert.domain.models import RateEntry

log = logging.getLogger(__name__)


class RateSource:
    def __init__(self, providers: Sequence[RateProvider]):
        """
        Args:
            providers: Providers in the order they are tried
        """
        if not providers:
            raise ValueError("RateSource needs at least one provider")
        self.providers: List[RateProvider] = list(providers)
        self.last_used_provider: Optional[str] = None

    async def resolve(self, from_code: str, to_code: str) -> RateEntry:
        """
        Fetch the live rate for ``from_code`` -> ``to_code``.

        Providers are tried strictly in order, never concurrently.

        Raises:
            RateUnavailableError: If every provider failed
        """
        loop = asyncio.get_running_loop()
        for provider in self.providers:
            try:
                entry = await loop.run_in_executor(None, provider.fetch_rate, from_code, to_code)
            except ProviderUnreachableError as e:
                log.warning("Provider %s failed for %s->%s: %s", provider.name, from_code, to_code, e)
                continue
            except Exception as e:
                log.error("Provider %s raised unexpectedly for %s->%s: %s",
                          provider.name, from_code, to_code, e, exc_info=True)
                continue
            self.last_used_provider = provider.name
            return entry

        log.error("All providers failed for %s->%s", from_code, to_code)
        raise RateUnavailableError(f"Rate unavailable for {from_code}->{to_code}")
