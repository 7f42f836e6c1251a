# src/fxconvert/application/rate_store.py
"""
Rate Store - Persistent Last-Known-Rate Cache

Keeps the most recent successfully resolved rate for every ordered pair so
conversions keep working offline. The whole cache is one JSON object kept
under a single key of a KeyValueStore:

    {"JPY_CZK": {"rate": 0.163, "date": "2026-02-01"}, ...}

Entries never expire. On first start the cache is seeded with a small
bootstrap table for pairs that were never fetched online.

Durability is best-effort: storage write failures are logged and
swallowed, and an unreadable cache blob is treated as empty.

Files that USE this module:
- fxconvert.application.converter (put on live success, require on failure)
- fxconvert.app (seed at startup)
- tests.test_rate_store (unit tests)

Files that this module USES:
- fxconvert.adapters.persistence.key_value (KeyValueStore capability)
- fxconvert.domain (RateEntry, pair_key, SEED_RATES, CacheMissError)
"""
from __future__ import annotations

import json
import logging
from typing import Dict, Iterable, Optional, Tuple

from fxconvert.adapters.persistence.key_value import KeyValueStore
from fxconvert.domain.currencies import SEED_RATES
from fxconvert.domain.errors import CacheMissError
from fxconvert.domain.models import RateEntry, pair_key

logger = logging.getLogger(__name__)

CACHE_KEY = "fx_cache"


class RateStore:
    """Pair-keyed rate cache on top of a KeyValueStore."""

    def __init__(
        self,
        kv: KeyValueStore,
        seed_rates: Iterable[Tuple[str, str, float, str]] = SEED_RATES,
        cache_key: str = CACHE_KEY,
    ):
        self.kv = kv
        self.seed_rates = tuple(seed_rates)
        self.cache_key = cache_key

    def _read_cache(self) -> Dict[str, dict]:
        """
        Read the cache mapping from storage.

        A missing or corrupt blob reads as an empty mapping. Errors raised
        by the storage backend itself propagate.
        """
        raw = self.kv.get(self.cache_key)
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning("Rate cache is corrupt, treating as empty: %s", e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Rate cache is not a mapping (%s), treating as empty", type(data).__name__)
            return {}
        return data

    def _write_cache(self, cache: Dict[str, dict]) -> None:
        self.kv.set(self.cache_key, json.dumps(cache))

    def put(self, from_code: str, to_code: str, rate: float, date: str) -> None:
        """
        Upsert the rate for a pair.

        Never raises: a failed write only costs offline availability of
        this rate later on.
        """
        key = pair_key(from_code, to_code)
        try:
            cache = self._read_cache()
            cache[key] = RateEntry(rate=rate, date=date).to_json()
            self._write_cache(cache)
            logger.debug("Cached %s = %s (date=%s)", key, rate, date)
        except Exception as e:
            logger.error("Failed to persist rate %s: %s", key, e)

    def get(self, from_code: str, to_code: str) -> Optional[RateEntry]:
        """
        Return the cached rate for a pair, or None if it was never stored.
        """
        key = pair_key(from_code, to_code)
        try:
            cache = self._read_cache()
        except Exception as e:
            logger.error("Failed to read rate cache: %s", e)
            return None
        return RateEntry.from_json(cache.get(key))

    def require(self, from_code: str, to_code: str) -> RateEntry:
        """
        Like get, but raise when the pair is not cached.

        Raises:
            CacheMissError: If no entry exists for the pair
        """
        entry = self.get(from_code, to_code)
        if entry is None:
            raise CacheMissError(f"No cached rate for {pair_key(from_code, to_code)}")
        return entry

    def seed(self) -> int:
        """
        Insert bootstrap rates for pairs not already cached.

        Writes at most once, and not at all when every seed pair is present,
        so calling it on every start is cheap and never clobbers live rates.

        Returns:
            Number of pairs inserted
        """
        try:
            cache = self._read_cache()
            inserted = 0
            for from_code, to_code, rate, date in self.seed_rates:
                key = pair_key(from_code, to_code)
                if RateEntry.from_json(cache.get(key)) is None:
                    cache[key] = RateEntry(rate=rate, date=date).to_json()
                    inserted += 1
            if inserted:
                self._write_cache(cache)
                logger.info("Seeded rate cache with %d bootstrap pair(s)", inserted)
            return inserted
        except Exception as e:
            logger.error("Failed to seed rate cache: %s", e)
            return 0
