# src/fxconvert/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core conversion concepts:
- Exchange rate entries for a currency pair
- Conversion results (live, stale, error)
- Converter lifecycle states

Files that USE this module:
- fxconvert.application.* (all services use domain models)
- fxconvert.adapters.* (adapters create and use domain models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # Finite-rate checks
from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Enumerations for result status and converter state
from typing import Any, Dict, Optional  # Type hints


STATUS_OK = "ok"
STATUS_OK_STALE = "ok-stale"
STATUS_ERROR = "error"


def pair_key(from_code: str, to_code: str) -> str:
    """Cache key for an ordered currency pair, e.g. ``JPY_CZK``."""
    return f"{from_code}_{to_code}"


@dataclass(frozen=True)
class RateEntry:
    """
    Exchange rate for an ordered pair.

    Attributes:
        rate: Multiplier such that amount_in_to = amount_in_from * rate
        date: Effective date published by the provider (YYYY-MM-DD)
    """
    rate: float
    date: str

    def to_json(self) -> dict:
        return {"rate": self.rate, "date": self.date}

    @staticmethod
    def from_json(data: Any) -> Optional["RateEntry"]:
        """
        Build a RateEntry from a persisted mapping.

        Returns None for anything that is not a ``{rate > 0 finite, date: str}`` mapping.
        """
        if not isinstance(data, dict):
            return None
        rate = data.get("rate")
        date = data.get("date")
        if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not math.isfinite(rate) or rate <= 0:
            return None
        if not isinstance(date, str):
            return None
        return RateEntry(rate=float(rate), date=date)


class ConverterState(str, Enum):
    """Lifecycle of a single conversion request."""
    IDLE = "idle"
    RESOLVING = "resolving"
    SUCCEEDED_LIVE = "succeeded_live"
    SUCCEEDED_CACHED = "succeeded_cached"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a conversion.

    Attributes:
        status: "ok", "ok-stale" or "error"
        converted: Converted amount (None on error)
        rate: Rate used (None on error)
        as_of_date: Date of the cached rate for stale results
        message: User-facing message for error results
    """
    status: str
    converted: Optional[float] = None
    rate: Optional[float] = None
    as_of_date: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in (STATUS_OK, STATUS_OK_STALE)

    @property
    def stale(self) -> bool:
        return self.status == STATUS_OK_STALE

    @classmethod
    def live(cls, converted: float, rate: float) -> "ConversionResult":
        return cls(status=STATUS_OK, converted=converted, rate=rate)

    @classmethod
    def cached(cls, converted: float, rate: float, as_of_date: str) -> "ConversionResult":
        return cls(status=STATUS_OK_STALE, converted=converted, rate=rate, as_of_date=as_of_date)

    @classmethod
    def error(cls, message: str) -> "ConversionResult":
        return cls(status=STATUS_ERROR, message=message)

    def to_dict(self) -> Dict[str, Any]:
        """Render the caller-facing shape for this status."""
        if self.status == STATUS_OK:
            return {"status": self.status, "converted": self.converted, "rate": self.rate}
        if self.status == STATUS_OK_STALE:
            return {
                "status": self.status,
                "converted": self.converted,
                "rate": self.rate,
                "asOfDate": self.as_of_date,
            }
        return {"status": self.status, "message": self.message}
