# src/fxconvert/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from fxconvert.shared.validators import (
    normalize_currency_code,
    parse_amount,
    validate_amount,
    validate_currency_code,
)
from fxconvert.shared.logging_conf import setup_logging

__all__ = [
    "normalize_currency_code",
    "parse_amount",
    "validate_amount",
    "validate_currency_code",
    "setup_logging",
]
