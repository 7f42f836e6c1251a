# src/fxconvert/adapters/formatting/__init__.py
"""
Formatting Adapters - Result Formatting

This package contains text formatting for conversion results.
"""

from fxconvert.adapters.formatting.formatter import (
    format_amount,
    format_currency_option,
    format_rate_line,
    format_result,
    format_source_line,
)

__all__ = [
    "format_amount",
    "format_currency_option",
    "format_rate_line",
    "format_result",
    "format_source_line",
]
