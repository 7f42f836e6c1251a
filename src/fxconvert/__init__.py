# src/fxconvert/__init__.py
"""
fxconvert - Offline-tolerant Currency Converter Engine

Converts an amount between two currencies using the daily currency-api
rate tables, with a primary/fallback provider chain and a persistent
last-known-rate cache for offline use.
"""

__version__ = "1.0.0"
