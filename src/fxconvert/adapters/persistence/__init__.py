# src/fxconvert/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains key-value backends for the rate cache:
- In-memory storage (tests, ephemeral hosts)
- File-based storage (JSON)
"""

from fxconvert.adapters.persistence.key_value import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
)

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
