# src/fxconvert/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (rate APIs)
- Persistence (key-value storage)
- Formatting (output)
"""

__all__ = []
