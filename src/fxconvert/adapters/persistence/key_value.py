# src/fxconvert/adapters/persistence/key_value.py
"""
Key-Value Stores - Durable String Storage Backends

The rate cache only needs a tiny capability from its host: read a string
by key and write a string by key. This module defines that capability and
two backends:

- InMemoryKeyValueStore: process-local dict, used by tests and ephemeral hosts
- JsonFileKeyValueStore: all keys in one JSON file, written atomically

Files that USE this module:
- fxconvert.application.rate_store (RateStore reads/writes through a KeyValueStore)
- fxconvert.app (build_converter creates a JsonFileKeyValueStore)

Files that this module USES:
- None (stdlib only)
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

log = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable string key-value capability."""
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryKeyValueStore:
    """Dict-backed store; contents are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileKeyValueStore:
    """
    Store every key as a string member of a single JSON object on disk.

    Reads go to disk on every call so several processes sharing the file
    see each other's writes.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        """
        Read the whole file.

        Undecodable content reads as empty. I/O errors propagate so a failed
        read never turns into a write that drops every other key.
        """
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                log.warning("Key-value file %s is corrupt, treating as empty: %s", self.path, e)
                return {}
        if not isinstance(data, dict):
            log.warning("Key-value file %s is not a JSON object, treating as empty", self.path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """
        Persist one key using an atomic write.

        Uses temporary file + atomic rename so a crash never leaves a
        half-written file behind.

        Raises:
            OSError: If the existing file cannot be read
            RuntimeError: If the file cannot be written
        """
        data = self._load()
        data[key] = value

        temp_path: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                suffix=".json.tmp",
                dir=str(self.path.parent),
                text=True,
            )
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_path, str(self.path))
        except Exception as e:
            if temp_path is not None:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
            raise RuntimeError(f"Failed to write key-value file: {e}") from e
