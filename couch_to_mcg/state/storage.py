"""Storage adapter abstraction.

The stores persist independent JSON-serializable blobs under stable keys.
Platform adapters implement StorageAdapter; InMemoryStorage backs tests and
the CLI.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any


class StorageKey(StrEnum):
    COMPLETED_DATES = "couchToMcgCompleted"
    PROFILE = "couchToMcgProfile"
    RUN_LOGS = "couchToMcgLogs"
    OVERRIDES = "couchToMcgOverrides"
    CUSTOM_ACTIVITIES = "couchToMcgCustomActivities"
    SYNC_METADATA = "couchToMcgSyncMetadata"
    DEVICE_ID = "couchToMcgDeviceId"


class StorageAdapter(ABC):
    """Key-value storage for JSON-serializable values."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if the key is missing."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_all_keys(self) -> list[str]:
        raise NotImplementedError

    def has(self, key: str) -> bool:
        return key in self.get_all_keys()


class InMemoryStorage(StorageAdapter):
    """Process-local storage; values are deep-copied in and out."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Any | None:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def get_all_keys(self) -> list[str]:
        return list(self._data)

    def has(self, key: str) -> bool:
        return key in self._data
