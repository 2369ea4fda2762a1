"""Remote sync boundary.

Only the interface is defined here; conflict resolution (last-write-wins) is
the responsibility of a concrete remote implementation. DisabledSyncService
is the default used when no remote is configured.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class SyncStatus(StrEnum):
    IDLE = "idle"
    SYNCING = "syncing"
    SUCCESS = "success"
    ERROR = "error"
    DISABLED = "disabled"


class SyncMetadata(BaseModel):
    last_sync_time: float | None = None
    device_id: str
    sync_enabled: bool = False


class SyncConfig(BaseModel):
    api_key: str | None = None
    project_id: str | None = None
    auth_domain: str | None = None
    user_id: str | None = None


class SyncEvent(BaseModel):
    status: SyncStatus
    message: str | None = None
    timestamp: float = Field(default_factory=time.time)


class SyncService(ABC):
    """Optional remote synchronization of stored blobs."""

    @abstractmethod
    def initialize(self, config: SyncConfig) -> None:
        raise NotImplementedError

    @abstractmethod
    def is_enabled(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def sync_to_remote(self, key: str, data: Any) -> None:
        """Push one stored blob to the remote."""
        raise NotImplementedError

    @abstractmethod
    def fetch_from_remote(self, key: str) -> Any | None:
        raise NotImplementedError

    @abstractmethod
    def perform_full_sync(self) -> None:
        """Bidirectional sync of every key."""
        raise NotImplementedError

    @abstractmethod
    def set_auto_sync(self, enabled: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_sync_metadata(self) -> SyncMetadata:
        raise NotImplementedError


class DisabledSyncService(SyncService):
    """Sync service used when no remote is configured. Every operation is a no-op."""

    def __init__(self, device_id: str = "local"):
        self._device_id = device_id

    def initialize(self, config: SyncConfig) -> None:
        return None

    def is_enabled(self) -> bool:
        return False

    def sync_to_remote(self, key: str, data: Any) -> None:
        return None

    def fetch_from_remote(self, key: str) -> Any | None:
        return None

    def perform_full_sync(self) -> None:
        return None

    def set_auto_sync(self, enabled: bool) -> None:
        return None

    def get_sync_metadata(self) -> SyncMetadata:
        return SyncMetadata(device_id=self._device_id, sync_enabled=False)

    def status(self) -> SyncEvent:
        return SyncEvent(status=SyncStatus.DISABLED, message="Remote sync is not configured")
