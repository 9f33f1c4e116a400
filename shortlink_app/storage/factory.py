"""
Factory for creating snapshot storage instances.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .strategies import SnapshotStorage, JsonFileSnapshotStorage, InMemorySnapshotStorage
from shortlink_app.config import settings


logger = logging.getLogger(__name__)


class SnapshotBackend(Enum):
    """Available snapshot storage backends"""
    JSON = "json"
    MEMORY = "memory"


class SnapshotStorageFactory:
    """
    Simple factory for creating snapshot storage instances.

    Falls back to settings for anything not passed explicitly.
    """

    @classmethod
    def create(
        cls,
        backend: Optional[SnapshotBackend] = None,
        path: Optional[Union[str, Path]] = None
    ) -> SnapshotStorage:
        """
        Create a snapshot storage instance.

        Args:
            backend: Type of storage backend (from enum).
                     If None, uses value from settings.
            path: Snapshot file path for the JSON backend.
                  If None, uses value from settings.

        Returns:
            A new SnapshotStorage

        Raises:
            ValueError: If backend is unknown
        """
        if backend is None:
            backend = SnapshotBackend(settings.snapshot_backend)

        if backend == SnapshotBackend.JSON:
            storage = JsonFileSnapshotStorage(path=path or settings.snapshot_path)
            logger.info("JSON snapshot storage initialized at %s", storage.path)

        elif backend == SnapshotBackend.MEMORY:
            storage = InMemorySnapshotStorage()
            logger.info("In-memory snapshot storage initialized (not durable)")

        else:
            raise ValueError(f"Unknown snapshot backend: {backend}")

        return storage
