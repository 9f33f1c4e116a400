"""
Snapshot storage module.

This module implements the Strategy Pattern for pluggable snapshot persistence.
The store talks to storage only through SnapshotStorage.
"""

from .strategies import SnapshotStorage, JsonFileSnapshotStorage, InMemorySnapshotStorage
from .factory import SnapshotStorageFactory, SnapshotBackend

__all__ = [
    "SnapshotStorage",
    "JsonFileSnapshotStorage",
    "InMemorySnapshotStorage",
    "SnapshotStorageFactory",
    "SnapshotBackend",
]
