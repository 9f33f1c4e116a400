"""
Exceptions raised by the short-link store and its facade.

Hierarchy:
    ShortlinkError
    ├── InvalidInputError   - empty target, empty or malformed code
    └── StoreError
        ├── PersistenceError   - snapshot could not be written
        ├── SnapshotLoadError  - snapshot exists but cannot be read or parsed
        └── StoreClosedError   - write attempted after close()

A lookup miss is not an exception: get/resolve return None.
"""


class ShortlinkError(Exception):
    """Base class for all short-link errors."""

    pass


class InvalidInputError(ShortlinkError, ValueError):
    """Raised when a caller supplies an empty target or a malformed code."""

    pass


class StoreError(ShortlinkError):
    """Base class for errors raised by DurableStore."""

    pass


class PersistenceError(StoreError):
    """Raised when the snapshot write or rename fails.

    The in-memory mapping has already been rolled back when this is raised.
    """

    pass


class SnapshotLoadError(StoreError):
    """Raised when an existing snapshot cannot be read, decoded or validated."""

    pass


class StoreClosedError(StoreError):
    """Raised when a write is attempted on a closed store."""

    pass
