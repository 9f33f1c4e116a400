"""
Durable short code store.
The only component that touches the mapping or its snapshot.
"""

from .durable_store import DurableStore
from .rwlock import ReadWriteLock

__all__ = [
    "DurableStore",
    "ReadWriteLock",
]
