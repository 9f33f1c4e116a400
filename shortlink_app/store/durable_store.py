"""
Durable code -> target mapping.

DurableStore keeps the canonical mapping in memory and mirrors it to a
SnapshotStorage. Every successful write is persisted before it becomes
visible to readers, and a failed write is rolled back, so the in-memory
state never runs ahead of what is on disk.

Locking:
- get() takes the lock shared
- put(), clear(), save_to_disk() and close() take it exclusive, including
  for the snapshot write

Limits:
- Each put() rewrites the whole snapshot. Throughput drops linearly with
  the number of stored links.
- Code allocation retries until it finds an unused code and has no upper
  bound. With 62^6 codes this only matters near exhaustion of the space.
"""

import logging
from typing import Dict, Optional

from shortlink_app.exceptions import (
    InvalidInputError,
    PersistenceError,
    SnapshotLoadError,
    StoreClosedError,
)
from shortlink_app.services.short_code_strategies import ShortCodeStrategy
from shortlink_app.storage.strategies import SnapshotStorage
from shortlink_app.store.rwlock import ReadWriteLock


logger = logging.getLogger(__name__)


class DurableStore:
    """
    Thread-safe, durable short code store.

    Lifecycle:
        store = DurableStore(generator, storage)
        store.load_from_disk()      # once, before serving
        code = store.put(target)    # any thread
        target = store.get(code)    # any thread
        store.close()               # final flush, rejects further writes
    """

    def __init__(self, generator: ShortCodeStrategy, storage: SnapshotStorage):
        """
        Initialize an empty store.

        Args:
            generator: Produces candidate codes
            storage: Where snapshots are read from and written to
        """
        self.generator = generator
        self.storage = storage
        self._urls: Dict[str, str] = {}
        self._lock = ReadWriteLock()
        self._closed = False

    # ----- lifecycle -----

    def load_from_disk(self) -> int:
        """
        Replace the in-memory mapping with the persisted snapshot.

        A missing snapshot is not an error: the mapping becomes empty.

        Returns:
            Number of entries loaded

        Raises:
            SnapshotLoadError: snapshot exists but is unreadable, not a
                               {code: target} object, or holds codes of the
                               wrong length or alphabet. The mapping is left
                               unchanged.
        """
        data = self.storage.read()
        if data is None:
            data = {}

        invalid = [code for code in data if not self.generator.is_valid(code)]
        if invalid:
            raise SnapshotLoadError(
                f"Snapshot holds {len(invalid)} malformed code(s), e.g. {invalid[0]!r}"
            )

        with self._lock.write_locked():
            self._urls = dict(data)
        return len(data)

    load = load_from_disk

    def save_to_disk(self) -> None:
        """
        Persist the full mapping.

        Raises:
            PersistenceError: snapshot could not be written
        """
        with self._lock.write_locked():
            self._persist()

    flush = save_to_disk

    def close(self) -> None:
        """Flush once more and reject further writes. Safe to call twice."""
        with self._lock.write_locked():
            if self._closed:
                return
            self._persist()
            self._closed = True
            count = len(self._urls)
        logger.info("Store closed with %d entries", count)

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "DurableStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ----- reads -----

    def get(self, code: str) -> Optional[str]:
        """Return the target for `code`, or None if there is no such mapping"""
        with self._lock.read_locked():
            return self._urls.get(code)

    def snapshot(self) -> Dict[str, str]:
        """Consistent copy of the whole mapping"""
        with self._lock.read_locked():
            return dict(self._urls)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._urls)

    def __contains__(self, code: object) -> bool:
        with self._lock.read_locked():
            return code in self._urls

    # ----- writes -----

    def put(self, target: str) -> str:
        """
        Store `target` under a freshly allocated code.

        The code is unique among all live entries. The entry is persisted
        before the lock is released; readers never see an entry that is not
        on disk yet.

        Returns:
            The new code

        Raises:
            InvalidInputError: target is not a string
            StoreClosedError: store was closed
            PersistenceError: snapshot write failed, nothing was stored
        """
        if not isinstance(target, str):
            raise InvalidInputError(f"Target must be a string (given type: {type(target).__name__})")

        with self._lock.write_locked():
            self._ensure_open()
            code = self._allocate_code()
            self._urls[code] = target
            try:
                self._persist()
            except Exception:
                del self._urls[code]
                raise

        logger.info("Stored short code %s", code)
        logger.debug("Short code %s -> %s", code, target)
        return code

    def clear(self) -> None:
        """
        Remove every entry and persist the empty mapping.

        Raises:
            StoreClosedError: store was closed
            PersistenceError: snapshot write failed, entries are kept
        """
        with self._lock.write_locked():
            self._ensure_open()
            previous = self._urls
            self._urls = {}
            try:
                self._persist()
            except Exception:
                self._urls = previous
                raise
            logger.info("Cleared %d entries", len(previous))

    # ----- internals (caller holds the write lock) -----

    def _allocate_code(self) -> str:
        # Unbounded on purpose; see module docstring
        attempts = 0
        while True:
            attempts += 1
            code = self.generator.generate()
            if code not in self._urls:
                if attempts > 1:
                    logger.debug("Allocated code after %d attempts", attempts)
                return code

    def _persist(self) -> None:
        try:
            self.storage.write(self._urls)
        except PersistenceError:
            logger.error("Snapshot write failed", exc_info=True)
            raise

    def _ensure_open(self) -> None:
        if self._closed:
            raise StoreClosedError("Store is closed")
