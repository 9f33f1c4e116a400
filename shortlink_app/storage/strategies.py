"""
Snapshot storage strategies using Strategy Pattern.

A snapshot is the complete code -> target mapping, serialized as one unit.
The store only ever reads a whole snapshot at startup and replaces the
whole snapshot on every write:
- JSON file: durable, human-readable, atomic replace on disk
- In-memory: tests and throwaway runs
"""

import os
import json
import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from shortlink_app.exceptions import PersistenceError, SnapshotLoadError


logger = logging.getLogger(__name__)


class SnapshotStorage(ABC):
    """
    Abstract base class for snapshot storage strategies.

    Implementations must make `write` all-or-nothing: a concurrent reader
    (or a process restarted after a crash) sees either the previous
    snapshot or the new one, never a mix.
    """

    @abstractmethod
    def read(self) -> Optional[Dict[str, str]]:
        """
        Read the persisted snapshot.

        Returns:
            The stored mapping, or None if no snapshot exists yet

        Raises:
            SnapshotLoadError: snapshot exists but cannot be read or decoded
        """
        pass

    @abstractmethod
    def write(self, mapping: Dict[str, str]) -> None:
        """
        Replace the persisted snapshot with `mapping`.

        Raises:
            PersistenceError: the snapshot was not replaced
        """
        pass

    @staticmethod
    def _check_shape(data, source: str) -> Dict[str, str]:
        if not isinstance(data, dict):
            raise SnapshotLoadError(
                f"Snapshot {source} must contain a JSON object, got {type(data).__name__}"
            )
        for code, target in data.items():
            if not isinstance(code, str) or not isinstance(target, str):
                raise SnapshotLoadError(
                    f"Snapshot {source} has a non-string entry for code {code!r}"
                )
        return data


class JsonFileSnapshotStorage(SnapshotStorage):
    """
    JSON file implementation.

    Format: a single JSON object mapping code to target URL,
    indented with two spaces. Non-ASCII characters are
    written as JSON escapes so any Python string (lone surrogates included)
    can be stored.

    Writes go to a temporary file in the same directory which is flushed,
    fsync'ed and then moved over the snapshot with os.replace. Rename is
    atomic on POSIX and Windows as long as both paths are on the same
    filesystem, which the shared directory guarantees.

    Cons:
    - Every write rewrites the whole file, so write cost grows linearly
      with the number of entries. Fine for thousands of links, not for
      millions.
    """

    def __init__(self, path: Union[str, Path] = "urls.json"):
        """
        Initialize JSON snapshot storage.

        Args:
            path: Path of the snapshot file
        """
        self.path = Path(path)

    def read(self) -> Optional[Dict[str, str]]:
        try:
            with open(self.path, encoding="utf-8") as snapshot_file:
                data = json.load(snapshot_file)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise SnapshotLoadError(f"Cannot read snapshot {self.path}: {e}") from e

        return self._check_shape(data, str(self.path))

    def write(self, mapping: Dict[str, str]) -> None:
        directory = self.path.parent
        tmp_path = None
        try:
            directory.mkdir(parents=True, exist_ok=True)

            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                json.dump(mapping, tmp_file, indent=2)
                tmp_file.write("\n")
                tmp_file.flush()
                os.fsync(tmp_file.fileno())

            os.replace(tmp_path, self.path)
            tmp_path = None

        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Cannot write snapshot {self.path}: {e}") from e

        finally:
            if tmp_path is not None:
                self._discard(tmp_path)

        # The new snapshot is already in place; failing here must not roll it back
        try:
            self._fsync_directory(directory)
        except OSError as e:
            logger.warning("Could not fsync snapshot directory %s: %s", directory, e)

    @staticmethod
    def _discard(tmp_path: str) -> None:
        """Remove a leftover temporary file; the original error wins"""
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove temporary snapshot %s: %s", tmp_path, e)

    @staticmethod
    def _fsync_directory(directory: Path) -> None:
        """Make the rename itself durable (POSIX only)"""
        if not hasattr(os, "O_DIRECTORY"):
            return
        dir_fd = os.open(directory, os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)


class InMemorySnapshotStorage(SnapshotStorage):
    """
    In-memory implementation using a Python dict.

    Pros:
    - Very fast, no filesystem access
    - Good for tests and demos

    Cons:
    - Lost on restart
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Optional[Dict[str, str]] = dict(initial) if initial is not None else None
        self.write_count = 0

    def read(self) -> Optional[Dict[str, str]]:
        if self._data is None:
            return None
        return self._check_shape(dict(self._data), "in memory")

    def write(self, mapping: Dict[str, str]) -> None:
        # Copy so later mutations of the live mapping don't leak in
        self._data = dict(mapping)
        self.write_count += 1
