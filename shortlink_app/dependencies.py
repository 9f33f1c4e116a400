"""
Dependency providers shared by the FastAPI app, the CLI and the bot.

This module builds exactly one store per process from settings.
Routes receive the URLService through Depends(); tests swap it via
app.dependency_overrides.
"""

import logging
import random
from functools import lru_cache

from shortlink_app.config import settings
from shortlink_app.exceptions import SnapshotLoadError
from shortlink_app.services.short_code_strategies import RandomShortCodeStrategy, ShortCodeStrategy
from shortlink_app.services.url_service import URLService
from shortlink_app.storage.factory import SnapshotStorageFactory
from shortlink_app.storage.strategies import SnapshotStorage
from shortlink_app.store.durable_store import DurableStore


logger = logging.getLogger(__name__)


@lru_cache()
def get_code_generator() -> ShortCodeStrategy:
    """
    Get short code generator (singleton).

    A configured seed makes generated codes reproducible across runs.
    """
    rng = random.Random(settings.short_code_seed)
    return RandomShortCodeStrategy(length=settings.short_code_length, rng=rng)


@lru_cache()
def get_snapshot_storage() -> SnapshotStorage:
    """Get snapshot storage instance (singleton) based on settings"""
    return SnapshotStorageFactory.create()


@lru_cache()
def get_store() -> DurableStore:
    """
    Get the process-wide store, loaded from its snapshot (singleton).

    An unreadable snapshot is logged and the store starts empty:
    availability wins over keeping old links. The next successful write
    replaces the unreadable file.
    """
    store = DurableStore(generator=get_code_generator(), storage=get_snapshot_storage())
    try:
        count = store.load_from_disk()
        logger.info("Loaded %d short links", count)
    except SnapshotLoadError:
        logger.error("Failed to load snapshot, starting with an empty store", exc_info=True)
    return store


def get_url_service() -> URLService:
    """Get URLService bound to the process-wide store"""
    return URLService(store=get_store(), base_url=settings.base_url)
