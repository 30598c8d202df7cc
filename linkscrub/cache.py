"""In-memory least-recently-used cache of guild configurations."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict

from linkscrub.database import Database, ServerConfig

logger = logging.getLogger(__name__)


class ConfigCache:
    """Caches guild configurations in front of the database, evicting the least recently used."""

    def __init__(self, database: Database, capacity: int = 1000) -> None:
        if capacity <= 0:
            raise ValueError("Capacity must be greater than zero")
        self._database = database
        self._capacity = capacity
        self._entries: OrderedDict[int, ServerConfig] = OrderedDict()
        self._lock = threading.Lock()

    def get_or_fetch(self, guild_id: int) -> ServerConfig:
        """Return the cached config, loading it from the database on a miss."""
        with self._lock:
            cached = self._entries.get(guild_id)
            if cached is not None:
                self._entries.move_to_end(guild_id)
                logger.debug("Found Server Config in cache")
                return cached

        logger.debug("Could not find guild in cache, retrieving from database.")
        config = self._database.get_or_default(guild_id)
        with self._lock:
            if guild_id in self._entries:
                self._entries.move_to_end(guild_id)
            else:
                self._store(guild_id, config)
        return config

    def update_config(self, guild_id: int, config: ServerConfig) -> None:
        """Save ``config`` to the database and refresh the cached copy."""
        self._database.save_server_config(config)
        with self._lock:
            self._store(guild_id, config)

    def _store(self, guild_id: int, config: ServerConfig) -> None:
        self._entries[guild_id] = config
        self._entries.move_to_end(guild_id)
        while len(self._entries) > self._capacity:
            evicted_id, _ = self._entries.popitem(last=False)
            logger.debug("Evicted guild_id %s from config cache", evicted_id)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, guild_id: object) -> bool:
        return guild_id in self._entries