import sqlite3
from dataclasses import replace

import pytest

from linkscrub.cache import ConfigCache
from linkscrub.database import Database, ServerConfig
from linkscrub.models import DeletePermission, SanitizerMode


@pytest.fixture
def database():
    connection = sqlite3.connect(":memory:")
    yield Database(connection)
    connection.close()


def test_miss_returns_default_and_caches(database):
    cache = ConfigCache(database)
    config = cache.get_or_fetch(7)
    assert config == ServerConfig.default_for(7)
    assert 7 in cache
    assert len(cache) == 1


def test_miss_loads_saved_config(database):
    saved = ServerConfig(7, SanitizerMode.MANUAL_BOTH, DeletePermission.EVERYONE, False)
    database.save_server_config(saved)
    cache = ConfigCache(database)
    assert cache.get_or_fetch(7) == saved


def test_hit_does_not_reread_database(database):
    cache = ConfigCache(database)
    first = cache.get_or_fetch(7)
    database.save_server_config(replace(first, sanitizer_mode=SanitizerMode.MANUAL_EMOTE))
    assert cache.get_or_fetch(7) == first


def test_update_config_persists_and_caches(database):
    cache = ConfigCache(database)
    cache.get_or_fetch(7)
    updated = ServerConfig(7, SanitizerMode.MANUAL_MENTION, DeletePermission.DISABLED, True)
    cache.update_config(7, updated)
    assert cache.get_or_fetch(7) == updated
    assert database.get_server_config(7) == updated


def test_update_config_inserts_uncached_guild(database):
    cache = ConfigCache(database)
    updated = ServerConfig(9, SanitizerMode.MANUAL_EMOTE, DeletePermission.EVERYONE, False)
    cache.update_config(9, updated)
    assert 9 in cache
    assert cache.get_or_fetch(9) == updated


def test_eviction_of_least_recently_used(database):
    cache = ConfigCache(database, capacity=2)
    cache.get_or_fetch(1)
    cache.get_or_fetch(2)
    cache.get_or_fetch(3)
    assert 1 not in cache
    assert 2 in cache and 3 in cache
    assert len(cache) == 2


def test_hit_promotes_entry(database):
    cache = ConfigCache(database, capacity=2)
    cache.get_or_fetch(1)
    cache.get_or_fetch(2)
    cache.get_or_fetch(1)
    cache.get_or_fetch(3)
    assert 1 in cache
    assert 2 not in cache


def test_reinsert_does_not_grow(database):
    cache = ConfigCache(database, capacity=2)
    config = ServerConfig.default_for(1)
    cache.update_config(1, config)
    cache.update_config(1, replace(config, hide_original_embed=False))
    assert len(cache) == 1
    assert cache.get_or_fetch(1).hide_original_embed is False


def test_zero_capacity_rejected(database):
    with pytest.raises(ValueError):
        ConfigCache(database, capacity=0)