"""Persistent storage of guild settings and bot-response mappings in SQLite."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import Optional

from linkscrub.models import DeletePermission, SanitizerMode

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS server_configs (
    guild_id INTEGER PRIMARY KEY,
    sanitizer_mode INTEGER NOT NULL,
    delete_permission INTEGER NOT NULL,
    hide_original_embed INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS response_map (
    user_message_id INTEGER PRIMARY KEY,
    bot_message_id INTEGER NOT NULL,
    guild_id INTEGER,
    channel_id INTEGER NOT NULL
);
"""

_U64 = 1 << 64
_I64_MAX = (1 << 63) - 1


def _to_signed(value: int) -> int:
    """Store an unsigned 64-bit id in a signed SQLite integer column."""
    return value - _U64 if value > _I64_MAX else value


def _to_unsigned(value: int) -> int:
    return value + _U64 if value < 0 else value


class DatabaseError(Exception):
    """Raised when a storage operation fails."""


@dataclass(frozen=True)
class ServerConfig:
    """Per-guild bot settings."""

    guild_id: int
    sanitizer_mode: SanitizerMode = SanitizerMode.AUTOMATIC
    delete_permission: DeletePermission = DeletePermission.AUTHOR_AND_MODS
    hide_original_embed: bool = True

    @classmethod
    def default_for(cls, guild_id: int) -> ServerConfig:
        """The configuration a guild has before anything is saved for it."""
        return cls(
            guild_id=guild_id,
            sanitizer_mode=SanitizerMode.default(),
            delete_permission=DeletePermission.default(),
            hide_original_embed=True,
        )


@dataclass(frozen=True)
class ResponseMap:
    """Links a user's message to the bot message that answered it."""

    user_message_id: int
    bot_message_id: int
    guild_id: Optional[int]
    channel_id: int


class Database:
    """Storage operations over an open SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        try:
            with self.connection:
                self.connection.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise DatabaseError("Failed to create tables") from exc

    def _execute(self, sql: str, params: tuple, failure: str) -> sqlite3.Cursor:
        try:
            with self.connection:
                return self.connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(failure) from exc

    def save_server_config(self, config: ServerConfig) -> None:
        self._execute(
            """
            INSERT OR REPLACE INTO server_configs
            (guild_id, sanitizer_mode, delete_permission, hide_original_embed)
            VALUES (?, ?, ?, ?)
            """,
            (
                _to_signed(config.guild_id),
                config.sanitizer_mode.value,
                config.delete_permission.value,
                int(config.hide_original_embed),
            ),
            "Failed to save server config",
        )
        logger.debug("Saved config for guild %s: %r", config.guild_id, config)

    def get_server_config(self, guild_id: int) -> Optional[ServerConfig]:
        """Return the stored configuration, or None if the guild has none."""
        cursor = self._execute(
            """
            SELECT guild_id, sanitizer_mode, delete_permission, hide_original_embed
            FROM server_configs
            WHERE guild_id = ?
            """,
            (_to_signed(guild_id),),
            "Failed to execute SELECT query",
        )
        row = cursor.fetchone()
        if row is None:
            logger.debug("No config found for guild %s", guild_id)
            return None
        logger.debug("Found existing config for guild %s", guild_id)
        return ServerConfig(
            guild_id=guild_id,
            sanitizer_mode=SanitizerMode.from_int(row[1]),
            delete_permission=DeletePermission.from_int(row[2]),
            hide_original_embed=bool(row[3]),
        )

    def get_or_default(self, guild_id: int) -> ServerConfig:
        config = self.get_server_config(guild_id)
        if config is None:
            logger.debug("Using default config for guild (%s)", guild_id)
            return ServerConfig.default_for(guild_id)
        return config

    def save_response(self, response: ResponseMap) -> None:
        guild_id = response.guild_id
        self._execute(
            """
            INSERT OR REPLACE INTO response_map
            (user_message_id, bot_message_id, guild_id, channel_id)
            VALUES (?, ?, ?, ?)
            """,
            (
                _to_signed(response.user_message_id),
                _to_signed(response.bot_message_id),
                None if guild_id is None else _to_signed(guild_id),
                _to_signed(response.channel_id),
            ),
            "Failed to save response map",
        )
        logger.debug("Saved response map: %r", response)

    def find_response(self, user_message_id: int) -> Optional[ResponseMap]:
        """Return the bot response recorded for a user message, if any."""
        cursor = self._execute(
            """
            SELECT user_message_id, bot_message_id, guild_id, channel_id
            FROM response_map
            WHERE user_message_id = ?
            """,
            (_to_signed(user_message_id),),
            "Failed to execute SELECT statement",
        )
        row = cursor.fetchone()
        if row is None:
            logger.debug("No response map found for user_message_id=%s", user_message_id)
            return None
        logger.debug("Found response map for user_message_id=%s", user_message_id)
        return ResponseMap(
            user_message_id=user_message_id,
            bot_message_id=_to_unsigned(row[1]),
            guild_id=None if row[2] is None else _to_unsigned(row[2]),
            channel_id=_to_unsigned(row[3]),
        )

    def delete_response(self, user_message_id: int) -> None:
        self._execute(
            "DELETE FROM response_map WHERE user_message_id = ?",
            (_to_signed(user_message_id),),
            "Failed to delete from response map",
        )
        logger.debug("Deleted response map for user_message_id=%s", user_message_id)