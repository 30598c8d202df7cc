"""The /credits command: acknowledges the services the bot relies on."""

from __future__ import annotations

from enum import IntEnum, IntFlag
from typing import Any

Payload = dict[str, Any]


class _CommandType(IntEnum):
    CHAT_INPUT = 1


class _ContextType(IntEnum):
    GUILD = 0
    BOT_DM = 1
    PRIVATE_CHANNEL = 2


class _IntegrationType(IntEnum):
    GUILD_INSTALL = 0


class _ResponseType(IntEnum):
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class _MessageFlags(IntFlag):
    EPHEMERAL = 1 << 6


_DESCRIPTION = (
    "These are all the super cool projects I rely on:\n"
    "-  **Twitter**: Thanks to FixTweet's reliable FxTwitter project\n"
    "-  **TikTok & Instagram**: Thanks to kkScript\n"
    "-  **Instagram** (Fallback): Powered by the awesome InstaFix project\n"
    "-  **Twitch**: Thanks to FxTwitch\n"
    "-  **Reddit**: Thanks to the FxReddit project\n"
    "-# The code that powers me is publicly sourced on GitHub.\n"
)


def create_credits_command() -> Payload:
    """The /credits command definition."""
    return {
        "name": "credits",
        "description": "Roll the credits! 🎺",
        "type": int(_CommandType.CHAT_INPUT),
        "contexts": [int(context) for context in _ContextType],
        "integration_types": [int(_IntegrationType.GUILD_INSTALL)],
    }


def credits_response() -> Payload:
    """The ephemeral interaction response listing the credits."""
    return {
        "type": int(_ResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
        "data": {
            "embeds": [{"title": "Credits 🎺", "description": _DESCRIPTION}],
            "flags": int(_MessageFlags.EPHEMERAL),
        },
    }