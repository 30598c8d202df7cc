"""The /sanitize and right-click "Sanitize" commands, and the global command list."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from linkscrub.credits import create_credits_command
from linkscrub.settings import create_settings_command
from linkscrub.urls import UrlProcessor

Payload = dict[str, Any]

logger = logging.getLogger(__name__)

INVALID_LINK_MESSAGE = (
    "The link provided is invalid, or the platform is currently not supported. :("
)
PROCESSING_FAILED_MESSAGE = "Oops! For some unknown reason, I was unable to process the URL."


class CommandType(IntEnum):
    CHAT_INPUT = 1
    MESSAGE = 3


class _ContextType(IntEnum):
    GUILD = 0
    BOT_DM = 1
    PRIVATE_CHANNEL = 2


class _IntegrationType(IntEnum):
    GUILD_INSTALL = 0
    USER_INSTALL = 1


class _OptionType(IntEnum):
    STRING = 3


class _ComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2


class _ButtonStyle(IntEnum):
    DANGER = 4
    LINK = 5


_CONTEXTS = [int(context) for context in _ContextType]
_INTEGRATIONS = [int(kind) for kind in _IntegrationType]


def create_sanitize_command() -> Payload:
    """The /sanitize slash command, taking a single required link."""
    return {
        "name": "sanitize",
        "description": "Fix the embed of your link! 🫧",
        "type": int(CommandType.CHAT_INPUT),
        "contexts": list(_CONTEXTS),
        "integration_types": list(_INTEGRATIONS),
        "options": [
            {
                "type": int(_OptionType.STRING),
                "name": "link",
                "description": "Your link goes here",
                "required": True,
                "max_length": 100,
            }
        ],
    }


def create_sanitize_message_command() -> Payload:
    """The "Sanitize" entry of a message's context menu."""
    return {
        "name": "Sanitize",
        "description": "",
        "type": int(CommandType.MESSAGE),
        "contexts": list(_CONTEXTS),
        "integration_types": list(_INTEGRATIONS),
    }


def construct_buttons(original_url: str, add_delete_button: bool) -> Payload:
    """An action row with an "Open Link" button and, optionally, a delete button."""
    buttons: list[Payload] = [
        {
            "type": int(_ComponentType.BUTTON),
            "style": int(_ButtonStyle.LINK),
            "label": "Open Link",
            "emoji": {"name": "🔗"},
            "url": original_url,
            "disabled": False,
        }
    ]
    if add_delete_button:
        buttons.append(
            {
                "type": int(_ComponentType.BUTTON),
                "style": int(_ButtonStyle.DANGER),
                "label": "Delete",
                "emoji": {"name": "🗑️"},
                "custom_id": "delete",
                "disabled": False,
            }
        )
    return {"type": int(_ComponentType.ACTION_ROW), "components": buttons}


def extract_user_input(data: Payload) -> str:
    """Return the text to sanitize from a command invocation's data.

    Raises ValueError when the data does not hold what its command type needs.
    """
    kind = data.get("type")
    if kind == CommandType.CHAT_INPUT:
        options = data.get("options") or []
        if not options:
            raise ValueError("No Options provided for ChatInput command")
        value = options[0].get("value")
        if not isinstance(value, str):
            raise ValueError(f"Expected String option, got: {value!r}")
        return value
    if kind == CommandType.MESSAGE:
        resolved = data.get("resolved")
        if resolved is None:
            raise ValueError("No Resolved data for Message.")
        messages = resolved.get("messages") or {}
        message = next(iter(messages.values()), None)
        if message is None:
            raise ValueError("No message found in resolved data")
        return message.get("content", "")
    raise ValueError(f"Unexpected CommandType: {kind!r}")


async def sanitize_reply(text: str) -> Payload:
    """The follow-up message for a sanitize command given the user's text."""
    processor = UrlProcessor.try_new(text)
    if processor is None:
        return {"content": INVALID_LINK_MESSAGE}

    original_url = processor.original_url()
    if original_url is None:
        raise ValueError("Original URL could not be retrieved.")

    captured = await processor.capture_url()
    output = captured.format_output() if captured is not None else None
    if output is None:
        logger.debug("Failed to process URL in %r", text)
        return {"content": PROCESSING_FAILED_MESSAGE}

    return {"content": output, "components": [construct_buttons(original_url, False)]}


def global_commands() -> list[Payload]:
    """Every command the bot registers globally, in registration order."""
    return [
        create_credits_command(),
        create_settings_command(),
        create_sanitize_command(),
        create_sanitize_message_command(),
    ]