"""The /settings command: a guild settings panel and the handling of its drop-downs."""

from __future__ import annotations

from dataclasses import replace
from enum import IntEnum, IntFlag
from typing import Any

from linkscrub.database import ServerConfig
from linkscrub.models import (
    DeletePermission,
    HideOriginalEmbed,
    SanitizerMode,
    SettingsMenuType,
)

Payload = dict[str, Any]


class _CommandType(IntEnum):
    CHAT_INPUT = 1


class _ContextType(IntEnum):
    GUILD = 0


class _IntegrationType(IntEnum):
    GUILD_INSTALL = 0


class _ResponseType(IntEnum):
    CHANNEL_MESSAGE_WITH_SOURCE = 4


class _ComponentType(IntEnum):
    ACTION_ROW = 1
    TEXT_SELECT = 3
    TEXT_DISPLAY = 10
    SEPARATOR = 14
    CONTAINER = 17


class _SeparatorSpacing(IntEnum):
    SMALL = 1


class _MessageFlags(IntFlag):
    EPHEMERAL = 1 << 6
    IS_COMPONENTS_V2 = 1 << 15


_CONFIRMATIONS = {
    SettingsMenuType.SANITIZER_MODE: "✅ Sanitizer Mode updated",
    SettingsMenuType.DELETE_PERMISSION: "✅ Delete Permission updated",
    SettingsMenuType.HIDE_ORIGINAL_EMBED: "✅ Original Link Preview updated",
}


def create_settings_command() -> Payload:
    """The /settings command definition, usable in guilds only."""
    return {
        "name": "settings",
        "description": "Configure Sanitizer's settings for this server 🛠️",
        "type": int(_CommandType.CHAT_INPUT),
        "contexts": [int(_ContextType.GUILD)],
        "integration_types": [int(_IntegrationType.GUILD_INSTALL)],
    }


def _text(content: str) -> Payload:
    return {"type": int(_ComponentType.TEXT_DISPLAY), "content": content}


def _separator() -> Payload:
    return {
        "type": int(_ComponentType.SEPARATOR),
        "divider": True,
        "spacing": int(_SeparatorSpacing.SMALL),
    }


def _option(label: str, value: str, default: bool, description: str, emoji: str) -> Payload:
    return {
        "label": label,
        "value": value,
        "default": default,
        "description": description,
        "emoji": {"name": emoji},
    }


def _select_row(menu_type: SettingsMenuType, placeholder: str, options: list[Payload]) -> Payload:
    select = {
        "type": int(_ComponentType.TEXT_SELECT),
        "custom_id": menu_type.value,
        "max_values": 1,
        "min_values": 1,
        "placeholder": placeholder,
        "options": options,
    }
    return {"type": int(_ComponentType.ACTION_ROW), "components": [select]}


def settings_container(config: ServerConfig) -> Payload:
    """The settings panel, with the guild's current choices preselected."""
    mode = config.sanitizer_mode
    permission = config.delete_permission
    hide = config.hide_original_embed

    mode_options = [
        _option("Automatic", SanitizerMode.AUTOMATIC.component_id(),
                mode is SanitizerMode.AUTOMATIC,
                "Fix links automatically. (Default)", "🤖"),
        _option("Manual: Emote", SanitizerMode.MANUAL_EMOTE.component_id(),
                mode is SanitizerMode.MANUAL_EMOTE,
                "Fix links once a emoji reaction is added.", "🎭"),
        _option("Manual: Mention", SanitizerMode.MANUAL_MENTION.component_id(),
                mode is SanitizerMode.MANUAL_MENTION,
                "Fix links in messages mentioning the bot.", "💬"),
        _option("Manual: Mention + Emote", SanitizerMode.MANUAL_BOTH.component_id(),
                mode is SanitizerMode.MANUAL_BOTH,
                "Fix links either if mentioned or on an emoji reaction.", "🔁"),
    ]
    permission_options = [
        _option("Author and Mods", DeletePermission.AUTHOR_AND_MODS.component_id(),
                permission is DeletePermission.AUTHOR_AND_MODS,
                "Author or users that can Manage Messages. (Default)", "👥"),
        _option("Everyone", DeletePermission.EVERYONE.component_id(),
                permission is DeletePermission.EVERYONE,
                "All users, regardless of their permissions.", "🌐"),
        _option("Disabled", DeletePermission.DISABLED.component_id(),
                permission is DeletePermission.DISABLED,
                "Delete button no longer appears.", "🚫"),
    ]
    embed_options = [
        _option("Keep original preview", HideOriginalEmbed.OFF.value, not hide,
                "Keep the embed of the original message.", "✅"),
        _option("Remove original preview", HideOriginalEmbed.ON.value, hide,
                "Hide the embed of the original message. (Default)", "❌"),
    ]

    components = [
        _text("## Sanitizer Settings 🛠️"),
        _separator(),
        _text("### Sanitizer Mode"),
        _text("Change how the bot can be activated."),
        _select_row(SettingsMenuType.SANITIZER_MODE, "Select Sanitizer Mode", mode_options),
        _separator(),
        _text("### Delete Button"),
        _text("Change who is allowed to delete the responses of the bot."),
        _select_row(SettingsMenuType.DELETE_PERMISSION,
                    "Select Delete Button Permission", permission_options),
        _separator(),
        _text("### Original link preview"),
        _text("Change whether the original message's link preview should be kept or removed."),
        _select_row(SettingsMenuType.HIDE_ORIGINAL_EMBED,
                    "Select Original Link Preview Visibility", embed_options),
    ]
    return {"type": int(_ComponentType.CONTAINER), "spoiler": False, "components": components}


def settings_response(config: ServerConfig) -> Payload:
    """The ephemeral interaction response that shows the settings panel."""
    return {
        "type": int(_ResponseType.CHANNEL_MESSAGE_WITH_SOURCE),
        "data": {
            "components": [settings_container(config)],
            "flags": int(_MessageFlags.IS_COMPONENTS_V2 | _MessageFlags.EPHEMERAL),
        },
    }


def apply_setting(config: ServerConfig, menu_type: SettingsMenuType, value: str) -> ServerConfig:
    """Return a copy of ``config`` with the drop-down choice ``value`` applied."""
    try:
        if menu_type is SettingsMenuType.SANITIZER_MODE:
            return replace(config, sanitizer_mode=SanitizerMode.parse(value))
        if menu_type is SettingsMenuType.DELETE_PERMISSION:
            return replace(config, delete_permission=DeletePermission.parse(value))
        hide = HideOriginalEmbed.parse(value)
    except ValueError as exc:
        label = {
            SettingsMenuType.SANITIZER_MODE: "sanitizer mode",
            SettingsMenuType.DELETE_PERMISSION: "delete permission",
            SettingsMenuType.HIDE_ORIGINAL_EMBED: "hide embed setting",
        }[menu_type]
        raise ValueError(f"Invalid {label}: '{value}'") from exc
    return replace(config, hide_original_embed=hide is HideOriginalEmbed.ON)


def confirmation_message(menu_type: SettingsMenuType) -> str:
    """The text shown after a setting has been changed."""
    return _CONFIRMATIONS[menu_type]