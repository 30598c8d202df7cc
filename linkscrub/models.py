"""Setting enums shared by the bot's commands, cache and storage."""

from __future__ import annotations

from enum import Enum


class SettingsMenuType(Enum):
    """Identifies which settings drop-down a component interaction came from."""

    SANITIZER_MODE = "sanitizer_mode"
    DELETE_PERMISSION = "delete_permission"
    HIDE_ORIGINAL_EMBED = "hide_original_embed"

    @classmethod
    def parse(cls, text: str) -> SettingsMenuType:
        """Return the menu type whose component id is ``text``."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unknown settings menu type: {text}")

    def __str__(self) -> str:
        return self.value


class SanitizerMode(Enum):
    """How the bot is triggered in a guild; values are the stored integers."""

    AUTOMATIC = 0
    MANUAL_EMOTE = 1
    MANUAL_MENTION = 2
    MANUAL_BOTH = 3

    @classmethod
    def parse(cls, text: str) -> SanitizerMode:
        """Return the mode whose component id is ``text``."""
        for member in cls:
            if member.component_id() == text:
                return member
        raise ValueError(f"Unknown sanitizer mode: {text}")

    @classmethod
    def from_int(cls, value: int) -> SanitizerMode:
        """Convert a stored integer, falling back to the default when unknown."""
        try:
            return cls(value)
        except ValueError:
            return cls.default()

    @classmethod
    def default(cls) -> SanitizerMode:
        return cls.AUTOMATIC

    def component_id(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.component_id()


class DeletePermission(Enum):
    """Who may press the delete button; values are the stored integers."""

    AUTHOR_AND_MODS = 0
    EVERYONE = 1
    DISABLED = 2

    @classmethod
    def parse(cls, text: str) -> DeletePermission:
        """Return the permission whose component id is ``text``."""
        for member in cls:
            if member.component_id() == text:
                return member
        raise ValueError(f"Unknown delete permission: {text}")

    @classmethod
    def from_int(cls, value: int) -> DeletePermission:
        """Convert a stored integer, falling back to the default when unknown."""
        try:
            return cls(value)
        except ValueError:
            return cls.default()

    @classmethod
    def default(cls) -> DeletePermission:
        return cls.AUTHOR_AND_MODS

    def component_id(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.component_id()


class HideOriginalEmbed(Enum):
    """Whether the original message's link preview is suppressed."""

    ON = "on"
    OFF = "off"

    @classmethod
    def parse(cls, text: str) -> HideOriginalEmbed:
        """Return the setting whose component id is ``text``."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unknown hide original embed setting: {text}")

    @classmethod
    def default(cls) -> HideOriginalEmbed:
        return cls.ON

    def __str__(self) -> str:
        return self.value