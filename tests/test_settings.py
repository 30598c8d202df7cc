import pytest

from linkscrub.database import ServerConfig
from linkscrub.models import (
    DeletePermission,
    HideOriginalEmbed,
    SanitizerMode,
    SettingsMenuType,
)
from linkscrub.settings import (
    apply_setting,
    confirmation_message,
    create_settings_command,
    settings_container,
    settings_response,
)


def _selects(container):
    return [
        component["components"][0]
        for component in container["components"]
        if "components" in component
    ]


def _default_values(select):
    return [option["value"] for option in select["options"] if option["default"]]


def test_command_definition():
    command = create_settings_command()
    assert command["name"] == "settings"
    assert command["description"] == "Configure Sanitizer's settings for this server 🛠️"


def test_select_custom_ids_parse_back_to_menu_types():
    selects = _selects(settings_container(ServerConfig.default_for(7)))
    parsed = [SettingsMenuType.parse(select["custom_id"]) for select in selects]
    assert parsed == list(SettingsMenuType)


@pytest.mark.parametrize("mode", list(SanitizerMode))
def test_current_sanitizer_mode_is_preselected(mode):
    config = ServerConfig(guild_id=1, sanitizer_mode=mode)
    select = _selects(settings_container(config))[0]
    assert _default_values(select) == [mode.component_id()]


@pytest.mark.parametrize("permission", list(DeletePermission))
def test_current_delete_permission_is_preselected(permission):
    config = ServerConfig(guild_id=1, delete_permission=permission)
    select = _selects(settings_container(config))[1]
    assert _default_values(select) == [permission.component_id()]


@pytest.mark.parametrize("hide, expected", [(True, "on"), (False, "off")])
def test_hide_embed_is_preselected(hide, expected):
    config = ServerConfig(guild_id=1, hide_original_embed=hide)
    select = _selects(settings_container(config))[2]
    assert _default_values(select) == [expected]


def test_every_option_value_parses():
    selects = _selects(settings_container(ServerConfig.default_for(3)))
    parsers = [SanitizerMode.parse, DeletePermission.parse, HideOriginalEmbed.parse]
    for select, parse in zip(selects, parsers):
        values = [option["value"] for option in select["options"]]
        assert [parse(value).__str__() for value in values] == values


def test_response_wraps_container_with_flags():
    config = ServerConfig.default_for(9)
    response = settings_response(config)
    assert response["type"] == 4
    assert response["data"]["components"] == [settings_container(config)]
    assert response["data"]["flags"] == 64 | 32768


@pytest.mark.parametrize("mode", list(SanitizerMode))
def test_apply_sanitizer_mode(mode):
    config = ServerConfig.default_for(5)
    updated = apply_setting(config, SettingsMenuType.SANITIZER_MODE, mode.component_id())
    assert updated.sanitizer_mode is mode
    assert updated.delete_permission is config.delete_permission
    assert updated.guild_id == config.guild_id


@pytest.mark.parametrize("permission", list(DeletePermission))
def test_apply_delete_permission(permission):
    config = ServerConfig.default_for(5)
    updated = apply_setting(
        config, SettingsMenuType.DELETE_PERMISSION, permission.component_id()
    )
    assert updated.delete_permission is permission
    assert updated.sanitizer_mode is config.sanitizer_mode


def test_apply_hide_embed_and_original_unchanged():
    config = ServerConfig.default_for(5)
    updated = apply_setting(config, SettingsMenuType.HIDE_ORIGINAL_EMBED, "off")
    assert updated.hide_original_embed is False
    assert config.hide_original_embed is True
    again = apply_setting(updated, SettingsMenuType.HIDE_ORIGINAL_EMBED, "on")
    assert again == config


@pytest.mark.parametrize(
    "menu_type, message",
    [
        (SettingsMenuType.SANITIZER_MODE, "Invalid sanitizer mode"),
        (SettingsMenuType.DELETE_PERMISSION, "Invalid delete permission"),
        (SettingsMenuType.HIDE_ORIGINAL_EMBED, "Invalid hide embed setting"),
    ],
)
def test_apply_invalid_value_raises(menu_type, message):
    with pytest.raises(ValueError, match=message):
        apply_setting(ServerConfig.default_for(5), menu_type, "invalid")


def test_confirmation_messages():
    assert confirmation_message(SettingsMenuType.SANITIZER_MODE) == "✅ Sanitizer Mode updated"
    assert (
        confirmation_message(SettingsMenuType.DELETE_PERMISSION)
        == "✅ Delete Permission updated"
    )
    assert (
        confirmation_message(SettingsMenuType.HIDE_ORIGINAL_EMBED)
        == "✅ Original Link Preview updated"
    )