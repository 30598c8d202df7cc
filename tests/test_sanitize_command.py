import pytest

from linkscrub.sanitize_command import (
    INVALID_LINK_MESSAGE,
    construct_buttons,
    create_sanitize_command,
    create_sanitize_message_command,
    extract_user_input,
    global_commands,
    sanitize_reply,
)


def test_sanitize_command_has_required_link_option():
    command = create_sanitize_command()
    assert command["name"] == "sanitize"
    assert command["description"] == "Fix the embed of your link! 🫧"
    (option,) = command["options"]
    assert option["name"] == "link"
    assert option["required"] is True
    assert option["max_length"] == 100


def test_message_command_has_empty_description():
    command = create_sanitize_message_command()
    assert command["name"] == "Sanitize"
    assert command["description"] == ""
    assert "options" not in command
    assert command["contexts"] == create_sanitize_command()["contexts"]


def test_buttons_without_delete():
    row = construct_buttons("https://x.com/someone/status/1", False)
    assert len(row["components"]) == 1
    button = row["components"][0]
    assert button["label"] == "Open Link"
    assert button["url"] == "https://x.com/someone/status/1"
    assert button["emoji"] == {"name": "🔗"}


def test_buttons_with_delete():
    row = construct_buttons("https://x.com/someone/status/1", True)
    labels = [button["label"] for button in row["components"]]
    assert labels == ["Open Link", "Delete"]
    delete = row["components"][1]
    assert delete["custom_id"] == "delete"
    assert "url" not in delete


def test_extract_chat_input():
    data = {"type": 1, "options": [{"name": "link", "type": 3, "value": "hello"}]}
    assert extract_user_input(data) == "hello"


def test_extract_message_content():
    data = {"type": 3, "resolved": {"messages": {"42": {"content": "look here"}}}}
    assert extract_user_input(data) == "look here"


@pytest.mark.parametrize(
    "data",
    [
        {"type": 1, "options": []},
        {"type": 1, "options": [{"name": "link", "value": 5}]},
        {"type": 3},
        {"type": 3, "resolved": {"messages": {}}},
        {"type": 2},
    ],
)
def test_extract_rejects_bad_data(data):
    with pytest.raises(ValueError):
        extract_user_input(data)


def test_global_commands_order():
    names = [command["name"] for command in global_commands()]
    assert names == ["credits", "settings", "sanitize", "Sanitize"]


@pytest.mark.asyncio
async def test_reply_for_unsupported_text():
    reply = await sanitize_reply("nothing to see here")
    assert reply == {"content": INVALID_LINK_MESSAGE}


@pytest.mark.asyncio
async def test_reply_for_twitter_link():
    link = "https://x.com/someone/status/123"
    reply = await sanitize_reply(f"check {link} out")
    assert reply["content"] == "[@someone via Twitter](https://fxtwitter.com/someone/status/123)"
    (row,) = reply["components"]
    assert [button["url"] for button in row["components"]] == [link]


@pytest.mark.asyncio
async def test_reply_keeps_spoiler():
    reply = await sanitize_reply("|| https://x.com/someone/status/9 ||")
    assert reply["content"].startswith("|| ")
    assert reply["content"].endswith(" ||")
    assert "fxtwitter.com" in reply["content"]


@pytest.mark.asyncio
async def test_reply_for_instagram_reel():
    link = "https://www.instagram.com/reel/abc"
    reply = await sanitize_reply(link)
    assert "Reel via Instagram" in reply["content"]
    assert reply["components"][0]["components"][0]["url"] == link
    assert len(reply["components"][0]["components"]) == 1