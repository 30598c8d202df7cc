# linkscrub

Building blocks for a chat bot that finds links to Instagram, Reddit, TikTok,
Twitch and Twitter/X in messages and answers with a link to a mirror that
embeds properly. It needs Python 3.10 or later, and depends on `aiohttp` and
`beautifulsoup4`. The `test` extra installs pytest and pytest-asyncio for the
test suite.

## Rewriting links

`linkscrub.urls` finds a supported link in text and builds the reply.

```python
import asyncio
from linkscrub.urls import UrlProcessor, contains_url

text = "look at this https://x.com/someone/status/12345"
assert contains_url(text)

processor = UrlProcessor.try_new(text)
print(processor.original_url())
# https://x.com/someone/status/12345
captured = asyncio.run(processor.capture_url())
print(captured.format_output())
# [@someone via Twitter](https://fxtwitter.com/someone/status/12345)
```

- `contains_url(text)` is a quick case-insensitive check for the domains of
  the supported sites.
- `Platform.detect(text)` returns the first matching `Platform`, checked in the
  order Instagram, Reddit, TikTok, Twitch, Twitter; `display_name()` and
  `replacement_domain()` give its name and mirror domain.
- `UrlProcessor.try_new(text)` returns `None` when no supported link is found.
  `capture_url()` returns a new processor with the rewritten link filled in (or
  `None`), and `format_output()` gives the markdown reply.

A link wrapped in spoiler bars (`|| ... ||`) gets a reply wrapped in spoiler
bars as well. For TikTok links, and for `clips.twitch.tv` links, `capture_url`
makes an HTTP request to find out who posted the clip; if that fails the reply
says "Post" instead of the author. `parse_tiktok_author`, `parse_meta_author`
and `fetch_author` do that part on their own.

## Server settings

`linkscrub.models` holds the setting enums: `SanitizerMode` (automatic, on an
emoji reaction, on a mention, or both), `DeletePermission` (author and mods,
everyone, or disabled), `HideOriginalEmbed` and `SettingsMenuType`. Each has a
`parse(text)` that raises `ValueError` on unknown text; the first two also have
`from_int(value)`, which falls back to the default for unknown integers.

`linkscrub.database.Database` wraps an open `sqlite3.Connection`, creates its
tables, and stores `ServerConfig` and `ResponseMap` records:

```python
import sqlite3
from linkscrub.database import Database
from linkscrub.cache import ConfigCache

db = Database(sqlite3.connect(":memory:"))
cache = ConfigCache(db, capacity=1000)
config = cache.get_or_fetch(1234)   # ServerConfig.default_for(1234) if nothing saved
```

Storage failures raise `DatabaseError`. `ConfigCache` keeps the most recently
used configurations in memory, and `update_config` writes to the database and
the cache together.

## Command payloads

`linkscrub.settings`, `linkscrub.credits` and `linkscrub.sanitize_command`
build plain `dict` payloads for the `/settings`, `/credits` and `/sanitize`
commands and the "Sanitize" message action:

- `settings_response(config)` shows the settings panel; `apply_setting(config,
  menu_type, value)` returns the changed config and `confirmation_message`
  the text to show afterwards.
- `credits_response()` is the credits message.
- `extract_user_input(data)` gets the text from a command invocation, and the
  coroutine `sanitize_reply(text)` returns the follow-up message: the rewritten
  link with an "Open Link" button, or a message saying why the link could not
  be handled.
- `global_commands()` lists every command definition, in registration order.

## What is not included

The package does not connect to a chat service. It has no gateway or event
handling, sends no messages or reactions, registers no commands by itself and
provides no program to run: a bot built on it has to deliver these payloads
and call these functions itself.