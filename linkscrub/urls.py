"""Detection of supported social-media links and rewriting them to embed-friendly mirrors."""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

import aiohttp
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_INSTAGRAM_URL_PATTERN = (
    r"(?i)https?://(?:www\.)?instagram\.com/(?P<type>reels?|p)(?P<data>/[^/\s?)\]`|]+)"
)
_REDDIT_URL_PATTERN = (
    r"(?i)https?://(?P<subdomain>(?:www\.|old\.)?)reddit\.com/"
    r"(?P<subreddit>r/[^/]+)(?P<data>/[^?\s)\]`|]*)?"
)
_TIKTOK_URL_PATTERN = (
    r"(?i)https?://(?P<subdomain>(?:\w{1,3}\.)?)(?P<domain>tiktok\.com)(?P<data>/[^?\s)\]`|]*)"
)
_TWITCH_URL_PATTERN = (
    r"(?i)https?://(www\.)?(twitch\.tv/(?P<username>\w+)/clip/|clips\.twitch\.tv/)"
    r"(?P<data>[^?\s)\]`|]+)"
)
_TWITTER_URL_PATTERN = (
    r"(?i)https?://(www\.)?(twitter|x)\.com/(?P<username>\w+)(?P<data>/status/[^?\s)\]`|]*)"
)

_USER_AGENT = "Mozilla/5.0 (compatible; Discordbot/2.0)"

_URL_HINTS = (
    "instagram.com",
    "reddit.com",
    "tiktok.com",
    "twitch.tv",
    "twitter.com",
    "x.com",
)


def contains_url(text: str) -> bool:
    """Cheap pre-check for whether ``text`` may hold a supported link."""
    lowered = text.lower()
    return any(hint in lowered for hint in _URL_HINTS)


class Platform(Enum):
    """Supported platforms, in detection priority order."""

    INSTAGRAM = 0
    REDDIT = 1
    TIKTOK = 2
    TWITCH = 3
    TWITTER = 4

    @classmethod
    def detect(cls, text: str) -> Optional[Platform]:
        """Return the highest-priority platform with a link in ``text``."""
        logger.debug("Trying to detect a match in the url.")
        for platform in cls:
            if platform.pattern.search(text):
                return platform
        return None

    @property
    def pattern(self) -> re.Pattern[str]:
        return _PATTERNS[self]

    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def replacement_domain(self) -> str:
        return _REPLACEMENT_DOMAINS[self]


_PATTERNS = {
    Platform.INSTAGRAM: re.compile(_INSTAGRAM_URL_PATTERN),
    Platform.REDDIT: re.compile(_REDDIT_URL_PATTERN),
    Platform.TIKTOK: re.compile(_TIKTOK_URL_PATTERN),
    Platform.TWITCH: re.compile(_TWITCH_URL_PATTERN),
    Platform.TWITTER: re.compile(_TWITTER_URL_PATTERN),
}

_DISPLAY_NAMES = {
    Platform.INSTAGRAM: "Instagram",
    Platform.REDDIT: "Reddit",
    Platform.TIKTOK: "TikTok",
    Platform.TWITCH: "Twitch",
    Platform.TWITTER: "Twitter",
}

_REPLACEMENT_DOMAINS = {
    Platform.INSTAGRAM: "kkinstagram.com",
    Platform.REDDIT: "rxddit.com",
    Platform.TIKTOK: "kktiktok.com",
    Platform.TWITCH: "fxtwitch.seria.moe",
    Platform.TWITTER: "fxtwitter.com",
}

_META_PROPERTIES = {
    Platform.TWITCH: "og:title",
    Platform.TWITTER: "twitter:creator",
}


def parse_tiktok_author(location: str) -> Optional[str]:
    """Extract the ``@user`` part of a TikTok redirect location."""
    start = location.find("/@")
    if start == -1:
        return None
    rest = location[start + 2:]
    end = rest.find("/video/")
    if end <= 0:
        return None
    return rest[:end]


def parse_meta_author(html: str, platform: Platform) -> Optional[str]:
    """Read the author from the platform's meta tag in an HTML page."""
    try:
        prop = _META_PROPERTIES[platform]
    except KeyError:
        raise ValueError(f"No author meta tag known for {platform.display_name()}") from None
    element = BeautifulSoup(html, "html.parser").find("meta", attrs={"property": prop})
    if element is None:
        return None
    content = element.get("content")
    if content is None:
        return None
    if platform is Platform.TWITCH:
        return content.split(" - ")[0]
    return content


async def fetch_author(url: str, platform: Platform) -> Optional[str]:
    """Fetch ``url`` without following redirects and work out the post's author."""
    if platform not in (Platform.TIKTOK, Platform.TWITCH, Platform.TWITTER):
        return None
    logger.debug("Attempting to get author from %s", url)
    async with aiohttp.ClientSession(headers={"User-Agent": _USER_AGENT}) as session:
        async with session.get(url, allow_redirects=False) as response:
            if platform is Platform.TIKTOK:
                location = response.headers.get("Location")
                return None if location is None else parse_tiktok_author(location)
            html = await response.text()
    return parse_meta_author(html, platform)


async def _author_or_none(url: str, platform: Platform) -> Optional[str]:
    try:
        return await fetch_author(url, platform)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
        logger.debug("Could not fetch author from %s: %r", url, exc)
        return None


@dataclass(frozen=True)
class UrlProcessor:
    """A supported link found in user input, and what it is rewritten to."""

    platform: Platform
    user_input: str
    clean_url: Optional[str] = None
    username: Optional[str] = None
    post_type: Optional[str] = None
    spoiler: bool = False

    @classmethod
    def try_new(cls, text: str) -> Optional[UrlProcessor]:
        """Return a processor for ``text`` if it holds a supported link."""
        platform = Platform.detect(text)
        if platform is None:
            return None
        return cls(platform=platform, user_input=text)

    def original_url(self) -> Optional[str]:
        """The link exactly as the user wrote it."""
        match = self.platform.pattern.search(self.user_input)
        return match.group(0) if match else None

    def is_spoiler(self, start: int, end: int) -> bool:
        """Whether the span ``start:end`` of the input sits inside ``||`` spoiler marks."""
        before = self.user_input[:start]
        after = self.user_input[end:]
        return before.count("||") % 2 == 1 and "||" in after

    async def capture_url(self) -> Optional[UrlProcessor]:
        """Return a copy with the rewritten link and author filled in, or None."""
        match = self.platform.pattern.search(self.user_input)
        if match is None:
            return None
        spoiler = self.is_spoiler(match.start(), match.end())
        domain = self.platform.replacement_domain()
        data = match.group("data")
        logger.debug("Successfully matched the platform: %s", self.platform.display_name())

        if self.platform is Platform.INSTAGRAM:
            post_type = match.group("type")
            return replace(
                self,
                spoiler=spoiler,
                post_type=post_type,
                clean_url=f"https://www.{domain}/{post_type}{data}",
            )

        if self.platform is Platform.REDDIT:
            if data is None:
                return None
            subdomain = match.group("subdomain")
            if subdomain is None:
                subdomain = "www."
            subreddit = match.group("subreddit")
            return replace(
                self,
                spoiler=spoiler,
                username=subreddit,
                clean_url=f"https://{subdomain}rxddit.com/{subreddit}{data}",
            )

        if self.platform is Platform.TIKTOK:
            subdomain = match.group("subdomain") or ""
            username = await _author_or_none(match.group(0), self.platform)
            return replace(
                self,
                spoiler=spoiler,
                username=username,
                clean_url=f"https://{subdomain}{domain}{data}",
            )

        if self.platform is Platform.TWITCH:
            username = match.group("username")
            if username is not None:
                clean_url = f"https://{domain}/{username}/clip/{data}"
            else:
                clean_url = f"https://{domain}/clip/{data}"
                username = await _author_or_none(clean_url, self.platform)
            return replace(self, spoiler=spoiler, username=username, clean_url=clean_url)

        username = match.group("username")
        return replace(
            self,
            spoiler=spoiler,
            username=username,
            clean_url=f"https://{domain}/{username}{data}",
        )

    def format_output(self) -> Optional[str]:
        """The markdown reply text, or None if the link was not captured."""
        if self.clean_url is None:
            return None
        name = self.platform.display_name()

        if self.platform is Platform.INSTAGRAM:
            kind = "Reel" if (self.post_type or "").lower() in ("reels", "reel") else "Post"
            text = f"[{kind} via {name}]({self.clean_url})"
        elif self.username is None:
            text = f"[Post via {name}]({self.clean_url})"
        elif self.platform is Platform.REDDIT:
            text = f"[{self.username} via {name}]({self.clean_url})"
        else:
            text = f"[@{self.username} via {name}]({self.clean_url})"

        return f"|| {text} ||" if self.spoiler else text