"""YouTube URL parsing for video blocks."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, parse_qs, urlsplit


_VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
_YOUTUBE_HOSTS = {"youtube.com", "www.youtube.com", "m.youtube.com", "music.youtube.com"}
_SHORT_HOSTS = {"youtu.be", "www.youtu.be"}
_PATH_PREFIXES = ("embed", "shorts", "live", "v")


def parse_url(value: str | None) -> SplitResult | None:
    """Split an absolute URL, or return None if ``value`` is not one."""
    if not value or not isinstance(value, str):
        return None
    try:
        parts = urlsplit(value.strip())
        # Accessing the port validates it
        _ = parts.port
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return parts


def parse_youtube_video_id(url: SplitResult) -> str:
    """Extract the video ID from a YouTube URL.

    Supported forms:
        https://youtu.be/<id>
        https://www.youtube.com/watch?v=<id>
        https://www.youtube.com/{embed,shorts,live,v}/<id>

    Returns:
        The 11 character video ID, or "" if none is found
    """
    host = (url.hostname or "").lower()
    segments = [segment for segment in url.path.split("/") if segment]

    candidate = ""
    if host in _SHORT_HOSTS:
        candidate = segments[0] if segments else ""
    elif host in _YOUTUBE_HOSTS:
        if segments[:1] == ["watch"]:
            candidate = (parse_qs(url.query).get("v") or [""])[0]
        elif len(segments) >= 2 and segments[0] in _PATH_PREFIXES:
            candidate = segments[1]

    if _VIDEO_ID_RE.match(candidate):
        return candidate
    return ""
