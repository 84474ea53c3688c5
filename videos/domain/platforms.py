"""
URL classification for the supported video platforms.

Everything here is a pure function of the input string: the same URL always
yields the same platform, id and thumbnail, and nothing touches the network.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple


class Platform(str, Enum):
    youtube = "youtube"
    facebook = "facebook"
    unknown = "unknown"


YOUTUBE_THUMBNAIL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/mqdefault.jpg"
YOUTUBE_WATCH_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"
PLACEHOLDER_THUMBNAIL = "/placeholder.svg"

Extractor = Callable[["re.Match[str]"], str]


def _first_group(match: "re.Match[str]") -> str:
    return match.group(1)


# Ordered: YouTube rules before Facebook rules, first match wins.
RULES: Sequence[Tuple[Platform, "re.Pattern[str]", Extractor]] = (
    (Platform.youtube, re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"), _first_group),
    (Platform.youtube, re.compile(r"youtube\.com/shorts/([^&\n?#]+)"), _first_group),
    (Platform.facebook, re.compile(r"facebook\.com/.*/videos/(\d+)"), _first_group),
    (Platform.facebook, re.compile(r"facebook\.com/watch/?\?v=(\d+)"), _first_group),
    (Platform.facebook, re.compile(r"fb\.watch/([^/?]+)"), _first_group),
    (Platform.facebook, re.compile(r"facebook\.com/reel/(\d+)"), _first_group),
)


def match(url: str) -> Tuple[Platform, Optional[str]]:
    """Run the rule table once and return ``(platform, video_id)``."""
    if not url:
        return Platform.unknown, None
    for platform, pattern, extract in RULES:
        m = pattern.search(url)
        if m:
            return platform, extract(m)
    return Platform.unknown, None


def classify(url: str) -> Platform:
    return match(url)[0]


def extract_id(url: str) -> Optional[str]:
    return match(url)[1]


def is_recognized(url: str) -> bool:
    return classify(url) is not Platform.unknown


def derive_thumbnail(
    url: str,
    platform: Platform,
    video_id: Optional[str],
    placeholder: str = PLACEHOLDER_THUMBNAIL,
) -> str:
    """
    Thumbnail for an entry. Only YouTube exposes public per-video images;
    everything else (or a missing id) gets the caller's placeholder.
    """
    if platform == Platform.youtube and video_id:
        return YOUTUBE_THUMBNAIL_TEMPLATE.format(video_id=video_id)
    return placeholder


def watch_url(video_id: str) -> str:
    return YOUTUBE_WATCH_TEMPLATE.format(video_id=video_id)
