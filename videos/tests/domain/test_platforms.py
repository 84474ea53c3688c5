# videos/tests/domain/test_platforms.py
import pytest

from videos.domain import platforms
from videos.domain.platforms import Platform


# ==============================================================================
# classify / extract_id
# ==============================================================================

@pytest.mark.parametrize(
    "url, expected_id",
    [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ?si=abc", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ#start", "dQw4w9WgXcQ"),
        ("https://youtube.com/shorts/aBcD_123-x", "aBcD_123-x"),
    ],
)
def test_should_classify_youtube_and_extract_id_when_url_has_known_shape(url, expected_id):
    assert platforms.classify(url) is Platform.youtube
    assert platforms.extract_id(url) == expected_id
    assert platforms.is_recognized(url) is True


@pytest.mark.parametrize(
    "url, expected_id",
    [
        ("https://www.facebook.com/somepage/videos/1234567890/", "1234567890"),
        ("https://www.facebook.com/watch/?v=987654321", "987654321"),
        ("https://www.facebook.com/watch?v=987654321", "987654321"),
        ("https://fb.watch/aBc12XyZ/", "aBc12XyZ"),
        ("https://fb.watch/aBc12XyZ?mibextid=1", "aBc12XyZ"),
        ("https://www.facebook.com/reel/555000111", "555000111"),
    ],
)
def test_should_classify_facebook_and_extract_id_when_url_has_known_shape(url, expected_id):
    assert platforms.classify(url) is Platform.facebook
    assert platforms.extract_id(url) == expected_id


@pytest.mark.parametrize(
    "url",
    [
        "not a url",
        "https://example.com",
        "https://vimeo.com/123456",
        "https://www.facebook.com/somepage",
        "https://www.youtube.com/channel/UC123",
        "",
    ],
)
def test_should_return_unknown_and_no_id_when_no_rule_matches(url):
    assert platforms.classify(url) is Platform.unknown
    assert platforms.extract_id(url) is None
    assert platforms.is_recognized(url) is False


def test_should_prefer_youtube_when_url_matches_both_platforms():
    # GIVEN: a Facebook video URL that also carries a youtu.be link
    url = "https://www.facebook.com/page/videos/123?ref=https://youtu.be/abc123"

    # THEN: YouTube rules are evaluated first
    assert platforms.match(url) == (Platform.youtube, "abc123")


def test_should_keep_youtube_rules_ahead_of_facebook_rules():
    order = [platform for platform, _, _ in platforms.RULES]
    assert order == sorted(order, key=lambda p: p is not Platform.youtube)


# ==============================================================================
# derive_thumbnail / watch_url
# ==============================================================================

def test_should_build_mqdefault_thumbnail_when_platform_is_youtube():
    assert (
        platforms.derive_thumbnail("https://youtu.be/abc123", Platform.youtube, "abc123")
        == "https://img.youtube.com/vi/abc123/mqdefault.jpg"
    )


@pytest.mark.parametrize(
    "platform, video_id",
    [
        (Platform.facebook, "1234567890"),
        (Platform.facebook, None),
        (Platform.unknown, "abc123"),
        (Platform.youtube, None),
    ],
)
def test_should_return_placeholder_when_no_youtube_id_is_available(platform, video_id):
    thumb = platforms.derive_thumbnail("https://example.com", platform, video_id)
    assert thumb == platforms.PLACEHOLDER_THUMBNAIL
    assert "img.youtube.com" not in thumb


def test_should_use_custom_placeholder_when_given():
    assert platforms.derive_thumbnail("x", Platform.facebook, "1", placeholder="/img/none.png") == "/img/none.png"


def test_should_build_canonical_watch_url():
    assert platforms.watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


# ==============================================================================
# Purity
# ==============================================================================

@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://fb.watch/aBc12XyZ/",
        "https://example.com",
    ],
)
def test_should_return_identical_results_when_called_twice(url):
    first = (platforms.classify(url), platforms.extract_id(url))
    second = (platforms.classify(url), platforms.extract_id(url))
    assert first == second

    platform, video_id = first
    assert platforms.derive_thumbnail(url, platform, video_id) == platforms.derive_thumbnail(url, platform, video_id)
