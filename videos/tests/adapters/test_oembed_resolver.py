# videos/tests/adapters/test_oembed_resolver.py
import pytest
import requests

from videos.adapters.outbound.oembed_resolver import OEmbedMetadataResolver
from videos.domain.entities.metadata import ResolutionStatus
from videos.domain.platforms import Platform

ENDPOINT = "https://oembed.test/oembed"
PLACEHOLDER = "/placeholder.svg"


# ------------------------------------------------------------------------------
# Fake requests.get (records every call so we can count network hits)
# ------------------------------------------------------------------------------

class _FakeResponse:
    def __init__(self, status_code: int, payload=None, raise_on_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._raise_on_json = raise_on_json

    def json(self):
        if self._raise_on_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class _RequestsSpy:
    def __init__(self, response=None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[tuple] = []

    def __call__(self, url, params=None, timeout=None, **kwargs):
        self.calls.append((url, params, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def resolver() -> OEmbedMetadataResolver:
    return OEmbedMetadataResolver(endpoint=ENDPOINT, timeout=3.0, placeholder=PLACEHOLDER)


def _patch_get(monkeypatch, spy: _RequestsSpy) -> _RequestsSpy:
    monkeypatch.setattr("videos.adapters.outbound.oembed_resolver.requests.get", spy)
    return spy


# ==============================================================================
# YouTube
# ==============================================================================

@pytest.mark.asyncio
async def test_should_resolve_title_and_channel_when_oembed_returns_200(monkeypatch, resolver):
    # GIVEN
    spy = _patch_get(
        monkeypatch,
        _RequestsSpy(
            _FakeResponse(
                200,
                {
                    "title": "Never Gonna Give You Up",
                    "author_name": "Rick Astley",
                    "author_url": "https://www.youtube.com/@RickAstleyYT",
                    "thumbnail_url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
                },
            )
        ),
    )
    url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

    # WHEN
    result = await resolver.resolve(url)

    # THEN
    assert len(spy.calls) == 1
    called_url, params, timeout = spy.calls[0]
    assert called_url == ENDPOINT
    assert params == {"url": url, "format": "json"}
    assert timeout == 3.0

    assert result.status is ResolutionStatus.resolved
    assert result.platform is Platform.youtube
    assert result.video_id == "dQw4w9WgXcQ"
    assert result.metadata.title == "Never Gonna Give You Up"
    assert result.metadata.channel_name == "Rick Astley"
    assert result.metadata.channel_url == "https://www.youtube.com/@RickAstleyYT"
    # thumbnail is derived from the id, not taken from the oEmbed payload
    assert result.metadata.thumbnail_url == "https://img.youtube.com/vi/dQw4w9WgXcQ/mqdefault.jpg"
    assert result.error is None


@pytest.mark.asyncio
async def test_should_fail_without_metadata_when_oembed_returns_404(monkeypatch, resolver):
    spy = _patch_get(monkeypatch, _RequestsSpy(_FakeResponse(404)))

    result = await resolver.resolve("https://youtu.be/doesnotexist")

    assert len(spy.calls) == 1
    assert result.status is ResolutionStatus.failed
    assert result.ok is False
    assert result.metadata is None        # caller must take its fallback path
    assert result.error == "http_404"


@pytest.mark.asyncio
async def test_should_fail_when_network_errors(monkeypatch, resolver):
    spy = _patch_get(monkeypatch, _RequestsSpy(exc=requests.ConnectionError("boom")))

    result = await resolver.resolve("https://www.youtube.com/shorts/abc123")

    assert len(spy.calls) == 1            # no retry
    assert result.status is ResolutionStatus.failed
    assert result.error == "network_error"
    assert result.video_id == "abc123"


@pytest.mark.asyncio
async def test_should_fail_when_body_is_not_json(monkeypatch, resolver):
    _patch_get(monkeypatch, _RequestsSpy(_FakeResponse(200, raise_on_json=True)))

    result = await resolver.resolve("https://www.youtube.com/embed/abc123")

    assert result.status is ResolutionStatus.failed
    assert result.error == "invalid_json"


@pytest.mark.asyncio
async def test_should_fail_when_json_is_not_an_object(monkeypatch, resolver):
    _patch_get(monkeypatch, _RequestsSpy(_FakeResponse(200, payload=["not", "a", "dict"])))

    result = await resolver.resolve("https://www.youtube.com/embed/abc123")

    assert result.status is ResolutionStatus.failed
    assert result.error == "invalid_json"


@pytest.mark.asyncio
async def test_should_default_missing_fields_to_empty_strings(monkeypatch, resolver):
    _patch_get(monkeypatch, _RequestsSpy(_FakeResponse(200, payload={"title": "Only a title"})))

    result = await resolver.resolve("https://youtu.be/abc123")

    assert result.status is ResolutionStatus.resolved
    assert result.metadata.title == "Only a title"
    assert result.metadata.channel_name == ""
    assert result.metadata.channel_url == ""


# ==============================================================================
# Facebook / unknown
# ==============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url",
    [
        "https://www.facebook.com/page/videos/1234567890",
        "https://fb.watch/aBc12XyZ/",
        "https://www.facebook.com/reel/555000111",
    ],
)
async def test_should_return_unavailable_without_network_when_url_is_facebook(monkeypatch, resolver, url):
    spy = _patch_get(monkeypatch, _RequestsSpy(_FakeResponse(200, {"title": "should not be used"})))

    result = await resolver.resolve(url)

    assert spy.calls == []
    assert result.status is ResolutionStatus.unavailable
    assert result.platform is Platform.facebook
    assert result.metadata.title == ""
    assert result.metadata.channel_name == ""
    assert result.metadata.channel_url == ""
    assert result.metadata.thumbnail_url == PLACEHOLDER


@pytest.mark.asyncio
async def test_should_return_none_without_network_when_url_is_unknown(monkeypatch, resolver):
    spy = _patch_get(monkeypatch, _RequestsSpy(_FakeResponse(200, {})))

    assert await resolver.resolve("https://example.com/video.mp4") is None
    assert spy.calls == []


@pytest.mark.asyncio
async def test_should_fail_when_fields_are_not_strings(monkeypatch, resolver):
    _patch_get(
        monkeypatch,
        _RequestsSpy(_FakeResponse(200, payload={"title": 12345, "author_name": ["x"], "author_url": None})),
    )

    result = await resolver.resolve("https://www.youtube.com/watch?v=dQw4w9WgXcQ")

    assert result.status is ResolutionStatus.failed
    assert result.error == "invalid_json"
    assert result.metadata is None
