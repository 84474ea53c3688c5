import asyncio
import logging
from typing import Optional

import requests

from app.core.config import settings
from videos.domain import platforms
from videos.domain.platforms import Platform
from videos.domain.entities.metadata import MetadataResolution, VideoMetadata
from videos.ports.outbound.metadata_port import MetadataResolverPort

logger = logging.getLogger(__name__)


class OEmbedMetadataResolver(MetadataResolverPort):
    """
    YouTube goes through the public oEmbed endpoint; Facebook needs an app
    token for oEmbed, so it is reported as unavailable without any I/O.
    Failures are returned as a ``failed`` resolution, never raised or retried.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        placeholder: Optional[str] = None,
    ):
        self.endpoint = endpoint or settings.oembed_endpoint
        self.timeout = timeout or settings.oembed_timeout_seconds
        self.placeholder = placeholder or settings.thumbnail_placeholder

    async def resolve(self, url: str) -> Optional[MetadataResolution]:
        platform, video_id = platforms.match(url)

        if platform is Platform.unknown:
            return None
        if platform is Platform.facebook:
            return MetadataResolution.unavailable(platform, video_id, self.placeholder)

        # requests is blocking; keep the event loop free while we wait
        return await asyncio.to_thread(self._fetch_youtube, url, video_id)

    def _fetch_youtube(self, url: str, video_id: Optional[str]) -> MetadataResolution:
        params = {"url": url, "format": "json"}
        try:
            r = requests.get(self.endpoint, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("oEmbed request failed for %s: %s", url, e)
            return MetadataResolution.failed(Platform.youtube, video_id, "network_error")

        if r.status_code != 200:
            logger.warning("oEmbed returned HTTP %s for %s", r.status_code, url)
            return MetadataResolution.failed(Platform.youtube, video_id, f"http_{r.status_code}")

        try:
            data = r.json()
        except ValueError:
            logger.warning("oEmbed returned a non-JSON body for %s", url)
            return MetadataResolution.failed(Platform.youtube, video_id, "invalid_json")
        if not isinstance(data, dict):
            logger.warning("oEmbed returned unexpected payload for %s", url)
            return MetadataResolution.failed(Platform.youtube, video_id, "invalid_json")

        fields = {
            "title": data.get("title") or "",
            "channel_name": data.get("author_name") or "",
            "channel_url": data.get("author_url") or "",
        }
        if not all(isinstance(v, str) for v in fields.values()):
            logger.warning("oEmbed returned non-string fields for %s", url)
            return MetadataResolution.failed(Platform.youtube, video_id, "invalid_json")

        metadata = VideoMetadata(
            **fields,
            thumbnail_url=platforms.derive_thumbnail(url, Platform.youtube, video_id, self.placeholder),
        )
        return MetadataResolution.resolved(Platform.youtube, video_id, metadata)
