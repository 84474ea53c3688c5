from typing import Optional, Protocol

from videos.domain.entities.metadata import MetadataResolution


class MetadataResolverPort(Protocol):
    """Resolves display metadata for a video URL (at most one network call)."""

    async def resolve(self, url: str) -> Optional[MetadataResolution]: ...
