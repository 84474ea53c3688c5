from videos.domain.entities.category import CategoryCreate, CategoryOut, CategoryUpdate
from videos.domain.entities.metadata import MetadataResolution, ResolutionStatus, VideoMetadata
from videos.domain.entities.video import (
    PlatformCountsOut,
    VideoCreate,
    VideoCreatedOut,
    VideoOut,
    VideoResolveOut,
    VideoUpdate,
    VideoUrlIn,
)
