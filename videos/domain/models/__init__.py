from videos.domain.models.category import Category
from videos.domain.models.video import Video

__all__ = ["Category", "Video"]
