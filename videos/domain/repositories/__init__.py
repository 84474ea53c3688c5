from videos.domain.repositories.category_repository import CategoryRepository
from videos.domain.repositories.video_repository import VideoRepository
