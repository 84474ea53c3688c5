from videos.routers.categories import router as categories_router
from videos.routers.videos import router as videos_router
