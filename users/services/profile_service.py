from activity.domain.models.activity_log import ActivityAction
from activity.services.activity_service import ActivityService
from links.domain.repositories.link_repository import LinkRepository
from users.entities.user import ProfileStatsOut
from users.models.user import User
from users.repositories.user_repository import UserRepository
from videos.domain.repositories.video_repository import VideoRepository


class ProfileService:
    """The signed-in user's own profile: display name and saved-item counts."""

    def __init__(
        self,
        users: UserRepository,
        videos: VideoRepository,
        links: LinkRepository,
        activity: ActivityService,
    ):
        self.users = users
        self.videos = videos
        self.links = links
        self.activity = activity

    async def update_display_name(self, user: User, display_name: str) -> User:
        user = await self.users.set_display_name(user, display_name)
        await self.activity.record(
            user.id,
            ActivityAction.profile_update,
            entity_type="profile",
            entity_id=user.id,
            metadata={"display_name": display_name},
        )
        return user

    async def stats(self, user: User) -> ProfileStatsOut:
        return ProfileStatsOut(
            videos=await self.videos.count(user.id),
            links=await self.links.count(user.id),
        )
