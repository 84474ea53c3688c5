import logging

from activity.domain.models.activity_log import ActivityAction
from activity.services.activity_service import ActivityService
from users.repositories.user_repository import UserRepository
from app.core.security import verify_password, create_access_token

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, repo: UserRepository, activity: ActivityService):
        self.repo = repo
        self.activity = activity

    async def login(self, email: str, password: str) -> str:
        user = await self.repo.get_by_email(email)
        if not user or not user.is_active or not verify_password(password, user.password_hash):
            logger.info("Login failed for %s", email)
            raise ValueError("invalid_credentials")
        await self.activity.record(user.id, ActivityAction.login, entity_type="user", entity_id=user.id)
        return create_access_token(user.id, user.role_names, user.display_name)

    async def logout(self, user) -> None:
        # tokens are stateless; logout only leaves a trail in the activity log
        await self.activity.record(user.id, ActivityAction.logout, entity_type="user", entity_id=user.id)
