import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from activity.domain.entities.activity import ActivityLogOut
from activity.domain.models.activity_log import ActivityAction
from activity.domain.repositories.activity_repository import ActivityRepository

logger = logging.getLogger(__name__)


class ActivityService:
    def __init__(self, repo: ActivityRepository):
        self.repo = repo

    async def record(
        self,
        user_id: UUID,
        action: ActivityAction,
        entity_type: Optional[str] = None,
        entity_id: Optional[Any] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        await self.repo.add(
            user_id=user_id,
            action=ActivityAction(action).value,
            entity_type=entity_type,
            entity_id=str(entity_id) if entity_id is not None else None,
            details=metadata,
        )
        logger.debug("activity %s %s/%s by %s", action, entity_type, entity_id, user_id)

    async def list_recent(self, q: Optional[str] = None, limit: int = 100) -> List[ActivityLogOut]:
        rows = await self.repo.list_with_users(q=q, limit=limit)
        out: List[ActivityLogOut] = []
        for log, email, display_name in rows:
            dto = ActivityLogOut.model_validate(log)
            dto.user_email = email or "Unknown"
            dto.user_name = display_name
            out.append(dto)
        return out
