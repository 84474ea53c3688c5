from typing import Any, Dict, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import or_, select

from activity.domain.models.activity_log import ActivityLog
from shared.abstracts.abstract_repository import SessionRepository
from users.models.user import User


class ActivityRepository(SessionRepository):
    """Append-only log; rows are never updated or deleted through the API."""

    async def add(
        self,
        user_id: UUID,
        action: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> ActivityLog:
        row = ActivityLog(
            user_id=user_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            details=details,
        )
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        return row

    async def list_with_users(
        self, *, q: Optional[str] = None, limit: int = 100
    ) -> Sequence[Tuple[ActivityLog, Optional[str], Optional[str]]]:
        stmt = (
            select(ActivityLog, User.email, User.display_name)
            .outerjoin(User, User.id == ActivityLog.user_id)
        )
        if q:
            like = f"%{q}%"
            stmt = stmt.where(
                or_(
                    ActivityLog.action.ilike(like),
                    ActivityLog.entity_type.ilike(like),
                    User.email.ilike(like),
                    User.display_name.ilike(like),
                )
            )
        stmt = stmt.order_by(ActivityLog.created_at.desc()).limit(limit)
        res = await self.db.execute(stmt)
        return [tuple(row) for row in res.all()]
