from typing import Optional, List
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from shared.abstracts.abstract_repository import SessionRepository
from users.models.user import User
from users.models.role import Role

class UserRepository(SessionRepository):
    async def get(self, user_id: UUID) -> Optional[User]:
        stmt = (
            select(User)
            .options(selectinload(User.roles))
            .where(User.id == user_id)
        )
        res = await self.db.execute(stmt)
        return res.scalars().first()

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = (
            select(User)
            .options(selectinload(User.roles))
            .where(User.email == email)
        )
        res = await self.db.execute(stmt)
        return res.scalars().first()

    async def create(
        self, email: str, password_hash: str, roles: List[Role], display_name: Optional[str] = None
    ) -> User:
        user = User(email=email, password_hash=password_hash, display_name=display_name)
        user.roles = roles
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def set_roles(self, user: User, roles: List[Role]) -> User:
        user.roles = roles
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def set_display_name(self, user: User, display_name: str) -> User:
        user.display_name = display_name
        await self.db.commit()
        await self.db.refresh(user)
        return user
