from sqlalchemy import select
from typing import Optional, Iterable, List

from shared.abstracts.abstract_repository import SessionRepository
from users.models.role import Role, RoleName

class RoleRepository(SessionRepository):
    async def get_by_name(self, name: RoleName) -> Optional[Role]:
        res = await self.db.execute(select(Role).where(Role.name == name))
        return res.scalar_one_or_none()

    async def list_all(self) -> List[Role]:
        res = await self.db.execute(select(Role).order_by(Role.name))
        return list(res.scalars())

    async def ensure(self, names: Iterable[RoleName]) -> list[Role]:
        roles: list[Role] = []
        for n in dict.fromkeys(names):
            role = await self.get_by_name(n)
            if not role:
                role = Role(name=n)
                self.db.add(role)
                await self.db.flush()
            roles.append(role)
        return roles
