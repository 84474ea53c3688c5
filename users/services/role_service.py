from users.repositories.role_repository import RoleRepository
from users.models.role import Role, RoleName

class RoleService:
    def __init__(self, repo: RoleRepository):
        self.repo = repo

    async def list_all(self) -> list[Role]:
        return await self.repo.list_all()

    async def ensure_defaults(self) -> list[Role]:
        roles = await self.repo.ensure([RoleName.admin, RoleName.user])
        await self.repo.db.commit()
        return roles
