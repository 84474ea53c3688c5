from users.models.role import Role, RoleName, user_roles
from users.models.user import User
